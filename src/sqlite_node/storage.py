"""
storage.py
----------
Filesystem layout and driver access for per-workflow SQLite database files.

Files live at <databases_root>/<workflow_id>/<db_name>.db. The root is
resolved against the current working directory at call time.
"""
import logging
import os
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from sqlalchemy import create_engine
from sqlalchemy.exc import DBAPIError
from sqlalchemy.pool import NullPool

logger = logging.getLogger(__name__)


def workflow_directory(databases_root: str, workflow_id: str) -> str:
    return os.path.abspath(os.path.join(databases_root, workflow_id))


def ensure_workflow_directory(databases_root: str, workflow_id: str) -> str:
    workflow_dir = workflow_directory(databases_root, workflow_id)
    if not os.path.isdir(workflow_dir):
        logger.info("Creating database directory %s", workflow_dir)
        os.makedirs(workflow_dir, exist_ok=True)
    return workflow_dir


def database_path(workflow_dir: str, db_name: str) -> str:
    # Plain concatenation: a leading separator in db_name must not reset the root
    return os.path.normpath(workflow_dir + os.sep + f"{db_name}.db")


def delete_database(db_path: str) -> bool:
    """Remove the database file. Returns False when there was nothing to delete."""
    if not os.path.exists(db_path):
        return False
    os.remove(db_path)
    logger.info("Deleted database %s", db_path)
    return True


@contextmanager
def open_database(db_path: str):
    """
    Yield an engine bound to a single database file and dispose of it on exit,
    whether the block succeeded or raised. NullPool keeps no connection (and so
    no file handle) open once a `with engine.begin()` block ends.
    """
    engine = create_engine(f"sqlite:///{db_path}", poolclass=NullPool)
    try:
        yield engine
    finally:
        engine.dispose()


def fetch_all(engine, query: str, bind: Optional[Any] = None) -> List[Dict[str, Any]]:
    try:
        # Rows are read before the block commits so writes in the statement persist
        with engine.begin() as conn:
            result = conn.exec_driver_sql(query, bind)
            if not result.returns_rows:
                return []
            return [dict(row) for row in result.mappings()]
    except DBAPIError as e:
        raise e.orig from e


def run_statement(engine, query: str, bind: Optional[Any] = None) -> None:
    try:
        with engine.begin() as conn:
            conn.exec_driver_sql(query, bind)
    except DBAPIError as e:
        raise e.orig from e
