"""
sqlite_exec.py
--------------
Implements SqliteNode for running queries against a local, per-workflow
SQLite database file as a workflow step.
"""
import enum
import logging
from typing import List, Optional

from .base import BaseNode
from ..config import settings
from ..description import NodeDescription, NodeProperty, NodePropertyOption
from ..host import ExecutionContext, NodeItem
from ..storage import (
    database_path,
    delete_database,
    ensure_workflow_directory,
    fetch_all,
    open_database,
    run_statement,
)
from ..utils.query_args import parse_args, to_bind_params

logger = logging.getLogger(__name__)


def register(register_node):
    register_node(SqliteNode.description.name, SqliteNode)


class QueryType(str, enum.Enum):
    AUTO = "AUTO"
    CREATE = "CREATE"
    DELETE = "DELETE"
    INSERT = "INSERT"
    SELECT = "SELECT"
    UPDATE = "UPDATE"
    DELETE_DATABASE = "DELETE_DATABASE"


QUERY_TYPE_OPTIONS = [
    NodePropertyOption(name="AUTO", value=QueryType.AUTO.value, description="Automatically detect query type"),
    NodePropertyOption(name="CREATE", value=QueryType.CREATE.value, description="Create a table"),
    NodePropertyOption(name="DELETE", value=QueryType.DELETE.value, description="Delete rows from a table"),
    NodePropertyOption(name="INSERT", value=QueryType.INSERT.value, description="Insert rows into a table"),
    NodePropertyOption(name="SELECT", value=QueryType.SELECT.value, description="Select rows from a table"),
    NodePropertyOption(name="UPDATE", value=QueryType.UPDATE.value, description="Update rows in a table"),
    NodePropertyOption(
        name="Delete Database", value=QueryType.DELETE_DATABASE.value, description="Delete the database file"
    ),
]


class SqliteNode(BaseNode):
    description = NodeDescription(
        display_name="SQLite Node",
        name="SqliteNode",
        icon="file:sqlite-icon.svg",
        group=["transform"],
        version=1,
        description="A node to perform query in a local SQLite database",
        defaults={"name": "Sqlite Node"},
        properties=[
            NodeProperty(
                display_name="Database Name",
                name="dbName",
                type="string",
                default="",
                placeholder="my_database",
                description="Name of the database file (without .db extension)",
                required=True,
            ),
            NodeProperty(
                display_name="Query Type",
                name="query_type",
                type="options",
                default=QueryType.AUTO.value,
                no_data_expression=True,
                required=True,
                options=QUERY_TYPE_OPTIONS,
            ),
            NodeProperty(
                display_name="Query",
                name="query",
                type="string",
                default="",
                placeholder="SELECT * FROM table where key = $key",
                description="The query to execute",
                required=True,
                type_options={"rows": 8},
            ),
            NodeProperty(
                display_name="Args",
                name="args",
                type="json",
                default="{}",
                placeholder='{"$key": "value"}',
                description="The args that get passed to the query",
            ),
            # Declared for the host form; output shape follows query_type only
            NodeProperty(
                display_name="Spread Result",
                name="spread",
                type="boolean",
                default=False,
                description="Whether the result should be spread into multiple items",
            ),
        ],
    )

    def __init__(self, databases_root: Optional[str] = None):
        self.databases_root = databases_root

    def execute(self, context: ExecutionContext) -> List[List[NodeItem]]:
        items = context.get_input_data()
        spread_results: List[NodeItem] = []

        workflow = context.get_workflow()
        workflow_id = (workflow.id if workflow else None) or settings.DEFAULT_WORKFLOW_ID
        workflow_dir = ensure_workflow_directory(self.databases_root or settings.DATABASES_ROOT, workflow_id)

        for item_index, item in enumerate(items):
            try:
                db_name = context.get_node_parameter("dbName", item_index, "")
                query_type = QueryType(context.get_node_parameter("query_type", item_index, QueryType.AUTO.value))
                db_path = database_path(workflow_dir, db_name)

                if query_type == QueryType.DELETE_DATABASE:
                    if delete_database(db_path):
                        item.json = {"success": True, "message": f"Database {db_name} deleted successfully."}
                    else:
                        item.json = {"success": False, "message": f"Database {db_name} does not exist."}
                    continue

                query = context.get_node_parameter("query", item_index, "")
                args = parse_args(context.get_node_parameter("args", item_index, "{}"))
                bind = to_bind_params(args)

                logger.debug("Item %d: %s query on %s", item_index, query_type.value, db_path)
                with open_database(db_path) as engine:
                    if query_type == QueryType.SELECT:
                        rows = fetch_all(engine, query, bind)
                    else:
                        run_statement(engine, query, bind)
                        # Fixed marker, not the affected row count
                        rows = [{"changes": 1}]

                if query_type == QueryType.SELECT:
                    spread_results.extend(NodeItem(json=row) for row in rows)
                else:
                    item.json = rows[0]

            except Exception as e:
                if context.continue_on_fail():
                    logger.warning("Item %d failed, continuing: %s", item_index, e)
                    item.json = {"error": str(e)}
                else:
                    raise

        if spread_results:
            return context.prepare_output_data(spread_results)
        return context.prepare_output_data(items)
