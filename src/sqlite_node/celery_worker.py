"""
celery_worker.py
----------------
Defines the Celery app and the task that runs a registered node on a list of
input items. This is the asynchronous entry point a host uses to drive a node.
"""
import logging

from celery import Celery
from celery.signals import worker_init

from .config import BROKER_URL, RESULT_BACKEND
from .host import LocalExecutionContext, serialize_output
from .log import configure_logging
from .registry import get_node

logger = logging.getLogger(__name__)

app = Celery("worker", broker=BROKER_URL, backend=RESULT_BACKEND)


@app.task(name="sqlite_node.run_node")
def run_node(node_name, items, parameters, workflow_id=None, continue_on_fail=False, item_parameters=None):
    node = get_node(node_name)
    context = LocalExecutionContext(
        items,
        parameters=parameters,
        workflow_id=workflow_id,
        continue_on_fail=continue_on_fail,
        item_parameters=item_parameters,
    )
    logger.info("Running node %s on %d item(s) for workflow %s", node_name, len(items), workflow_id)
    return serialize_output(node.execute(context))


# --- Signals ---

@worker_init.connect
def worker_ready(sender=None, **kwargs):
    """Run any worker-specific initialization here if needed."""
    configure_logging()
    logger.info("Worker initialized.")
