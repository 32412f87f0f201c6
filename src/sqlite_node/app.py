"""
app.py
--------
FastAPI application entrypoint. Lists registered nodes with their
descriptions and executes a node on a list of items, either inline or through
the Celery worker.
"""
import logging

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import Any, Dict, List, Optional

from sqlite_node.celery_worker import run_node
from sqlite_node.description import NodeDescription
from sqlite_node.host import LocalExecutionContext, serialize_output
from sqlite_node.log import configure_logging
from sqlite_node.registry import NODE_REGISTRY, get_node, list_descriptions

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="SQLite Node API")


class ExecuteRequest(BaseModel):
    items: List[Dict[str, Any]] = [{}]
    parameters: Dict[str, Any] = {}
    item_parameters: Optional[List[Dict[str, Any]]] = None
    workflow_id: Optional[str] = None
    continue_on_fail: bool = False


def _get_node_or_404(name: str):
    if name not in NODE_REGISTRY:
        raise HTTPException(status_code=404, detail="Node not found")
    return get_node(name)


# -------------------------------
# Node descriptions
# -------------------------------
@app.get("/nodes/", response_model=List[NodeDescription])
def list_nodes():
    return list_descriptions()


@app.get("/nodes/{name}", response_model=NodeDescription)
def describe_node(name: str):
    return _get_node_or_404(name).description


# -------------------------------
# Execution
# -------------------------------
@app.post("/nodes/{name}/execute")
def execute_node(name: str, request: ExecuteRequest):
    node = _get_node_or_404(name)
    context = LocalExecutionContext(
        request.items,
        parameters=request.parameters,
        workflow_id=request.workflow_id,
        continue_on_fail=request.continue_on_fail,
        item_parameters=request.item_parameters,
    )
    try:
        output = node.execute(context)
    except Exception as e:
        logger.warning("Node %s failed: %s", name, e)
        raise HTTPException(status_code=400, detail=str(e))
    return {"data": serialize_output(output)}


@app.post("/nodes/{name}/run")
def enqueue_node(name: str, request: ExecuteRequest):
    _get_node_or_404(name)
    async_result = run_node.apply_async(
        args=[name, request.items, request.parameters],
        kwargs={
            "workflow_id": request.workflow_id,
            "continue_on_fail": request.continue_on_fail,
            "item_parameters": request.item_parameters,
        },
    )
    return {"celery_id": async_result.id}
