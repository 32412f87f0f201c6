"""
host.py
-------
The host side of the node contract: items flowing between workflow steps,
the workflow descriptor and the execution context a node is driven through.

LocalExecutionContext is the context used when this package itself hosts a
node (HTTP API, Celery worker, tests).
"""
import base64
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

_MISSING = object()


class NodeParameterError(ValueError):
    pass


@dataclass
class NodeItem:
    json: Dict[str, Any] = field(default_factory=dict)


@dataclass
class WorkflowInfo:
    id: Optional[str] = None
    name: Optional[str] = None


class ExecutionContext:
    """
    Interface a node sees while executing. Hosts implement every method.
    """

    def get_input_data(self) -> List[NodeItem]:
        raise NotImplementedError

    def get_node_parameter(self, name: str, item_index: int, default: Any = _MISSING) -> Any:
        raise NotImplementedError

    def continue_on_fail(self) -> bool:
        raise NotImplementedError

    def get_workflow(self) -> Optional[WorkflowInfo]:
        raise NotImplementedError

    def prepare_output_data(self, items: List[NodeItem]) -> List[List[NodeItem]]:
        raise NotImplementedError


class LocalExecutionContext(ExecutionContext):
    def __init__(
        self,
        items: List[Dict[str, Any]],
        parameters: Optional[Dict[str, Any]] = None,
        workflow_id: Optional[str] = None,
        continue_on_fail: bool = False,
        item_parameters: Optional[List[Dict[str, Any]]] = None,
    ):
        self.items = [NodeItem(json=dict(payload or {})) for payload in items]
        self.parameters = parameters or {}
        # Per-item overrides, indexed like items
        self.item_parameters = item_parameters or []
        self.workflow = WorkflowInfo(id=workflow_id) if workflow_id is not None else None
        self._continue_on_fail = continue_on_fail

    def get_input_data(self):
        return self.items

    def get_node_parameter(self, name, item_index, default=_MISSING):
        if item_index < len(self.item_parameters):
            overrides = self.item_parameters[item_index] or {}
            if name in overrides:
                return overrides[name]
        if name in self.parameters:
            return self.parameters[name]
        if default is _MISSING:
            raise NodeParameterError(f"Could not get parameter '{name}' for item {item_index}")
        return default

    def continue_on_fail(self):
        return self._continue_on_fail

    def get_workflow(self):
        return self.workflow

    def prepare_output_data(self, items):
        return [list(items)]


def _to_json_value(value: Any) -> Any:
    # SQLite BLOB columns come back as bytes
    if isinstance(value, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(value)).decode("ascii")
    return value


def serialize_output(output: List[List[NodeItem]]) -> List[List[Dict[str, Any]]]:
    """Plain JSON payloads for HTTP responses and Celery results; BLOBs become base64 strings."""
    return [
        [{key: _to_json_value(value) for key, value in item.json.items()} for item in branch]
        for branch in output
    ]
