import pytest

from sqlite_node.host import (
    ExecutionContext,
    LocalExecutionContext,
    NodeItem,
    NodeParameterError,
    serialize_output,
)


def test_item_parameters_override_node_parameters():
    context = LocalExecutionContext(
        [{}, {}],
        parameters={"dbName": "shared", "query": "SELECT 1"},
        item_parameters=[{"dbName": "first"}],
    )
    assert context.get_node_parameter("dbName", 0, "") == "first"
    assert context.get_node_parameter("dbName", 1, "") == "shared"
    assert context.get_node_parameter("query", 0) == "SELECT 1"


def test_missing_parameter_uses_default_or_raises():
    context = LocalExecutionContext([{}])
    assert context.get_node_parameter("args", 0, "{}") == "{}"
    assert context.get_node_parameter("args", 0, None) is None
    with pytest.raises(NodeParameterError, match="'query'"):
        context.get_node_parameter("query", 0)


def test_workflow_descriptor():
    assert LocalExecutionContext([]).get_workflow() is None
    assert LocalExecutionContext([], workflow_id="wf9").get_workflow().id == "wf9"


def test_items_are_copied_into_node_items():
    payload = {"a": 1}
    context = LocalExecutionContext([payload, None])
    items = context.get_input_data()
    assert items == [NodeItem(json={"a": 1}), NodeItem(json={})]
    items[0].json = {"b": 2}
    assert payload == {"a": 1}


def test_prepare_and_serialize_output():
    context = LocalExecutionContext([], continue_on_fail=True)
    assert context.continue_on_fail() is True
    output = context.prepare_output_data([NodeItem(json={"x": 1})])
    assert serialize_output(output) == [[{"x": 1}]]


def test_serialize_output_encodes_blobs():
    output = [[NodeItem(json={"id": 1, "data": b"\xff\x00", "name": "n"})]]
    assert serialize_output(output) == [[{"id": 1, "data": "/wA=", "name": "n"}]]


def test_base_context_is_abstract():
    with pytest.raises(NotImplementedError):
        ExecutionContext().get_input_data()
