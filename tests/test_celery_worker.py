from sqlite_node.celery_worker import run_node


def test_run_node_returns_json_payloads(workdir):
    result = run_node.apply(
        args=["SqliteNode", [{}, {}], {"dbName": "tasks"}],
        kwargs={
            "workflow_id": "wf-celery",
            "item_parameters": [
                {"query_type": "CREATE", "query": "CREATE TABLE t (x)"},
                {"query_type": "INSERT", "query": "INSERT INTO t VALUES ($x)", "args": '{"$x": 4}'},
            ],
        },
    )
    assert result.get() == [[{"changes": 1}, {"changes": 1}]]
    assert (workdir / "databases" / "wf-celery" / "tasks.db").is_file()


def test_run_node_continue_on_fail(workdir):
    result = run_node.apply(
        args=["SqliteNode", [{}], {"dbName": "tasks", "query_type": "SELECT", "query": "SELECT * FROM nope"}],
        kwargs={"workflow_id": "wf-celery", "continue_on_fail": True},
    )
    assert result.get() == [[{"error": "no such table: nope"}]]
