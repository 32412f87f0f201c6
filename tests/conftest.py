import pytest

from sqlite_node.host import LocalExecutionContext


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run each test from an empty directory so ./databases lands in tmp_path."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def make_context():
    def _make(item_parameters, workflow_id="wf1", continue_on_fail=False, parameters=None):
        return LocalExecutionContext(
            [{} for _ in item_parameters],
            parameters=parameters or {},
            workflow_id=workflow_id,
            continue_on_fail=continue_on_fail,
            item_parameters=item_parameters,
        )

    return _make
