from sqlite_node.config import Settings


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for name in ("DATABASES_ROOT", "DEFAULT_WORKFLOW_ID", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.DATABASES_ROOT == "./databases"
    assert settings.DEFAULT_WORKFLOW_ID == "default_workflow"
    assert settings.LOG_LEVEL == "INFO"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DATABASES_ROOT", "/srv/sqlite")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    settings = Settings()
    assert settings.DATABASES_ROOT == "/srv/sqlite"
    assert settings.LOG_LEVEL == "DEBUG"


def test_env_file(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DEFAULT_WORKFLOW_ID", raising=False)
    (tmp_path / ".env").write_text("DEFAULT_WORKFLOW_ID=from_env_file\n", encoding="utf-8")
    assert Settings().DEFAULT_WORKFLOW_ID == "from_env_file"
