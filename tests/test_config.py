from pagekit.core.config import Settings, _parse_cors_origins


def test_cors_comma_list():
    assert _parse_cors_origins("http://a.test, http://b.test,") == ["http://a.test", "http://b.test"]


def test_cors_json_list():
    assert _parse_cors_origins('["http://a.test"]') == ["http://a.test"]


def test_cors_empty_falls_back():
    assert _parse_cors_origins("") == ["http://localhost:3000", "http://localhost:5173"]


def test_storage_backend_from_env(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "mongo")
    assert Settings().storage_backend == "mongo"


def test_logging_and_seed_settings(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("MEMORY_SEED_ARTICLES", "7")
    s = Settings()
    assert s.log_level == "warning"
    assert s.memory_seed_articles == 7
