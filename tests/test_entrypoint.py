import uvicorn

from fintrack import __main__ as entrypoint
from fintrack.db.settings import Settings


def test_main_serves_configured_host_and_port(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(entrypoint, "get_settings", lambda: Settings(app_host="127.0.0.1", app_port=8123))
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

    entrypoint.main()

    assert calls == [("fintrack.main:app", {"host": "127.0.0.1", "port": 8123})]
