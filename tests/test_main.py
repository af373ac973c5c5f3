import pytest

import cookielogin.__main__ as entry


def test_main_runs_uvicorn_with_env(monkeypatch):
    seen = {}

    def fake_run(target, **kwargs):
        seen["target"] = target
        seen.update(kwargs)

    monkeypatch.setenv("COOKIELOGIN_PORT", "3999")
    monkeypatch.setattr(entry.uvicorn, "run", fake_run)
    entry.main()
    assert seen["target"] == "cookielogin.app:app"
    assert seen["port"] == 3999
    assert seen["host"] == "127.0.0.1"


def test_startup_failure_exits_with_status_1(monkeypatch, caplog):
    def boom(*args, **kwargs):
        raise OSError("address already in use")

    monkeypatch.delenv("COOKIELOGIN_PORT", raising=False)
    monkeypatch.setattr(entry.uvicorn, "run", boom)
    with pytest.raises(SystemExit) as exc:
        entry.main()
    assert exc.value.code == 1
    assert "Server failed to start" in caplog.text
