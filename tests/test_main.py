"""
Process entry point tests
"""
from exam_relay import __main__ as entrypoint
from exam_relay import main as main_module


class TestEntrypoint:
    """python -m exam_relay"""

    def test_runs_uvicorn_with_settings(self, monkeypatch):
        calls = []
        monkeypatch.setattr(entrypoint.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

        entrypoint.main()

        assert len(calls) == 1
        app, kwargs = calls[0]
        assert app is main_module.app
        assert app.state.settings is main_module.settings
        assert kwargs == {
            "host": main_module.settings.HOST,
            "port": main_module.settings.PORT,
            "log_config": None,
        }
