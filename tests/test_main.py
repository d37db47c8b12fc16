from unittest.mock import MagicMock

from pidlist import __main__ as entry
from pidlist import logging_config
from pidlist.exceptions import ListingExitCodeError
from pidlist.models import ProcessLink


def test_main_prints_links(monkeypatch, capsys):
    monkeypatch.setattr(entry, "setup_logging", MagicMock())
    monkeypatch.setattr(
        entry,
        "get_processes_sync",
        MagicMock(return_value=[ProcessLink(parent_pid=0, pid=4), ProcessLink(parent_pid=4, pid=88)]),
    )

    assert entry.main() == 0
    assert capsys.readouterr().out == "0 4\n4 88\n"


def test_main_reports_query_errors(monkeypatch, capsys, caplog):
    monkeypatch.setattr(entry, "setup_logging", MagicMock())
    monkeypatch.setattr(entry, "get_processes_sync", MagicMock(side_effect=ListingExitCodeError(exit_code=1)))

    assert entry.main() == 1
    assert capsys.readouterr().out == ""
    assert "exited with code 1" in caplog.text


def test_main_reports_malformed_config(monkeypatch, caplog):
    monkeypatch.setattr(entry, "setup_logging", MagicMock())
    sync_call = MagicMock()
    monkeypatch.setattr(entry, "get_processes_sync", sync_call)
    monkeypatch.setenv("PIDLIST_HIDE_WINDOW", "sometimes")

    assert entry.main() == 1
    assert "PIDLIST_HIDE_WINDOW" in caplog.text
    sync_call.assert_not_called()


def test_main_reports_malformed_log_level(monkeypatch, capsys):
    logging_config.reset_logging()
    sync_call = MagicMock()
    monkeypatch.setattr(entry, "get_processes_sync", sync_call)
    monkeypatch.setenv("PIDLIST_LOG_LEVEL", "chatty")

    assert entry.main() == 1
    assert capsys.readouterr().out == ""
    sync_call.assert_not_called()
