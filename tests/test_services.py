"""Unit tests for PathService and NotificationCenter."""

import logging

from codeql_agent.service.notification_center import NotificationCenter
from codeql_agent.service.path_service import PathService


class TestPathService:

    def test_no_folder(self):
        assert PathService().current_folder() == ""

    def test_folder_is_resolved(self, tmp_path):
        ps = PathService()
        ps.set_current_folder(tmp_path / "a" / "..")
        assert ps.current_folder() == str(tmp_path.resolve())

    def test_clear(self, tmp_path):
        ps = PathService(tmp_path)
        ps.set_current_folder(None)
        assert ps.current_folder() == ""


class TestNotificationCenter:

    def test_error_emits_and_logs(self, caplog):
        center = NotificationCenter()
        received = []
        center.notification_requested.connect(lambda *args: received.append(args))

        with caplog.at_level(logging.ERROR, logger="codeql_agent.service.notification_center"):
            center.error("Docker missing")

        assert received == [("error", "Docker missing", 5000)]
        assert "Docker missing" in caplog.text

    def test_warn_level(self, caplog):
        center = NotificationCenter()
        received = []
        center.notification_requested.connect(lambda *args: received.append(args))

        with caplog.at_level(logging.WARNING, logger="codeql_agent.service.notification_center"):
            center.warn("careful", ms=100)

        assert received == [("warn", "careful", 100)]
        assert caplog.records[0].levelno == logging.WARNING
