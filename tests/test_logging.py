"""Test package log switching."""

from unittest.mock import patch

from loguru import logger

from simple_events import EventList, enable_logging


class TestEnableLogging:
    """Toggling this package's records."""

    def test_enable_targets_package(self):
        with patch("simple_events.log.logger") as mock_logger:
            enable_logging()
            mock_logger.enable.assert_called_once_with("simple_events")
            mock_logger.disable.assert_not_called()

    def test_disable_targets_package(self):
        with patch("simple_events.log.logger") as mock_logger:
            enable_logging(False)
            mock_logger.disable.assert_called_once_with("simple_events")

    def test_host_sinks_are_kept(self):
        with patch("simple_events.log.logger") as mock_logger:
            enable_logging(False)
            enable_logging(True)
            mock_logger.remove.assert_not_called()
            mock_logger.add.assert_not_called()

    def test_disable_silences_package_records(self):
        # Arrange
        messages: list[str] = []
        sink_id = logger.add(messages.append, level="DEBUG", format="{message}")

        try:
            # Act
            enable_logging(False)
            EventList().get("silenced")
            enable_logging(True)
            EventList().get("emitted")
        finally:
            enable_logging(True)
            logger.remove(sink_id)

        # Assert
        assert len(messages) == 1
        assert "'emitted'" in messages[0]
