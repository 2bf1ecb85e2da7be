import json
import logging
import sys

from pixcode.config import LoggingConfig, Settings
from pixcode.logging_conf import JsonFormatter, configure_logging


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="pixcode.keys",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="pix key rejected",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJsonFormatter:
    def test_renders_core_fields(self) -> None:
        payload = json.loads(JsonFormatter().format(_record()))

        assert payload == {"level": "WARNING", "logger": "pixcode.keys", "message": "pix key rejected"}

    def test_includes_extra_fields(self) -> None:
        payload = json.loads(JsonFormatter().format(_record(reason="no_match", key_length=15)))

        assert payload["reason"] == "no_match"
        assert payload["key_length"] == 15

    def test_includes_formatted_exception(self) -> None:
        try:
            raise ValueError("bad amount")
        except ValueError:
            record = _record()
            record.exc_info = sys.exc_info()

        payload = json.loads(JsonFormatter().format(record))

        assert "ValueError: bad amount" in payload["exc_info"]
        assert "exc_text" not in payload


class TestConfigureLogging:
    def test_installs_json_formatter(self, restore_root_logger: logging.Logger) -> None:
        configure_logging(Settings(_env_file=None, logging=LoggingConfig(level="DEBUG", json_logs=True)))

        handler = restore_root_logger.handlers[0]
        assert isinstance(handler.formatter, JsonFormatter)
        assert restore_root_logger.level == logging.DEBUG

    def test_plain_formatter_when_json_disabled(self, restore_root_logger: logging.Logger) -> None:
        configure_logging(Settings(_env_file=None, logging=LoggingConfig(level="WARNING", json_logs=False)))

        handler = restore_root_logger.handlers[0]
        assert not isinstance(handler.formatter, JsonFormatter)
        assert handler.formatter.format(_record()) == "WARNING pixcode.keys pix key rejected"
