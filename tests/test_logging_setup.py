import logging
from datetime import datetime

import colorlog

from backslash_escape import config
from libs.logging_setup.setup_logging import DailyFileHandler, PreviewTruncationFilter, setup_logging


def _record(msg, *args):
    return logging.LogRecord("backslash_escape", logging.INFO, __file__, 1, msg, args, None)


def test_preview_filter_truncates_long_messages():
    record = _record("payload: %s", "x" * 100)
    assert PreviewTruncationFilter(20).filter(record) is True
    assert record.getMessage() == "payload: xxxxxxxxxxx... [89 more chars]"


def test_preview_filter_leaves_short_messages():
    record = _record("short %s", "msg")
    PreviewTruncationFilter(20).filter(record)
    assert record.getMessage() == "short msg"


def test_preview_filter_disabled_with_zero():
    record = _record("y" * 500)
    PreviewTruncationFilter(0).filter(record)
    assert record.getMessage() == "y" * 500


def test_daily_file_handler_writes_dated_file(tmp_path):
    handler = DailyFileHandler(log_dir=str(tmp_path), encoding="utf-8", delay=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    try:
        handler.emit(_record("hello log"))
    finally:
        handler.close()
    now = datetime.now()
    log_file = tmp_path / now.strftime("%Y-%m") / f"escape.{now.strftime('%Y-%m-%d')}.log"
    assert log_file.read_text(encoding="utf-8") == "hello log\n"


def test_daily_file_handler_rolls_over_on_date_change(tmp_path):
    handler = DailyFileHandler(log_dir=str(tmp_path), encoding="utf-8", delay=True)
    try:
        handler.current_date_str = "2000-01-01"
        assert handler.shouldRollover(_record("x"))
        handler.doRollover()
        assert handler.current_date_str == datetime.now().strftime("%Y-%m-%d")
        assert handler.baseFilename.endswith(f"escape.{handler.current_date_str}.log")
    finally:
        handler.close()


def test_setup_logging_installs_file_and_console_handlers(tmp_path, clean_root_logger):
    root = setup_logging(log_path=str(tmp_path), log_level=logging.DEBUG, preview_length=50)
    assert root is clean_root_logger
    assert root.level == logging.DEBUG
    file_handlers = [h for h in root.handlers if isinstance(h, DailyFileHandler)]
    console_handlers = [h for h in root.handlers if isinstance(h.formatter, colorlog.ColoredFormatter)]
    assert len(file_handlers) == 1 and len(console_handlers) == 1
    assert all(any(isinstance(f, PreviewTruncationFilter) for f in h.filters) for h in root.handlers)
    log_file = tmp_path / datetime.now().strftime("%Y-%m") / f"escape.{datetime.now().strftime('%Y-%m-%d')}.log"
    file_handlers[0].flush()
    assert "SUCCESS - Logging initialized." in log_file.read_text(encoding="utf-8")


def test_setup_logging_without_rotation(tmp_path, clean_root_logger):
    root = setup_logging(log_path=str(tmp_path), daily_rotation=False)
    root.info("plain file")
    for handler in root.handlers:
        handler.flush()
    assert "plain file" in (tmp_path / "escape.log").read_text(encoding="utf-8")


def test_setup_logging_console_only(tmp_path, clean_root_logger):
    root = setup_logging(log_path=str(tmp_path / "unused"), log_to_file=False)
    assert len(root.handlers) == 1
    assert not (tmp_path / "unused").exists()


def test_initialize_logging_uses_config(tmp_path, monkeypatch, clean_root_logger):
    monkeypatch.setattr(config, "LOG_LEVEL", logging.WARNING)
    monkeypatch.setattr(config, "DAILY_ROTATION", False)
    root = config.initialize_logging(log_path=str(tmp_path))
    assert root.level == logging.WARNING
    assert any(getattr(h, "baseFilename", "") == str(tmp_path / "escape.log") for h in root.handlers)


class _RecordingHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.closed_calls = 0

    def emit(self, record):
        pass

    def close(self):
        self.closed_calls += 1
        super().close()


def test_setup_logging_detaches_existing_handlers_without_closing(tmp_path, clean_root_logger):
    existing = _RecordingHandler()
    clean_root_logger.addHandler(existing)
    root = setup_logging(log_path=str(tmp_path), log_to_file=False)
    assert existing not in root.handlers
    assert existing.closed_calls == 0
