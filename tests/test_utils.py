import logging

from webindex.fetcher import BatchRateLimiter
from webindex.utils import get_logger


def read_log(path):
    return path.read_text(encoding="utf-8")


def test_module_loggers_write_to_configured_file(tmp_path):
    get_logger("run", log_dir=tmp_path / "logs", level="DEBUG")
    limiter = BatchRateLimiter(batch_size=1, pause=0.5, sleep=lambda s: None)
    limiter.acquire()
    limiter.acquire()

    text = read_log(tmp_path / "logs" / "run.log")
    assert "DEBUG" in text
    assert "webindex.fetcher" in text
    assert "pausing 0.5s" in text


def test_configured_level_filters_module_messages(tmp_path):
    get_logger("run", log_dir=tmp_path, level="ERROR")
    logging.getLogger("webindex.index_builder").warning("not written")
    logging.getLogger("webindex.index_builder").error("written")

    text = read_log(tmp_path / "run.log")
    assert "written" in text
    assert "not written" not in text


def test_reconfiguring_replaces_handlers(tmp_path):
    get_logger("first", log_dir=tmp_path)
    logger = get_logger("second", log_dir=tmp_path)
    assert len(logger.handlers) == 2
    logging.getLogger("webindex.search_cli").info("hello")

    assert read_log(tmp_path / "first.log") == ""
    assert "hello" in read_log(tmp_path / "second.log")


def test_console_only_without_filename(tmp_path):
    logger = get_logger(log_dir=tmp_path / "unused")
    assert len(logger.handlers) == 1
    assert not (tmp_path / "unused").exists()
