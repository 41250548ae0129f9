import io
from datetime import datetime, timedelta

import pytest

from bingwallpaper.logger import Logger, LogLevel, NullLogger


def make_logger(level=LogLevel.INFO, **kwargs):
    stream = io.StringIO()
    kwargs.setdefault("show_time", False)
    return Logger(level, writer=stream, **kwargs), stream


@pytest.mark.parametrize(
    "level, expected",
    [
        (LogLevel.DEBUG, ["[DEBUG] d", "[INFO] i", "[WARN] w", "[ERROR] e"]),
        (LogLevel.INFO, ["[INFO] i", "[WARN] w", "[ERROR] e"]),
        (LogLevel.WARNING, ["[WARN] w", "[ERROR] e"]),
        (LogLevel.ERROR, ["[ERROR] e"]),
    ],
)
def test_level_ordering(level, expected):
    logger, stream = make_logger(level)
    logger.debug("d")
    logger.info("i")
    logger.warning("w")
    logger.error("e")
    assert stream.getvalue().splitlines() == expected


@pytest.mark.parametrize(
    "level, tag",
    [
        (LogLevel.DEBUG, "DEBUG"),
        (LogLevel.INFO, "INFO"),
        (LogLevel.WARNING, "WARN"),
        (LogLevel.ERROR, "ERROR"),
    ],
)
def test_format_message_level_tag(level, tag):
    logger, _ = make_logger()
    assert logger.format_message(level, "msg") == f"[{tag}] msg"


def test_format_message_with_args():
    logger, _ = make_logger()
    assert logger.format_message(LogLevel.INFO, "count=%d name=%s", 3, "x") == "[INFO] count=3 name=x"


def test_format_message_without_args_keeps_percent():
    logger, _ = make_logger()
    assert logger.format_message(LogLevel.INFO, "100%") == "[INFO] 100%"


def test_format_message_no_level():
    logger, _ = make_logger(show_level=False)
    assert logger.format_message(LogLevel.ERROR, "plain") == "plain"


def test_format_message_with_time():
    logger, _ = make_logger(show_time=True)
    before = datetime.now().replace(microsecond=0)
    line = logger.format_message(LogLevel.INFO, "hi")
    after = datetime.now()
    assert line[0] == "["
    assert line[20:] == "] [INFO] hi"
    stamp = datetime.strptime(line[1:20], "%Y-%m-%d %H:%M:%S")
    assert before <= stamp <= after + timedelta(seconds=1)


def test_default_level_is_info():
    assert Logger().level == LogLevel.INFO


def test_messages_below_level_are_dropped():
    logger, stream = make_logger(LogLevel.WARNING)
    logger.debug("d")
    logger.info("i")
    logger.warning("w")
    logger.error("e")
    assert stream.getvalue().splitlines() == ["[WARN] w", "[ERROR] e"]


def test_debug_level_emits_everything():
    logger, stream = make_logger(LogLevel.DEBUG)
    logger.debug("a")
    logger.info("b")
    assert len(stream.getvalue().splitlines()) == 2


def test_level_can_be_changed():
    logger, stream = make_logger(LogLevel.ERROR)
    logger.info("hidden")
    logger.level = LogLevel.DEBUG
    logger.info("shown")
    assert stream.getvalue().splitlines() == ["[INFO] shown"]


def test_default_writer_is_stdout(capsys):
    logger = Logger(show_time=False)
    logger.info("to stdout %s", "ok")
    assert capsys.readouterr().out == "[INFO] to stdout ok\n"


def test_null_logger_discards(capsys):
    logger = NullLogger()
    logger.debug("x")
    logger.info("x")
    logger.warning("x")
    logger.error("x %s", 1)
    assert capsys.readouterr().out == ""
    assert logger.level == LogLevel.ERROR


def test_null_logger_level_fixed():
    logger = NullLogger()
    logger.level = LogLevel.DEBUG
    assert logger.level == LogLevel.ERROR