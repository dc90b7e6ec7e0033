import logging

import pytest

from fzolv import __main__ as demo
from fzolv.logging_config import setup_logging
from fzolv.math import Vector2f


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("fzolv")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_main_prints_greeting_and_point(capsys):
    assert demo.main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:3] == [
        "Hi from Fzolv :)",
        "===============>",
        "{ X : 1.500000 , Y : 3.500000 }",
    ]


def test_main_accepts_components(capsys):
    demo.main(["--x", "-2", "--y", "0.25"])
    out = capsys.readouterr().out
    assert "{ X : -2.000000 , Y : 0.250000 }" in out


def test_format_point():
    assert demo.format_point(Vector2f(1.0, 2.0)) == "{ X : 1.000000 , Y : 2.000000 }"


def test_setup_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "fzolv.log"
    setup_logging(logging.DEBUG)
    logger = setup_logging(logging.DEBUG, log_file)
    assert len(logger.handlers) == 2

    Vector2f.zero().normalize()
    for handler in logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "fzolv.math.vec2 - DEBUG" in text
    assert "zero-length" in text


def test_setup_logging_creates_log_directory(tmp_path):
    log_file = tmp_path / "logs" / "run" / "fzolv.log"
    setup_logging(logging.INFO, log_file)
    logging.getLogger("fzolv.demo").info("hello")
    assert log_file.exists()
    assert "fzolv.demo - INFO - hello" in log_file.read_text(encoding="utf-8")
