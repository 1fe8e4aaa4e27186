"""Tests for the content source and logging setup."""

import logging

import pytest

from modcheck.errors import ContentReadError
from modcheck.utils.content import preview, read_content
from modcheck.utils.log import LOGGER_NAME, setup_logging


def test_read_content_strips(tmp_path):
    path = tmp_path / "content.txt"
    path.write_text("\n  some text to check  \n\n", encoding="utf-8")
    assert read_content(path) == "some text to check"


def test_read_content_default_path(tmp_path):
    (tmp_path / "content.txt").write_text("hello")
    assert read_content() == "hello"


def test_read_content_missing(tmp_path):
    with pytest.raises(ContentReadError, match="Failed to read content from"):
        read_content(tmp_path / "missing.txt")


def test_read_content_is_oserror(tmp_path):
    with pytest.raises(OSError):
        read_content(tmp_path / "missing.txt")


def test_preview():
    assert preview("short", 30) == "short"
    assert preview("x" * 60, 50) == "x" * 50 + "..."
    assert preview("x" * 50, 50) == "x" * 50


def test_setup_logging_levels():
    logger = setup_logging("debug")
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1

    logger = setup_logging("nonsense")
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
