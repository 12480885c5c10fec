"""
Tests unitaires pour le format console du logging.
"""

from collections.abc import Iterator

import pytest
from loguru import logger

from codec_oracle.logging_config import _console_format


@pytest.fixture
def console_lines() -> Iterator[list]:
    """Capture les lignes formatees avec le gabarit console, sans couleur."""
    lines: list = []
    handler_id = logger.add(lines.append, level="DEBUG", format=_console_format, colorize=False)
    yield lines
    logger.remove(handler_id)


def test_template_without_extra() -> None:
    template = _console_format({"extra": {}})
    assert template.endswith("<level>{message}</level>\n{exception}")
    assert "extra[" not in template


def test_template_lists_each_extra_key() -> None:
    template = _console_format({"extra": {"mime": "video/hevc", "level": 5}})
    assert "mime={extra[mime]}" in template
    assert "level={extra[level]}" in template


def test_decision_context_appended_to_line(console_lines: list) -> None:
    logger.info("Aucun decodeur", mime="video/hevc", profile=4096, level=65536)

    (line,) = console_lines
    assert "| Aucun decodeur mime=video/hevc profile=4096 level=65536\n" in line
    assert "INFO" in line


def test_plain_message_has_no_context(console_lines: list) -> None:
    logger.info("HEVC non supporte")

    (line,) = console_lines
    assert line.endswith("| HEVC non supporte\n")
