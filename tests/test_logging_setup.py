import logging
import re
import sys

import pytest
import structlog

from ethereal_vault.app import Application
from ethereal_vault.logging_setup import render_prefixed_line, setup_logging

LINE = r"\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2} "


def test_render_prefixed_line():
    event_dict = {
        "prefix": "[INFO] ",
        "timestamp": "2026/10/19 12:00:00",
        "event": "Processing completed successfully",
        "level": "info",
    }

    line = render_prefixed_line(None, "info", event_dict)

    assert line == "[INFO] 2026/10/19 12:00:00 Processing completed successfully"


def test_render_without_prefix_appends_exception():
    event_dict = {
        "timestamp": "2026/10/19 12:00:00",
        "event": "vault sealed",
        "exception": "Traceback (most recent call last):\n  ...",
    }

    line = render_prefixed_line(None, "critical", event_dict)

    assert line.splitlines()[0] == "2026/10/19 12:00:00 vault sealed"
    assert line.splitlines()[1] == "Traceback (most recent call last):"


@pytest.mark.parametrize(
    "verbose, level", [(True, logging.DEBUG), (False, logging.INFO)]
)
def test_setup_logging_replaces_root_handlers(verbose, level):
    logging.getLogger().addHandler(logging.NullHandler())

    setup_logging(verbose)

    root_logger = logging.getLogger()
    assert root_logger.level == level
    assert [handler.stream for handler in root_logger.handlers] == [
        sys.stdout,
        sys.stderr,
    ]


def test_critical_records_go_to_stderr_only(capsys):
    setup_logging(False)

    structlog.get_logger("ethereal_vault.cli").critical("vault sealed")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert re.fullmatch(LINE + "vault sealed\n", captured.err)


@pytest.mark.parametrize("verbose, prefix", [(False, "[INFO] "), (True, "[DEBUG] ")])
def test_application_output_format(capsys, verbose, prefix):
    setup_logging(verbose)

    Application(verbose).run()

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert re.fullmatch(
        re.escape(prefix) + LINE + "Starting EtherealVault processing", lines[0]
    )
    assert re.fullmatch(
        re.escape(prefix) + LINE + "Processing completed successfully", lines[1]
    )


def test_setup_logging_emits_nothing(capsys):
    setup_logging(True)

    assert capsys.readouterr().out == ""
