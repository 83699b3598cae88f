import logging
import sys

import structlog

TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"


def render_prefixed_line(logger, method_name: str, event_dict: dict) -> str:
    """
    Final structlog processor. Renders `<prefix><timestamp> <event>`, where the
    prefix comes from the `prefix` key bound on the logger (empty if unbound).
    """
    prefix = event_dict.get("prefix", "")
    timestamp = event_dict.get("timestamp", "")
    line = f"{prefix}{timestamp} {event_dict.get('event', '')}"
    exception = event_dict.get("exception")
    if exception:
        line = f"{line}\n{exception}"
    return line


def setup_logging(verbose: bool):
    """
    Configures structlog to render through the standard library and routes
    every record, structlog or not, to stdout. Critical records, the fatal
    error line, go to stderr instead.
    """
    log_level = logging.DEBUG if verbose else logging.INFO

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt=TIMESTAMP_FORMAT, utc=False),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=shared_processors
        + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        # foreign_pre_chain handles records that don't originate from structlog.
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            render_prefixed_line,
        ],
    )

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)
    stdout_handler.addFilter(lambda record: record.levelno < logging.CRITICAL)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    stderr_handler.setLevel(logging.CRITICAL)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(stdout_handler)
    root_logger.addHandler(stderr_handler)
    root_logger.setLevel(log_level)
