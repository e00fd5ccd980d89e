"""Logging configuration using loguru.

All log output goes to stderr: stdout is reserved for the MCP stdio
protocol and for CLI results.

``setup_logging`` picks between one JSON object per line and a colored
console format.
"""

import json
import sys
from datetime import UTC, datetime

from loguru import logger

# Map loguru levels to severity names
LEVEL_TO_SEVERITY = {
    "TRACE": "DEBUG",
    "DEBUG": "DEBUG",
    "INFO": "INFO",
    "SUCCESS": "INFO",
    "WARNING": "WARNING",
    "ERROR": "ERROR",
    "CRITICAL": "CRITICAL",
}


def _json_formatter(record: dict) -> str:
    """Format a log record as a single JSON line."""
    log_entry = {
        "timestamp": datetime.now(UTC).isoformat(),
        "severity": LEVEL_TO_SEVERITY.get(record["level"].name, "INFO"),
        "message": record["message"],
        "logger": record["name"],
        "function": record["function"],
        "line": record["line"],
    }

    # Bound fields such as document_id
    for key, value in record["extra"].items():
        if key not in log_entry:
            log_entry[key] = value

    exc = record["exception"]
    if exc:
        log_entry["exception"] = {
            "type": exc.type.__name__ if exc.type else None,
            "value": str(exc.value) if exc.value else None,
        }

    # Stash the rendered line so the format string stays free of braces
    # coming from user text.
    record["extra"]["_json"] = json.dumps(log_entry, default=str)
    return "{extra[_json]}\n"


def _dev_formatter(record: dict) -> str:
    """Console format, prefixed with the bound document ID when there is one."""
    document_id = record["extra"].get("document_id")
    context_str = f"[doc={document_id}] " if document_id else ""
    record["extra"]["_context"] = context_str

    return (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "{extra[_context]}"
        "<level>{message}</level>\n"
        "{exception}"
    )


def setup_logging(json_logs: bool = False, log_level: str = "INFO") -> None:
    """Configure loguru for extratext.

    Args:
        json_logs: If True, output one JSON object per log line
        log_level: Lowest level that is emitted
    """
    # Remove default handler
    logger.remove()

    if json_logs:
        logger.add(
            sys.stderr,
            format=_json_formatter,
            level=log_level,
        )
    else:
        logger.add(
            sys.stderr,
            format=_dev_formatter,
            level=log_level,
            colorize=True,
        )
