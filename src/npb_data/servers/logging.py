"""
JSON Structured Logging for the NPB Data server.

Emits one JSON object per line for tool calls and errors so they can be
picked up by log aggregators. Lines go to stderr: under the stdio transport
stdout carries the MCP protocol stream and must stay clean.

Usage:
    from npb_data.servers.logging import log_error, log_tool_call

    log_tool_call(tool="get_team_roster", duration_ms=312.4, rows=68, team_code="g")

    log_error(
        service="mcp",
        error="Failed to fetch https://npb.jp/bis/teams/rst_g.html: 503",
        error_type="FetchError",
        tool="get_team_roster",
    )
"""

import json
import logging
import sys
import time
from datetime import UTC, datetime
from typing import Any

logger = logging.getLogger(__name__)


def log_event(**kwargs: Any) -> None:
    """
    Log a structured event as a JSON line on stderr.

    Adds ``ts`` (epoch seconds) and ``timestamp`` (ISO 8601, UTC) unless the
    caller supplied ``ts``.

    Example:
        >>> log_event(service="mcp", event="tool_call", tool="list_teams", rows=12)
        {"service": "mcp", "event": "tool_call", "tool": "list_teams", "rows": 12, "ts": ..., "timestamp": "..."}
    """
    kwargs.setdefault("ts", time.time())
    kwargs["timestamp"] = datetime.fromtimestamp(kwargs["ts"], tz=UTC).isoformat()

    try:
        sys.stderr.write(json.dumps(kwargs, ensure_ascii=False) + "\n")
        sys.stderr.flush()
    except (TypeError, ValueError) as e:
        # Fallback to standard logging if JSON serialization fails
        logger.error(f"Failed to write JSON log: {e}. Data: {kwargs}")


def log_error(
    service: str,
    error: str,
    error_type: str | None = None,
    **kwargs: Any,
) -> None:
    """
    Log an error with structured data.

    Args:
        service: Service name ("mcp", "cli")
        error: Error message
        error_type: Error class name (FetchError, UnknownTeamError, ...)
        **kwargs: Additional context (tool, arguments, ...)
    """
    log_data = {
        "event": "error",
        "service": service,
        "error": error,
    }

    if error_type:
        log_data["error_type"] = error_type

    log_data.update(kwargs)

    log_event(**log_data)


def log_tool_call(
    tool: str,
    service: str = "mcp",
    duration_ms: float | None = None,
    rows: int | None = None,
    success: bool = True,
    **kwargs: Any,
) -> None:
    """
    Log MCP tool calls.

    Args:
        tool: Tool name
        service: Service name (default: "mcp")
        duration_ms: Tool execution time
        rows: Number of records returned
        success: Whether tool succeeded
        **kwargs: Additional context (team_code, query, player_id)
    """
    log_data: dict[str, Any] = {
        "event": "tool_call",
        "service": service,
        "tool": tool,
        "success": success,
    }

    if duration_ms is not None:
        log_data["duration_ms"] = round(duration_ms, 2)

    if rows is not None:
        log_data["rows"] = rows

    log_data.update(kwargs)

    log_event(**log_data)


__all__ = ["log_event", "log_error", "log_tool_call"]
