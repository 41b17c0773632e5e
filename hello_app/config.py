"""Configuration helpers for the responder entrypoint."""

from __future__ import annotations

from typing import Final, Optional

DEFAULT_HOST: Final[str] = "0.0.0.0"
DEFAULT_PORT: Final[int] = 3000
PORT_ENV_VAR: Final[str] = "PORT"


def parse_port(raw_value: Optional[str]) -> Optional[int]:
    """Return ``raw_value`` as a TCP port, or ``None`` when it is not one.

    Args:
        raw_value: Raw port string, typically the ``PORT`` environment
            variable. ``None`` and blank strings count as missing.

    Returns:
        The integer port when ``raw_value`` parses as a base-10 integer in
        ``1..65535``; otherwise ``None``.
    """

    if raw_value is None:
        return None

    raw_value = raw_value.strip()
    if not raw_value:
        return None

    try:
        port = int(raw_value, 10)
    except ValueError:
        return None

    if 1 <= port <= 65535:
        return port

    return None


def resolve_port(raw_value: Optional[str], default_port: int = DEFAULT_PORT) -> int:
    """Return the port the responder should listen on.

    Falls back to ``default_port`` when ``raw_value`` is missing or invalid.
    """

    port = parse_port(raw_value)
    if port is None:
        return default_port
    return port
