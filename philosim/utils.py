"""Number parsing and status-line formatting shared by both simulations."""

from __future__ import annotations

from enum import Enum

LONG_MAX = 9223372036854775807

_SPACES = frozenset("\t\n\v\f\r ")


class Message(Enum):
    """Kinds of status line a philosopher can print."""

    TAKEN_FORK = 10
    EATING = 11
    SLEEPING = 12
    THINKING = 13
    DIED = 14
    TAKEN_SINGLE_FORK = 15


def parse_long(text: str) -> int:
    """Parse a leading integer the lenient way.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit.  Anything after is ignored; text with
    no digits gives 0.  A magnitude beyond the 64-bit range saturates to
    ``LONG_MAX`` (or its negation for a minus sign).
    """
    rest = text.lstrip("".join(_SPACES))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
        if value > LONG_MAX:
            return LONG_MAX * sign
    return value * sign


def is_numeric(text: str) -> bool:
    """Return True if ``text`` is an optional leading '-' followed by digits only."""
    body = text[1:] if text.startswith("-") else text
    return bool(body) and all("0" <= char <= "9" for char in body)


def format_message(timestamp: int, philosopher: int, message: Message) -> str:
    """Render the status line(s) for ``message``, each ending in a newline.

    Eating is announced as two fork pickups followed by the eating line.
    A plain ``TAKEN_FORK`` message produces no output.
    """
    prefix = f"{timestamp} {philosopher}"
    if message is Message.TAKEN_SINGLE_FORK:
        return f"{prefix} has taken a fork\n"
    if message is Message.EATING:
        return (
            f"{prefix} has taken a fork\n"
            f"{prefix} has taken a fork\n"
            f"{prefix} is eating\n"
        )
    if message is Message.SLEEPING:
        return f"{prefix} is sleeping\n"
    if message is Message.THINKING:
        return f"{prefix} is thinking\n"
    if message is Message.DIED:
        return f"{prefix} died\n"
    return ""