import math
import re
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from rangecomp.models import BoundaryMode, Interval

_INTERVAL_RE = re.compile(
    r"^\s*(?P<lower>[\[(])\s*(?P<start>[^,]*?)\s*,"
    r"\s*(?P<end>[^,]*?)\s*(?P<upper>[\])])\s*$"
)
_UNBOUNDED_START_TOKENS = frozenset({"", "-inf", "-infinity"})
_UNBOUNDED_END_TOKENS = frozenset(
    {"", "inf", "+inf", "infinity", "+infinity"}
)


class IntervalSyntaxError(ValueError):
    """Raised when text is not valid interval notation."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Invalid interval {text!r}: {reason}")
        self.text = text
        self.reason = reason


def _parse_endpoint(token: str, text: str) -> Any:
    try:
        return int(token)
    except ValueError:
        pass
    try:
        value = float(token)
    except ValueError:
        pass
    else:
        if not math.isfinite(value):
            raise IntervalSyntaxError(
                text, f"endpoint {token!r} must be finite"
            )
        return value
    try:
        return datetime.fromisoformat(token)
    except ValueError:
        raise IntervalSyntaxError(
            text,
            f"endpoint {token!r} is not an int, float, or ISO-8601 datetime",
        ) from None


def parse_interval(text: str) -> Interval:
    """Parse interval notation such as ``"[1, 10)"`` or ``"(-inf, 5]"``.

    An empty endpoint, ``-inf`` on the left or ``inf`` on the right leaves
    that side unbounded.
    """
    match = _INTERVAL_RE.match(text)
    if match is None:
        raise IntervalSyntaxError(
            text, "expected '[start, end)' style notation"
        )

    start_token = match.group("start")
    end_token = match.group("end")
    start = (
        None
        if start_token.lower() in _UNBOUNDED_START_TOKENS
        else _parse_endpoint(start_token, text)
    )
    end = (
        None
        if end_token.lower() in _UNBOUNDED_END_TOKENS
        else _parse_endpoint(end_token, text)
    )
    boundary_mode = BoundaryMode.from_closed(
        lower_closed=match.group("lower") == "[",
        upper_closed=match.group("upper") == "]",
    )
    try:
        return Interval(start=start, end=end, boundary_mode=boundary_mode)
    except ValidationError as err:
        reason = "; ".join(error["msg"] for error in err.errors())
        raise IntervalSyntaxError(text, reason) from err


def _format_endpoint(value: Any) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def format_interval(interval: Interval) -> str:
    if interval.start is None:
        lower = "(-inf"
    else:
        bracket = "[" if interval.boundary_mode.lower_closed else "("
        lower = bracket + _format_endpoint(interval.start)
    if interval.end is None:
        upper = "inf)"
    else:
        bracket = "]" if interval.boundary_mode.upper_closed else ")"
        upper = _format_endpoint(interval.end) + bracket
    return f"{lower}, {upper}"
