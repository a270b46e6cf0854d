"""Slack message timestamp helpers."""

import re

_DIGITS = re.compile(r"^\d+$")

# Slack timestamps carry six fractional digits: "1234567890.123456"
TS_FRACTION_DIGITS = 6


def normalize_ts(ts: str) -> str:
    """Insert the period into an all-digit timestamp.

    Message links drop the period (``p1234567890123456``), so a value like
    ``"1234567890123456"`` becomes ``"1234567890.123456"``. Anything else is
    returned stripped but otherwise untouched.
    """
    ts = ts.strip()
    if ts.startswith("p") and _DIGITS.match(ts[1:]):
        ts = ts[1:]
    if _DIGITS.match(ts) and len(ts) > TS_FRACTION_DIGITS:
        return f"{ts[:-TS_FRACTION_DIGITS]}.{ts[-TS_FRACTION_DIGITS:]}"
    return ts
