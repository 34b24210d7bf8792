"""Miscellaneous parsing helpers.

Each helper returns ``None`` when the value cannot be parsed instead of
raising, so callers decide explicitly what a failed parse means for them.
"""

from __future__ import annotations

import datetime as dt
import decimal
import re
from decimal import Decimal
from typing import Optional

_AMOUNT_RE = re.compile(r"\d+(?:\.\d+)?", re.ASCII)
_ISO_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
_HOUR_RE = re.compile(r"\d+", re.ASCII)


def parse_amount(value: str | None) -> Optional[Decimal]:
    """Parse a plain unsigned amount such as ``"12.25"`` into a :class:`Decimal`.

    Only digits with an optional fractional part are accepted. Signs,
    surrounding whitespace, exponents (``1e2``), digit separators
    (``1_000``) and special values (``NaN``, ``Infinity``) return ``None``
    even though ``Decimal`` itself would parse them.
    """
    if not value or _AMOUNT_RE.fullmatch(value) is None:
        return None
    return Decimal(value)


def exact_context(*amounts: Decimal) -> decimal.Context:
    """Return a context precise enough to scale ``amounts`` without rounding.

    The default context keeps 28 significant digits, fewer than an
    arbitrarily long validated amount can carry.
    """
    ctx = decimal.getcontext().copy()
    digits = max((len(a.as_tuple().digits) for a in amounts), default=0)
    ctx.prec = max(ctx.prec, digits + 4)
    return ctx


def parse_iso_date(value: str | None) -> Optional[dt.date]:
    """Parse a strict ``YYYY-MM-DD`` calendar date.

    ``date.fromisoformat`` also accepts basic and week formats such as
    ``20220101`` or ``2022-W01-1``; only the extended calendar form is
    allowed here. Impossible dates (``2022-02-30``) return ``None``.
    """
    if not value:
        return None
    match = _ISO_DATE_RE.fullmatch(value)
    if match is None:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return dt.date(year, month, day)
    except ValueError:
        return None


def parse_clock_hour(value: str | None) -> Optional[int]:
    """Return the hour of an ``HH:MM`` clock string.

    The value must split on ``:`` into exactly two fields and the first
    must be made of digits only, so signed hours such as ``+14`` are
    malformed. The minute field is not interpreted.
    """
    if not value:
        return None
    parts = value.split(":")
    if len(parts) != 2:
        return None
    if _HOUR_RE.fullmatch(parts[0]) is None:
        return None
    return int(parts[0])
