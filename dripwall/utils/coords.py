from __future__ import annotations

import math
import re
from typing import Optional

from ..models import Focus

_DECIMAL = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')
_PREFIXED = re.compile(r'0(?:[xX](?P<hex>[0-9a-fA-F]+)|[oO](?P<oct>[0-7]+)|[bB](?P<bin>[01]+))')


def _parse_number(part: str) -> Optional[float]:
    """Parse one coordinate the way a browser's ``Number()`` would.

    Blank parts count as ``0``. Returns ``None`` for anything that would not
    be a finite number.
    """

    text = part.strip()
    if not text:
        return 0.0

    if _DECIMAL.fullmatch(text):
        value = float(text)
        return value if math.isfinite(value) else None

    prefixed = _PREFIXED.fullmatch(text)
    if prefixed:
        for name, base in (('hex', 16), ('oct', 8), ('bin', 2)):
            digits = prefixed.group(name)
            if digits is not None:
                return float(int(digits, base))

    return None


def parse_focus(coords: Optional[str]) -> Optional[Focus]:
    """Return the ``x,y`` focus point encoded in a canvas URL segment.

    Anything other than exactly two finite numbers yields ``None``.
    """

    if coords is None:
        return None

    parts = coords.split(',')
    if len(parts) != 2:
        return None

    x, y = (_parse_number(part) for part in parts)
    if x is None or y is None:
        return None
    return Focus(x=x, y=y)
