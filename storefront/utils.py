# storefront/utils.py
from __future__ import annotations

import re
from decimal import Decimal
from typing import Any, Optional

# semn opțional + "0x" urmat de cifre hexa, sau cifre zecimale
_INT_PREFIX_RE = re.compile(r"^\s*([+-]?)(0[xX])?([0-9a-fA-F]*)")
_FLOAT_PREFIX_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_DEC_DIGITS_RE = re.compile(r"^\d+")


def parse_int_prefix(value: Any) -> Optional[int]:
    """
    Întreg din prefixul numeric al valorii, ca parseInt fără radix:
    4, "4", " 4 ", "4abc", 4.7 -> 4; "0x1A" -> 26.
    Returnează None când nu există prefix întreg ("abc", "", "0x", None).
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    m = _INT_PREFIX_RE.match(str(value))
    sign, hex_prefix, digits = m.group(1), m.group(2), m.group(3)
    if hex_prefix:
        # "0x" fără cifre hexa valide -> nimic (nu 0)
        return int(sign + digits, 16) if digits else None
    dec = _DEC_DIGITS_RE.match(digits)
    return int(sign + dec.group(0)) if dec else None


def parse_decimal_prefix(value: Any) -> Optional[Decimal]:
    """Decimal din prefixul numeric: "12.50 lei" -> Decimal("12.50"); None dacă lipsește."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value
    m = _FLOAT_PREFIX_RE.match(str(value))
    return Decimal(m.group(1)) if m else None
