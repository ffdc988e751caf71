"""Satellite designations, plus sexagesimal RA/dec text.

Covers NORAD numbers and international designations in both the packed
YYNNNA form and the full YYYY-NNNA form.
"""

from __future__ import annotations

import math

_BLANK_PACKED = " " * 8


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_upper(char: str) -> bool:
    return "A" <= char <= "Z"


def _leading_int(text: str) -> int:
    """Integer value of the leading digits (after blanks and a sign), or 0."""
    stripped = text.lstrip(" \t")
    sign = 1
    if stripped[:1] in ("+", "-"):
        sign = -1 if stripped[0] == "-" else 1
        stripped = stripped[1:]
    digits = ""
    for char in stripped:
        if not _is_digit(char):
            break
        digits += char
    return sign * int(digits) if digits else 0


def format_base_60(n_millisec: int) -> str:
    """Format a count of milliseconds as 'HHH MM SS.sss' (at most 14 characters)."""
    if n_millisec < 0:
        raise ValueError("millisecond count must not be negative")
    text = "%03d %02d %02d.%03d" % (
        n_millisec // 3600000,
        (n_millisec // 60000) % 60,
        (n_millisec // 1000) % 60,
        n_millisec % 1000,
    )
    return text[:14]


def format_ra(ra: float) -> str:
    """Format an RA in radians as 'HH MM SS.sss', reduced to [0, 24h)."""
    ra = math.fmod(ra, 2.0 * math.pi)
    if ra < 0.0:
        ra += 2.0 * math.pi
    return format_base_60(int(3600.0 * 1000.0 * ra * 12.0 / math.pi))[1:]


def format_dec(dec: float) -> str:
    """Format a declination in radians as a signed 'sDD MM SS.sss'."""
    text = format_base_60(int(3600.0 * 1000.0 * abs(dec) * 180.0 / math.pi))
    return ("+" if dec > 0.0 else "-") + text[1:]


def fix_desig(desig: str) -> str:
    """Convert a YYYY-NNNA designation to YYNNNA form; return others unchanged."""
    head = desig[:10]
    bitmask = 0
    for i, char in enumerate(head):
        if _is_digit(char):
            bitmask |= 1 << i
    if len(head) >= 9 and bitmask == 0xEF and desig[4] == "-":
        return desig[2:4] + desig[5:]
    return desig


def desig_match(norad_number: int, intl_desig: str, desig: str) -> bool:
    """True if ``desig`` (a five-digit NORAD number or a packed YYNNNA
    designation) names the satellite with the given identifiers."""
    n_digits = 0
    while n_digits < len(desig) and _is_digit(desig[n_digits]):
        n_digits += 1
    if n_digits != 5:
        return False
    if n_digits == len(desig):
        return int(desig) == norad_number
    length = len(desig)
    if not 5 < length < 9:
        return False
    if intl_desig[:length] != desig:
        return False
    following = intl_desig[length:length + 1]
    return following == "" or following <= " "


def pack_intl_desig(desig: str) -> str:
    """Return the eight-character packed form (YYNNNA padded with blanks).

    Accepts YYNNNA[a[a]] or YYYY-NNNA[a[a]]; raises ValueError otherwise.
    """
    n_digits = 0
    while n_digits < len(desig) and _is_digit(desig[n_digits]):
        n_digits += 1
    if n_digits == 5 and len(desig) > 5 and _is_upper(desig[5]):
        head, rest = desig[:5], desig[5:]
    elif (
        n_digits == 4
        and len(desig) > 8
        and desig[4] == "-"
        and all(_is_digit(c) for c in desig[5:8])
        and _is_upper(desig[8])
    ):
        head, rest = desig[2:4] + desig[5:8], desig[8:]
    else:
        raise ValueError(f"not an international designation: {desig!r}")
    letters = rest[0]
    for char in rest[1:3]:
        if not _is_upper(char):
            break
        letters += char
    return (head + letters).ljust(8)


def _packed_or_blank(desig: str) -> str:
    try:
        return pack_intl_desig(desig)
    except ValueError:
        return _BLANK_PACKED


def compare_intl_desigs(desig1: str, desig2: str) -> int:
    """Compare two international designations in either form: -1, 0 or 1.

    Unrecognised designations compare as blank.
    """
    a = _packed_or_blank(desig1)
    b = _packed_or_blank(desig2)
    return (a > b) - (a < b)


def unpack_intl(packed: str) -> str:
    """Turn a packed designation such as 92044A into 1992-044A."""
    century = "19" if _leading_int(packed) > 57000 else "20"
    return f"{century}{packed[:2]}-{packed[2:]}"[:11]


def remove_redundant_desig(name: str, desig: str) -> str:
    """Remove every occurrence of ``desig`` from ``name``, with an adjoining ' = '."""
    target = desig.rstrip(" ")
    if not target:
        return name
    i = 0
    while i < len(name):
        if name.startswith(target, i):
            start, n = i, len(target)
            if start >= 3 and name[start - 3:start] == " = ":
                start -= 3
                n += 3
            elif name[start + n:start + n + 3] == " = ":
                n += 3
            name = name[:start] + name[start + n:]
            i = start
        else:
            i += 1
    return name