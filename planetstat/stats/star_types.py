"""Star class helpers for EDSM sub-type strings."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable

from ..models import System

# Main sequence and giants: "K (Yellow-Orange) Star", "M (Red giant) Star"
_SPECTRAL_RE = re.compile(r"^([OBAFGKMLTY]) \(")
# "White Dwarf (DAB) Star"
_WHITE_DWARF_RE = re.compile(r"^White Dwarf \((D[A-Z]*)\) Star$")

SPECIAL_TYPES = {
    "T Tauri Star": "TTS",
    "Herbig Ae/Be Star": "AeBe",
    "Wolf-Rayet Star": "W",
    "Wolf-Rayet N Star": "WN",
    "Wolf-Rayet NC Star": "WNC",
    "Wolf-Rayet C Star": "WC",
    "Wolf-Rayet O Star": "WO",
    "C Star": "C",
    "CN Star": "CN",
    "CJ Star": "CJ",
    "CH Star": "CH",
    "CHd Star": "CHd",
    "MS-type Star": "MS",
    "S-type Star": "S",
    "Neutron Star": "N",
    "Black Hole": "BH",
    "Supermassive Black Hole": "SMBH",
}


def short_type(sub_type: str) -> str:
    """Collapse an EDSM star sub-type to its short class.

    Examples:
        >>> short_type("M (Red dwarf) Star")
        'M'
        >>> short_type("White Dwarf (DA) Star")
        'DA'
        >>> short_type("Neutron Star")
        'N'
        >>> short_type("Rogue Planet")
        'Rogue Planet'
    """
    text = sub_type.strip()
    if text in SPECIAL_TYPES:
        return SPECIAL_TYPES[text]

    match = _SPECTRAL_RE.match(text)
    if match:
        return match.group(1)

    match = _WHITE_DWARF_RE.match(text)
    if match:
        return match.group(1)

    return text


def primary_star_types(systems: Iterable[System]) -> list[str]:
    """Primary star types in system order, skipping unknown ones."""
    return [s.primary_star.type for s in systems if s.primary_star.type]


def count_by(values: Iterable[str]) -> list[tuple[str, int]]:
    """Tally values, most common first; ties keep first-seen order."""
    return Counter(values).most_common()
