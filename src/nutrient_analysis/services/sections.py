"""Segmentation of analysis text into labeled zones."""

import re
from dataclasses import dataclass

_HEADING_RE = re.compile(
    r"^##\s*(macronutrients|micronutrients|estimated\s+calories)\b",
    re.IGNORECASE,
)

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

_SECTION_KEYS = {
    "macronutrients": "macros",
    "micronutrients": "micros",
    "estimated calories": "calories",
}


@dataclass(frozen=True)
class SectionZones:
    """Lines that follow each recognized heading."""

    macros: tuple[str, ...] = ()
    micros: tuple[str, ...] = ()
    calories: tuple[str, ...] = ()


def heading_key(line: str) -> str | None:
    """Return the section key for a heading line, if it is one."""
    match = _HEADING_RE.match(line.strip())
    if not match:
        return None
    label = " ".join(match.group(1).lower().split())
    return _SECTION_KEYS[label]


def split_sections(text: str) -> SectionZones:
    """Split text into macro, micro and calorie zones.

    A zone runs from its heading to the next recognized heading or the end of
    the text. When a heading repeats, the zone of its last occurrence is kept.
    """
    zones: dict[str, list[str]] = {}
    current: list[str] | None = None
    for line in _LINE_BREAK_RE.split(text):
        key = heading_key(line)
        if key is not None:
            current = []
            zones[key] = current
            continue
        if current is not None:
            current.append(line)
    return SectionZones(
        macros=tuple(zones.get("macros", ())),
        micros=tuple(zones.get("micros", ())),
        calories=tuple(zones.get("calories", ())),
    )
