"""Parser for free-text nutrient analyses produced by an LLM."""

import logging
import math
import re
from collections.abc import Iterable
from dataclasses import dataclass

from nutrient_analysis.domain.nutrients import MacroEntry, MacroName, ParsedNutrients
from nutrient_analysis.services.energy import estimate_calories
from nutrient_analysis.services.sections import split_sections

# "•" and its UTF-8 bytes mis-decoded as cp1252.
_BULLET = r"(?:â€¢|[-*•])"

_MACRO_RE = re.compile(
    rf"^{_BULLET}?\s*\**\s*(protein|carbohydrates?|fat)\s*\**\s*:"
    r"\s*\**\s*([0-9]+(?:\.[0-9]+)?)\s*g",
    re.IGNORECASE,
)
_MICRO_BULLET_RE = re.compile(r"^(?:â€¢|[-•]|\*(?!\*))")
_INTEGER_RE = re.compile(r"[0-9]+")

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NutrientTextParser:
    """Turns a markdown nutrient analysis into a ParsedNutrients record.

    Parsing never raises: missing or malformed sections produce empty
    collections, and a missing calorie count is estimated from the macros.
    """

    debug: bool = False

    def parse(self, text: str) -> ParsedNutrients:
        """Parse analysis text into macros, micros and calories."""
        if not isinstance(text, str):
            return ParsedNutrients()

        zones = split_sections(text)
        macros = _extract_macros(zones.macros)
        micros = _extract_micros(zones.micros)
        calories = _extract_calories(zones.calories)

        estimated = False
        if calories == 0 and macros:
            grams = {entry.name: entry.grams for entry in macros}
            calories = estimate_calories(
                protein_g=grams.get(MacroName.PROTEIN, 0.0),
                carbs_g=grams.get(MacroName.CARBS, 0.0),
                fat_g=grams.get(MacroName.FAT, 0.0),
            )
            estimated = True

        if self.debug:
            _logger.info(
                "Parsed nutrients: macros=%s micros=%s calories=%s estimated=%s",
                len(macros),
                len(micros),
                calories,
                estimated,
            )
        return ParsedNutrients(
            macros=tuple(macros), micros=tuple(micros), calories=calories
        )


def _canonical_macro(label: str) -> MacroName:
    """Map a matched macro label to its display name."""
    lowered = label.lower()
    if lowered.startswith("carb"):
        return MacroName.CARBS
    if lowered == "protein":
        return MacroName.PROTEIN
    return MacroName.FAT


def _extract_macros(lines: Iterable[str]) -> list[MacroEntry]:
    """Extract macro grams; a repeated label keeps its slot but takes the last value."""
    found: dict[MacroName, float] = {}
    for line in lines:
        match = _MACRO_RE.match(line.strip())
        if not match:
            continue
        grams = float(match.group(2))
        if not math.isfinite(grams):
            continue
        found[_canonical_macro(match.group(1))] = grams
    return [MacroEntry(name=name, grams=grams) for name, grams in found.items()]


def _extract_micros(lines: Iterable[str]) -> list[str]:
    """Keep every non-blank line with its bullet marker removed."""
    micros: list[str] = []
    for line in lines:
        cleaned = _MICRO_BULLET_RE.sub("", line.strip(), count=1).strip()
        if cleaned:
            micros.append(cleaned)
    return micros


def _extract_calories(lines: Iterable[str]) -> int:
    """Return the first integer in the calorie zone, or 0."""
    match = _INTEGER_RE.search("\n".join(lines))
    if not match:
        return 0
    try:
        return int(match.group(0))
    except ValueError:
        _logger.warning("Ignoring calorie token of %s digits", len(match.group(0)))
        return 0
