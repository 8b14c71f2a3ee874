"""Nutrient analysis domain models."""

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class MacroName(StrEnum):
    """Canonical display names for macronutrients."""

    PROTEIN = "Protein"
    CARBS = "Carbs"
    FAT = "Fat"


class MacroEntry(BaseModel):
    """Single macronutrient amount in grams."""

    model_config = ConfigDict(frozen=True)

    name: MacroName
    grams: float = Field(ge=0.0)


@dataclass(frozen=True)
class MacroTotals:
    """Fixed-shape macro grams, with missing macros as zero."""

    protein_g: float
    carbs_g: float
    fat_g: float


class ParsedNutrients(BaseModel):
    """Structured result of parsing a nutrient analysis text."""

    model_config = ConfigDict(frozen=True)

    macros: tuple[MacroEntry, ...] = ()
    micros: tuple[str, ...] = ()
    calories: int = Field(default=0, ge=0)

    def grams(self, name: MacroName) -> float:
        """Return grams for a macro, or 0.0 when it was not found."""
        for entry in self.macros:
            if entry.name == name:
                return entry.grams
        return 0.0

    def macro_totals(self) -> MacroTotals:
        """Return macros as a fixed-shape record."""
        return MacroTotals(
            protein_g=self.grams(MacroName.PROTEIN),
            carbs_g=self.grams(MacroName.CARBS),
            fat_g=self.grams(MacroName.FAT),
        )
