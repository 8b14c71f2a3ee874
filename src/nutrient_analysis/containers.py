"""Dependency container wiring for the application."""

from dataclasses import dataclass

from nutrient_analysis.config import Settings
from nutrient_analysis.services.parser import NutrientTextParser


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    parser: NutrientTextParser


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    parser = NutrientTextParser(debug=resolved_settings.parser_debug)
    return AppContainer(settings=resolved_settings, parser=parser)
