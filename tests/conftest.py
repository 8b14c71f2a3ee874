"""Shared test fixtures."""

import logging
from collections.abc import Iterator

import pytest

from nutrient_analysis.config import Settings
from nutrient_analysis.containers import AppContainer
from nutrient_analysis.services.parser import NutrientTextParser

WELL_FORMED_ANALYSIS = """## Macronutrients
Protein: 25g
Carbohydrates: 30g
Fat: 10g

## Micronutrients
- Vitamin C: 20mg
- Iron: 2mg

## Estimated Calories
Approximately 310 calories
"""


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", log_level="DEBUG", parser_debug=True)


@pytest.fixture
def parser() -> NutrientTextParser:
    return NutrientTextParser()


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return AppContainer(
        settings=settings,
        parser=NutrientTextParser(debug=settings.parser_debug),
    )


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("nutrient_analysis")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
