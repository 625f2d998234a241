"""
Pytest configuration and shared fixtures.
"""

import pytest

from scoring.config import EngineSettings, reset_settings_cache
from scoring.engine import RoundEngine
from scoring.logger import StructuredLogger, reset_logger


@pytest.fixture(autouse=True)
def _fresh_globals():
    reset_settings_cache()
    reset_logger()
    yield
    reset_settings_cache()
    reset_logger()


@pytest.fixture
def quiet_logger() -> StructuredLogger:
    return StructuredLogger(name="voor-test", level="DEBUG", enable_console=False)


@pytest.fixture
def engine(quiet_logger) -> RoundEngine:
    """Engine with stock settings, independent of the environment."""
    return RoundEngine(settings=EngineSettings(), logger=quiet_logger)
