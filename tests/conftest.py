"""
Basic test fixtures for the robobattle test suite.

Provides fresh engine objects and the bundled definitions for tests.
"""

import sys
import os
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from robobattle.core.config import MatchConfig
from robobattle.core.data import Team
from robobattle.core.engine.game_state import GameState, MatchPhase
from robobattle.core.events.event_manager import EventManager
from robobattle.game.combat.combat_resolver import CombatResolver
from robobattle.game.entities.robot_templates import load_robot_templates
from robobattle.game.equipment.catalog import EquipmentCatalog


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager(enable_debug_logging=False)


@pytest.fixture
def game_state():
    """Create a fresh game state on the title screen."""
    return GameState(phase=MatchPhase.TITLE)


@pytest.fixture
def config():
    """Default match settings."""
    return MatchConfig()


@pytest.fixture(scope="session")
def catalog():
    """The bundled equipment catalog."""
    return EquipmentCatalog.load()


@pytest.fixture(scope="session")
def templates():
    """The bundled robot templates."""
    return load_robot_templates()


@pytest.fixture
def player(templates, catalog):
    """Player robot at full HP with no equipment."""
    return templates[Team.PLAYER].build(catalog)


@pytest.fixture
def enemy(templates, catalog):
    """Enemy robot with its default Gun/Armor/Helmet loadout."""
    return templates[Team.ENEMY].build(catalog)


@pytest.fixture
def resolver(event_manager, config):
    """Combat resolver with default settings."""
    return CombatResolver(event_manager, config)
