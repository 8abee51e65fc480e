"""
Pytest configuration and shared fixtures
"""

import logging

import pytest
import tempfile
from pathlib import Path
from unittest.mock import Mock, AsyncMock

# Add src to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from milestone_tracker.agents.base import IStepGenerator, GeneratorType, GeneratorConfig
from milestone_tracker.milestone.tracker import MilestoneTracker


GENERATED_RESPONSE = '["Buy yarn and needles","Learn the knit stitch","Knit a scarf"]'


@pytest.fixture
def tracker():
    """Create an empty tracker"""
    return MilestoneTracker()


@pytest.fixture
def goal_tracker(tracker):
    """Tracker with a goal and no steps"""
    tracker.set_goal("Learn to knit")
    return tracker


@pytest.fixture
def stepped_tracker(goal_tracker):
    """Tracker with a goal and three manual steps"""
    goal_tracker.add_step("Buy yarn")
    goal_tracker.add_step("Watch a tutorial")
    goal_tracker.add_step("Knit a swatch")
    return goal_tracker


@pytest.fixture
def mock_generator():
    """Create a mock step generator returning a valid plan"""
    generator = Mock(spec=IStepGenerator)
    generator.generator_type = GeneratorType.GEMINI
    generator.config = GeneratorConfig(model="mock")
    generator.is_available.return_value = True
    generator.complete = AsyncMock(return_value=GENERATED_RESPONSE)
    return generator


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def temp_config_file(temp_dir):
    """Create a temporary YAML config file"""
    config_content = """milestone_tracker:
  generator_type: claude
  command: claude-test
  timeout: 30
  log_level: DEBUG
"""
    config_path = Path(temp_dir) / "config.yaml"
    config_path.write_text(config_content)
    return str(config_path)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging between tests"""
    yield
    logger = logging.getLogger("milestone_tracker")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
