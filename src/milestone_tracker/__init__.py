"""
Milestone Tracker - goal and step tracking with AI-generated plans

Tracks a single goal through:
- Manually entered steps
- Steps generated by an LLM (Gemini or Claude Code CLI)
- Step completion with automatic closure
"""

__version__ = "1.0.0"

from .milestone.tracker import MilestoneTracker, MilestoneStep, MilestoneState
from .milestone.errors import MilestoneError
from .agents.base import IStepGenerator, GeneratorType
from .agents.factory import GeneratorFactory
from .app import AppConfig

__all__ = [
    "MilestoneTracker",
    "MilestoneStep",
    "MilestoneState",
    "MilestoneError",
    "IStepGenerator",
    "GeneratorType",
    "GeneratorFactory",
    "AppConfig",
]
