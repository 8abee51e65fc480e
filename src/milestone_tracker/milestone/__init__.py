"""Milestone Tracking and Step Response Parsing"""

from .errors import (
    MilestoneError,
    ValidationError,
    DuplicateError,
    PreconditionError,
    NotFoundError,
    AlreadyCompleteError,
    AlreadyClosedError,
    ParseError,
    GenerationError,
)
from .parser import StepResponseParser, build_steps_prompt, parse_steps_response
from .tracker import MilestoneTracker, MilestoneStep, MilestoneState

__all__ = [
    "MilestoneError",
    "ValidationError",
    "DuplicateError",
    "PreconditionError",
    "NotFoundError",
    "AlreadyCompleteError",
    "AlreadyClosedError",
    "ParseError",
    "GenerationError",
    "StepResponseParser",
    "build_steps_prompt",
    "parse_steps_response",
    "MilestoneTracker",
    "MilestoneStep",
    "MilestoneState",
]
