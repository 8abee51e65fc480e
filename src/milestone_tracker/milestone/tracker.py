"""
Milestone Tracker

Tracks a single goal and the ordered steps toward it, from goal setting
through automatic or manual closure.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Any, List, Optional

from ..agents.base import IStepGenerator
from .errors import (
    ValidationError,
    DuplicateError,
    PreconditionError,
    NotFoundError,
    AlreadyCompleteError,
    AlreadyClosedError,
    ParseError,
)
from .parser import StepResponseParser, build_steps_prompt


logger = logging.getLogger("milestone_tracker")

MAX_TEXT_LENGTH = 200


class MilestoneState(Enum):
    """Lifecycle state of a milestone"""
    NO_GOAL = "no_goal"
    GOAL_SET = "goal_set"
    CLOSED = "closed"


@dataclass
class MilestoneStep:
    """A single step toward the goal"""
    description: str
    created_at: datetime = field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None
    is_complete: bool = False

    def mark_complete(self) -> None:
        self.is_complete = True
        self.completed_at = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "created_at": self.created_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "is_complete": self.is_complete,
        }


class MilestoneTracker:
    """
    Tracks one milestone: a goal, its steps, and whether it is still active.

    Steps are added manually or generated by an IStepGenerator. Completing
    the last open step closes the milestone; closure is terminal.

    A tracker is not safe for concurrent mutation. Callers must not issue
    other mutating calls while generate_steps() is awaiting the generator.
    """

    def __init__(self, parser: Optional[StepResponseParser] = None):
        self._goal = ""
        self._steps: List[MilestoneStep] = []
        self._is_active = True
        self._parser = parser or StepResponseParser()

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def state(self) -> MilestoneState:
        if not self._is_active:
            return MilestoneState.CLOSED
        if not self._goal:
            return MilestoneState.NO_GOAL
        return MilestoneState.GOAL_SET

    @property
    def total_steps(self) -> int:
        return len(self._steps)

    @property
    def completed_steps(self) -> int:
        return sum(1 for s in self._steps if s.is_complete)

    @property
    def progress_percentage(self) -> float:
        if self.total_steps == 0:
            return 0.0
        return (self.completed_steps / self.total_steps) * 100

    def _validate_text(self, text: str) -> str:
        """
        Validate goal or step text.

        Returns:
            The trimmed text

        Raises:
            ValidationError: If empty or too long
            DuplicateError: If it matches the goal or an existing step
        """
        item = (text or "").strip()
        if not item:
            raise ValidationError("Cannot be empty")
        if len(item) > MAX_TEXT_LENGTH:
            raise ValidationError(
                f"Description is too long (max {MAX_TEXT_LENGTH} characters)"
            )
        if item == self._goal or any(s.description == item for s in self._steps):
            raise DuplicateError(f"Already exists: {item}")
        return item

    def _require_goal(self) -> None:
        if not self._goal:
            raise PreconditionError("Goal must exist")

    def set_goal(self, goal: str) -> str:
        """
        Set the goal for this milestone.

        A previous goal is overwritten, even when steps already exist.

        Args:
            goal: Goal text (max 200 characters after trimming)

        Returns:
            The stored, trimmed goal

        Raises:
            ValidationError: If the goal is empty or too long
            DuplicateError: If it matches the current goal or a step
        """
        item = self._validate_text(goal)

        if self._goal and self._steps:
            logger.warning(
                f"Replacing goal '{self._goal}' while {len(self._steps)} steps exist"
            )

        self._goal = item
        logger.info(f"Goal set: {item}")
        return item

    def add_step(self, description: str) -> List[MilestoneStep]:
        """
        Add a manually entered step.

        Args:
            description: Step description (max 200 characters after trimming)

        Returns:
            All steps, in insertion order

        Raises:
            PreconditionError: If no goal is set
            ValidationError: If the description is empty or too long
            DuplicateError: If it matches the goal or an existing step
        """
        self._require_goal()
        item = self._validate_text(description)

        self._steps.append(MilestoneStep(description=item))
        logger.info(f"Step added: {item}")
        return self._steps

    async def generate_steps(self, generator: IStepGenerator) -> List[MilestoneStep]:
        """
        Replace all steps with steps produced by a generator.

        Existing steps, manual or generated, are discarded only after the
        response has been decoded successfully. Generated descriptions are
        not validated, so a repeated description can only be completed
        once and keeps the milestone from closing automatically.

        Args:
            generator: Step generator to ask for a plan

        Returns:
            The newly generated steps

        Raises:
            PreconditionError: If no goal is set
            ParseError: If the response is not a non-empty list of strings
        """
        self._require_goal()

        prompt = build_steps_prompt(self._goal)
        response = await generator.complete(prompt)

        try:
            descriptions = self._parser.parse(response)
        except ParseError as e:
            logger.error(f"Error generating steps: {e} (response: {response!r:.200})")
            raise

        self._steps = [MilestoneStep(description=d) for d in descriptions]
        logger.info(f"Generated {len(self._steps)} steps for goal: {self._goal}")
        return self._steps

    def complete_step(self, description: str) -> List[MilestoneStep]:
        """
        Mark a step as complete.

        Completing the last open step closes the milestone.

        Args:
            description: Exact description of the step

        Returns:
            All steps, in insertion order

        Raises:
            AlreadyClosedError: If the milestone is no longer active
            NotFoundError: If no step has this description
            AlreadyCompleteError: If the step is already complete
        """
        if not self._is_active:
            raise AlreadyClosedError("Milestone is already not active")

        step = next((s for s in self._steps if s.description == description), None)
        if step is None:
            raise NotFoundError(f"Step not found: {description}")
        if step.is_complete:
            raise AlreadyCompleteError(f"Step is already complete: {description}")

        step.mark_complete()
        logger.info(f"Step completed: {description}")

        if all(s.is_complete for s in self._steps):
            self.close_milestone()

        return self._steps

    def close_milestone(self) -> None:
        """
        Close the milestone, whether the goal was reached or abandoned.

        Raises:
            AlreadyClosedError: If the milestone is not active
        """
        if not self._is_active:
            raise AlreadyClosedError("Milestone is already not active")
        self._is_active = False
        logger.info(
            f"Milestone closed: {self._goal} "
            f"({self.completed_steps}/{self.total_steps} steps complete)"
        )

    def get_steps(self) -> List[MilestoneStep]:
        return self._steps

    def get_goal(self) -> str:
        return self._goal

    def get_pending_steps(self) -> List[MilestoneStep]:
        """Get steps that are not yet complete."""
        return [s for s in self._steps if not s.is_complete]

    def get_next_step(self) -> Optional[MilestoneStep]:
        """Get the first open step in order."""
        pending = self.get_pending_steps()
        return pending[0] if pending else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "goal": self._goal,
            "state": self.state.value,
            "is_active": self._is_active,
            "steps": [s.to_dict() for s in self._steps],
            "progress": {
                "total": self.total_steps,
                "completed": self.completed_steps,
                "percentage": self.progress_percentage,
            },
        }

    def get_summary(self) -> str:
        """Get a text summary of the milestone."""
        lines = [
            f"Goal: {self._goal or '(none)'}",
            f"State: {self.state.value}",
            f"Progress: {self.completed_steps}/{self.total_steps} ({self.progress_percentage:.1f}%)",
        ]
        for s in self._steps:
            checkbox = "[x]" if s.is_complete else "[ ]"
            lines.append(f"- {checkbox} {s.description}")
        return "\n".join(lines)
