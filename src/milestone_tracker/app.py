"""
Milestone Tracker Application

Configuration, logging setup and the console entry point that drives a
single milestone through a sequence of operations.
"""

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Dict, Any, List, Optional

import yaml

from .agents.base import IStepGenerator, GeneratorType, GeneratorConfig
from .agents.factory import GeneratorFactory
from .milestone.errors import MilestoneError
from .milestone.tracker import MilestoneTracker


LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"


@dataclass
class AppConfig:
    """Configuration for the milestone tracker application"""
    generator_type: GeneratorType = GeneratorType.GEMINI
    model: Optional[str] = None
    command: Optional[str] = None
    timeout: int = 120
    api_key: Optional[str] = None

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generator_type": self.generator_type.value,
            "model": self.model,
            "command": self.command,
            "timeout": self.timeout,
            "log_level": self.log_level,
            "log_file": self.log_file,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        data = data.copy()
        if "generator_type" in data:
            data["generator_type"] = GeneratorType(data["generator_type"])
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str) -> "AppConfig":
        """Load config from YAML file"""
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data.get("milestone_tracker", data))

    def generator_config(self) -> GeneratorConfig:
        """Build the generator configuration, keeping generator defaults for unset values."""
        overrides = {
            "model": self.model,
            "command": self.command,
            "timeout": self.timeout,
            "api_key": self.api_key,
        }
        defaults = GeneratorFactory.get_default_config(self.generator_type)
        defaults.update({k: v for k, v in overrides.items() if v is not None})
        return GeneratorConfig(**defaults)

    def create_generator(self) -> IStepGenerator:
        return GeneratorFactory.create(self.generator_type, self.generator_config())


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """Setup the milestone_tracker logger"""
    logger = logging.getLogger("milestone_tracker")
    logger.setLevel(getattr(logging, level.upper()))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

        if log_file:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(file_handler)

    return logger


async def run(
    tracker: MilestoneTracker,
    goal: str,
    steps: List[str],
    complete: List[str],
    generator: Optional[IStepGenerator] = None,
    close: bool = False,
) -> MilestoneTracker:
    """
    Drive a tracker through goal setting, step entry, generation,
    completion and closure, in that order.

    Generation runs only when a generator is given. Closing is skipped
    when completing the steps already closed the milestone.
    """
    tracker.set_goal(goal)

    for description in steps:
        tracker.add_step(description)

    if generator is not None:
        await tracker.generate_steps(generator)

    for description in complete:
        tracker.complete_step(description)

    if close and tracker.is_active:
        tracker.close_milestone()

    return tracker


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    import argparse

    parser = argparse.ArgumentParser(description="Milestone Tracker")
    parser.add_argument("--goal", "-g", required=True, help="Goal to work toward")
    parser.add_argument("--step", "-s", action="append", default=[], help="Add a step (repeatable)")
    parser.add_argument("--generate", action="store_true", help="Replace steps with generated ones")
    parser.add_argument("--complete", "-c", action="append", default=[], help="Complete a step (repeatable)")
    parser.add_argument("--close", action="store_true", help="Close the milestone at the end")
    parser.add_argument("--config", help="Path to YAML config file")
    parser.add_argument("--generator", choices=[t.value for t in GeneratorType])
    parser.add_argument("--log-level", default=None)

    args = parser.parse_args(argv)

    config = AppConfig.from_yaml(args.config) if args.config else AppConfig()
    if args.generator:
        config.generator_type = GeneratorType(args.generator)
    if args.log_level:
        config.log_level = args.log_level

    logger = setup_logging(config.log_level, config.log_file)
    tracker = MilestoneTracker()

    try:
        generator = config.create_generator() if args.generate else None
        asyncio.run(
            run(
                tracker,
                goal=args.goal,
                steps=args.step,
                complete=args.complete,
                generator=generator,
                close=args.close,
            )
        )
    except MilestoneError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"\nError ({type(e).__name__}): {e}")
        print(f"\n{tracker.get_summary()}")
        return 1

    print(f"\n{tracker.get_summary()}")
    print(f"\nFinal Status:\n{json.dumps(tracker.to_dict(), indent=2)}")
    return 0


if __name__ == "__main__":
    exit(main())
