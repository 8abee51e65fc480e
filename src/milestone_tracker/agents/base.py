"""
Base Step Generator Interface

Defines the contract for all step generators (Gemini, Claude) and their
common configuration.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class GeneratorType(Enum):
    """Available step generator types"""
    GEMINI = "gemini"
    CLAUDE = "claude"


@dataclass
class GeneratorConfig:
    """Configuration for a step generator"""
    model: Optional[str] = None
    command: Optional[str] = None
    timeout: int = 120
    api_key: Optional[str] = None
    json_output: bool = True
    env_vars: Dict[str, str] = field(default_factory=dict)


class IStepGenerator(ABC):
    """
    Abstract base class for step generators.

    A step generator is a text-completion service: it receives a prompt and
    returns the raw response text. Decoding the response is left to the
    milestone tracker.
    """

    def __init__(self, config: GeneratorConfig):
        self.config = config

    @property
    def generator_type(self) -> GeneratorType:
        """Return the type of this generator"""
        raise NotImplementedError

    @abstractmethod
    async def complete(self, prompt: str) -> str:
        """
        Send a prompt and wait for the response.

        Args:
            prompt: The instruction to send

        Returns:
            Raw response text

        Raises:
            GenerationError: If the service could not produce a response
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if this generator is available and properly configured.

        Returns:
            True if generator can be used
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type={self.generator_type.value})"
