"""Step Generator Interfaces and Implementations"""

from .base import IStepGenerator, GeneratorType, GeneratorConfig
from .claude_agent import ClaudeGenerator
from .gemini_agent import GeminiGenerator
from .factory import GeneratorFactory

__all__ = [
    "IStepGenerator",
    "GeneratorType",
    "GeneratorConfig",
    "ClaudeGenerator",
    "GeminiGenerator",
    "GeneratorFactory",
]
