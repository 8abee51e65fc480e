"""
Step Generator Factory

Creates and configures step generators based on type and configuration.
"""

from typing import Optional, Dict, Any

from .base import IStepGenerator, GeneratorType, GeneratorConfig
from .claude_agent import ClaudeGenerator
from .gemini_agent import GeminiGenerator, DEFAULT_MODEL


class GeneratorFactory:
    """
    Factory for creating step generators.

    Provides a central point for generator creation with proper configuration.
    """

    _default_configs: Dict[GeneratorType, Dict[str, Any]] = {
        GeneratorType.GEMINI: {
            "model": DEFAULT_MODEL,
            "timeout": 120,
        },
        GeneratorType.CLAUDE: {
            "command": "claude",
            "timeout": 120,
            "json_output": True,
        },
    }

    @classmethod
    def get_default_config(cls, generator_type: GeneratorType) -> Dict[str, Any]:
        """Return a copy of the default config parameters for a generator type."""
        return cls._default_configs.get(generator_type, {}).copy()

    @classmethod
    def create(
        cls,
        generator_type: GeneratorType,
        config: Optional[GeneratorConfig] = None,
        **kwargs,
    ) -> IStepGenerator:
        """
        Create a generator of the specified type.

        Args:
            generator_type: Type of generator to create
            config: Optional configuration override
            **kwargs: Additional config parameters

        Returns:
            Configured IStepGenerator instance

        Raises:
            ValueError: If generator type is unknown
        """
        if config is None:
            default = cls.get_default_config(generator_type)
            default.update(kwargs)
            config = GeneratorConfig(**default)

        if generator_type == GeneratorType.GEMINI:
            return GeminiGenerator(config)
        elif generator_type == GeneratorType.CLAUDE:
            return ClaudeGenerator(config)
        else:
            raise ValueError(f"Unknown generator type: {generator_type}")

    @classmethod
    def create_from_config(
        cls,
        config_dict: Dict[str, Any],
    ) -> IStepGenerator:
        """
        Create a generator from a configuration dictionary.

        Args:
            config_dict: Dictionary with 'type' and config parameters

        Returns:
            Configured IStepGenerator instance
        """
        config_dict = config_dict.copy()
        generator_type = GeneratorType(config_dict.pop("type", "gemini"))
        default = cls.get_default_config(generator_type)
        default.update(config_dict)
        return cls.create(generator_type, GeneratorConfig(**default))

    @classmethod
    def get_available_generators(cls) -> Dict[GeneratorType, bool]:
        """
        Check which generators are available.

        Returns:
            Dictionary of generator types and availability
        """
        return {
            generator_type: cls.create(generator_type).is_available()
            for generator_type in GeneratorType
        }
