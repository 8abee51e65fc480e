"""
Claude Code CLI Step Generator

Adapter for using the Claude Code CLI as a step generator.
"""

import asyncio
import json
import os
import shutil
from typing import Optional

from ..milestone.errors import GenerationError
from .base import IStepGenerator, GeneratorType, GeneratorConfig


class ClaudeGenerator(IStepGenerator):
    """
    Claude Code CLI step generator.

    Runs the CLI non-interactively in a subprocess without blocking the
    event loop.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None):
        if config is None:
            config = GeneratorConfig(command="claude", timeout=120, json_output=True)
        super().__init__(config)
        if not self.config.command:
            self.config.command = "claude"

    @property
    def generator_type(self) -> GeneratorType:
        return GeneratorType.CLAUDE

    async def complete(self, prompt: str) -> str:
        """
        Execute a prompt using Claude Code CLI.

        Args:
            prompt: The instruction to send

        Returns:
            The CLI's result text

        Raises:
            GenerationError: On a missing CLI, timeout or non-zero exit
        """
        cmd = [self.config.command, "--print", prompt]
        if self.config.json_output:
            cmd.extend(["--output-format", "json"])

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                env={**os.environ, **self.config.env_vars},
            )
        except FileNotFoundError as e:
            raise GenerationError(f"Claude CLI not found: {self.config.command}") from e
        except OSError as e:
            raise GenerationError(f"Claude CLI could not be started: {e}") from e

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(), timeout=self.config.timeout
            )
        except asyncio.TimeoutError as e:
            process.kill()
            await process.wait()
            raise GenerationError(
                f"Claude execution timed out after {self.config.timeout}s"
            ) from e

        if process.returncode != 0:
            error = stderr.decode("utf-8", errors="replace").strip()
            raise GenerationError(
                f"Claude exited with code {process.returncode}: {error}"
            )

        return self._extract_result(stdout.decode("utf-8", errors="replace"))

    def _extract_result(self, output: str) -> str:
        """Pull the result text out of JSON output, keeping raw output otherwise."""
        if self.config.json_output and output.strip():
            try:
                parsed = json.loads(output)
                if isinstance(parsed, dict) and isinstance(parsed.get("result"), str):
                    return parsed["result"]
            except json.JSONDecodeError:
                pass  # Keep raw output
        return output

    def is_available(self) -> bool:
        """Check if Claude CLI is available."""
        return shutil.which(self.config.command) is not None
