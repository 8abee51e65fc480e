"""
Tests for configuration, logging setup and the console entry point

Tests:
1. test_config_defaults
2. test_config_from_yaml
3. test_config_from_flat_yaml
4. test_config_from_empty_yaml
5. test_config_round_trip
6. test_config_generator_config
7. test_config_create_generator
8. test_setup_logging_once
9. test_run_sequence
10. test_run_close_after_auto_closure
11. test_run_with_generator
12. test_run_propagates_errors
13. test_main_manual_steps
14. test_main_close
15. test_main_generate
16. test_main_generation_failure
17. test_main_error_exit_code
18. test_main_validation_error
19. test_main_with_config
"""

import json
import logging

import httpx
import pytest
from pathlib import Path
from unittest.mock import Mock, AsyncMock, patch

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from milestone_tracker.app import AppConfig, setup_logging, run, main
from milestone_tracker.agents.base import GeneratorType
from milestone_tracker.agents.claude_agent import ClaudeGenerator
from milestone_tracker.milestone.tracker import MilestoneTracker
from milestone_tracker.milestone.errors import NotFoundError


class TestAppConfig:
    """Tests for AppConfig"""

    def test_config_defaults(self):
        """Test default configuration"""
        config = AppConfig()

        assert config.generator_type == GeneratorType.GEMINI
        assert config.log_level == "INFO"
        assert config.to_dict()["generator_type"] == "gemini"

    def test_config_from_yaml(self, temp_config_file):
        """Test loading a sectioned YAML file"""
        config = AppConfig.from_yaml(temp_config_file)

        assert config.generator_type == GeneratorType.CLAUDE
        assert config.command == "claude-test"
        assert config.timeout == 30
        assert config.log_level == "DEBUG"

    def test_config_from_flat_yaml(self, temp_dir):
        """Test loading a YAML file without a section header"""
        path = Path(temp_dir) / "flat.yaml"
        path.write_text("generator_type: gemini\nmodel: gemini-test\n")

        config = AppConfig.from_yaml(str(path))
        assert config.model == "gemini-test"

    def test_config_from_empty_yaml(self, temp_dir):
        """Test an empty YAML file yields defaults"""
        path = Path(temp_dir) / "empty.yaml"
        path.write_text("")

        assert AppConfig.from_yaml(str(path)) == AppConfig()

    def test_config_round_trip(self):
        """Test to_dict output loads back"""
        config = AppConfig(generator_type=GeneratorType.CLAUDE, timeout=45)
        assert AppConfig.from_dict(config.to_dict()) == config

    def test_config_generator_config(self):
        """Test unset values keep generator defaults"""
        config = AppConfig(generator_type=GeneratorType.CLAUDE, timeout=45)
        generator_config = config.generator_config()

        assert generator_config.command == "claude"
        assert generator_config.timeout == 45

    def test_config_create_generator(self, temp_config_file):
        """Test the configured generator is created"""
        generator = AppConfig.from_yaml(temp_config_file).create_generator()

        assert isinstance(generator, ClaudeGenerator)
        assert generator.config.command == "claude-test"


class TestLogging:
    """Tests for logging setup"""

    def test_setup_logging_once(self):
        """Test repeated setup does not stack handlers"""
        logger = setup_logging("DEBUG")
        handlers = len(logger.handlers)

        setup_logging("INFO")
        assert len(logger.handlers) == handlers
        assert logger.level == logging.INFO


class TestRun:
    """Tests for the scripted run sequence"""

    @pytest.mark.asyncio
    async def test_run_sequence(self):
        """Test steps are added, completed, and the milestone closes"""
        tracker = await run(
            MilestoneTracker(),
            goal="Learn to knit",
            steps=["Buy yarn", "Cast on"],
            complete=["Buy yarn", "Cast on"],
        )

        assert not tracker.is_active
        assert tracker.completed_steps == 2

    @pytest.mark.asyncio
    async def test_run_close_after_auto_closure(self):
        """Test an explicit close is skipped when already closed"""
        tracker = await run(
            MilestoneTracker(),
            goal="Learn to knit",
            steps=["Buy yarn"],
            complete=["Buy yarn"],
            close=True,
        )

        assert not tracker.is_active

    @pytest.mark.asyncio
    async def test_run_with_generator(self, mock_generator):
        """Test generation replaces the manual steps"""
        tracker = await run(
            MilestoneTracker(),
            goal="Learn to knit",
            steps=["Buy yarn"],
            complete=["Knit a scarf"],
            generator=mock_generator,
        )

        assert tracker.total_steps == 3
        assert tracker.completed_steps == 1
        assert tracker.is_active

    @pytest.mark.asyncio
    async def test_run_propagates_errors(self):
        """Test tracker errors reach the caller"""
        with pytest.raises(NotFoundError):
            await run(MilestoneTracker(), goal="Learn to knit", steps=[], complete=["Missing"])


class TestMain:
    """Tests for the console entry point"""

    def test_main_manual_steps(self, capsys):
        """Test a full manual run prints the final status"""
        exit_code = main([
            "--goal", "Learn to knit",
            "--step", "Buy yarn",
            "--complete", "Buy yarn",
        ])

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "- [x] Buy yarn" in output
        status = json.loads(output.split("Final Status:\n", 1)[1])
        assert status["is_active"] is False

    def test_main_close(self, capsys):
        """Test --close closes an unfinished milestone"""
        exit_code = main(["--goal", "Learn to knit", "--step", "Buy yarn", "--close"])

        assert exit_code == 0
        assert "State: closed" in capsys.readouterr().out

    def test_main_generate(self, capsys, mock_generator):
        """Test --generate uses the configured generator"""
        with patch("milestone_tracker.app.GeneratorFactory.create", return_value=mock_generator) as mock_create:
            exit_code = main(["--goal", "Learn to knit", "--generate", "--generator", "claude"])

        assert exit_code == 0
        assert mock_create.call_args.args[0] == GeneratorType.CLAUDE
        assert "Learn the knit stitch" in capsys.readouterr().out

    def test_main_generation_failure(self, capsys, monkeypatch):
        """Test generator transport failures are reported with exit code 1"""
        monkeypatch.setenv("GEMINI_API_KEY", "test-key")
        client = Mock()
        client.aio.models.generate_content = AsyncMock(side_effect=httpx.ConnectError("no route"))

        with patch("milestone_tracker.agents.gemini_agent.genai.Client", return_value=client):
            exit_code = main(["--goal", "Learn to knit", "--generate"])

        assert exit_code == 1
        assert "GenerationError" in capsys.readouterr().out

    def test_main_error_exit_code(self, capsys):
        """Test tracker errors are reported by kind with exit code 1"""
        exit_code = main(["--goal", "Learn to knit", "--complete", "Missing"])

        output = capsys.readouterr().out
        assert exit_code == 1
        assert "NotFoundError" in output

    def test_main_validation_error(self, capsys):
        """Test an invalid goal is reported"""
        exit_code = main(["--goal", "a" * 201])

        assert exit_code == 1
        assert "ValidationError" in capsys.readouterr().out

    def test_main_with_config(self, temp_config_file, capsys):
        """Test a config file is accepted"""
        exit_code = main(["--goal", "Learn to knit", "--config", temp_config_file])
        assert exit_code == 0
