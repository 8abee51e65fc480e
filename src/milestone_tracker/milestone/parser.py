"""
Step Response Parser

Builds the step-generation prompt and decodes the generator's raw text
response into a list of step descriptions.
"""

import json
import re
from typing import Any, List, Tuple

from .errors import ParseError


STEPS_PROMPT_TEMPLATE = """
You are a helpful AI assistant that creates a recommended plan of clear steps for people looking to work on a hobby.

Create a structured step-by-step plan for this goal: "{goal}"

Response Requirements:
1. Return ONLY a single-line JSON array of strings
2. Each string should be a specific, complete, measurable, and actionable step
3. Steps must be relevant to the goal and feasible for an average person, not overly ambitious or vague
4. Only contain necessary steps to achieve the goal, avoid filler steps
5. Based on the goal, be mindful of the number of steps and do not make a step for every small action
6. Steps must be in logical order
7. Do NOT use line breaks or extra whitespace
8. Properly escape any quotes in the text
9. No step numbers or prefixes
10. No comments or explanations

Example response format:
["Research camera settings and features","Practice taking photos in different lighting","Review and organize test shots"]

Return ONLY the JSON array, nothing else."""


def build_steps_prompt(goal: str) -> str:
    """Build the instruction sent to the step generator for a goal."""
    return STEPS_PROMPT_TEMPLATE.format(goal=goal)


class StepResponseParser:
    """
    Decoder for step generator responses.

    The response is untrusted free-form text. Common formatting defects
    are repaired before the JSON array is decoded:
    - line breaks inside the array
    - repeated whitespace
    - trailing separators before the closing bracket
    - doubled separators
    """

    # Applied in order: (pattern, replacement)
    CLEANUP_PATTERNS: List[Tuple[str, str]] = [
        (r"\r?\n", " "),
        (r"\s+", " "),
        (r",\s*]", "]"),
        (r",\s*,", ","),
    ]

    def __init__(self):
        self._compiled_patterns = [
            (re.compile(pattern), replacement)
            for pattern, replacement in self.CLEANUP_PATTERNS
        ]

    def clean(self, response: str) -> str:
        """
        Normalize whitespace and separators in a raw response.

        Args:
            response: Raw generator output

        Returns:
            Cleaned text ready for structural parsing
        """
        text = response.strip()
        for pattern, replacement in self._compiled_patterns:
            text = pattern.sub(replacement, text)
        return text.strip()

    def parse(self, response: str) -> List[str]:
        """
        Decode a raw response into step descriptions.

        Args:
            response: Raw generator output

        Returns:
            Non-empty list of step descriptions, in response order

        Raises:
            ParseError: If the cleaned text is not a non-empty JSON array
                of strings
        """
        if not isinstance(response, str):
            raise ParseError(f"Response is not text: {type(response).__name__}")

        cleaned = self.clean(response)

        try:
            decoded: Any = json.loads(cleaned)
        except json.JSONDecodeError as e:
            raise ParseError(f"Could not parse steps from response: {e.msg}") from e

        if not isinstance(decoded, list) or not decoded:
            raise ParseError("Response did not contain valid steps")

        if not all(isinstance(item, str) for item in decoded):
            raise ParseError("Response contained non-text steps")

        return decoded


_default_parser = StepResponseParser()


def clean_response(response: str) -> str:
    """Clean a raw response with the default parser."""
    return _default_parser.clean(response)


def parse_steps_response(response: str) -> List[str]:
    """Decode a raw response with the default parser."""
    return _default_parser.parse(response)
