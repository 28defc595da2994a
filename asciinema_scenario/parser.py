"""Read scenario files."""

import json
import logging
import math
from dataclasses import dataclass
from typing import Iterator, Tuple

logger = logging.getLogger(__name__)

HEADER_MARKER = '#! '

DEFAULT_STEP = 0.10
DEFAULT_WIDTH = 77
DEFAULT_HEIGHT = 20


class ScenarioError(ValueError):
    """Raised when a scenario file cannot be interpreted."""

    def __init__(self, message: str, line_number: int = None):
        if line_number is not None:
            message = f'line {line_number}: {message}'
        super().__init__(message)
        self.line_number = line_number


def _reject_constant(name: str):
    # NaN and Infinity are not JSON
    raise ScenarioError(f'malformed header: {name} is not a valid JSON value', 1)


@dataclass(frozen=True)
class ScenarioHeader:
    """Session settings taken from the optional "#! {...}" first line."""

    step: float = DEFAULT_STEP
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT

    def __post_init__(self):
        if (isinstance(self.step, bool) or not isinstance(self.step, (int, float))
                or not math.isfinite(self.step) or not self.step > 0):
            raise ScenarioError(f'header step must be a positive number, got {self.step!r}', 1)
        for name in ('width', 'height'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ScenarioError(f'header {name} must be a positive integer, got {value!r}', 1)

    @classmethod
    def from_json(cls, text: str) -> 'ScenarioHeader':
        """
        Build a header from the JSON object following the header marker.

        Missing keys fall back to defaults and unknown keys are ignored.

        Raises:
            ScenarioError: If the text is not a JSON object or holds bad values
        """
        try:
            data = json.loads(text, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            raise ScenarioError(f'malformed header: {e}', 1) from e

        if not isinstance(data, dict):
            raise ScenarioError('header must be a JSON object', 1)

        return cls(
            step=data.get('step', DEFAULT_STEP),
            width=data.get('width', DEFAULT_WIDTH),
            height=data.get('height', DEFAULT_HEIGHT),
        )


def _strip_line_ending(line: str) -> str:
    """Drop a trailing "\\n", along with one "\\r" right before it."""
    if line.endswith('\n'):
        line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
    return line


def read_header(filepath: str) -> ScenarioHeader:
    """
    Read the scenario header from the first line of a file.

    Args:
        filepath: Path to the scenario file

    Returns:
        The parsed header, or the defaults when the first line is not a header
    """
    with open(filepath, 'r', encoding='utf-8', newline='\n') as f:
        first_line = _strip_line_ending(f.readline())

    if first_line.startswith(HEADER_MARKER):
        header = ScenarioHeader.from_json(first_line[len(HEADER_MARKER):])
        logger.debug('Using scenario header %s', header)
        return header

    logger.debug('No scenario header, using defaults')
    return ScenarioHeader()


def read_lines(filepath: str) -> Iterator[Tuple[int, str]]:
    """
    Yield (index, line) pairs for every line of a file, without line endings.

    Lines end at "\\n" only; a lone "\\r" stays part of the line.
    """
    with open(filepath, 'r', encoding='utf-8', newline='\n') as f:
        for index, line in enumerate(f):
            yield index, _strip_line_ending(line)
