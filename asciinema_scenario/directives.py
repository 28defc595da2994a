"""Classify scenario lines by the role they play in the session."""

import math
import re
from dataclasses import dataclass
from typing import Union

from .parser import HEADER_MARKER, ScenarioError

TIMEOUT_MARKER = '#timeout:'
# ASCII decimal with optional fraction and exponent; negative waits are refused
TIMEOUT_VALUE = re.compile(r'\+?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')
COMMENT_MARKER = '#'
CLEAR_MARKER = '--'

# (prompt marker, prompt label) pairs, checked in order
PROMPTS = (
    ('$ ', ''),
    ('(nix-shell) $ ', '(nix-shell) '),
)


@dataclass(frozen=True)
class HeaderDirective:
    pass


@dataclass(frozen=True)
class TimeoutDirective:
    seconds: float


@dataclass(frozen=True)
class Comment:
    pass


@dataclass(frozen=True)
class CommandLine:
    prompt: str
    text: str


@dataclass(frozen=True)
class ClearDirective:
    pass


@dataclass(frozen=True)
class Blank:
    pass


@dataclass(frozen=True)
class Plain:
    text: str


Directive = Union[
    HeaderDirective, TimeoutDirective, Comment, CommandLine, ClearDirective, Blank, Plain
]


def parse_timeout(value: str, index: int) -> float:
    """Parse the seconds given to a "#timeout:" directive."""
    value = value.strip()
    if not TIMEOUT_VALUE.fullmatch(value):
        raise ScenarioError(f'invalid timeout {value!r}', index + 1)

    seconds = float(value)
    if not math.isfinite(seconds):
        raise ScenarioError(f'timeout is out of range, got {value!r}', index + 1)
    return seconds


def classify_line(line: str, index: int) -> Directive:
    """
    Assign a role to one scenario line.

    Rules are tried in order and the first match wins, so every line maps
    to exactly one directive.

    Args:
        line: Line text without its line ending
        index: Zero-based position of the line in the file

    Returns:
        The classified directive

    Raises:
        ScenarioError: If a timeout directive does not hold a number
    """
    if index == 0 and line.startswith(HEADER_MARKER):
        return HeaderDirective()

    if line.startswith(TIMEOUT_MARKER):
        return TimeoutDirective(parse_timeout(line[len(TIMEOUT_MARKER):], index))

    if line.startswith(COMMENT_MARKER):
        return Comment()

    for marker, label in PROMPTS:
        if line.startswith(marker):
            return CommandLine(prompt=label, text=line[len(marker):])

    if line.startswith(CLEAR_MARKER):
        return ClearDirective()

    if not line.strip():
        return Blank()

    return Plain(text=line)
