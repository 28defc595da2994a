"""Simulate a person typing a scenario and emit the matching recording events."""

import logging
from typing import Iterable, List, Tuple

from . import ansi
from .directives import (
    Blank,
    ClearDirective,
    CommandLine,
    Comment,
    HeaderDirective,
    Plain,
    TimeoutDirective,
    classify_line,
)
from .parser import ScenarioHeader
from .recording import OutputEvent, RecordingWriter

logger = logging.getLogger(__name__)

HIGHLIGHT_MARKER = '#'

# Pauses, in steps
START_PAUSE = 3
PROMPT_PAUSE = 3
ENTER_PAUSE = 3
BLANK_PAUSE = 3
CLEAR_BEFORE = 18
CLEAR_AFTER = 3

PreviewLine = Tuple[str, ...]


class TimeCursor:
    """Elapsed virtual time of the session, in seconds."""

    def __init__(self, start: float = 0.0):
        self.value = start

    def advance(self, seconds: float) -> float:
        if seconds < 0:
            raise ValueError(f'cannot move time backwards by {seconds}')
        self.value += seconds
        return self.value

    def __repr__(self):
        return f'TimeCursor({self.value!r})'


class ScenarioEngine:
    """Turn classified scenario lines into recording events and preview lines."""

    def __init__(self, header: ScenarioHeader, writer: RecordingWriter):
        self.step = header.step
        self.writer = writer
        self.cursor = TimeCursor(START_PAUSE * self.step)
        self.preview_lines: List[PreviewLine] = []

    def process_lines(self, lines: Iterable[Tuple[int, str]]) -> List[PreviewLine]:
        """
        Process every scenario line in order.

        Args:
            lines: (index, text) pairs, index being the zero-based line position

        Returns:
            Preview lines for every command and plain output line
        """
        for index, line in lines:
            self.process_line(line, index)

        logger.info(
            'Processed scenario: %d events, %d preview lines, %.2fs',
            self.writer.event_count, len(self.preview_lines), self.cursor.value,
        )
        return self.preview_lines

    def process_line(self, line: str, index: int):
        directive = classify_line(line, index)
        logger.debug('Line %d: %r', index + 1, directive)

        if isinstance(directive, (HeaderDirective, Comment)):
            return

        if isinstance(directive, TimeoutDirective):
            self.cursor.advance(directive.seconds)
        elif isinstance(directive, CommandLine):
            self._echo_console_line(directive.prompt, directive.text)
        elif isinstance(directive, ClearDirective):
            self._clear_terminal()
        elif isinstance(directive, Blank):
            self.cursor.advance(BLANK_PAUSE * self.step)
        elif isinstance(directive, Plain):
            # Output appears at once, without typing
            self._emit(directive.text + ansi.NEWLINE)
            self.preview_lines.append((directive.text,))

    def _emit(self, data: str):
        self.writer.write_event(OutputEvent(time=self.cursor.value, data=data))

    def _clear_terminal(self):
        self.cursor.advance(CLEAR_BEFORE * self.step)
        self._emit(ansi.CLEAR_SCREEN)
        self.cursor.advance(CLEAR_AFTER * self.step)

    def _echo_console_line(self, prompt: str, text: str):
        self.cursor.advance(self.step)
        self._emit(ansi.prompt_sequence(prompt))
        self.cursor.advance(PROMPT_PAUSE * self.step)

        self._echo_typing(text)
        self.preview_lines.append((prompt, text))

    def _echo_typing(self, text: str):
        bright_applied = False
        for char in text:
            self.cursor.advance(self.step)
            if char == HIGHLIGHT_MARKER:
                self._emit(ansi.BRIGHT_ON)
                bright_applied = True
            self._emit(char)

        if bright_applied:
            self._emit(ansi.RESET)

        self.cursor.advance(ENTER_PAUSE * self.step)
        self._emit(ansi.NEWLINE)
