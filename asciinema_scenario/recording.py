"""Write asciicast v2 recordings."""

import json
from dataclasses import dataclass
from typing import TextIO

from .parser import ScenarioHeader

ASCIICAST_VERSION = 2
OUTPUT = 'o'


@dataclass(frozen=True)
class OutputEvent:
    """One timestamped chunk of terminal output."""

    time: float
    data: str
    kind: str = OUTPUT

    def to_json(self) -> str:
        # Only the written timestamp is rounded, callers keep full precision
        return _dumps([round(self.time, 2), self.kind, self.data])


def _dumps(value) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(',', ':'))


def header_json(header: ScenarioHeader) -> str:
    """Serialize the recording header line for a scenario header."""
    return _dumps({
        'version': ASCIICAST_VERSION,
        'width': header.width,
        'height': header.height,
    })


class RecordingWriter:
    """Write a recording one line at a time, in call order."""

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.event_count = 0

    def write_header(self, header: ScenarioHeader):
        self._write_line(header_json(header))

    def write_event(self, event: OutputEvent):
        self._write_line(event.to_json())
        self.event_count += 1

    def _write_line(self, line: str):
        self.stream.write(line)
        self.stream.write('\n')
        self.stream.flush()
