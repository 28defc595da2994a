import io
import json

import pytest

from asciinema_scenario.engine import ScenarioEngine
from asciinema_scenario.parser import ScenarioHeader
from asciinema_scenario.recording import RecordingWriter


@pytest.fixture
def write_scenario(tmp_path):
    """Write scenario text to a file and return its path."""
    def _write(text, name='demo.scenario'):
        path = tmp_path / name
        path.write_text(text, encoding='utf-8')
        return str(path)
    return _write


@pytest.fixture
def run_engine():
    """Run the engine over in-memory lines; return (events, preview_lines, engine)."""
    def _run(text, header=None):
        stream = io.StringIO()
        engine = ScenarioEngine(header or ScenarioHeader(), RecordingWriter(stream))
        preview_lines = engine.process_lines(enumerate(text.split('\n')))
        events = [json.loads(line) for line in stream.getvalue().splitlines()]
        return events, preview_lines, engine
    return _run
