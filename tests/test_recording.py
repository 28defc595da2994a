import io
import json

from asciinema_scenario.parser import ScenarioHeader
from asciinema_scenario.recording import OutputEvent, RecordingWriter, header_json


def test_header_line():
    assert header_json(ScenarioHeader(width=80, height=24)) == '{"version":2,"width":80,"height":24}'


def test_event_time_is_rounded_to_two_decimals():
    event = OutputEvent(time=0.30000000000000004, data='x')
    assert event.to_json() == '[0.3,"o","x"]'
    assert event.time == 0.30000000000000004


def test_event_data_escapes_control_characters():
    event = OutputEvent(time=1.0, data='\x1b[1m')
    assert event.to_json() == '[1.0,"o","\\u001b[1m"]'


def test_event_data_keeps_unicode():
    assert OutputEvent(time=1.0, data='é').to_json() == '[1.0,"o","é"]'


def test_writer_keeps_call_order():
    stream = io.StringIO()
    writer = RecordingWriter(stream)
    writer.write_header(ScenarioHeader())
    for i, char in enumerate('abc'):
        writer.write_event(OutputEvent(time=i / 10, data=char))

    lines = stream.getvalue().splitlines()
    assert json.loads(lines[0]) == {'version': 2, 'width': 77, 'height': 20}
    assert [json.loads(line)[2] for line in lines[1:]] == ['a', 'b', 'c']
    assert writer.event_count == 3
