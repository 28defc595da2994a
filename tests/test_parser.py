import pytest

from asciinema_scenario.parser import ScenarioError, ScenarioHeader, read_header, read_lines


def test_defaults_without_header(write_scenario):
    path = write_scenario('$ ls\n')
    assert read_header(path) == ScenarioHeader(step=0.10, width=77, height=20)


def test_partial_header_uses_defaults(write_scenario):
    path = write_scenario('#! {"width": 100}\n$ ls\n')
    assert read_header(path) == ScenarioHeader(step=0.10, width=100, height=20)


def test_full_header(write_scenario):
    path = write_scenario('#! {"step": 0.05, "width": 120, "height": 40, "title": "x"}\n')
    assert read_header(path) == ScenarioHeader(step=0.05, width=120, height=40)


def test_empty_file_uses_defaults(write_scenario):
    assert read_header(write_scenario('')) == ScenarioHeader()


def test_malformed_header_raises(write_scenario):
    path = write_scenario('#! {step: 0.1}\n')
    with pytest.raises(ScenarioError, match='line 1'):
        read_header(path)


@pytest.mark.parametrize('text', [
    '[1, 2]',
    '{"step": 0}',
    '{"width": -3}',
    '{"height": 2.5}',
    '{"step": "fast"}',
    '{"step": Infinity}',
    '{"step": NaN}',
    '{"step": 1e400}',
    '{"title": -Infinity}',
])
def test_invalid_header_values(text):
    with pytest.raises(ScenarioError):
        ScenarioHeader.from_json(text)


def test_read_lines_strips_line_endings(write_scenario):
    path = write_scenario('one\r\ntwo\n\nthree')
    assert list(read_lines(path)) == [(0, 'one'), (1, 'two'), (2, ''), (3, 'three')]


def test_lone_carriage_return_stays_in_line(write_scenario):
    path = write_scenario('progress 10%\rprogress 100%\nend\r')
    assert list(read_lines(path)) == [(0, 'progress 10%\rprogress 100%'), (1, 'end\r')]


def test_header_line_with_crlf(write_scenario):
    path = write_scenario('#! {"width": 90}\r\n$ ls\r\n')
    assert read_header(path) == ScenarioHeader(width=90)
