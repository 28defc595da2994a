"""Render a static SVG preview of a scenario session."""

import logging
import xml.etree.ElementTree as ET
from typing import Iterable, Sequence

from .ansi import PROMPT, strip_ansi
from .engine import HIGHLIGHT_MARKER

logger = logging.getLogger(__name__)

CANVAS_WIDTH = 824
CANVAS_HEIGHT = 623
ROW_HEIGHT = '1.2em'
MASK_ID = 'bigterminal-mask'

HIGHLIGHT_CLASS = 'fg-15'

SVG_NAMESPACES = {
    'xmlns:dc': 'http://purl.org/dc/elements/1.1/',
    'xmlns:cc': 'http://creativecommons.org/ns#',
    'xmlns:rdf': 'http://www.w3.org/1999/02/22-rdf-syntax-ns#',
    'xmlns:svg': 'http://www.w3.org/2000/svg',
    'xmlns': 'http://www.w3.org/2000/svg',
}


def _append_text(element: ET.Element, text: str):
    """Append text after the last child of an element (or into it when empty)."""
    if not text:
        return
    if len(element):
        last = element[-1]
        last.tail = (last.tail or '') + text
    else:
        element.text = (element.text or '') + text


def _canvas_rect(**attrs) -> ET.Element:
    return ET.Element('rect', {
        'x': '0',
        'y': '0',
        'width': str(CANVAS_WIDTH),
        'height': str(CANVAS_HEIGHT),
        **attrs,
    })


def render_row(segments: Sequence[str]) -> ET.Element:
    """
    Render one preview line as a <tspan> row.

    An empty segment stands for a bare prompt and renders as "$ ". A segment
    holding the highlight marker renders the text before it plain and the text
    after it highlighted.

    Args:
        segments: Text segments of the line

    Returns:
        The row element
    """
    row = ET.Element('tspan', {'x': '0', 'dy': ROW_HEIGHT})

    for segment in segments:
        if not segment:
            _append_text(row, PROMPT)
            continue

        # XML text cannot hold escape sequences or most control characters
        prefix, marker, suffix = strip_ansi(segment).partition(HIGHLIGHT_MARKER)
        _append_text(row, prefix)
        if marker:
            highlight = ET.SubElement(row, 'tspan', {'class': HIGHLIGHT_CLASS})
            highlight.text = suffix

    return row


def render_preview(preview_lines: Iterable[Sequence[str]]) -> ET.Element:
    """
    Build the SVG document for a list of preview lines.

    The canvas has a fixed size whatever the terminal width and height of the
    session; rows running past it are clipped by a mask.

    Args:
        preview_lines: One sequence of segments per row, top to bottom

    Returns:
        The <svg> root element
    """
    svg = ET.Element('svg', {
        **SVG_NAMESPACES,
        'version': '1.1',
        'width': '100%',
        'viewBox': f'0 0 {CANVAS_WIDTH} {CANVAS_HEIGHT}',
        'preserveAspectRatio': 'xMidYMid meet',
    })

    mask = ET.SubElement(svg, 'mask', {'id': MASK_ID})
    mask.append(_canvas_rect(fill='#fff'))

    svg.append(_canvas_rect(**{'class': 'background'}))

    text = ET.SubElement(svg, 'text', {
        'mask': f'url(#{MASK_ID})',
        'transform': 'translate(0 0)',
        'y': '0',
        'x': '0',
        'xml:space': 'preserve',
    })
    for segments in preview_lines:
        text.append(render_row(segments))

    return svg


def preview_to_string(preview_lines: Iterable[Sequence[str]]) -> str:
    """Serialize the SVG preview; text and attribute values are escaped."""
    return ET.tostring(render_preview(preview_lines), encoding='unicode')


def save_preview(filepath: str, preview_lines: Iterable[Sequence[str]]):
    """
    Write the SVG preview to a new file.

    Raises:
        FileExistsError: If the file already exists
    """
    document = preview_to_string(preview_lines)
    with open(filepath, 'x', encoding='utf-8') as f:
        f.write(document)
        f.write('\n')
    logger.info('Wrote SVG preview to %s', filepath)
