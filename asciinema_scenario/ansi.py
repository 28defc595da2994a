"""ANSI escape sequences written into the recording."""

import re

# Erase display, then move the cursor home
CLEAR_SCREEN = '\r\x1b[2J\r\x1b[H'

BRIGHT_ON = '\x1b[1m'
RESET = '\x1b[0m'
GREEN = '\x1b[32m'

NEWLINE = '\r\n'

PROMPT = '$ '

# CSI sequences, OSC sequences ended by BEL, and two-byte ESC sequences
ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;?]*[a-zA-Z]|\x1b\][^\x07]*\x07|\x1b[=<>]')

# Control characters XML 1.0 does not allow in text
CONTROL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f\ufffe\uffff]')


def prompt_sequence(label: str) -> str:
    """
    Build the prompt shown before a typed command.

    Args:
        label: Prompt label such as "(nix-shell) ", may be empty

    Returns:
        The label colored green followed by "$ ", or a plain "$ "
    """
    if label:
        return f'{GREEN}{label}{RESET}{PROMPT}'
    return PROMPT


def strip_ansi(text: str) -> str:
    """
    Strip ANSI escape sequences and stray control characters from text.

    Tabs, newlines and carriage returns are kept.
    """
    text = ANSI_ESCAPE.sub('', text)
    return CONTROL_CHARS.sub('', text)
