"""Create asciinema recordings from scenario scripts."""

__version__ = '0.1.0'
