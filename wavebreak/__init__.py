"""WAVEBREAK - a top-down arena shooter for the terminal."""

__version__ = '0.1.0'
