"""SoundFont 2 parsing, MIDI tuning tables and sample interpolation loops."""

__version__ = "0.1.0"