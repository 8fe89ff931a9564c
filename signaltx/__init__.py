"""Encode text to bit streams, modulate them with ASK or PSK, and compute waveform views."""

__version__ = "0.1.0"