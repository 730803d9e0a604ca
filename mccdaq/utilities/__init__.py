"""Helpers shared by the device drivers: :mod:`utilities.waveform`."""
