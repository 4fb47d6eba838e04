"""MIDI control-change editor model for the Prophet-5 synthesizer."""

__version__ = "0.1.0"

__all__ = [
    "editor",
    "layout",
    "midi",
    "midi_parameter_map",
    "parameter_map",
    "parameters",
    "processor",
    "queue",
]