"""Static description of the synthesizer's editable parameters and their panels."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

_C_WHITESPACE = frozenset(" \t\n\v\f\r")


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


@dataclass(frozen=True, order=True)
class WidgetUnit:
    """Width of a widget inside a panel: a rotary is 2 units wide, a button 1."""

    value: int = 0

    def __add__(self, other: int) -> WidgetUnit:
        return WidgetUnit(self.value + other)

    def __sub__(self, other: int) -> WidgetUnit:
        return WidgetUnit(self.value - other)

    def __mul__(self, other: int) -> WidgetUnit:
        return WidgetUnit(self.value * other)

    def __truediv__(self, other: int) -> WidgetUnit:
        return WidgetUnit(_truncating_div(self.value, other))

    def __int__(self) -> int:
        return self.value


def to_pixels(unit: WidgetUnit, scale: int) -> int:
    """Convert a widget width in units to pixels."""
    return unit.value * scale


class MidiMessageType(Enum):
    CC = "cc"


@dataclass(frozen=True)
class MidiConfig:
    message_type: MidiMessageType = MidiMessageType.CC
    channel: int = 0
    cc_number: int = 0


@dataclass(frozen=True)
class ValueRange:
    min_value: int = 0
    max_value: int = 127
    increment: int = 1
    default_value: int = 0
    labels: tuple[str, ...] = ()


@dataclass(frozen=True)
class WidgetDescription:
    name: str
    midi_config: MidiConfig
    value_range: ValueRange


@dataclass(frozen=True)
class PanelDescription:
    name: str
    # Maximum width of a widget line on this panel; a new line starts when reached.
    width: WidgetUnit = field(default_factory=lambda: WidgetUnit(8))


@dataclass(frozen=True)
class WidgetPanel:
    panel: PanelDescription
    widgets: tuple[WidgetDescription, ...]


def _cc(
    name: str,
    channel: int,
    cc_number: int,
    min_value: int,
    max_value: int,
    increment: int,
    default_value: int,
    labels: tuple[str, ...] = (),
) -> WidgetDescription:
    return WidgetDescription(
        name,
        MidiConfig(MidiMessageType.CC, channel, cc_number),
        ValueRange(min_value, max_value, increment, default_value, labels),
    )


def _panel(name: str, width: int, *widgets: WidgetDescription) -> WidgetPanel:
    return WidgetPanel(PanelDescription(name, WidgetUnit(width)), tuple(widgets))


_PANELS: tuple[WidgetPanel, ...] = (
    _panel(
        "POLY-MOD", 8,
        _cc("F Env", 7, 59, 0, 127, 1, 0),
        _cc("Osc B", 7, 60, 0, 120, 1, 0),
        _cc("OSC A", 7, 61, 0, 1, 1, 0),
        _cc("PW", 7, 62, 0, 1, 1, 0),
        _cc("Filter", 7, 63, 0, 1, 1, 0),
    ),
    _panel(
        "LFO", 8,
        _cc("Initial Amount", 7, 47, 0, 120, 1, 0),
        _cc("Frequency", 7, 46, 0, 120, 1, 0),
        _cc("SAW", 7, 117, 0, 1, 1, 0),
        _cc("TRI", 7, 118, 0, 1, 1, 0),
        _cc("SQU", 7, 119, 0, 1, 1, 0),
    ),
    _panel(
        "WHEEL-MOD", 8,
        _cc("LFO/noise", 7, 53, 0, 120, 1, 0),
        _cc("A Freq", 7, 54, 0, 1, 1, 0),
        _cc("B Freq", 7, 55, 0, 1, 1, 0),
        _cc("A PW", 7, 56, 0, 1, 1, 0),
        _cc("B PW", 7, 57, 0, 1, 1, 0),
        _cc("Filter", 7, 58, 0, 1, 1, 0),
    ),
    _panel(
        "OSC A", 8,
        _cc("Frequency", 7, 3, 0, 120, 1, 48),
        _cc("SAW", 7, 15, 0, 1, 1, 1),
        _cc("SQU", 7, 20, 0, 1, 1, 0),
        _cc("Pulse Width", 7, 21, 0, 120, 1, 60),
        _cc("Sync", 7, 23, 0, 1, 1, 0),
    ),
    _panel(
        "OSC B", 12,
        _cc("Frequency", 7, 9, 0, 120, 1, 48),
        _cc("Fine Tune", 7, 14, 0, 127, 1, 0),
        _cc("SAW", 7, 30, 0, 1, 1, 1),
        _cc("TRI", 7, 52, 0, 1, 1, 0),
        _cc("SQU", 7, 116, 0, 1, 1, 0),
        _cc("Pulse Width", 7, 22, 0, 120, 1, 60),
        _cc("Low Freq", 7, 24, 0, 1, 1, 0),
        _cc("Keyboard", 7, 25, 0, 1, 1, 1),
    ),
    _panel(
        "MIXER", 8,
        _cc("Osc A", 7, 27, 0, 120, 1, 120),
        _cc("Osc B", 7, 28, 0, 120, 1, 0),
        _cc("Noise", 7, 29, 0, 120, 1, 0),
    ),
    _panel(
        "FILTER", 10,
        _cc("Rev", 7, 41, 0, 1, 1, 0, ("1/2", "3")),
        _cc("Cutoff", 7, 73, 0, 120, 1, 120),
        _cc("Resonance", 7, 31, 0, 120, 1, 0),
        _cc("Env Amount", 7, 89, 0, 120, 1, 0),
        _cc("Keyboard", 7, 35, 0, 2, 1, 0, ("off", "half", "full")),
        _cc("Attack", 7, 103, 0, 120, 1, 0),
        _cc("Decay", 7, 105, 0, 120, 1, 60),
        _cc("Sustain", 7, 107, 0, 120, 1, 120),
        _cc("Release", 7, 109, 0, 120, 1, 0),
    ),
    _panel(
        "ENVELOPE", 8,
        _cc("Attack", 7, 104, 0, 120, 1, 0),
        _cc("Decay", 7, 106, 0, 120, 1, 60),
        _cc("Sustain", 7, 108, 0, 120, 1, 120),
        _cc("Release", 7, 110, 0, 120, 1, 0),
    ),
    _panel(
        "KEYBOARD", 8,
        _cc("VELO Filter", 7, 90, 0, 1, 1, 0),
        _cc("VELO VCA", 7, 102, 0, 1, 1, 0),
        _cc("AFT Filter", 7, 86, 0, 1, 1, 0),
        _cc("AFT LFO", 7, 87, 0, 1, 1, 0),
    ),
    _panel(
        "UNISON", 8,
        _cc("On/Off", 7, 112, 0, 1, 1, 0),
        _cc(
            "Voice Count", 7, 113, 0, 11, 1, 5,
            ("1", "2", "3", "4", "5", "", "", "", "", "", "chord", "2 poly"),
        ),
        _cc("Note Priority", 7, 71, 0, 3, 1, 0, ("lowest", "latest", "low+R", "lat+R")),
        _cc("Detune", 7, 114, 0, 7, 1, 3),
    ),
    _panel(
        "GENERAL", 8,
        _cc("Glide rate", 7, 26, 0, 120, 1, 0),
        _cc("Vintage", 7, 85, 0, 127, 1, 0),
        _cc("PB Range", 7, 70, 0, 11, 1, 2),
        _cc("Release", 7, 111, 0, 1, 1, 0),
        _cc("Master Volume", 7, 7, 0, 120, 1, 120),
    ),
)


def get_panels() -> tuple[WidgetPanel, ...]:
    """Return every panel of the editor, in display order."""
    return _PANELS


def remove_spaces(text: str) -> str:
    """Drop every whitespace character from ``text``."""
    return "".join(ch for ch in text if ch not in _C_WHITESPACE)


def generate_parameter_id(panel_name: str, widget_name: str) -> str:
    """Build the unique parameter identifier of a widget on a panel."""
    return f"{remove_spaces(panel_name)}|{remove_spaces(widget_name)}"