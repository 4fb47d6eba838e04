"""Routing of incoming MIDI controller messages to parameters."""

from __future__ import annotations

from zeeedit.midi import MidiMessage
from zeeedit.parameter_map import MidiConfig, MidiMessageType, ValueRange
from zeeedit.parameters import IntParameter

_CHANNELS = range(1, 17)
_CONTROLLERS = range(128)


class MidiParameterMap:
    """Maps (channel, controller number) pairs to the parameters they drive."""

    def __init__(self) -> None:
        self._cc_map: dict[tuple[int, int], tuple[IntParameter, float]] = {}

    def __len__(self) -> int:
        return len(self._cc_map)

    def register_parameter(
        self, midi_config: MidiConfig, value_range: ValueRange, parameter: IntParameter
    ) -> None:
        """Let messages matching ``midi_config`` set ``parameter``."""
        if midi_config.message_type is not MidiMessageType.CC:
            return
        if midi_config.channel not in _CHANNELS:
            raise ValueError(f"MIDI channel {midi_config.channel} outside 1..16")
        if midi_config.cc_number not in _CONTROLLERS:
            raise ValueError(f"CC number {midi_config.cc_number} outside 0..127")
        key = (midi_config.channel, midi_config.cc_number)
        self._cc_map[key] = (parameter, float(value_range.min_value))

    def set_parameter_value(self, message: MidiMessage) -> bool:
        """Apply ``message`` to its parameter; return whether one was registered."""
        if not message.is_controller():
            return False
        entry = self._cc_map.get((message.channel, message.controller_number))
        if entry is None:
            return False
        parameter, min_value = entry
        value = float(message.controller_value)
        steps = parameter.num_steps()
        if steps > 1:
            value = (value - min_value) / (steps - 1)
        else:
            value = 1.0
        parameter.set_value_notifying_host(value)
        return True