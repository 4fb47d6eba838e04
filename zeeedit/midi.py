"""Raw MIDI messages."""

from __future__ import annotations

from dataclasses import dataclass

_CONTROLLER_STATUS = 0xB0


@dataclass(frozen=True)
class MidiMessage:
    """A MIDI message held as its raw bytes."""

    data: bytes

    def __post_init__(self) -> None:
        if not self.data:
            raise ValueError("a MIDI message needs at least one byte")
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def controller_event(cls, channel: int, controller: int, value: int) -> MidiMessage:
        """Build a control-change message; ``channel`` runs from 1 to 16."""
        channel_bits = min(max(channel - 1, 0), 15)
        return cls(bytes((_CONTROLLER_STATUS | channel_bits, controller & 0x7F, value & 0x7F)))

    @property
    def status(self) -> int:
        return self.data[0]

    @property
    def channel(self) -> int:
        """The channel from 1 to 16, or 0 for system messages."""
        if 0x80 <= self.status < 0xF0:
            return (self.status & 0x0F) + 1
        return 0

    def is_controller(self) -> bool:
        return (self.status & 0xF0) == _CONTROLLER_STATUS

    @property
    def controller_number(self) -> int:
        if not self.is_controller():
            raise ValueError("not a controller message")
        return self.data[1]

    @property
    def controller_value(self) -> int:
        if not self.is_controller():
            raise ValueError("not a controller message")
        return self.data[2]