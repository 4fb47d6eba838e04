"""The MIDI-effect processor: parameters out as controller messages, MIDI in to the editor."""

from __future__ import annotations

import struct
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from collections.abc import MutableSequence
from typing import Any, Protocol

from zeeedit.editor import Editor
from zeeedit.midi import MidiMessage
from zeeedit.parameter_map import generate_parameter_id, get_panels
from zeeedit.parameters import IntParameter, ParameterStore
from zeeedit.queue import BoundedQueue

PRODUCT_NAME = "ZeeEdit-Prophet5"
STATE_TYPE = "parameters"
OUTPUT_QUEUE_SIZE = 64
INPUT_QUEUE_SIZE = 128

_XML_MAGIC = 0x21324356
_HEADER = struct.Struct("<II")


class ChangeListener(Protocol):
    def change_listener_callback(self, source: object) -> None: ...


def passthrough_audio(
    buffer: MutableSequence[MutableSequence[float]], input_channels: int, output_channels: int
) -> None:
    """Silence the output channels that have no matching input channel."""
    for channel in buffer[max(input_channels, 0):output_channels]:
        channel[:] = [0.0] * len(channel)


def _state_to_binary(state: ET.Element) -> bytes:
    text = ET.tostring(state, encoding="unicode").encode("utf-8") + b"\0"
    return _HEADER.pack(_XML_MAGIC, len(text)) + text


def _state_from_binary(data: bytes) -> ET.Element | None:
    if len(data) < _HEADER.size:
        return None
    magic, size = _HEADER.unpack_from(data)
    if magic != _XML_MAGIC:
        return None
    body = data[_HEADER.size:_HEADER.size + size]
    text = body.split(b"\0", 1)[0]
    try:
        return ET.fromstring(text.decode("utf-8"))
    except (ET.ParseError, UnicodeDecodeError):
        return None


class PluginProcessorBase(ABC):
    """Common behaviour of a MIDI-effect processor with one program and no audio."""

    name = PRODUCT_NAME
    accepts_midi = True
    produces_midi = True
    is_midi_effect = True
    has_editor = True
    tail_length_seconds = 0.0
    num_programs = 1
    current_program = 0
    # A MIDI effect declares no audio buses.
    total_num_input_channels = 0
    total_num_output_channels = 0

    @property
    @abstractmethod
    def parameters(self) -> ParameterStore:
        """The store holding every parameter of the processor."""

    @abstractmethod
    def process_midi_messages(self, midi_messages: list[MidiMessage]) -> list[MidiMessage]:
        """Consume the incoming messages and replace them with the outgoing ones."""

    def is_buses_layout_supported(self, layouts: Any) -> bool:
        """A MIDI effect accepts any bus layout."""
        return True

    def process_block(
        self,
        buffer: MutableSequence[MutableSequence[float]],
        midi_messages: list[MidiMessage],
    ) -> list[MidiMessage]:
        """Handle one block; ``midi_messages`` holds the output messages afterwards."""
        passthrough_audio(buffer, self.total_num_input_channels, self.total_num_output_channels)
        return self.process_midi_messages(midi_messages)

    def get_state_information(self) -> bytes:
        """Serialise every parameter value."""
        return _state_to_binary(self.parameters.copy_state())

    def set_state_information(self, data: bytes) -> bool:
        """Restore parameter values; return False when ``data`` is not a usable state."""
        state = _state_from_binary(bytes(data))
        if state is None or state.tag != self.parameters.state_type:
            return False
        self.parameters.replace_state(state)
        return True


class ZeeEdit(PluginProcessorBase):
    """Sends a controller message for every parameter change and forwards MIDI input."""

    def __init__(self) -> None:
        self._parameters = ParameterStore(STATE_TYPE, self._create_parameters())
        self._output_queue: BoundedQueue[MidiMessage] = BoundedQueue(OUTPUT_QUEUE_SIZE)
        self._input_queue: BoundedQueue[tuple[MidiMessage, ...]] = BoundedQueue(INPUT_QUEUE_SIZE)
        self._change_listeners: list[ChangeListener] = []
        self.active_editor: Editor | None = None
        self._create_parameter_listeners()

    @property
    def parameters(self) -> ParameterStore:
        return self._parameters

    @staticmethod
    def _create_parameters() -> list[IntParameter]:
        return [
            IntParameter(
                generate_parameter_id(panel.panel.name, widget.name),
                widget.name,
                widget.value_range.min_value,
                widget.value_range.max_value,
                widget.value_range.default_value,
            )
            for panel in get_panels()
            for widget in panel.widgets
        ]

    def _create_parameter_listeners(self) -> None:
        for panel in get_panels():
            for widget in panel.widgets:
                parameter_id = generate_parameter_id(panel.panel.name, widget.name)
                self._parameters.add_parameter_listener(
                    parameter_id,
                    self._controller_sender(widget.midi_config.channel, widget.midi_config.cc_number),
                )

    def _controller_sender(self, channel: int, cc_number: int):
        def send(_parameter_id: str, new_value: float) -> None:
            self.push_output_message(MidiMessage.controller_event(channel, cc_number, int(new_value)))

        return send

    def push_output_message(self, message: MidiMessage) -> bool:
        """Queue ``message`` for the next block; return False if the queue is full."""
        return self._output_queue.push(message)

    def add_change_listener(self, listener: ChangeListener) -> None:
        self._change_listeners.append(listener)

    def _send_change_message(self) -> None:
        for listener in list(self._change_listeners):
            listener.change_listener_callback(self)

    def process_midi_messages(self, midi_messages: list[MidiMessage]) -> list[MidiMessage]:
        incoming = tuple(midi_messages)
        midi_messages.clear()
        if incoming:
            self._input_queue.push(incoming)
            self._send_change_message()
        self._output_queue.pop_all(midi_messages.append)
        return midi_messages

    def create_editor(self) -> Editor:
        """Build the editor and subscribe it to incoming MIDI."""
        editor = Editor(self, self._parameters, self._input_queue)
        self.add_change_listener(editor)
        self.active_editor = editor
        return editor