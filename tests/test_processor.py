import xml.etree.ElementTree as ET

import pytest

from zeeedit.editor import Editor
from zeeedit.midi import MidiMessage
from zeeedit.parameter_map import get_panels
from zeeedit.processor import ZeeEdit, passthrough_audio


@pytest.fixture
def plugin():
    return ZeeEdit()


def test_name(plugin):
    assert plugin.name == "ZeeEdit-Prophet5"


def test_midi_effect_properties(plugin):
    assert plugin.is_midi_effect is True
    assert plugin.accepts_midi is True
    assert plugin.produces_midi is True
    assert plugin.tail_length_seconds == 0.0
    assert plugin.num_programs == 1
    assert plugin.current_program == 0


def test_any_layout_supported(plugin):
    assert plugin.is_buses_layout_supported(object()) is True


def test_passthrough_clears_extra_outputs():
    buffer = [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]
    passthrough_audio(buffer, 1, 3)
    assert buffer == [[1.0, 2.0], [0.0, 0.0], [0.0, 0.0]]


def test_passthrough_keeps_all_when_inputs_cover_outputs():
    buffer = [[1.0], [2.0]]
    passthrough_audio(buffer, 2, 2)
    assert buffer == [[1.0], [2.0]]


def test_parameters_created_from_panels(plugin):
    expected = sum(len(panel.widgets) for panel in get_panels())
    assert len(plugin.parameters) == expected
    assert plugin.parameters.get_parameter("OSCA|Frequency").value == 48
    assert plugin.parameters.get_parameter("UNISON|VoiceCount").value == 5


def test_parameter_change_emits_controller(plugin):
    plugin.parameters.get_parameter("MIXER|Noise").set_value_notifying_host(1.0)
    midi = []
    result = plugin.process_block([], midi)
    assert midi == [MidiMessage.controller_event(7, 29, 120)]
    assert result is midi
    assert midi[0].data == bytes((0xB6, 29, 120))


def test_output_drained_after_block(plugin):
    plugin.parameters.get_parameter("MIXER|Noise").set_value_notifying_host(1.0)
    plugin.process_block([], [])
    midi = []
    plugin.process_block([], midi)
    assert midi == []


def test_output_queue_capacity(plugin):
    message = MidiMessage.controller_event(1, 1, 1)
    results = [plugin.push_output_message(message) for _ in range(70)]
    assert results.count(True) == 63
    midi = []
    plugin.process_block([], midi)
    assert len(midi) == 63


def test_input_without_editor_does_not_change_parameters(plugin):
    midi = [MidiMessage.controller_event(7, 29, 60)]
    plugin.process_block([], midi)
    assert midi == []
    assert plugin.parameters.get_parameter("MIXER|Noise").value == 0


def test_input_reaches_editor(plugin):
    editor = plugin.create_editor()
    assert isinstance(editor, Editor)
    assert plugin.active_editor is editor
    midi = [MidiMessage.controller_event(7, 29, 60)]
    plugin.process_block([], midi)
    assert plugin.parameters.get_parameter("MIXER|Noise").value == 60
    assert midi == [MidiMessage.controller_event(7, 29, 60)]


def test_change_listener_receives_source(plugin):
    calls = []

    class Recorder:
        def change_listener_callback(self, source):
            calls.append(source)

    plugin.add_change_listener(Recorder())
    plugin.process_block([], [MidiMessage.controller_event(1, 2, 3)])
    plugin.process_block([], [])
    assert calls == [plugin]


def test_state_round_trip(plugin):
    plugin.parameters.get_parameter("FILTER|Cutoff").set_value_notifying_host(0.5)
    data = plugin.get_state_information()
    other = ZeeEdit()
    assert other.set_state_information(data) is True
    assert other.parameters.get_parameter("FILTER|Cutoff").value == 60


def test_state_garbage_ignored(plugin):
    assert plugin.set_state_information(b"not a state") is False
    assert plugin.parameters.get_parameter("FILTER|Cutoff").value == 120


def test_state_wrong_tag_ignored(plugin):
    other = ZeeEdit()
    other.parameters.get_parameter("FILTER|Cutoff").set_value_notifying_host(0.0)
    data = other.get_state_information()
    tampered = data.replace(b"<parameters", b"<somethings").replace(
        b"</parameters>", b"</somethings>"
    )
    assert plugin.set_state_information(tampered) is False
    assert plugin.parameters.get_parameter("FILTER|Cutoff").value == 120


def test_state_contains_xml(plugin):
    data = plugin.get_state_information()
    text = data[8:].split(b"\0", 1)[0].decode("utf-8")
    root = ET.fromstring(text)
    assert root.tag == "parameters"
    assert len(root.findall("PARAM")) == len(plugin.parameters)
    assert int.from_bytes(data[:4], "little") == 0x21324356