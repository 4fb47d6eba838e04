# zeeedit

An editor model for the Prophet-5 synthesizer driven over MIDI control
changes. Every front-panel control is described as an integer parameter bound
to a MIDI channel and CC number. When a parameter moves, a control-change
message is queued for output; control changes coming back from the instrument
move the matching parameters.

The package has no dependencies outside the standard library.

## Installing

```
pip install zeeedit
```

To run the test suite:

```
pip install "zeeedit[test]"
pytest
```

## Modules

- `zeeedit.parameter_map` – the panel table. `get_panels()` returns every
  `WidgetPanel` in display order; each has a `PanelDescription` (name and
  width in `WidgetUnit`s) and its `WidgetDescription`s, each with a
  `MidiConfig` (message type, channel, CC number) and a `ValueRange`
  (minimum, maximum, increment, default and optional value labels).
  `generate_parameter_id(panel_name, widget_name)` joins the two names with
  `|` after `remove_spaces` has dropped their whitespace:
  `generate_parameter_id("OSC A", "Pulse Width")` gives `"OSCA|PulseWidth"`.
  `to_pixels(unit, scale)` converts a `WidgetUnit` width to pixels.
- `zeeedit.midi` – `MidiMessage`, a message held as raw bytes.
  `MidiMessage.controller_event(channel, controller, value)` builds a control
  change (channel 1 to 16); `channel`, `controller_number`,
  `controller_value` and `is_controller()` read it back.
- `zeeedit.parameters` – `IntParameter`, an integer in a closed range with
  `num_steps()`, `normalized()`, `set_value_notifying_host(normalized)` and
  `add_listener(listener)`; listeners are called as
  `listener(parameter_id, new_value)` only when the value actually changes.
  `ParameterStore` holds parameters by identifier, with `get_parameter`,
  `add_parameter_listener`, and `copy_state()` / `replace_state(state)` which
  snapshot and restore values as an `xml.etree.ElementTree.Element`.
- `zeeedit.queue` – `BoundedQueue`, a lock-protected FIFO for passing items
  between a producer thread and a consumer thread. A queue created with size
  *n* holds at most *n − 1* items; `push(item)` returns `False` when it is
  full, and `pop_all(reader)` hands every waiting item to `reader` in order
  and returns how many there were.
- `zeeedit.layout` – `LayoutProcessor` flows `Component`s left to right and
  starts a new row when the configured width (pixels, or a `WidgetUnit`) would
  be exceeded. `insert_widget(widget)` first sizes a `Widget` by its
  `WidgetType` (rotary, toggle or select); `insert(component, label_height)`
  places any component; `size()` gives the width and height covered.
- `zeeedit.midi_parameter_map` – `MidiParameterMap` routes incoming control
  changes to the parameter registered for that channel and CC number.
  `set_parameter_value(message)` returns whether a parameter was found.
- `zeeedit.editor` – `Editor` builds one `PanelView` per panel, choosing a
  select for controls with value labels, a toggle for two-valued controls and
  a rotary otherwise, and registers each with its `MidiParameterMap`.
  `resized()` lays the panels out across the editor width, and
  `change_listener_callback(source)` applies every queued incoming MIDI
  buffer to the parameters.
- `zeeedit.processor` – `ZeeEdit`, the MIDI-effect processor.
  `process_block(buffer, midi_messages)` queues the incoming messages for the
  editor, notifies change listeners, and replaces the list's contents with the
  control changes produced by parameter changes since the last block.
  `get_state_information()` returns the parameter values as bytes and
  `set_state_information(data)` restores them, returning `False` for data it
  cannot use. `create_editor()` builds an `Editor` subscribed to incoming MIDI.

## Example

```python
from zeeedit.midi import MidiMessage
from zeeedit.processor import ZeeEdit

synth = ZeeEdit()

# Moving a parameter queues a control change for the next block.
pulse_width = synth.parameters.get_parameter("OSCA|PulseWidth")
pulse_width.set_value_notifying_host(1.0)
out = synth.process_block([], [])
assert out == [MidiMessage.controller_event(7, 21, 120)]

# Incoming control changes move parameters once an editor is listening.
synth.create_editor()
synth.process_block([], [MidiMessage.controller_event(7, 21, 60)])
assert pulse_width.value == 60

# Save and restore.
state = synth.get_state_information()
other = ZeeEdit()
assert other.set_state_information(state)
assert other.parameters.get_parameter("OSCA|PulseWidth").value == 60
```

## What it does not do

- It opens no MIDI ports: messages go in and out only as `MidiMessage` lists
  passed to `process_block`.
- It draws nothing. The editor is a model of controls and their pixel
  geometry; rendering it is left to whatever front end uses it.
- It is not a loadable audio plug-in and processes no audio; `ZeeEdit`
  declares no audio channels.