"""Editor model: the panels of widgets and how incoming MIDI updates them."""

from __future__ import annotations

from collections.abc import Iterable

from zeeedit.layout import (
    LABEL_HEIGHT,
    Component,
    LayoutProcessor,
    Widget,
    WidgetType,
)
from zeeedit.midi import MidiMessage
from zeeedit.midi_parameter_map import MidiParameterMap
from zeeedit.parameter_map import WidgetDescription, WidgetPanel, generate_parameter_id, get_panels
from zeeedit.parameters import ParameterStore
from zeeedit.queue import BoundedQueue

DEFAULT_WIDTH = 1140
DEFAULT_HEIGHT = 800


def _widget_type(description: WidgetDescription) -> WidgetType:
    value_range = description.value_range
    if value_range.labels:
        return WidgetType.SELECT
    if (value_range.max_value - value_range.min_value) // value_range.increment == 1:
        return WidgetType.TOGGLE
    return WidgetType.ROTARY


class PanelView:
    """A titled group of widgets laid out within the panel's configured width."""

    def __init__(
        self, panel: WidgetPanel, store: ParameterStore, midi_parameter_map: MidiParameterMap
    ) -> None:
        self.name = panel.panel.name
        self.label_text = panel.panel.name
        self.configured_width = panel.panel.width
        self.component = Component()
        self.widgets: list[Widget] = []
        self._label_height = LABEL_HEIGHT

        for description in panel.widgets:
            parameter_id = generate_parameter_id(panel.panel.name, description.name)
            widget_type = _widget_type(description)
            items = (
                tuple(item for item in description.value_range.labels if item)
                if widget_type is WidgetType.SELECT
                else ()
            )
            self.widgets.append(
                Widget(widget_type, parameter_id, description.name, items=items)
            )
            midi_parameter_map.register_parameter(
                description.midi_config,
                description.value_range,
                store.get_parameter(parameter_id),
            )

        layout = LayoutProcessor(self.configured_width)
        for widget in self.widgets:
            layout.insert_widget(widget)
        self.component.width, self.component.height = layout.size()

    def label_height(self) -> int:
        return self._label_height


class Editor:
    """The editor window: every panel, and the MIDI input that moves its controls."""

    def __init__(
        self,
        processor: object,
        store: ParameterStore,
        input_queue: BoundedQueue[Iterable[MidiMessage]],
    ) -> None:
        self.processor = processor
        self.midi_parameter_map = MidiParameterMap()
        self._input_queue = input_queue
        self.panels = [PanelView(panel, store, self.midi_parameter_map) for panel in get_panels()]
        self.resizable = True
        self.width = 0
        self.height = 0
        self.set_size(DEFAULT_WIDTH, DEFAULT_HEIGHT)

    def set_size(self, width: int, height: int) -> None:
        """Resize the editor and lay the panels out again."""
        self.width = width
        self.height = height
        self.resized()

    def resized(self) -> None:
        layout = LayoutProcessor(self.width)
        for panel in self.panels:
            layout.insert(panel.component, panel.label_height())

    def change_listener_callback(self, source: object = None) -> None:
        """Apply every queued incoming MIDI buffer to the parameters."""

        def apply(buffer: Iterable[MidiMessage]) -> None:
            for message in buffer:
                self.midi_parameter_map.set_parameter_value(message)

        self._input_queue.pop_all(apply)