"""Placement of widgets and panels in rows that wrap at a configured width."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from zeeedit.parameter_map import WidgetUnit

WIDGET_UNIT = 36  # Widget unit in pixels
VALUE_HEIGHT = 20  # Height of a text value
LABEL_HEIGHT = 10  # Height of a text label
H_SPACING = 12  # Horizontal spacing between widgets
V_SPACING = 8  # Vertical spacing between widgets


def value_text_box_height() -> int:
    """Height in pixels of the value box shown below a rotary."""
    return VALUE_HEIGHT


class WidgetType(Enum):
    ROTARY = "rotary"
    TOGGLE = "toggle"
    SELECT = "select"


@dataclass
class Component:
    """A rectangle on screen, positioned by its top-left corner."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


@dataclass
class Widget:
    """A control bound to one parameter, with the label shown above it."""

    widget_type: WidgetType
    parameter_id: str
    label_text: str = ""
    component: Component = field(default_factory=Component)
    label_height: int = LABEL_HEIGHT
    items: tuple[str, ...] = ()
    text_box: tuple[int, int] | None = None


class LayoutProcessor:
    """Places components left to right, starting a new row when the width is exceeded."""

    def __init__(self, panel_width: WidgetUnit | int) -> None:
        if isinstance(panel_width, WidgetUnit):
            panel_width = (H_SPACING + WIDGET_UNIT) * panel_width.value + H_SPACING
        self.panel_width = panel_width
        self._top_left = (H_SPACING, V_SPACING)
        self._max_bottom_right = self._top_left

    def reset(self) -> None:
        """Forget every placed component and start again at the top left."""
        self._top_left = (H_SPACING, V_SPACING)
        self._max_bottom_right = self._top_left

    def insert_widget(self, widget: Widget) -> None:
        """Size ``widget`` according to its type, then place it."""
        if widget.widget_type is WidgetType.ROTARY:
            width = 2 * WIDGET_UNIT
            height = 2 * WIDGET_UNIT + VALUE_HEIGHT
            widget.text_box = (width, VALUE_HEIGHT)
        elif widget.widget_type is WidgetType.TOGGLE:
            width = WIDGET_UNIT
            height = WIDGET_UNIT
        elif widget.widget_type is WidgetType.SELECT:
            width = 2 * WIDGET_UNIT
            height = VALUE_HEIGHT
        else:
            return
        widget.component.width = width
        widget.component.height = height
        self.insert(widget.component, widget.label_height)

    def insert(self, component: Component, label_height: int) -> None:
        """Place ``component`` with room for a label of ``label_height`` above it."""
        left, top = self._top_left
        right = left + component.width + H_SPACING
        bottom = top + component.height + label_height + V_SPACING
        if right > self.panel_width:
            left, top = H_SPACING, self._max_bottom_right[1]
            right = left + component.width + H_SPACING
            bottom = top + component.height + label_height + V_SPACING

        component.x = left
        component.y = top + label_height

        max_right, max_bottom = self._max_bottom_right
        self._max_bottom_right = (max(max_right, right), max(max_bottom, bottom))
        self._top_left = (right, top)

    def size(self) -> tuple[int, int]:
        """Width and height covering everything placed so far."""
        return self._max_bottom_right