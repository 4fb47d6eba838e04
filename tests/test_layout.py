import pytest

from zeeedit.layout import (
    H_SPACING,
    LABEL_HEIGHT,
    V_SPACING,
    VALUE_HEIGHT,
    WIDGET_UNIT,
    Component,
    LayoutProcessor,
    Widget,
    WidgetType,
    value_text_box_height,
)
from zeeedit.parameter_map import WidgetUnit


def _overlap(a: Component, b: Component) -> bool:
    return a.x < b.right and b.x < a.right and a.y < b.bottom and b.y < a.bottom


def test_value_text_box_height():
    assert value_text_box_height() == VALUE_HEIGHT


def test_width_in_units_converted_to_pixels():
    assert LayoutProcessor(WidgetUnit(8)).panel_width == 396


def test_pixel_width_kept():
    assert LayoutProcessor(500).panel_width == 500


def test_initial_size_is_margin():
    assert LayoutProcessor(300).size() == (H_SPACING, V_SPACING)


def test_first_component_below_its_label():
    layout = LayoutProcessor(300)
    component = Component(width=30, height=20)
    layout.insert(component, 7)
    assert (component.x, component.y) == (H_SPACING, V_SPACING + 7)


def test_components_share_a_row_when_they_fit():
    layout = LayoutProcessor(1000)
    first, second = Component(width=30, height=20), Component(width=40, height=20)
    layout.insert(first, 5)
    layout.insert(second, 5)
    assert second.y == first.y
    assert second.x >= first.right + H_SPACING


def test_wraps_to_new_row():
    layout = LayoutProcessor(100)
    first, second = Component(width=60, height=20), Component(width=60, height=20)
    layout.insert(first, 5)
    layout.insert(second, 5)
    assert second.x == H_SPACING
    assert second.y > first.bottom


def test_size_covers_every_component():
    layout = LayoutProcessor(150)
    components = [Component(width=w, height=h) for w, h in [(30, 20), (50, 10), (70, 40), (20, 20)]]
    for component in components:
        layout.insert(component, LABEL_HEIGHT)
    width, height = layout.size()
    for component in components:
        assert component.right <= width
        assert component.bottom <= height
    for i, a in enumerate(components):
        for b in components[i + 1:]:
            assert not _overlap(a, b)


def test_reset_starts_again():
    layout = LayoutProcessor(150)
    layout.insert(Component(width=50, height=50), 5)
    layout.reset()
    assert layout.size() == (H_SPACING, V_SPACING)
    again = Component(width=10, height=10)
    layout.insert(again, 0)
    assert (again.x, again.y) == (H_SPACING, V_SPACING)


@pytest.mark.parametrize(
    "widget_type, expected",
    [
        (WidgetType.ROTARY, (2 * WIDGET_UNIT, 2 * WIDGET_UNIT + VALUE_HEIGHT)),
        (WidgetType.TOGGLE, (WIDGET_UNIT, WIDGET_UNIT)),
        (WidgetType.SELECT, (2 * WIDGET_UNIT, VALUE_HEIGHT)),
    ],
)
def test_insert_widget_sizes_by_type(widget_type, expected):
    widget = Widget(widget_type, "P|W")
    LayoutProcessor(400).insert_widget(widget)
    assert (widget.component.width, widget.component.height) == expected
    assert widget.component.y == V_SPACING + widget.label_height


def test_rotary_gets_text_box_below():
    widget = Widget(WidgetType.ROTARY, "P|W")
    LayoutProcessor(400).insert_widget(widget)
    assert widget.text_box == (2 * WIDGET_UNIT, VALUE_HEIGHT)


def test_toggle_has_no_text_box():
    widget = Widget(WidgetType.TOGGLE, "P|W")
    LayoutProcessor(400).insert_widget(widget)
    assert widget.text_box is None