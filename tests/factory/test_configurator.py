import pytest

from objconf.errors import ClassResolutionError, UnknownPropertyError, UnsupportedHostError
from objconf.factory import BehaviorHost, EventHost, configure
from sample_components import PlainWidget, SingleSlot, SlottedPoint, Tooltip, Widget, on_click


def test_properties_are_assigned(widget):
    result = configure(widget, {"label": "OK", "width": 80})
    assert result is widget
    assert widget.label == "OK"
    assert widget.width == 80


def test_unknown_property_in_strict_mode(widget):
    with pytest.raises(UnknownPropertyError) as exc_info:
        configure(widget, {"colour": "red"})
    assert exc_info.value.name == "colour"
    assert exc_info.value.obj_type == "Widget"


def test_unknown_property_allowed_when_not_strict(widget):
    configure(widget, {"colour": "red"}, strict=False)
    assert widget.colour == "red"


def test_declared_slots_count_as_properties():
    point = configure(SlottedPoint(), {"x": 1, "y": 2})
    assert (point.x, point.y) == (1, 2)


def test_class_key_is_ignored(widget):
    configure(widget, {"class": "sample_components.PlainWidget", "label": "OK"})
    assert type(widget) is Widget
    assert widget.label == "OK"


def test_event_handler_from_dotted_path(widget):
    configure(widget, {"on click": "sample_components.on_click"})
    assert widget.handlers == {"click": [on_click]}


def test_event_handler_callable(widget):
    handler = lambda event: None  # noqa: E731
    configure(widget, {"on  submit ": handler})
    assert widget.handlers["submit"] == [handler]


def test_event_handler_must_resolve(widget):
    with pytest.raises(ClassResolutionError):
        configure(widget, {"on click": "sample_components.NOT_CALLABLE"})


def test_behavior_from_nested_record(widget):
    configure(widget, {"as tooltip": {"class": "sample_components.Tooltip", "text": "Send"}})
    tooltip = widget.behaviors["tooltip"]
    assert isinstance(tooltip, Tooltip)
    assert tooltip.text == "Send"
    assert tooltip.owner is widget


def test_behavior_from_class_name(widget, resolver):
    configure(widget, {"as tooltip": "tooltip"}, resolver=resolver)
    assert isinstance(widget.behaviors["tooltip"], Tooltip)


def test_behavior_instance_is_attached_as_is(widget):
    tooltip = Tooltip()
    configure(widget, {"as tooltip": tooltip})
    assert widget.behaviors["tooltip"] is tooltip


def test_events_need_an_event_host():
    with pytest.raises(UnsupportedHostError) as exc_info:
        configure(PlainWidget(), {"on click": on_click})
    assert exc_info.value.name == "click"


def test_behaviors_need_a_behavior_host():
    with pytest.raises(UnsupportedHostError):
        configure(PlainWidget(), {"as tooltip": {"class": "sample_components.Tooltip"}})


def test_nested_record_property_is_instantiated(widget):
    configure(widget, {"child": {"class": "sample_components.Widget", "label": "inner"}})
    assert isinstance(widget.child, Widget)
    assert widget.child.label == "inner"


def test_nested_record_property_left_alone_when_disabled(widget):
    nested = {"class": "sample_components.Widget", "label": "inner"}
    configure(widget, {"child": nested}, instantiate_nested=False)
    assert widget.child is nested


def test_plain_mapping_property_is_not_instantiated(widget):
    configure(widget, {"child": {"label": "inner"}})
    assert widget.child == {"label": "inner"}


def test_entries_apply_in_record_order():
    calls = []

    class Recorder(Widget):
        def __setattr__(self, name, value):
            calls.append(("set", name))
            super().__setattr__(name, value)

        def on(self, name, handler):
            calls.append(("on", name))

        def attach_behavior(self, name, behavior):
            calls.append(("as", name))

    obj = Recorder()
    calls.clear()
    configure(obj, {"as tip": Tooltip(), "label": "x", "on click": on_click, "width": 3})
    assert calls == [("as", "tip"), ("set", "label"), ("on", "click"), ("set", "width")]


def test_host_protocols():
    assert isinstance(Widget(), EventHost)
    assert isinstance(Widget(), BehaviorHost)
    assert not isinstance(PlainWidget(), EventHost)


def test_single_string_slot_is_one_name():
    holder = configure(SingleSlot(), {"value": 1})
    assert holder.value == 1
    with pytest.raises(UnknownPropertyError):
        configure(SingleSlot(), {"val": 1})
