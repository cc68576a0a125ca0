import pytest

from objconf.errors import DuplicateKeyError, InvalidKeyError
from objconf.records import ConfigRecord, KeyKind, is_record


@pytest.fixture
def button_record():
    return ConfigRecord.from_mapping({
        "class": "sample_components.Widget",
        "label": "OK",
        "on click": "sample_components.on_click",
        "as tooltip": {"class": "sample_components.Tooltip", "text": "Send"},
        "width": 80,
    })


def test_classified_views(button_record):
    assert button_record.class_name == "sample_components.Widget"
    assert button_record.has_class
    assert button_record.properties == {"label": "OK", "width": 80}
    assert button_record.events == {"click": "sample_components.on_click"}
    assert list(button_record.behaviors) == ["tooltip"]


def test_behavior_values_are_wrapped_as_records(button_record):
    tooltip = button_record.behaviors["tooltip"]
    assert isinstance(tooltip, ConfigRecord)
    assert tooltip.class_name == "sample_components.Tooltip"


def test_entries_keep_source_order_without_class(button_record):
    kinds = [(key.kind, key.name) for key, _ in button_record.entries()]
    assert kinds == [
        (KeyKind.PROPERTY, "label"),
        (KeyKind.EVENT, "click"),
        (KeyKind.BEHAVIOR, "tooltip"),
        (KeyKind.PROPERTY, "width"),
    ]


def test_mapping_protocol(button_record):
    assert len(button_record) == 5
    assert button_record["label"] == "OK"
    assert list(button_record)[0] == "class"
    assert "on click" in button_record


def test_without_class(button_record):
    body = button_record.without_class()
    assert not body.has_class
    assert body.class_name is None
    assert list(body) == ["label", "on click", "as tooltip", "width"]
    assert button_record.has_class


def test_to_dict_unwraps_nested_records(button_record):
    data = button_record.to_dict()
    assert type(data) is dict
    assert type(data["as tooltip"]) is dict
    assert data["as tooltip"]["text"] == "Send"


def test_colliding_keys_are_rejected():
    with pytest.raises(DuplicateKeyError) as exc_info:
        ConfigRecord({"on click": "a.b", "on  click": "c.d"})
    assert exc_info.value.key == "on  click"


def test_same_name_different_kinds_is_allowed():
    record = ConfigRecord({"click": 1, "on click": "a.b", "as click": {"class": "x.Y"}})
    assert record.properties == {"click": 1}
    assert record.events == {"click": "a.b"}


def test_nested_behavior_records_are_validated():
    with pytest.raises(InvalidKeyError):
        ConfigRecord({"as logger": {"class": "x.Y", "on ": "a.b"}})


def test_from_mapping_returns_existing_record(button_record):
    assert ConfigRecord.from_mapping(button_record) is button_record


def test_from_mapping_rejects_non_mapping():
    with pytest.raises(TypeError):
        ConfigRecord.from_mapping(["class", "x.Y"])


def test_is_record():
    assert is_record({})
    assert is_record(ConfigRecord({}))
    assert not is_record("x.Y")
    assert not is_record([{"class": "x.Y"}])
