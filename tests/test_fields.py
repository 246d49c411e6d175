import pytest

from modcatalog.ui.definitions import UNSET, FieldDefinition
from modcatalog.ui.dom import Document, Event
from modcatalog.ui.fields import INVALID_DEFINITION_MESSAGE, parse_number, render_field


class Host:
    """Minimal getter/setter pair recording every setter call."""

    def __init__(self, **stored):
        self.stored = stored
        self.calls = []

    def get(self, key):
        return self.stored.get(key, UNSET)

    def set(self, key, value):
        self.calls.append((key, value))


def render(host, **definition):
    definition.setdefault("key", "value")
    definition.setdefault("name", "Value")
    definition.setdefault("description", "Help text")
    return render_field(FieldDefinition(**definition), host.get, host.set, Document())


def controls(field):
    return [
        element
        for element in field.iter_descendants()
        if element.tag in ("input", "select", "textarea")
    ]


def edit(control, value):
    control.value = value
    control.dispatch_event(Event("change" if control.tag == "select" else "input"))


def test_input_reports_raw_text():
    host = Host()
    (text,) = controls(render(host, type="input"))

    edit(text, "hello")

    assert host.calls == [("value", "hello")]


def test_input_reports_none_for_empty_or_default():
    host = Host()
    (text,) = controls(render(host, type="input", default="stone"))

    edit(text, "stone")
    edit(text, "")

    assert host.calls == [("value", None), ("value", None)]


def test_input_seeds_stored_value_then_default():
    host = Host(value="stored")
    (text,) = controls(render(host, type="input", default="fallback"))
    assert text.value == "stored"

    (text,) = controls(render(Host(), type="input", default="fallback"))
    assert text.value == "fallback"


@pytest.mark.parametrize(
    "raw, expected",
    [("42", 42), ("2.5", 2.5), (" 7 ", 7), ("abc", None), ("0", None), ("", None)],
)
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


def test_numeric_input_coerces():
    host = Host()
    (text,) = controls(render(host, type="input", isNumber=True))

    edit(text, "12")
    edit(text, "twelve")

    assert host.calls == [("value", 12), ("value", None)]


def test_textarea_never_coerces_numbers():
    host = Host()
    (area,) = controls(render(host, type="textarea", is_number=True))

    edit(area, "12")

    assert area.tag == "textarea"
    assert host.calls == [("value", "12")]


def test_text_fields_do_not_call_setter_on_load():
    host = Host(value="stored")
    render(host, type="input")
    render(host, type="textarea")
    icon_host = Host(value={"item": "sword"})
    render(icon_host, type="icon")

    assert host.calls == []
    assert icon_host.calls == []


def test_select_applies_and_resubmits_initial_value():
    # Load-time re-submission is a known quirk of select fields
    host = Host(value="fabric")
    (select,) = controls(render(host, type="select", options=["forge", "fabric"]))

    assert select.value == "fabric"
    assert host.calls == [("value", "fabric")]

    edit(select, "forge")
    assert host.calls[-1] == ("value", "forge")


def test_select_without_initial_value_stays_quiet():
    host = Host()
    (select,) = controls(render(host, type="select", options=["forge", "fabric"]))

    assert select.value == "forge"
    assert host.calls == []


def test_boolean_reports_booleans():
    host = Host()
    (select,) = controls(render(host, type="boolean"))

    edit(select, "false")
    edit(select, "true")

    assert host.calls == [("value", False), ("value", True)]


@pytest.mark.parametrize(
    "initial, shown, submitted",
    [("true", "true", True), (True, "true", True), ("false", "false", False), (False, "false", False)],
)
def test_boolean_resubmits_initial_value(initial, shown, submitted):
    # Same load-time quirk as select fields
    host = Host(value=initial)
    (select,) = controls(render(host, type="boolean"))

    assert select.value == shown
    assert host.calls == [("value", submitted)]


def test_icon_seeds_item():
    text, kind = controls(render(Host(value={"item": "sword"}), type="icon"))

    assert text.value == "sword"
    assert kind.value == "item"


def test_icon_seeds_texture():
    text, kind = controls(render(Host(value={"texture": "foo.png"}), type="icon"))

    assert text.value == "foo.png"
    assert kind.value == "texture"


def test_icon_reports_kind_keyed_value_only_for_non_empty_text():
    host = Host()
    text, kind = controls(render(host, type="icon"))

    edit(kind, "texture")
    assert host.calls == []

    edit(text, "foo.png")
    edit(kind, "item")
    edit(text, "")

    assert host.calls == [
        ("value", {"texture": "foo.png"}),
        ("value", {"item": "foo.png"}),
        ("value", None),
    ]


def test_unknown_type_renders_disabled_error_control():
    host = Host(value="anything")
    field = render(host, type="colour-picker")
    (control,) = controls(field)

    assert control.disabled
    assert control.value == INVALID_DEFINITION_MESSAGE
    assert host.calls == []


def test_field_is_labelled_with_tooltip():
    field = render(Host(), type="input", name="Display <name>", description="Shown <b>on</b> hover")
    html = field.to_html()

    assert "Display &lt;name&gt;" in html
    assert "Shown &lt;b&gt;on&lt;/b&gt; hover" in html
    assert "popover" in html


def test_autocomplete_selection_sets_input_and_value():
    host = Host()
    field = render(host, type="input", autocomplete=["1.20.1", "1.19.2"])
    (text,) = controls(field)
    suggestions = field.query_selector("ul")

    edit(text, "1.19")
    host.calls.clear()
    suggestions.element_children[0].dispatch_event(Event("click"))

    assert text.value == "1.19.2"
    assert host.calls == [("value", "1.19.2")]
