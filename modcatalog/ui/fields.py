"""
Field renderer.

``render_field`` turns a ``FieldDefinition`` into a labelled form group and
wires its controls to two host callables: ``get_initial(key)`` returns the
stored value or ``UNSET``; ``set_value(key, value)`` receives edits, with
``None`` meaning "unset / use the default".
"""

import math
from typing import Any, Callable, Dict, List, Mapping, Optional

from modcatalog.core.logger import get_logger
from modcatalog.ui.autocomplete import create_autocomplete
from modcatalog.ui.definitions import UNSET, FieldDefinition
from modcatalog.ui.dom import Document, Element

logger = get_logger(__name__)

Getter = Callable[[str], Any]
Setter = Callable[[str, Any], None]

INVALID_DEFINITION_MESSAGE = "Error in definition! Report this to the developer."

ICON_KINDS = (("item", "Item"), ("texture", "Texture"))


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def parse_number(raw: str) -> Optional[float]:
    """Parse numeric input; empty, unparsable and zero all read as ``None``."""
    try:
        number = float(raw.strip() or "0")
    except ValueError:
        return None
    if math.isnan(number) or number == 0:
        return None
    if number.is_integer():
        return int(number)
    return number


def _text_handler(definition: FieldDefinition, control: Element, set_value: Setter, numeric: bool):
    default = None if definition.default is None else _as_text(definition.default)

    def on_input(_event) -> None:
        value = control.value
        if value and value != default:
            set_value(definition.key, parse_number(value) if numeric else value)
        else:
            set_value(definition.key, None)

    return on_input


def _seed_text(definition: FieldDefinition, control: Element, initial: Any) -> None:
    if initial is not UNSET:
        control.value = initial
    elif definition.default is not None:
        control.value = _as_text(definition.default)


def _select(document: Document, name: str, options, class_name: str = "form-select") -> Element:
    select = document.create_element("select", {"class": class_name, "name": name})
    for value, label in options:
        select.append_child(document.create_element("option", {"value": value}, label))
    return select


def _render_input(
    definition: FieldDefinition, get_initial: Getter, set_value: Setter, document: Document
) -> List[Element]:
    control = document.create_element(
        "input", {"class": "form-input", "type": "text", "name": definition.key}
    )
    control.add_event_listener(
        "input", _text_handler(definition, control, set_value, definition.is_number)
    )
    _seed_text(definition, control, get_initial(definition.key))

    controls = [control]
    if definition.autocomplete:

        def on_select(value: str) -> None:
            control.value = value
            set_value(definition.key, value)

        controls.append(create_autocomplete(control, definition.autocomplete, on_select))
    return controls


def _render_textarea(
    definition: FieldDefinition, get_initial: Getter, set_value: Setter, document: Document
) -> List[Element]:
    control = document.create_element(
        "textarea", {"class": "form-input", "name": definition.key, "rows": 6}
    )
    control.add_event_listener("input", _text_handler(definition, control, set_value, False))
    _seed_text(definition, control, get_initial(definition.key))
    return [control]


def _render_select(
    definition: FieldDefinition, get_initial: Getter, set_value: Setter, document: Document
) -> List[Element]:
    options = [(option, option) for option in definition.options or []]
    select = _select(document, definition.key, options)
    select.add_event_listener("change", lambda _event: set_value(definition.key, select.value))

    initial = get_initial(definition.key)
    if initial is not UNSET:
        select.value = _as_text(initial)
        set_value(definition.key, initial)
    return [select]


def _render_boolean(
    definition: FieldDefinition, get_initial: Getter, set_value: Setter, document: Document
) -> List[Element]:
    select = _select(document, definition.key, (("true", "True"), ("false", "False")))
    select.add_event_listener(
        "change", lambda _event: set_value(definition.key, select.value == "true")
    )

    initial = get_initial(definition.key)
    if initial is not UNSET:
        select.value = _as_text(initial)
        set_value(definition.key, initial == "true" or initial is True)
    return [select]


def _render_icon(
    definition: FieldDefinition, get_initial: Getter, set_value: Setter, document: Document
) -> List[Element]:
    text = document.create_element(
        "input", {"class": "form-input", "type": "text", "name": definition.key}
    )
    kind = _select(document, f"{definition.key}__kind", ICON_KINDS)
    kind.style["flex-grow"] = "unset"

    def on_text(_event) -> None:
        if not text.value:
            set_value(definition.key, None)
        elif kind.value in ("item", "texture"):
            set_value(definition.key, {kind.value: text.value})

    def on_kind(_event) -> None:
        if text.value:
            set_value(definition.key, {kind.value: text.value})

    text.add_event_listener("input", on_text)
    kind.add_event_listener("change", on_kind)

    initial = get_initial(definition.key)
    if isinstance(initial, Mapping):
        for key, _label in ICON_KINDS:
            if key in initial:
                text.value = initial[key]
                kind.value = key
    return [text, kind]


def _render_invalid(definition: FieldDefinition, document: Document) -> List[Element]:
    control = document.create_element(
        "input", {"class": "form-input", "type": "text", "disabled": True}
    )
    control.value = INVALID_DEFINITION_MESSAGE
    return [control]


_RENDERERS: Dict[str, Callable[..., List[Element]]] = {
    "input": _render_input,
    "select": _render_select,
    "icon": _render_icon,
    "boolean": _render_boolean,
    "textarea": _render_textarea,
}


def _tooltip(definition: FieldDefinition, document: Document) -> Element:
    return document.create_element(
        "div",
        {"class": "input-group-addon popover popover-right"},
        document.create_element("div", {"class": "noselect"}, "?"),
        document.create_element(
            "div",
            {"class": "popover-container card p-0"},
            document.create_element(
                "div", {"class": "card-body ws-collapse"}, definition.description
            ),
        ),
    )


def render_field(
    definition: FieldDefinition,
    get_initial: Getter,
    set_value: Setter,
    document: Optional[Document] = None,
) -> Element:
    """Build the form group for one field definition."""
    document = document or Document()

    renderer = _RENDERERS.get(definition.type)
    if renderer is None:
        logger.warning("Unknown field type %r for key %r", definition.type, definition.key)
        controls = _render_invalid(definition, document)
    else:
        controls = renderer(definition, get_initial, set_value, document)

    group = document.create_element(
        "div",
        {"class": "input-group"},
        document.create_element(
            "span", {"class": "input-group-addon min-w-5em text-right"}, definition.name
        ),
    )
    for control in controls:
        group.append_child(control)
    group.append_child(_tooltip(definition, document))

    return document.create_element("div", {"class": "form-group"}, group)


__all__ = ["INVALID_DEFINITION_MESSAGE", "parse_number", "render_field"]
