"""
Component tree for server-side form building.

A deliberately small element model: enough structure for the field renderer
and autocomplete widget to wire listeners, track focus and visibility, and
serialize to HTML for Jinja2 pages. Layout is not computed here; hosts that
know the real box geometry set ``client_width``/``offset_left``/... on the
elements themselves.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Union

from markupsafe import Markup, escape

Listener = Callable[["Event"], None]

VOID_TAGS = frozenset({"input", "br", "hr", "img", "meta", "link"})


class Event:
    """A dispatched event. Bubbles from the target up through its ancestors."""

    def __init__(self, type: str) -> None:
        self.type = type
        self.target: Optional["Element"] = None
        self.current_target: Optional["Element"] = None
        self.default_prevented = False

    def prevent_default(self) -> None:
        self.default_prevented = True


class KeyboardEvent(Event):
    def __init__(self, type: str, key: str, shift_key: bool = False) -> None:
        super().__init__(type)
        self.key = key
        self.shift_key = shift_key


class EventTarget:
    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = {}

    def add_event_listener(self, type: str, listener: Listener) -> None:
        self._listeners.setdefault(type, []).append(listener)

    def remove_event_listener(self, type: str, listener: Listener) -> None:
        listeners = self._listeners.get(type, [])
        if listener in listeners:
            listeners.remove(listener)

    def listener_count(self, type: str) -> int:
        return len(self._listeners.get(type, []))

    def _invoke(self, event: Event) -> None:
        # Copy: listeners may remove themselves while running
        for listener in list(self._listeners.get(event.type, [])):
            listener(event)


class Window(EventTarget):
    """Holds window-level listeners such as ``resize``."""

    def dispatch_event(self, event: Event) -> bool:
        self._invoke(event)
        return not event.default_prevented


class Text:
    """A text node."""

    def __init__(self, data: str) -> None:
        self.data = data
        self.parent: Optional["Element"] = None

    @property
    def text_content(self) -> str:
        return self.data

    def to_html(self) -> Markup:
        return escape(self.data)


Node = Union["Element", Text]


class Element(EventTarget):
    """An element with attributes, inline style, children and listeners."""

    def __init__(
        self,
        tag: str,
        document: "Document",
        attributes: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__()
        self.tag = tag
        self.owner_document = document
        self.attributes: Dict[str, Any] = dict(attributes or {})
        self.style: Dict[str, str] = {}
        self.children: List[Node] = []
        self.parent: Optional["Element"] = None
        self._value = ""
        self._selected_index = -1
        # Box geometry, supplied by whoever knows the real layout
        self.client_width = 0
        self.client_height = 0
        self.offset_left = 0
        self.offset_top = 0

    # Tree

    def append_child(self, child: Union[Node, str]) -> Node:
        if isinstance(child, str):
            child = Text(child)
        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.append(child)
        if isinstance(child, Element) and child.tag == "option" and self._selected_index < 0:
            self._selected_index = 0
        return child

    def remove(self) -> None:
        if self.parent is not None:
            self.parent.children.remove(self)
            self.parent = None

    def clear_children(self) -> None:
        for child in self.children:
            child.parent = None
        self.children = []
        if self.tag == "select":
            self._selected_index = -1

    @property
    def element_children(self) -> List["Element"]:
        return [child for child in self.children if isinstance(child, Element)]

    def _sibling(self, offset: int) -> Optional["Element"]:
        if self.parent is None:
            return None
        siblings = self.parent.element_children
        index = siblings.index(self) + offset
        if 0 <= index < len(siblings):
            return siblings[index]
        return None

    @property
    def next_element_sibling(self) -> Optional["Element"]:
        return self._sibling(1)

    @property
    def previous_element_sibling(self) -> Optional["Element"]:
        return self._sibling(-1)

    def iter_descendants(self) -> Iterator["Element"]:
        for child in self.element_children:
            yield child
            yield from child.iter_descendants()

    def query_selector(self, tag: str) -> Optional["Element"]:
        """First descendant with the given tag name."""
        return next((el for el in self.iter_descendants() if el.tag == tag), None)

    def contains(self, other: Optional[Node]) -> bool:
        node = other
        while node is not None:
            if node is self:
                return True
            node = node.parent
        return False

    @property
    def is_connected(self) -> bool:
        return self.owner_document.body.contains(self)

    @property
    def text_content(self) -> str:
        return "".join(child.text_content for child in self.children)

    # Form control state

    @property
    def options(self) -> List["Element"]:
        return [el for el in self.element_children if el.tag == "option"]

    @property
    def value(self) -> str:
        if self.tag == "select":
            options = self.options
            if 0 <= self._selected_index < len(options):
                return options[self._selected_index].value
            return ""
        if self.tag == "option":
            return str(self.attributes.get("value", self.text_content))
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        text = "" if value is None else str(value)
        if self.tag == "select":
            values = [option.value for option in self.options]
            self._selected_index = values.index(text) if text in values else -1
        else:
            self._value = text

    @property
    def disabled(self) -> bool:
        return bool(self.attributes.get("disabled"))

    # Focus and events

    def focus(self) -> None:
        self.owner_document.active_element = self

    def dispatch_event(self, event: Event) -> bool:
        event.target = self
        node: Optional[Element] = self
        while node is not None:
            event.current_target = node
            node._invoke(event)
            node = node.parent
        return not event.default_prevented

    # Serialization

    def _attribute_html(self, selected: bool = False) -> str:
        attributes: Dict[str, Any] = {"selected": True} if selected else {}
        attributes.update(self.attributes)
        if self.tag == "input" and self._value:
            attributes["value"] = self._value
        if self.style:
            attributes["style"] = "; ".join(f"{k}: {v}" for k, v in self.style.items())
        parts = []
        for name, value in attributes.items():
            if value is True:
                parts.append(f" {name}")
            elif value is False or value is None:
                continue
            else:
                parts.append(f' {name}="{escape(value)}"')
        return "".join(parts)

    def to_html(self, selected: bool = False) -> Markup:
        attrs = self._attribute_html(selected)
        if self.tag in VOID_TAGS:
            return Markup(f"<{self.tag}{attrs}>")

        if self.tag == "textarea":
            inner: str = escape(self._value)
        elif self.tag == "select":
            options = self.options
            inner = "".join(
                child.to_html(selected=options.index(child) == self._selected_index)
                if isinstance(child, Element) and child.tag == "option"
                else child.to_html()
                for child in self.children
            )
        else:
            inner = "".join(child.to_html() for child in self.children)
        return Markup(f"<{self.tag}{attrs}>{inner}</{self.tag}>")

    def __html__(self) -> str:
        return self.to_html()

    def __repr__(self) -> str:
        return f"<Element {self.tag} {self.attributes!r}>"


class Document:
    """Owns the element tree root, the focused element and the window."""

    def __init__(self, window: Optional[Window] = None) -> None:
        self.window = window or Window()
        self.active_element: Optional[Element] = None
        self.body = Element("body", self)

    def create_element(
        self, tag: str, attributes: Optional[Dict[str, Any]] = None, *children: Union[Node, str]
    ) -> Element:
        element = Element(tag, self, attributes)
        for child in children:
            element.append_child(child)
        return element


__all__ = [
    "Document",
    "Element",
    "Event",
    "KeyboardEvent",
    "Text",
    "Window",
]
