"""
Autocomplete suggestion list attached to a text input.

The list is rebuilt on every ``input`` event from the candidates that contain
the typed text, best matches first, and supports keyboard navigation from
either the input or the list itself.
"""

from typing import Callable, List, Optional, Sequence, Tuple

from pyuca import Collator

from modcatalog.ui.dom import Element, Event, KeyboardEvent

MAX_SUGGESTIONS = 100


# Unicode Collation Algorithm with the default table, locale independent
_collator = Collator()


def _collation_key(text: str) -> Tuple[Tuple[int, ...], str]:
    return (_collator.sort_key(text), text)


def rank_candidates(
    query: str, candidates: Sequence[str], limit: int = MAX_SUGGESTIONS
) -> List[str]:
    """
    Filter and order candidates for a query.

    Matching is a case-insensitive substring test. Prefix matches come
    first, then earlier occurrences, then locale collation order.
    """
    needle = query.lower()
    matches = [candidate for candidate in candidates if needle in candidate.lower()]
    matches.sort(
        key=lambda candidate: (
            not candidate.lower().startswith(needle),
            candidate.lower().index(needle),
            _collation_key(candidate),
        )
    )
    return matches[:limit]


class Autocomplete:
    def __init__(
        self,
        input: Element,
        candidates: Sequence[str],
        on_select: Callable[[str], None],
    ) -> None:
        self.input = input
        self.candidates = list(candidates)
        self.on_select = on_select
        self.document = input.owner_document
        self.list = self.document.create_element("ul", {"class": "menu autocomplete"})
        self._resize_listener = self._on_resize

        input.add_event_listener("input", self._on_input)
        input.add_event_listener("keydown", self._on_keydown)
        self.list.add_event_listener("keydown", self._on_keydown)
        self.document.window.add_event_listener("resize", self._resize_listener)
        self.hide()

    @property
    def visible(self) -> bool:
        return self.list.style.get("display") != "none"

    def show(self) -> None:
        self.list.style.pop("display", None)
        self.position()

    def hide(self) -> None:
        self.list.style["display"] = "none"

    def position(self) -> None:
        self.list.style["width"] = f"{self.input.client_width}px"
        self.list.style["left"] = f"{self.input.offset_left}px"
        self.list.style["top"] = f"{self.input.offset_top + self.input.client_height}px"

    def select(self, value: str) -> None:
        self.on_select(value)
        self.hide()

    def _on_resize(self, _event: Event) -> None:
        if not self.list.is_connected:
            self.document.window.remove_event_listener("resize", self._resize_listener)
            return
        self.position()

    def _on_input(self, _event: Event) -> None:
        query = self.input.value
        if not query:
            self.hide()
            return

        self.list.clear_children()
        suggestions = rank_candidates(query, self.candidates)
        if not suggestions:
            self.hide()
            return

        for suggestion in suggestions:
            self.list.append_child(self._build_item(suggestion))
        self.show()

    def _build_item(self, suggestion: str) -> Element:
        item = self.document.create_element("li", {"class": "menu-item"})
        item.append_child(self.document.create_element("a", {"href": "#"}, suggestion))

        def on_click(event: Event) -> None:
            event.prevent_default()
            self.select(suggestion)

        item.add_event_listener("click", on_click)
        return item

    def _focused_link(self) -> Optional[Element]:
        current = self.document.active_element
        if current is None or not self.list.contains(current):
            return None
        if current.tag != "a":
            return current.query_selector("a")
        return current

    def _on_keydown(self, event: KeyboardEvent) -> None:
        if not self.visible or not self.list.children:
            return

        current = self._focused_link()
        forward = event.key == "ArrowDown" or (event.key == "Tab" and not event.shift_key)
        backward = event.key == "ArrowUp" or (event.key == "Tab" and event.shift_key)

        if forward:
            event.prevent_default()
            if current is None:
                target = self.list.element_children[0]
            else:
                target = current.parent.next_element_sibling
            if target is not None:
                target.query_selector("a").focus()
        elif backward:
            event.prevent_default()
            if current is None:
                target = self.list.element_children[-1]
            else:
                target = current.parent.previous_element_sibling
            if target is not None:
                target.query_selector("a").focus()
        elif event.key == "Enter":
            event.prevent_default()
            if current is not None:
                self.select(current.text_content)


def create_autocomplete(
    input: Element, candidates: Sequence[str], on_select: Callable[[str], None]
) -> Element:
    """Attach an autocomplete list to ``input`` and return the list element."""
    return Autocomplete(input, candidates, on_select).list


__all__ = ["Autocomplete", "MAX_SUGGESTIONS", "create_autocomplete", "rank_candidates"]
