"""Form controller: hosts rendered fields over an in-memory value mapping."""

from typing import Any, Dict, Iterable, Mapping, Optional

from markupsafe import Markup

from modcatalog.ui.definitions import UNSET, FieldDefinition
from modcatalog.ui.dom import Document, Element, Event
from modcatalog.ui.fields import render_field


class FormController:
    """
    Owns the values behind a set of fields.

    ``values`` holds the current stored value per key; ``changes`` records
    what the controls reported since construction. Load-time normalization
    (select and boolean fields re-submit their initial value) lands in
    ``values`` but not in ``changes``.
    """

    def __init__(
        self,
        definitions: Iterable[FieldDefinition],
        initial: Optional[Mapping[str, Any]] = None,
        document: Optional[Document] = None,
        action: str = "",
        form_id: Optional[str] = None,
    ) -> None:
        self.definitions = list(definitions)
        self.document = document or Document()
        self.values: Dict[str, Any] = {
            key: value for key, value in (initial or {}).items() if value is not None
        }
        self.changes: Dict[str, Any] = {}

        self.form = self.document.create_element(
            "form",
            {"id": form_id, "class": "form-horizontal", "method": "post", "action": action},
        )
        self.document.body.append_child(self.form)
        self.fields: Dict[str, Element] = {}
        for definition in self.definitions:
            field = render_field(definition, self.get_initial, self.set_value, self.document)
            self.form.append_child(field)
            self.fields[definition.key] = field
        self.changes.clear()

    def get_initial(self, key: str) -> Any:
        return self.values.get(key, UNSET)

    def set_value(self, key: str, value: Any) -> None:
        self.changes[key] = value
        if value is None:
            self.values.pop(key, None)
        else:
            self.values[key] = value

    def submit(self, form_data: Mapping[str, str]) -> Dict[str, Any]:
        """
        Replay posted form values through the controls.

        Each named control whose posted value differs from its current one
        is updated and receives the event a browser would fire, so the
        field's own handlers decide what reaches ``set_value``. Returns the
        changes collected by the replay.
        """
        self.changes.clear()
        for definition in self.definitions:
            controls = [
                element
                for element in self.fields[definition.key].iter_descendants()
                if element.attributes.get("name") is not None
            ]
            # Selects first: a kind switch must land before the text it labels
            controls.sort(key=lambda element: element.tag != "select")
            for control in controls:
                name = control.attributes["name"]
                if name not in form_data or control.disabled:
                    continue
                posted = form_data[name]
                if posted == control.value:
                    continue
                control.value = posted
                control.dispatch_event(Event("change" if control.tag == "select" else "input"))
        return dict(self.changes)

    def to_html(self) -> Markup:
        return self.form.to_html()

    def __html__(self) -> str:
        return self.to_html()


__all__ = ["FormController"]
