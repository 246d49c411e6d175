"""Form building: component tree, field renderer and autocomplete widget."""

from modcatalog.ui.autocomplete import Autocomplete, create_autocomplete, rank_candidates
from modcatalog.ui.definitions import (
    MOD_FIELDS,
    UNSET,
    VERSION_FIELDS,
    FieldDefinition,
)
from modcatalog.ui.dom import Document, Element, Event, KeyboardEvent, Window
from modcatalog.ui.fields import INVALID_DEFINITION_MESSAGE, parse_number, render_field
from modcatalog.ui.form import FormController

__all__ = [
    "Autocomplete",
    "Document",
    "Element",
    "Event",
    "FieldDefinition",
    "FormController",
    "INVALID_DEFINITION_MESSAGE",
    "KeyboardEvent",
    "MOD_FIELDS",
    "UNSET",
    "VERSION_FIELDS",
    "Window",
    "create_autocomplete",
    "parse_number",
    "rank_candidates",
    "render_field",
]
