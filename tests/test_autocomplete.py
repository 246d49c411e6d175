from modcatalog.ui.autocomplete import MAX_SUGGESTIONS, create_autocomplete, rank_candidates
from modcatalog.ui.dom import Document, Event, KeyboardEvent


def build_widget(candidates, selected=None):
    document = Document()
    text = document.create_element("input", {"type": "text"})
    document.body.append_child(text)
    picks = [] if selected is None else selected
    suggestions = create_autocomplete(text, candidates, picks.append)
    document.body.append_child(suggestions)
    return document, text, suggestions, picks


def type_text(text, value):
    text.value = value
    text.dispatch_event(Event("input"))


def press(target, key, shift=False):
    event = KeyboardEvent("keydown", key, shift_key=shift)
    target.dispatch_event(event)
    return event


def suggestion_texts(suggestions):
    return [item.text_content for item in suggestions.element_children]


def test_rank_candidates_prefers_prefix_then_position_then_collation():
    candidates = ["Stone", "Cobblestone", "sandstone", "Stone Bricks", "Dirt"]

    assert rank_candidates("sto", candidates) == [
        "Stone",
        "Stone Bricks",
        "sandstone",
        "Cobblestone",
    ]


def test_rank_candidates_orders_prefix_matches_before_inner_matches():
    assert rank_candidates("ab", ["cab", "abacus", "crab"]) == ["abacus", "cab", "crab"]


def test_rank_candidates_breaks_ties_by_unicode_collation():
    assert rank_candidates("x", ["zx", "\u00e9x"]) == ["\u00e9x", "zx"]
    assert rank_candidates("b", ["Ab", "ab"]) == ["ab", "Ab"]


def test_rank_candidates_is_case_insensitive():
    assert rank_candidates("DIRT", ["dirt", "Coarse Dirt", "Dirt Path"]) == [
        "dirt",
        "Dirt Path",
        "Coarse Dirt",
    ]


def test_rank_candidates_truncates_to_limit():
    candidates = [f"item{i}" for i in range(150)]
    assert len(rank_candidates("item", candidates)) == MAX_SUGGESTIONS


def test_list_hidden_until_input_matches():
    _, text, suggestions, _ = build_widget(["alpha", "beta"])
    assert suggestions.style["display"] == "none"

    type_text(text, "zzz")
    assert suggestions.style["display"] == "none"

    type_text(text, "al")
    assert "display" not in suggestions.style
    assert suggestion_texts(suggestions) == ["alpha"]

    type_text(text, "")
    assert suggestions.style["display"] == "none"


def test_list_is_rebuilt_on_every_input():
    _, text, suggestions, _ = build_widget(["alpha", "alpine", "beta"])

    type_text(text, "al")
    assert suggestion_texts(suggestions) == ["alpha", "alpine"]

    type_text(text, "alpi")
    assert suggestion_texts(suggestions) == ["alpine"]


def test_list_positioned_below_input():
    _, text, suggestions, _ = build_widget(["alpha"])
    text.client_width = 200
    text.client_height = 30
    text.offset_left = 10
    text.offset_top = 20

    type_text(text, "a")

    assert suggestions.style["width"] == "200px"
    assert suggestions.style["left"] == "10px"
    assert suggestions.style["top"] == "50px"


def test_arrow_down_walks_forward_without_wrapping():
    document, text, suggestions, selected = build_widget(["alpha", "alpine", "alps"])
    type_text(text, "al")

    event = press(text, "ArrowDown")
    assert event.default_prevented
    assert document.active_element.text_content == "alpha"

    press(text, "ArrowDown")
    press(text, "ArrowDown")
    assert document.active_element.text_content == "alps"

    press(text, "ArrowDown")
    assert document.active_element.text_content == "alps"

    event = press(document.active_element, "Enter")
    assert event.default_prevented
    assert selected == ["alps"]
    assert suggestions.style["display"] == "none"


def test_arrow_up_and_shift_tab_walk_backward():
    document, text, _, _ = build_widget(["alpha", "alpine", "alps"])
    type_text(text, "al")

    press(text, "ArrowUp")
    assert document.active_element.text_content == "alps"

    press(document.active_element, "Tab", shift=True)
    assert document.active_element.text_content == "alpine"

    press(document.active_element, "Tab")
    assert document.active_element.text_content == "alps"

    press(document.active_element, "ArrowUp")
    press(document.active_element, "ArrowUp")
    press(document.active_element, "ArrowUp")
    assert document.active_element.text_content == "alpha"


def test_enter_without_focused_item_selects_nothing():
    _, text, suggestions, selected = build_widget(["alpha"])
    type_text(text, "a")

    event = press(text, "Enter")

    assert event.default_prevented
    assert selected == []
    assert "display" not in suggestions.style


def test_keys_ignored_while_hidden():
    _, text, _, _ = build_widget(["alpha"])

    event = press(text, "ArrowDown")

    assert not event.default_prevented


def test_click_selects_suggestion_without_touching_input():
    _, text, suggestions, selected = build_widget(["alpha", "alpine"])
    type_text(text, "alp")

    link = suggestions.element_children[1].query_selector("a")
    event = Event("click")
    link.dispatch_event(event)

    assert event.default_prevented
    assert selected == ["alpine"]
    assert text.value == "alp"
    assert suggestions.style["display"] == "none"


def test_resize_listener_removed_once_list_is_disconnected():
    document, text, suggestions, _ = build_widget(["alpha"])
    window = document.window
    type_text(text, "a")

    text.client_width = 320
    window.dispatch_event(Event("resize"))
    assert suggestions.style["width"] == "320px"
    assert window.listener_count("resize") == 1

    suggestions.remove()
    window.dispatch_event(Event("resize"))
    assert window.listener_count("resize") == 0
