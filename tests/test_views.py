# tests/test_views.py
import pytest

from randints.core.state import AppState
from randints.core.viewmodel import StreamViewModel
from randints.themes import ThemeManager, THEMES
from randints.ui_ptk.status import status_line
from randints.ui_ptk.views import circle_glyph, circle_art, format_history, number_fragments, log_fragments


@pytest.mark.parametrize("value, glyph", [
    (0, "⓪"), (1, "①"), (20, "⑳"), (21, "㉑"), (35, "㉟"), (36, "㊱"), (50, "㊿"),
    (51, "(51)"), (-3, "(-3)"),
])
def test_circle_glyph(value, glyph):
    assert circle_glyph(value) == glyph


def test_circle_art_is_centered_on_the_number():
    lines = circle_art(42)
    assert len(lines) == 5
    assert "42" in lines[2]
    assert lines[2].startswith("|") and lines[2].endswith("|")
    assert len(lines[1]) == len(lines[2]) == len(lines[3])


def test_number_fragments_follow_state():
    state = AppState()
    state.set_current(7)
    text = "".join(t for _, t in number_fragments(state))
    assert "⑦" in text
    assert "7" in text


def test_history_and_log_formatting():
    assert format_history([]) == "-"
    assert format_history([1, 2]) == "① ②"
    state = AppState()
    state.log.clear()
    assert "Log empty" in log_fragments(state)[0][1]


def test_status_line():
    state = AppState()
    vm = StreamViewModel(min_value=1, max_value=50)
    assert status_line(state, vm, "Mono") == "Source: stream   Range: 1..50   Draws: 0   Theme: Mono"


def test_theme_cycling():
    tm = ThemeManager("does-not-exist")
    assert tm.name == list(THEMES)[0]
    seen = {tm.cycle_next() for _ in range(len(THEMES))}
    assert seen == set(THEMES)
    assert tm.style is not None
