# randints/ui_ptk/views.py
from typing import List, Tuple
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.containers import Window, WindowAlign
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.layout.margins import ScrollbarMargin

# -------- Formatting ------------------------------------------------------

def circle_glyph(value: int) -> str:
    """Enclosed-number glyph for 0..50, parenthesised digits otherwise."""
    if value == 0:
        return "⓪"
    if 1 <= value <= 20:
        return chr(0x2460 + value - 1)
    if 21 <= value <= 35:
        return chr(0x3251 + value - 21)
    if 36 <= value <= 50:
        return chr(0x32B1 + value - 36)
    return f"({value})"

def circle_art(value: int) -> List[str]:
    text = str(value)
    inner = len(text) + 6
    return [
        "  ." + "-" * (inner - 2) + ".  ",
        " /" + " " * inner + "\\ ",
        "|" + text.center(inner + 2) + "|",
        " \\" + " " * inner + "/ ",
        "  '" + "-" * (inner - 2) + "'  ",
    ]

def format_history(values) -> str:
    return " ".join(circle_glyph(v) for v in values) if values else "-"

# -------- Views -----------------------------------------------------------

def number_fragments(state) -> List[Tuple[str, str]]:
    value = state.current_value
    out: List[Tuple[str, str]] = [("class:number.glyph", f"{circle_glyph(value)}\n\n")]
    for line in circle_art(value):
        out.append(("class:number", line + "\n"))
    return out

def number_view(state) -> Window:
    return Window(
        content=FormattedTextControl(lambda: number_fragments(state)),
        align=WindowAlign.CENTER,
        always_hide_cursor=True,
        height=Dimension(min=7, preferred=9),
    )

def history_view(state) -> Window:
    def _text():
        return [("class:text.muted", " History: "), ("class:history", format_history(state.recent()))]
    return Window(content=FormattedTextControl(_text), height=1, always_hide_cursor=True)

def log_fragments(state) -> List[Tuple[str, str]]:
    return [("", f" {line}\n") for line in state.log] if state.log else [("class:text.muted", " Log empty.")]

def log_view(state) -> Window:
    return Window(
        content=FormattedTextControl(lambda: log_fragments(state)),
        wrap_lines=True,
        always_hide_cursor=True,
        height=Dimension(weight=1, min=5),
        right_margins=[ScrollbarMargin(display_arrows=True)],
    )
