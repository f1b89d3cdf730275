# randints/ui_ptk/status.py
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout import Window

def status_line(state, viewmodel, theme_name: str) -> str:
    src = f"Source: {viewmodel.source}"
    rng = f"Range: {viewmodel.min_value}..{viewmodel.max_value}"
    return f"{src}   {rng}   Draws: {state.draws}   Theme: {theme_name}"

def status_view(state, viewmodel, theme_name_provider):
    return Window(
        content=FormattedTextControl(lambda: status_line(state, viewmodel, theme_name_provider())),
        height=1, always_hide_cursor=True, style="class:statusbar",
    )
