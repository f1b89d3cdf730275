# randints/ui_ptk/bind.py
from prompt_toolkit.key_binding import KeyBindings
from randints.core.actions import draw_next

def build_keybindings(state, viewmodel, theme):
    kb = KeyBindings()

    @kb.add("c-c")
    @kb.add("q")
    def _(event):
        event.app.exit()

    @kb.add("n")
    @kb.add(" ")
    def _(event):
        draw_next(state, viewmodel)
        event.app.invalidate()

    @kb.add("tab")
    def _(event):
        event.app.layout.focus_next()

    @kb.add("s-tab")
    def _(event):
        event.app.layout.focus_previous()

    @kb.add("f6")
    def _(event):
        theme.cycle_next()
        event.app.style = theme.style
        state.add_log(f"Theme: {theme.name}")
        event.app.invalidate()

    return kb
