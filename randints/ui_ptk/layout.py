# randints/ui_ptk/layout.py
from prompt_toolkit.application import Application
from prompt_toolkit.layout import Layout, HSplit, VSplit
from prompt_toolkit.layout.containers import HorizontalAlign
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.widgets import Label, Frame

from randints.core.actions import draw_next
from randints.ui_ptk.views import number_view, history_view, log_view
from randints.ui_ptk.bind import build_keybindings
from randints.ui_ptk.status import status_view
from randints.ui_ptk.controls import FlatButtonWindow
from randints.themes import ThemeManager


def build_layout(state, viewmodel, cfg=None):
    theme = ThemeManager(cfg.theme if cfg else None)
    kb = build_keybindings(state, viewmodel, theme)

    next_button = FlatButtonWindow("Next", lambda: draw_next(state, viewmodel))

    number_frame = Frame(
        HSplit([
            number_view(state),
            VSplit([next_button], align=HorizontalAlign.CENTER, height=1),
        ], padding=1),
        title="Number",
        style="class:frame",
        width=Dimension(preferred=40),
    )

    header = Label(" randints - n/Space:Next | F6:Theme | q/Ctrl+C:Quit", style="class:header")
    log_frame = Frame(log_view(state), title="Log", style="class:frame")
    status = status_view(state, viewmodel, theme_name_provider=lambda: theme.name)

    root_container = HSplit([
        header,
        VSplit([number_frame, log_frame]),
        history_view(state),
        status,
    ])

    app = Application(
        layout=Layout(root_container, focused_element=next_button),
        key_bindings=kb,
        mouse_support=True,
        full_screen=True,
        style=theme.style,
        refresh_interval=0.5,
    )

    saved_theme = {"v": theme.name}

    def _persist():
        if cfg and saved_theme["v"] != theme.name:
            saved_theme["v"] = cfg.theme = theme.name
            try:
                cfg.save()
            except Exception as e:
                state.add_log(f"[config] save error: {e!r}")

    app.after_render += lambda _: _persist()
    return app
