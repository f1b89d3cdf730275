# randints/ui_ptk/controls.py
from prompt_toolkit.layout import Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.application import get_app
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.mouse_events import MouseEventType


class FlatButtonWindow(Window):
    """One-line clickable button; fires on mouse up, or enter/space when focused."""

    def __init__(self, label: str, on_click):
        self.label = label
        self.on_click = on_click
        self._hover = False
        self._pressed = False

        kb = KeyBindings()

        @kb.add("enter")
        @kb.add(" ")
        def _(event):
            self.click()

        super().__init__(
            content=FormattedTextControl(self._fragments, focusable=True, key_bindings=kb),
            height=1,
            dont_extend_width=True,
        )

    def click(self):
        if callable(self.on_click):
            self.on_click()

    def _fragments(self):
        style = "class:btn"
        if self._hover:
            style = "class:btn.hover"
        if self._pressed:
            style = "class:btn.active"
        return [(style, f" {self.label} ", self._mouse)]

    def _mouse(self, me):
        t = me.event_type

        # leave wheel events to the container
        if t in (MouseEventType.SCROLL_UP, MouseEventType.SCROLL_DOWN):
            return NotImplemented

        if t == MouseEventType.MOUSE_MOVE:
            if not self._hover:
                self._hover = True
                get_app().invalidate()
            return None

        if t == MouseEventType.MOUSE_DOWN:
            self._pressed = True
            get_app().invalidate()
            return None

        if t == MouseEventType.MOUSE_UP:
            was_pressed = self._pressed
            self._pressed = False
            self._hover = False
            get_app().invalidate()
            if was_pressed:
                self.click()
            return None

        return NotImplemented
