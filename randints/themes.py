# randints/themes.py
import logging
from typing import Dict, List
from prompt_toolkit.styles import Style

THEMES: Dict[str, Dict[str, str]] = {
    "Default": {
        "header": "bold #ffffff bg:#005f87",
        "frame": "#8a8a8a",
        "frame.border": "#5f87af",
        "number": "bold #ffd75f",
        "number.glyph": "bold #ffffff",
        "history": "#87afd7",
        "text.muted": "#6c6c6c",
        "statusbar": "#000000 bg:#87afd7",
        "btn": "#ffffff bg:#444444",
        "btn.hover": "#000000 bg:#87afd7",
        "btn.active": "#000000 bg:#ffd75f",
    },
    "Solarized": {
        "header": "bold #fdf6e3 bg:#268bd2",
        "frame": "#93a1a1",
        "frame.border": "#586e75",
        "number": "bold #b58900",
        "number.glyph": "bold #cb4b16",
        "history": "#2aa198",
        "text.muted": "#657b83",
        "statusbar": "#002b36 bg:#93a1a1",
        "btn": "#fdf6e3 bg:#073642",
        "btn.hover": "#002b36 bg:#2aa198",
        "btn.active": "#002b36 bg:#b58900",
    },
    "Mono": {
        "header": "reverse bold",
        "frame": "",
        "frame.border": "",
        "number": "bold",
        "number.glyph": "bold",
        "history": "",
        "text.muted": "italic",
        "statusbar": "reverse",
        "btn": "reverse",
        "btn.hover": "bold reverse",
        "btn.active": "bold underline",
    },
}


class ThemeManager:
    def __init__(self, initial: str | None = None):
        self._names = list(THEMES.keys())
        self._index = self._names.index(initial) if initial in THEMES else 0

    def names(self) -> List[str]:
        return list(self._names)

    @property
    def name(self) -> str:
        return self._names[self._index]

    @property
    def style(self) -> Style:
        return Style.from_dict(THEMES[self.name])

    def cycle_next(self) -> str:
        self._index = (self._index + 1) % len(self._names)
        logging.info(f"Cycled theme to: {self.name}")
        return self.name
