# randints/core/state.py
import time
from collections import deque
from typing import List

class AppState:
    def __init__(self, history_size: int = 10):
        self.current_value: int = 0
        self.history = deque(maxlen=history_size)
        self.log = deque(maxlen=500)
        self.draws: int = 0

        self.add_log(f"Welcome to randints! - {time.strftime('%Y-%m-%d %H:%M:%S')}")

    def add_log(self, text: str):
        t = time.strftime("%H:%M:%S")
        self.log.append(f"[{t}] {text}")

    def set_current(self, value: int):
        self.current_value = value
        self.history.append(value)
        self.draws += 1

    def recent(self) -> List[int]:
        return list(self.history)
