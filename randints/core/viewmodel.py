# randints/core/viewmodel.py
"""View models that feed the number view.

Both expose the same surface: ``next()`` draws a random number on the
producer side and ``numbers`` is the async sequence the view consumes.
``StreamViewModel`` emits straight into a ValueStream it owns;
``NotificationViewModel`` posts through a NotificationBus it is handed and
reads the numbers back off that bus.
"""
import logging
import random
from typing import AsyncIterator

from randints.core.bus import NotificationBus
from randints.core.events import NEXT_NUMBER
from randints.core.stream import ValueStream


class _RandomSource:
    def __init__(self, min_value: int = 1, max_value: int = 50, seed: int | None = None):
        if min_value > max_value:
            raise ValueError(f"empty range: {min_value}..{max_value}")
        self.min_value = min_value
        self.max_value = max_value
        self._rng = random.Random(seed)

    def draw(self) -> int:
        return self._rng.randint(self.min_value, self.max_value)


class StreamViewModel(_RandomSource):
    source = "stream"

    def __init__(self, min_value: int = 1, max_value: int = 50, seed: int | None = None):
        super().__init__(min_value, max_value, seed)
        self.numbers: ValueStream[int] = ValueStream()

    def next(self) -> int:
        value = self.draw()
        self.numbers.emit(value)
        logging.debug(f"[viewmodel] emitted {value}")
        return value


class NotificationViewModel(_RandomSource):
    source = "notification"

    def __init__(self, bus: NotificationBus, min_value: int = 1, max_value: int = 50,
                 seed: int | None = None, name: str = NEXT_NUMBER):
        super().__init__(min_value, max_value, seed)
        self.bus = bus
        self.name = name
        # observe before the first post so nothing is dropped
        self._notes = bus.notifications(name)

    def next(self) -> int:
        value = self.draw()
        self.bus.post(self.name, value)
        logging.debug(f"[viewmodel] posted {self.name}={value}")
        return value

    @property
    def numbers(self) -> AsyncIterator[int]:
        return self._values()

    async def _values(self) -> AsyncIterator[int]:
        async for note in self._notes:
            yield note.value


def build_viewmodel(cfg, bus: NotificationBus | None = None):
    if cfg.source == "notification":
        return NotificationViewModel(bus or NotificationBus(), cfg.min_value, cfg.max_value, cfg.seed)
    return StreamViewModel(cfg.min_value, cfg.max_value, cfg.seed)
