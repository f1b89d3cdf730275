# randints/core/bus.py
import logging
from typing import Dict, List

from randints.core.events import Notification
from randints.core.stream import ValueStream


class NotificationBus:
    """Named rendezvous point, handed to producer and consumer explicitly.

    Each name carries one ValueStream with a single consumer; there is no
    fan-out. Posts to a name nobody has asked for are dropped.
    """

    def __init__(self):
        self._streams: Dict[str, ValueStream[Notification]] = {}

    def notifications(self, name: str) -> ValueStream[Notification]:
        stream = self._streams.get(name)
        if stream is None:
            stream = ValueStream()
            self._streams[name] = stream
            logging.debug(f"[bus] observing {name}")
        return stream

    def post(self, name: str, value: int) -> None:
        stream = self._streams.get(name)
        if stream is None:
            logging.debug(f"[bus] dropped {name}={value!r}: no observer")
            return
        stream.emit(Notification(name=name, value=value))

    def names(self) -> List[str]:
        return sorted(self._streams)
