from . import events  # re-export
from .state import AppState
from .stream import ValueStream
from .bus import NotificationBus

__all__ = ["events", "AppState", "ValueStream", "NotificationBus"]
