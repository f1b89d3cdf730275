# randints/core/events.py
import time
from dataclasses import dataclass, field

NEXT_NUMBER = "randints.next-number"

@dataclass(frozen=True)
class Notification:
    name: str
    value: int
    ts: float = field(default_factory=time.time)
