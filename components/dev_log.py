"""components.dev_log — Recent detection and pause transitions.

World resource filled by the stealth scene's EventBus subscribers and
shown by the Tab overlay.  Old entries fall off the front once
``max_entries`` is reached; ``count()`` keeps running totals so the
overlay can still say how often the player was spotted.

    log.record(pid, "detection", "spotted", t=4.2, details={"by": [3, 5]})
    log.recent(3)   # newest last

Each entry is a dict with keys ``t``, ``eid``, ``cat``, ``msg`` and
``details``.
"""

from __future__ import annotations
from collections import Counter, deque
from dataclasses import dataclass, field


@dataclass
class DevLog:
    max_entries: int = 200
    entries: deque = field(init=False, repr=False)
    totals: Counter = field(default_factory=Counter, repr=False)

    def __post_init__(self):
        self.entries = deque(maxlen=self.max_entries)

    def record(self, eid: int, cat: str, msg: str, *, t: float = 0.0,
               details: dict | None = None) -> None:
        self.entries.append({"t": t, "eid": eid, "cat": cat, "msg": msg,
                             "details": details})
        self.totals[(cat, msg)] += 1

    def recent(self, n: int = 8) -> list[dict]:
        """The *n* newest entries, oldest first."""
        if n <= 0:
            return []
        return list(self.entries)[-n:]

    def for_cat(self, cat: str, n: int = 50) -> list[dict]:
        return [e for e in self.entries if e["cat"] == cat][-n:]

    def count(self, cat: str, msg: str) -> int:
        """How many times (cat, msg) was recorded, evicted entries included."""
        return self.totals[(cat, msg)]
