"""components.dev_log — Structured round event log.

A ring-buffer resource that records tick-stamped things the simulation
decided quietly: a pursuit target the ghost could not reach, a hit, an
elimination, a round transition.  Nothing in here is an error the
player sees; it exists so a test or a log reader can ask *why*.

Usage:
    log = world.res(DevLog)
    log.record(eid, "pathfind", "target unreachable", t=tick,
               details={"target": 7})

Each entry is a dict:
    {"t": int, "eid": int, "cat": str, "msg": str, "details": dict | None}

Categories in use: ``pathfind``, ``collision``, ``round``.
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class DevLog:
    """Ring-buffer of simulation events."""

    entries: list[dict] = field(default_factory=list)
    max_entries: int = 500

    def record(self, eid: int, cat: str, msg: str, *,
               t: int = 0, details: dict | None = None) -> None:
        self.entries.append({
            "t": t,
            "eid": eid,
            "cat": cat,
            "msg": msg,
            "details": details,
        })
        if len(self.entries) > self.max_entries:
            del self.entries[:-self.max_entries]

    def for_cat(self, cat: str, n: int = 50) -> list[dict]:
        return [e for e in self.entries if e["cat"] == cat][-n:]
