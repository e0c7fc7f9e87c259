"""
Rubik Core: audit.py
--------------------
Move history.

Each applied token is recorded with the number of stickers it turned
and whether the lattice invariants still held afterwards. The log can
be summarized, exported to JSON, or popped to undo the last move.
"""

from __future__ import annotations

import json
import time
from collections import Counter
from dataclasses import asdict, dataclass, field
from typing import Optional

import numpy as np

from rubik.conservation import verify_conservation
from rubik.moves import parse_move

# quarter-turn metric: a prime turn counts as one
_QUARTER_TURNS = {90: 1, 180: 2, 270: 1}


# -------------------------------------------------------------------
# Move Entry: atomic record of a single turn
# -------------------------------------------------------------------

@dataclass
class MoveEntry:
    timestamp: float
    token: str
    angle: int
    turned: int
    conserved: bool
    note: str = ""

    def to_dict(self) -> dict:
        """Convert the entry to a serializable dictionary."""
        return asdict(self)


# -------------------------------------------------------------------
# Move Log: chronological ledger of applied tokens
# -------------------------------------------------------------------

@dataclass
class MoveLog:
    entries: list[MoveEntry] = field(default_factory=list)

    def record(self, cube, token: str, turned: int, note: str = "") -> None:
        """Record a token already applied to `cube`."""
        entry = MoveEntry(
            timestamp=time.time(),
            token=token,
            angle=parse_move(token).angle,
            turned=turned,
            conserved=verify_conservation(cube),
            note=note,
        )
        self.entries.append(entry)

    def pop(self) -> Optional[MoveEntry]:
        """Remove and return the most recent entry (None when empty)."""
        return self.entries.pop() if self.entries else None

    def sequence(self) -> str:
        """The recorded tokens as one move sequence."""
        return " ".join(e.token for e in self.entries)

    # ---------------------------------------------------------------
    # Verification and integrity
    # ---------------------------------------------------------------

    def verify_integrity(self) -> bool:
        """Return True if every recorded move kept the lattice invariants."""
        return all(e.conserved for e in self.entries)

    def summary(self) -> dict:
        if not self.entries:
            return {"count": 0, "integrity_passed": True}

        turned = np.array([e.turned for e in self.entries])
        quarter_turns = sum(_QUARTER_TURNS[e.angle] for e in self.entries)
        return {
            "count": len(self.entries),
            "quarter_turns": int(quarter_turns),
            "mean_turned": float(np.mean(turned)),
            "range_turned": [int(np.min(turned)), int(np.max(turned))],
            "by_base": dict(Counter(e.token.rstrip("2'") for e in self.entries)),
            "integrity_passed": self.verify_integrity(),
        }

    # ---------------------------------------------------------------
    # Persistence
    # ---------------------------------------------------------------

    def export_json(self, path: str) -> None:
        """Export the full move history to a JSON file."""
        with open(path, "w") as f:
            json.dump([e.to_dict() for e in self.entries], f, indent=2)

    def clear(self) -> None:
        self.entries.clear()

    def describe(self) -> str:
        """Readable one-line summary for console output."""
        s = self.summary()
        return (
            f"MoveLog(count={s['count']}, "
            f"quarter_turns={s.get('quarter_turns', 0)}, "
            f"integrity={s['integrity_passed']})"
        )


# -------------------------------------------------------------------
# Helper: one-move audit wrapper
# -------------------------------------------------------------------

def audit_move(cube, token: str, turned: int, log: MoveLog | None = None, note: str = "") -> MoveLog:
    """
    Record one applied move and return the updated log.
    Creates a new log if none exists.
    """
    if log is None:
        log = MoveLog()
    log.record(cube, token, turned, note)
    return log


# -------------------------------------------------------------------
# Self-check
# -------------------------------------------------------------------

if __name__ == "__main__":
    from rubik.cube import CubeState, audited_move

    cube = CubeState.solved()
    log = MoveLog()
    for token in "R U R' U'".split():
        cube, log = audited_move(cube, token, log)

    print(log.describe())
    print(log.summary())
    print("audit.py self-check passed ✓")
