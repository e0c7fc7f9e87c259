"""
Cube console: session.py
========================
One interactive session: a cube, the pending move text and the history
of moves applied so far.

    input_change(text) → store pending moves
    apply()            → apply pending moves (no-op when empty)
    reset()            → fresh solved cube, empty history
    undo()             → revert the last recorded move
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from rubik.audit import MoveLog
from rubik.cube import CubeState, audited_move
from rubik.moves import inverse_token, split_sequence
from console.config import FACE_COLORS


@dataclass
class Session:
    cube: CubeState = field(default_factory=CubeState.solved)
    moves: str = ""
    log: MoveLog = field(default_factory=MoveLog)

    # ---------------------------------------------------------------
    # Input handling
    # ---------------------------------------------------------------

    def input_change(self, text: str) -> None:
        self.moves = text

    def apply(self) -> int:
        """
        Apply the pending moves token by token, recording each one.
        InvalidNotation propagates; tokens before the bad one stay applied
        and recorded. Returns how many tokens were applied.
        """
        applied = 0
        if not self.moves.strip():
            return applied
        for token in split_sequence(self.moves):
            self.cube, self.log = audited_move(self.cube, token, self.log)
            applied += 1
        return applied

    def reset(self) -> None:
        self.cube = CubeState.solved()
        self.log.clear()

    def undo(self) -> Optional[str]:
        """Undo the most recent move. Returns its token, or None if history is empty."""
        entry = self.log.pop()
        if entry is None:
            return None
        self.cube.apply_move(inverse_token(entry.token))
        return entry.token

    # ---------------------------------------------------------------
    # Readers
    # ---------------------------------------------------------------

    def state(self) -> str:
        return self.cube.serialize()

    def blocks(self) -> Dict[str, str]:
        return dict(self.cube.face_blocks())

    def colors(self) -> Dict[str, List[Tuple[int, int, int]]]:
        """Face → 9 RGB colors, in the same row-major order as the face string."""
        return {face: [FACE_COLORS[c] for c in block] for face, block in self.blocks().items()}
