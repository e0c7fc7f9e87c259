from __future__ import annotations

from dataclasses import dataclass, field

from rubik.lattice import Position, get_face
from rubik.moves import Move
from rubik.rotation import rotate_position


@dataclass
class Sticker:
    """
    One facelet of the cube.

    `current_position` moves with every turn that affects it; the original
    position is fixed at creation and gives the sticker its color.
    """
    current_position: Position
    _original_position: Position = field(default=None, repr=False)

    def __post_init__(self):
        self.current_position = tuple(int(v) for v in self.current_position)
        if self._original_position is None:
            self._original_position = self.current_position

    @property
    def original_position(self) -> Position:
        return self._original_position

    def apply(self, move: Move) -> bool:
        """
        Turn the sticker if the move's layer contains it.
        Rotation uses the negated nominal angle. Returns True if it moved.
        """
        if not move.affects(self.current_position):
            return False
        self.current_position = rotate_position(self.current_position, move.axis, -move.angle)
        return True

    def face(self) -> str:
        return get_face(self.current_position)

    def original_face(self) -> str:
        return get_face(self._original_position)
