"""Players that walk the dungeon, paint it and drop bombs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .bomb import Bomb
from .dungeon import Block, Dungeon, TileColor
from .timer import Timer

DEATH_SECONDS = 2.0
BOMB_RADIUS = 3
BOMB_FUSE = 3.0

PLAYER_RGB: dict[TileColor, tuple[int, int, int, int]] = {
    TileColor.RED: (230, 41, 55, 255),
    TileColor.BLUE: (0, 121, 241, 255),
}


class Direction(IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


_STEPS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(eq=False)
class Player:
    """A player standing on tile ``(x, y)`` and painting in ``color``."""

    x: int
    y: int
    color: TileColor
    max_health: float = 100.0
    health: float = field(default=0.0, init=False)
    is_dead: bool = field(default=False, init=False)
    death_timer: Timer | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.health = self.max_health

    @property
    def rgb(self) -> tuple[int, int, int, int]:
        """RGBA colour the player is drawn with."""
        return PLAYER_RGB.get(self.color, (255, 255, 255, 255))

    def update(self, dt: float, dungeon: Dungeon, playing: bool) -> bool:
        """Advance one frame. Returns True if the player died this frame."""
        if self.health > 0:
            self.paint_floor(dungeon)
            return False

        just_died = not self.is_dead
        if just_died:
            self.die()
        if self.death_timer is not None:
            self.death_timer.update(dt, playing)
            if self.death_timer.is_done():
                self.respawn(dungeon)
        return just_died

    def paint_floor(self, dungeon: Dungeon) -> None:
        dungeon.colors[self.x][self.y] = self.color

    def use_ability(self, dungeon: Dungeon, bombs: list[Bomb]) -> Bomb:
        """Drop a bomb on the current tile and return it."""
        bomb = Bomb(dungeon.block_position(self.x, self.y), BOMB_RADIUS, BOMB_FUSE, self.color)
        bombs.append(bomb)
        return bomb

    def move(self, direction: Direction, dungeon: Dungeon, other: Player | None) -> bool:
        """Step one tile unless blocked by a wall or the other player."""
        if self.is_dead:
            return False
        dx, dy = _STEPS[Direction(direction)]
        tx, ty = self.x + dx, self.y + dy
        if dungeon.get_block(tx, ty) == Block.WALL:
            return False
        if other is not None and (other.x, other.y) == (tx, ty):
            return False
        self.x, self.y = tx, ty
        return True

    def die(self) -> None:
        """Mark the player dead and start the respawn countdown."""
        self.is_dead = True
        self.death_timer = Timer(DEATH_SECONDS)

    def respawn(self, dungeon: Dungeon) -> None:
        """Return to the spawn point with full health."""
        self.x, self.y = dungeon.spawn_point(self.color)
        self.is_dead = False
        self.health = self.max_health
        self.death_timer = None