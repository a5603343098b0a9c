"""Bombs that paint the floor around them and hurt enemy players."""

from __future__ import annotations

from dataclasses import dataclass, field

from .dungeon import Block, Dungeon, TileColor
from .timer import Timer

DAMAGE = 100.0

BOMB_COLORS: dict[TileColor, tuple[int, int, int, int]] = {
    TileColor.RED: (120, 20, 0, 255),
    TileColor.BLUE: (0, 64, 127, 255),
}


@dataclass(eq=False)
class Bomb:
    """A bomb placed at a pixel ``position`` that explodes when its fuse runs out."""

    position: tuple[int, int]
    radius: int
    fuse: float
    player_color: TileColor
    timer: Timer = field(init=False)

    def __post_init__(self) -> None:
        self.timer = Timer(self.fuse)

    @property
    def color(self) -> tuple[int, int, int, int]:
        """RGBA colour the bomb is drawn with."""
        return BOMB_COLORS.get(self.player_color, (0, 0, 0, 0))

    def update(self, dt: float, playing: bool, bombs: list[Bomb], dungeon: Dungeon) -> bool:
        """Burn the fuse; explode when it is done. Returns True on explosion."""
        self.timer.update(dt, playing)
        if self.timer.is_done():
            self.explode(bombs, dungeon)
            return True
        return False

    def _blocked(self, dungeon: Dungeon, gx: int, gy: int, dx: int, dy: int) -> bool:
        radius = self.radius
        if radius <= 0:
            return False
        step_x = dx / radius
        step_y = dy / radius
        return any(
            dungeon.get_block(int(gx + step_x * step), int(gy + step_y * step)) == Block.WALL
            for step in range(radius)
        )

    def explode(self, bombs: list[Bomb], dungeon: Dungeon) -> None:
        """Paint visible floor tiles within the radius, damage enemies, leave ``bombs``."""
        size = dungeon.block_size
        gx = int(self.position[0]) // size
        gy = int(self.position[1]) // size
        radius = self.radius

        for x in range(gx - radius, gx + radius + 1):
            for y in range(gy - radius, gy + radius + 1):
                if not (0 <= x < dungeon.width and 0 <= y < dungeon.height):
                    continue
                if dungeon.blocks[x][y] != Block.FLOOR:
                    continue
                dx, dy = x - gx, y - gy
                if dx * dx + dy * dy > radius * radius:
                    continue
                if self._blocked(dungeon, gx, gy, dx, dy):
                    continue

                dungeon.colors[x][y] = self.player_color
                for player in dungeon.players:
                    if (player.x, player.y) == (x, y) and player.color != self.player_color:
                        player.health -= DAMAGE

        for index, bomb in enumerate(bombs):
            if bomb.position == self.position:
                del bombs[index]
                return