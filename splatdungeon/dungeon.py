"""Tile grid with random room-based generation and floor colouring."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

log = logging.getLogger(__name__)

ATTEMPTS = 50


class Block(IntEnum):
    NONE = 0
    FLOOR = 1
    WALL = 2
    RED_SPAWN = 3
    BLUE_SPAWN = 4


class TileColor(IntEnum):
    WHITE = 0
    RED = 1
    BLUE = 2


def rand_int(rng: random.Random, low: int, high: int) -> int:
    """Return a random integer in ``[low, high)``; raise ValueError if empty."""
    return rng.randrange(low, high)


@dataclass
class Room:
    """A rectangular room; its outer ring is wall, the inside is floor."""

    pivot_x: int
    pivot_y: int
    width: int
    height: int

    def move_to(self, target: tuple[int, int]) -> None:
        """Step the pivot one tile towards ``target`` on each axis."""
        tx, ty = target
        if self.pivot_x < tx:
            self.pivot_x += 1
        if self.pivot_x > tx:
            self.pivot_x -= 1
        if self.pivot_y < ty:
            self.pivot_y += 1
        if self.pivot_y > ty:
            self.pivot_y -= 1

    def in_bounds(self, dungeon: Dungeon) -> bool:
        if self.pivot_x < 0 or self.pivot_y < 0:
            return False
        if self.pivot_x + self.width >= dungeon.width:
            return False
        if self.pivot_y + self.height >= dungeon.height:
            return False
        return True

    def bad_overlap(self, dungeon: Dungeon) -> bool:
        """Return True if any interior tile of the room is already occupied."""
        return any(
            dungeon.get_block(x + self.pivot_x, y + self.pivot_y) != Block.NONE
            for x in range(1, self.width - 1)
            for y in range(1, self.height - 1)
        )

    def cells(self):
        """Yield ``(dx, dy)`` offsets of every tile, column by column."""
        for x in range(self.width):
            for y in range(self.height):
                yield x, y


class Dungeon:
    """A ``width`` x ``height`` grid of blocks, indexed ``[x][y]``."""

    def __init__(self, width: int, height: int, block_size: int = 16) -> None:
        self.width = width
        self.height = height
        self.block_size = block_size
        self.players: list[Any] = []
        self._clear()

    def _clear(self) -> None:
        self.blocks: list[list[Block]] = [
            [Block.NONE] * self.height for _ in range(self.width)
        ]
        self.colors: list[list[TileColor]] = [
            [TileColor.WHITE] * self.height for _ in range(self.width)
        ]
        self.floor_positions: list[tuple[int, int]] = []

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) outside {self.width}x{self.height} grid")

    def _peek(self, x: int, y: int) -> Block:
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.blocks[x][y]
        return Block.NONE

    def place_block(self, block: Block, x: int, y: int) -> None:
        self._check(x, y)
        self.blocks[x][y] = block
        if block == Block.FLOOR:
            self.floor_positions.append((x, y))

    def get_block(self, x: int, y: int) -> Block:
        self._check(x, y)
        return self.blocks[x][y]

    def block_position(self, x: int, y: int) -> tuple[int, int]:
        """Return the pixel position of the tile's top-left corner."""
        return x * self.block_size, y * self.block_size

    def stamp_room(self, room: Room) -> None:
        for x, y in room.cells():
            edge = x in (0, room.width - 1) or y in (0, room.height - 1)
            self.place_block(
                Block.WALL if edge else Block.FLOOR, x + room.pivot_x, y + room.pivot_y
            )

    def attempt_stamp(self, room: Room) -> bool:
        """Stamp ``room`` if one of its side walls backs onto existing floor.

        The shared wall tile becomes a doorway. Returns True on success.
        """
        for x, y in room.cells():
            gx, gy = x + room.pivot_x, y + room.pivot_y
            side = x in (0, room.width - 1) and 0 < y < room.height - 1
            cap = y in (0, room.height - 1) and 0 < x < room.width - 1
            if side and self._peek(gx, gy) == Block.WALL:
                if Block.FLOOR in (self._peek(gx - 1, gy), self._peek(gx + 1, gy)):
                    self.stamp_room(room)
                    self.place_block(Block.FLOOR, gx, gy)
                    return True
            if cap and self._peek(gx, gy) == Block.WALL:
                if Block.FLOOR in (self._peek(gx, gy - 1), self._peek(gx, gy + 1)):
                    self.stamp_room(room)
                    self.place_block(Block.FLOOR, gx, gy)
                    return True
        return False

    def generate(self, seed: int | None = None) -> None:
        """Rebuild the grid from ``seed`` and place both spawn points."""
        self._clear()
        rng = random.Random(seed)

        initial = Room(0, 0, rand_int(rng, 5, 8), rand_int(rng, 5, 8))
        initial.pivot_x = rand_int(rng, 0, self.width - initial.width)
        initial.pivot_y = rand_int(rng, 0, self.height - initial.height)
        self.stamp_room(initial)

        for _ in range(ATTEMPTS):
            room = Room(0, 0, rand_int(rng, 3, 8), rand_int(rng, 3, 8))
            side = rand_int(rng, 0, 4)
            if side == 0:
                room.pivot_x = -room.width
                room.pivot_y = rand_int(rng, -self.height, self.height)
            elif side == 1:
                room.pivot_x = self.width
                room.pivot_y = rand_int(rng, -self.height, self.height)
            else:
                # Rooms from above and below only get a vertical offset.
                room.pivot_y = rand_int(rng, -self.width, self.width)

            target = self.floor_positions[rand_int(rng, 0, len(self.floor_positions))]
            for _ in range(max(self.width, self.height)):
                room.move_to(target)
                if not room.in_bounds(self):
                    continue
                if room.bad_overlap(self):
                    break
                if self.attempt_stamp(room):
                    break

        for spawn in (Block.RED_SPAWN, Block.BLUE_SPAWN):
            while True:
                x = rand_int(rng, 0, self.width)
                y = rand_int(rng, 0, self.height)
                if self.get_block(x, y) == Block.FLOOR:
                    self.place_block(spawn, x, y)
                    break

    def spawn_point(self, color: TileColor) -> tuple[int, int]:
        """Return the spawn tile of ``color``; raise LookupError if none."""
        wanted = {TileColor.RED: Block.RED_SPAWN, TileColor.BLUE: Block.BLUE_SPAWN}.get(
            TileColor(color)
        )
        if wanted is not None:
            for x, column in enumerate(self.blocks):
                for y, block in enumerate(column):
                    if block == wanted:
                        return x, y
        raise LookupError(f"no spawn point for {TileColor(color).name}")

    def count(self, color: TileColor) -> int:
        return sum(column.count(color) for column in self.colors)

    def winner(self) -> TileColor:
        """Return the colour covering more tiles, or WHITE on a draw."""
        red = self.count(TileColor.RED)
        blue = self.count(TileColor.BLUE)
        log.debug("red tiles: %d, blue tiles: %d", red, blue)
        if red > blue:
            return TileColor.RED
        if blue > red:
            return TileColor.BLUE
        return TileColor.WHITE

    def add_player(self, player: Any) -> None:
        self.players.append(player)