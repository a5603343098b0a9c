"""Game rules: round timer, state machine and player actions."""

from __future__ import annotations

import math
import random
from enum import Enum, auto

from .bomb import Bomb
from .dungeon import Dungeon, TileColor
from .player import Direction, Player

ROUND_SECONDS = 60
DUNGEON_WIDTH = 60
DUNGEON_HEIGHT = 33
MAX_HEALTH = 100.0


class GameState(Enum):
    PLAYING = auto()
    OVER = auto()
    MENU = auto()
    PAUSED = auto()


class Action(Enum):
    P1_UP = auto()
    P1_DOWN = auto()
    P1_LEFT = auto()
    P1_RIGHT = auto()
    P1_ABILITY = auto()
    P2_UP = auto()
    P2_DOWN = auto()
    P2_LEFT = auto()
    P2_RIGHT = auto()
    P2_ABILITY = auto()
    PAUSE = auto()
    MENU = auto()
    QUIT = auto()
    START = auto()
    RESTART = auto()
    CHEAT_P2_DIE = auto()


class Sound(Enum):
    WALK = auto()
    PLACE = auto()
    EXPLODE = auto()
    DEATH = auto()


_MOVES = {
    Action.P1_UP: (0, Direction.UP),
    Action.P1_DOWN: (0, Direction.DOWN),
    Action.P1_LEFT: (0, Direction.LEFT),
    Action.P1_RIGHT: (0, Direction.RIGHT),
    Action.P2_UP: (1, Direction.UP),
    Action.P2_DOWN: (1, Direction.DOWN),
    Action.P2_LEFT: (1, Direction.LEFT),
    Action.P2_RIGHT: (1, Direction.RIGHT),
}

_ABILITIES = {Action.P1_ABILITY: 0, Action.P2_ABILITY: 1}


class Game:
    """One two-player session; starts on the menu."""

    def __init__(
        self,
        width: int = DUNGEON_WIDTH,
        height: int = DUNGEON_HEIGHT,
        block_size: int = 16,
        rng: random.Random | None = None,
    ) -> None:
        self.dungeon = Dungeon(width, height, block_size)
        self.state = GameState.MENU
        self.time_left: float = float(ROUND_SECONDS)
        self.bombs: list[Bomb] = []
        self.player1: Player | None = None
        self.player2: Player | None = None
        self.running = True
        self._rng = rng or random.Random()

    @property
    def players(self) -> tuple[Player, Player]:
        if self.player1 is None or self.player2 is None:
            raise RuntimeError("the game has not been started")
        return self.player1, self.player2

    def restart(self, seed: int | None = None) -> None:
        """Generate a fresh dungeon, place both players and start playing."""
        if seed is None:
            seed = self._rng.getrandbits(64)
        self.state = GameState.PLAYING
        self.dungeon.generate(seed)
        red = Player(*self.dungeon.spawn_point(TileColor.RED), TileColor.RED, MAX_HEALTH)
        blue = Player(*self.dungeon.spawn_point(TileColor.BLUE), TileColor.BLUE, MAX_HEALTH)
        self.dungeon.players = []
        self.dungeon.add_player(red)
        self.dungeon.add_player(blue)
        self.player1, self.player2 = red, blue
        self.bombs = []
        self.time_left = float(ROUND_SECONDS)

    def handle_action(self, action: Action) -> list[Sound]:
        """Apply one input action and return the sounds it triggers."""
        if action is Action.QUIT:
            self.running = False
            return []

        if self.state is GameState.PLAYING:
            players = self.players
            if action in _MOVES:
                index, direction = _MOVES[action]
                players[index].move(direction, self.dungeon, players[1 - index])
                return [Sound.WALK]
            if action in _ABILITIES:
                players[_ABILITIES[action]].use_ability(self.dungeon, self.bombs)
                return [Sound.PLACE]
            if action is Action.PAUSE:
                self.state = GameState.PAUSED
            elif action is Action.CHEAT_P2_DIE:
                players[1].health = 0
        elif self.state is GameState.PAUSED:
            if action is Action.PAUSE:
                self.state = GameState.PLAYING
            elif action is Action.MENU:
                self.state = GameState.MENU
        elif self.state is GameState.OVER:
            if action is Action.RESTART:
                self.restart()
        elif self.state is GameState.MENU:
            if action is Action.START:
                self.restart()
        return []

    def tick(self, dt: float) -> list[Sound]:
        """Advance the round by ``dt`` seconds and return the sounds triggered."""
        sounds: list[Sound] = []
        if self.state is GameState.PLAYING:
            if self.time_left > 1:
                self.time_left -= dt
            else:
                self.state = GameState.OVER

        if self.state is GameState.PLAYING:
            for player in self.dungeon.players:
                if player.update(dt, self.dungeon, True):
                    sounds.append(Sound.DEATH)
            for bomb in list(self.bombs):
                if bomb.update(dt, True, self.bombs, self.dungeon):
                    sounds.append(Sound.EXPLODE)
        return sounds

    def winner_text(self) -> str:
        winner = self.dungeon.winner()
        if winner == TileColor.RED:
            return "Red wins!"
        if winner == TileColor.BLUE:
            return "Blue wins!"
        return "It's a draw!"

    def seconds_left(self) -> int:
        return math.ceil(self.time_left)