"""Window, input and drawing for the two-player game."""

from __future__ import annotations

import argparse
import logging
import os
import random
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .dungeon import Block, TileColor  # noqa: E402
from .game import Action, Game, GameState, Sound  # noqa: E402

log = logging.getLogger(__name__)

SCREEN_SIZE = (1920, 1080)
FPS = 60
ZOOM = 2
VOLUME = 0.3
DEFAULT_BLOCK_SIZE = 16

RAYWHITE = (245, 245, 245)
BLACK = (0, 0, 0)
RED = (230, 41, 55)

_KEYS = {
    GameState.PLAYING: {
        pygame.K_w: Action.P1_UP,
        pygame.K_s: Action.P1_DOWN,
        pygame.K_a: Action.P1_LEFT,
        pygame.K_d: Action.P1_RIGHT,
        pygame.K_q: Action.P1_ABILITY,
        pygame.K_UP: Action.P2_UP,
        pygame.K_DOWN: Action.P2_DOWN,
        pygame.K_LEFT: Action.P2_LEFT,
        pygame.K_RIGHT: Action.P2_RIGHT,
        pygame.K_RCTRL: Action.P2_ABILITY,
        pygame.K_p: Action.PAUSE,
        pygame.K_F1: Action.CHEAT_P2_DIE,
    },
    GameState.PAUSED: {pygame.K_p: Action.PAUSE, pygame.K_m: Action.MENU},
    GameState.OVER: {pygame.K_r: Action.RESTART},
    GameState.MENU: {pygame.K_RETURN: Action.START},
}

_SOUND_FILES = {
    Sound.WALK: "walk.wav",
    Sound.PLACE: "place.wav",
    Sound.EXPLODE: "explode.wav",
    Sound.DEATH: "death.wav",
}

_BLOCK_SPRITES = {Block.NONE: "none", Block.FLOOR: "dot", Block.WALL: "rounded"}
_BLOCK_TINTS = {
    Block.NONE: (0, 0, 0, 10),
    Block.FLOOR: (0, 0, 0, 64),
    Block.WALL: (0, 0, 0, 128),
}
_SPAWN_TINTS = {Block.RED_SPAWN: (255, 0, 0, 255), Block.BLUE_SPAWN: (0, 0, 255, 255)}
_FLOOR_PAINT = {TileColor.RED: (255, 0, 0, 64), TileColor.BLUE: (0, 0, 255, 64)}

_MENU_LINES = (
    "Press Enter to start",
    "Player 1 Controls:",
    "WASD to move",
    "Q to use ability",
    "Player 2 Controls:",
    "Arrow keys to move",
    "Right Control to use ability",
    "P to Pause",
    "Esc to Quit",
)
_PAUSE_LINES = ("Game Paused", "P to Resume", "M to Return to Menu", "Esc to Quit")


def action_for_key(key: int, state: GameState) -> Action | None:
    """Return the action a key press means in ``state``, or None."""
    if key == pygame.K_ESCAPE:
        return Action.QUIT
    return _KEYS.get(state, {}).get(key)


def _load_image(path: Path) -> pygame.Surface | None:
    try:
        return pygame.image.load(str(path)).convert_alpha()
    except (pygame.error, FileNotFoundError):
        log.warning("cannot load image %s", path)
        return None


class _Assets:
    """Sprites, sounds and fonts, each optional."""

    def __init__(self, root: Path) -> None:
        sprites = root / "sprites"
        self.sprites = {
            name: _load_image(sprites / f"{name}.png")
            for name in ("none", "dot", "rounded", "spawn", "deadplayer")
        }
        dot = self.sprites["dot"]
        self.block_size = dot.get_width() if dot is not None else DEFAULT_BLOCK_SIZE
        self.music = root / "audio" / "music" / "Boost.mp3"
        self.sounds: dict[Sound, pygame.mixer.Sound] = {}
        self.audio = self._init_audio()
        if self.audio:
            for sound, name in _SOUND_FILES.items():
                path = root / "audio" / "sfx" / name
                try:
                    loaded = pygame.mixer.Sound(str(path))
                except (pygame.error, FileNotFoundError):
                    log.warning("cannot load sound %s", path)
                    continue
                loaded.set_volume(VOLUME)
                self.sounds[sound] = loaded
        self._tints: dict[tuple[str, tuple[int, ...]], pygame.Surface] = {}
        self._fonts: dict[int, pygame.font.Font] = {}

    @staticmethod
    def _init_audio() -> bool:
        try:
            pygame.mixer.init()
        except pygame.error:
            log.warning("audio unavailable")
            return False
        return True

    def start_music(self) -> None:
        if not self.audio:
            return
        try:
            pygame.mixer.music.load(str(self.music))
        except (pygame.error, FileNotFoundError):
            log.warning("cannot load music %s", self.music)
            return
        pygame.mixer.music.set_volume(VOLUME)
        pygame.mixer.music.play(-1)

    def play(self, sounds: list[Sound]) -> None:
        for sound in sounds:
            loaded = self.sounds.get(sound)
            if loaded is not None:
                loaded.play()

    def tinted(self, name: str, color: tuple[int, int, int, int]) -> pygame.Surface:
        key = (name, color)
        if key not in self._tints:
            base = self.sprites.get(name)
            if base is None:
                surface = pygame.Surface((self.block_size, self.block_size), pygame.SRCALPHA)
                surface.fill(color)
            else:
                surface = base.copy()
                surface.fill(color, special_flags=pygame.BLEND_RGBA_MULT)
            self._tints[key] = surface
        return self._tints[key]

    def font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]


def _draw_world(game: Game, assets: _Assets) -> pygame.Surface:
    dungeon = game.dungeon
    size = dungeon.block_size
    world = pygame.Surface((dungeon.width * size, dungeon.height * size), pygame.SRCALPHA)

    for x, column in enumerate(dungeon.blocks):
        for y, block in enumerate(column):
            pos = (x * size, y * size)
            paint = dungeon.colors[x][y]
            if block == Block.NONE:
                continue
            if block in _SPAWN_TINTS:
                world.blit(assets.tinted("spawn", _SPAWN_TINTS[block]), pos)
            elif block == Block.FLOOR and paint in _FLOOR_PAINT:
                world.fill(_FLOOR_PAINT[paint], (*pos, size, size))
            else:
                world.blit(assets.tinted(_BLOCK_SPRITES[block], _BLOCK_TINTS[block]), pos)

    for player in dungeon.players:
        pos = (player.x * size, player.y * size)
        if player.is_dead:
            world.blit(assets.tinted("deadplayer", player.rgb), pos)
        else:
            world.fill(player.rgb, (*pos, size, size))

    for bomb in game.bombs:
        center = (int(bomb.position[0]) + size // 2, int(bomb.position[1]) + size // 2)
        pygame.draw.circle(world, bomb.color, center, bomb.radius)
    return world


def _text(screen, assets, text, pos, size, color) -> None:
    screen.blit(assets.font(size).render(text, True, color), pos)


def _draw(screen: pygame.Surface, game: Game, assets: _Assets) -> None:
    screen.fill(RAYWHITE)
    width, height = screen.get_size()
    left = width // 2 - 100

    if game.state is GameState.PLAYING:
        world = _draw_world(game, assets)
        scaled = pygame.transform.scale(
            world, (world.get_width() * ZOOM, world.get_height() * ZOOM)
        )
        screen.blit(scaled, (0, 0))
        label = str(game.seconds_left())
        text_width = assets.font(50).size(label)[0]
        _text(screen, assets, label, (width // 2 - text_width // 2, 10), 50, BLACK)
    elif game.state is GameState.OVER:
        _text(screen, assets, "Game Over", (left, height // 2 - 50), 40, RED)
        _text(screen, assets, "Press R to restart", (left, height // 2 + 50), 20, RED)
        _text(screen, assets, game.winner_text(), (left, height // 2 + 100), 50, BLACK)
    elif game.state is GameState.MENU:
        for row, line in enumerate(_MENU_LINES):
            _text(screen, assets, line, (left, 100 + 50 * row), 50, BLACK)
    elif game.state is GameState.PAUSED:
        for row, line in enumerate(_PAUSE_LINES):
            _text(screen, assets, line, (left, 100 + 50 * row), 50, BLACK)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until the players quit."""
    parser = argparse.ArgumentParser(
        prog="splatdungeon", description="Two-player dungeon floor painting game."
    )
    parser.add_argument("--resources", type=Path, default=Path("resources"))
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption("Splat Dungeon")
        clock = pygame.time.Clock()
        assets = _Assets(args.resources)
        game = Game(block_size=assets.block_size, rng=random.Random(args.seed))
        assets.start_music()

        while game.running:
            dt = clock.tick(FPS) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN:
                    action = action_for_key(event.key, game.state)
                    if action is not None:
                        assets.play(game.handle_action(action))
            assets.play(game.tick(dt))
            _draw(screen, game, assets)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0