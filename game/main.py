"""Entry point for the Tile Walk overworld toy."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import pygame as pg

# ``python game/main.py`` does not put the repository root on the path, so
# ``config`` would not be importable without an install.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import runtime_config as CFG

from overworld.content import DEFAULT_CONTENT_DIR, load_content
from overworld.hud import DialoguePanel
from overworld.input import KeyboardInput
from overworld.render import PygameSurface, TileRenderer
from overworld.world import ContentError, Overworld
import settings as S


@dataclass
class GameConfig:
    resolution: tuple[int, int]
    fps_limit: int
    tile_px: int
    step_duration_ms: float
    content_path: Path
    caption: str


class GameApp:
    """Window, clock and the update-then-render loop around an :class:`Overworld`."""

    def __init__(self, config: GameConfig) -> None:
        self.config = config
        content = load_content(config.content_path)

        # Built before the window opens so bad content fails without a display.
        self.panel = DialoguePanel()
        self.world = Overworld(
            content.tilemap,
            content.npcs,
            content.spawn,
            step_duration=config.step_duration_ms,
            view=self.panel,
        )

        pg.init()
        pg.font.init()
        pg.display.set_caption(config.caption)
        self.screen = pg.display.set_mode(config.resolution, pg.RESIZABLE)
        self.clock = pg.time.Clock()
        self.renderer = TileRenderer(config.tile_px)
        self.canvas = PygameSurface(self.screen)
        self.keyboard = KeyboardInput()

    # ----------------------------------------------------------------- lifecycle
    def run(self) -> None:
        CFG.log_event(
            f"session started: {self.world.tilemap.width}x{self.world.tilemap.height} map, "
            f"{len(self.world.npcs)} npcs"
        )
        try:
            while True:
                dt = float(self.clock.tick(self.config.fps_limit))
                if not self._process_events():
                    break
                self._update(dt)
                self._draw()
                pg.display.flip()
        finally:
            CFG.log_event(f"session ended; talked to {', '.join(self.world.dialogue.talked_to) or 'nobody'}")
            pg.quit()

    # ------------------------------------------------------------------- internals
    def _process_events(self) -> bool:
        for event in pg.event.get():
            if event.type == pg.QUIT:
                return False
            if event.type == pg.VIDEORESIZE:
                self.screen = pg.display.set_mode(event.size, pg.RESIZABLE)
                self.canvas.surface = self.screen
            if event.type == pg.KEYDOWN and event.key == pg.K_ESCAPE:
                return False
        return True

    def _update(self, dt: float) -> None:
        state, interact_pressed = self.keyboard.poll()
        if interact_pressed:
            self.world.interact()
        self.world.tick(dt, state)

    def _draw(self) -> None:
        self.renderer.render(self.canvas, self.world)
        self.panel.draw(self.screen)


def build_config() -> GameConfig:
    resolution = (getattr(S, "WINDOW_W", 960), getattr(S, "WINDOW_H", 540))
    fps_limit = getattr(S, "FPS", 60)
    tile_px = getattr(S, "TILE_PX", 48)
    step_duration = float(getattr(S, "STEP_DURATION_MS", 110))
    content_path = CFG.get_content_dir(DEFAULT_CONTENT_DIR) / getattr(S, "CONTENT_FILE", "overworld.yaml")
    caption = getattr(S, "CAPTION", "Tile Walk")
    return GameConfig(resolution, fps_limit, tile_px, step_duration, content_path, caption)


def main(argv: Iterable[str] | None = None) -> int:
    config = build_config()
    try:
        app = GameApp(config)
    except ContentError as exc:
        CFG.log_error(f"content rejected: {exc}")
        print(f"Cannot start: {exc}", file=sys.stderr)
        return 1
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
