"""Top-down tile renderer driven by the player-centred camera."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Protocol, Sequence, Tuple

import pygame as pg

from .camera import Camera, viewport_tiles
from .entities import NPC, Player
from .tilemap import Tile
from .world import Overworld

Color = Tuple[int, ...]
Rect = Tuple[int, int, int, int]


class DrawSurface(Protocol):
    """The handful of immediate-mode calls the renderer needs."""

    @property
    def size(self) -> Tuple[int, int]: ...

    def clear(self, color: Color) -> None: ...

    def fill_rect(self, color: Color, rect: Rect) -> None: ...

    def fill_circle(self, color: Color, center: Tuple[int, int], radius: int) -> None: ...


class PygameSurface:
    """Adapt a ``pygame.Surface`` to :class:`DrawSurface`."""

    def __init__(self, surface: pg.Surface) -> None:
        self.surface = surface
        self._overlays: Dict[Tuple[Color, int, int], pg.Surface] = {}

    @property
    def size(self) -> Tuple[int, int]:
        return self.surface.get_size()

    def clear(self, color: Color) -> None:
        self.surface.fill(color[:3])

    def fill_rect(self, color: Color, rect: Rect) -> None:
        if len(color) == 4 and color[3] < 255:
            self.surface.blit(self._overlay(color, rect[2], rect[3]), (rect[0], rect[1]))
        else:
            self.surface.fill(color[:3], pg.Rect(rect))

    def fill_circle(self, color: Color, center: Tuple[int, int], radius: int) -> None:
        if len(color) == 4 and color[3] < 255:
            size = radius * 2 + 1
            overlay = pg.Surface((size, size), pg.SRCALPHA)
            pg.draw.circle(overlay, color, (radius, radius), radius)
            self.surface.blit(overlay, (center[0] - radius, center[1] - radius))
        else:
            pg.draw.circle(self.surface, color[:3], center, radius)

    def _overlay(self, color: Color, width: int, height: int) -> pg.Surface:
        key = (tuple(color), width, height)
        overlay = self._overlays.get(key)
        if overlay is None:
            overlay = pg.Surface((max(1, width), max(1, height)), pg.SRCALPHA)
            overlay.fill(color)
            self._overlays[key] = overlay
        return overlay


@dataclass(frozen=True)
class Palette:
    void: Color = (11, 16, 32)
    grass: Color = (47, 143, 78)
    grass_highlight: Color = (255, 255, 255, 15)
    wall: Color = (30, 58, 42)
    wall_inset: Color = (45, 106, 69)
    water: Color = (43, 108, 255)
    water_highlight: Color = (255, 255, 255, 41)
    player: Color = (255, 255, 255)
    skin: Color = (245, 215, 178)
    facing_dot: Color = (0, 0, 0, 89)


class TileRenderer:
    """Draw the visible slice of the overworld onto a :class:`DrawSurface`."""

    # Extra tiles drawn past the viewport so partial tiles at the edge are covered.
    MARGIN = 2

    def __init__(self, tile_px: int, palette: Palette | None = None) -> None:
        if tile_px <= 0:
            raise ValueError("tile_px must be positive")
        self.tile_px = tile_px
        self.palette = palette or Palette()
        self._npc_colors: Dict[str, Color] = {}

    def camera_for(self, surface: DrawSurface, world: Overworld) -> Camera:
        view_w, view_h = viewport_tiles(*surface.size, self.tile_px)
        return world.camera(view_w, view_h)

    def render(self, surface: DrawSurface, world: Overworld) -> Camera:
        camera = self.camera_for(surface, world)
        surface.clear(self.palette.void)
        self._draw_tiles(surface, world, camera)
        self._draw_entities(surface, world.npcs, world.player, camera)
        self._draw_facing_indicator(surface, world.player, camera)
        return camera

    # ------------------------------------------------------------------ tiles
    def _draw_tiles(self, surface: DrawSurface, world: Overworld, camera: Camera) -> None:
        ts = self.tile_px
        tilemap = world.tilemap
        for sy in range(camera.view_h + self.MARGIN):
            for sx in range(camera.view_w + self.MARGIN):
                mx = camera.origin_x + sx
                my = camera.origin_y + sy
                x, y = sx * ts, sy * ts
                if not tilemap.in_bounds(mx, my):
                    surface.fill_rect(self.palette.void, (x, y, ts, ts))
                else:
                    self._draw_tile(surface, tilemap.tile_at(mx, my), x, y)

    def _draw_tile(self, surface: DrawSurface, tile: Tile, x: int, y: int) -> None:
        ts = self.tile_px
        pal = self.palette
        if tile is Tile.OPEN:
            surface.fill_rect(pal.grass, (x, y, ts, ts))
            surface.fill_rect(pal.grass_highlight, (x, y, ts, 2))
        elif tile is Tile.BLOCKING:
            surface.fill_rect(pal.wall, (x, y, ts, ts))
            surface.fill_rect(pal.wall_inset, (x + 4, y + 4, ts - 8, ts - 8))
        elif tile is Tile.LIQUID:
            surface.fill_rect(pal.water, (x, y, ts, ts))
            surface.fill_rect(pal.water_highlight, (x, y + ts // 2, ts, 2))

    # --------------------------------------------------------------- entities
    def _draw_entities(
        self,
        surface: DrawSurface,
        npcs: Sequence[NPC],
        player: Player,
        camera: Camera,
    ) -> None:
        # Player last so it stays on top of anything sharing its tile.
        for npc in npcs:
            self._draw_person(surface, npc.position.x, npc.position.y, self._npc_color(npc), camera)
        self._draw_person(surface, player.position.x, player.position.y, self.palette.player, camera)

    def _draw_person(self, surface: DrawSurface, tx: int, ty: int, color: Color, camera: Camera) -> None:
        ts = self.tile_px
        sx, sy = camera.to_screen(tx, ty, ts)
        surface.fill_rect(color, (sx + int(ts * 0.25), sy + int(ts * 0.2), int(ts * 0.5), int(ts * 0.55)))
        surface.fill_rect(self.palette.skin, (sx + int(ts * 0.33), sy + int(ts * 0.08), int(ts * 0.34), int(ts * 0.2)))

    def _draw_facing_indicator(self, surface: DrawSurface, player: Player, camera: Camera) -> None:
        target = player.facing_tile()
        sx, sy = camera.to_screen(target.x, target.y, self.tile_px)
        center = (sx + self.tile_px // 2, sy + self.tile_px // 2)
        surface.fill_circle(self.palette.facing_dot, center, 4)

    def _npc_color(self, npc: NPC) -> Color:
        color = self._npc_colors.get(npc.color)
        if color is None:
            try:
                parsed = pg.Color(npc.color)
            except ValueError:
                parsed = pg.Color(self.palette.player)
            color = (parsed.r, parsed.g, parsed.b)
            self._npc_colors[npc.color] = color
        return color
