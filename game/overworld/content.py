"""Load the map description and NPC roster from YAML content files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from .entities import NPC, Position
from .tilemap import Region, TileMap
from .world import ContentError

# Bundled content ships as package data beside this module.
DEFAULT_CONTENT_DIR = Path(__file__).resolve().with_name("data")


@dataclass(frozen=True)
class OverworldContent:
    tilemap: TileMap
    npcs: Tuple[NPC, ...]
    spawn: Position


def _int_pair(value: Any, what: str) -> Tuple[int, int]:
    if not (isinstance(value, (list, tuple)) and len(value) == 2 and all(isinstance(v, int) for v in value)):
        raise ContentError(f"{what} must be [int, int], got {value!r}")
    return value[0], value[1]


def _regions(entries: Any, what: str) -> List[Region]:
    regions: List[Region] = []
    for entry in entries or []:
        if not (isinstance(entry, (list, tuple)) and len(entry) == 4 and all(isinstance(v, int) for v in entry)):
            raise ContentError(f"{what} entries must be [x0, y0, x1, y1], got {entry!r}")
        regions.append(Region(*entry))
    return regions


def _build_map(data: Dict[str, Any]) -> TileMap:
    try:
        layout = data.get("layout")
        if layout:
            return TileMap.from_layout([str(row) for row in layout])
        width = data.get("width")
        height = data.get("height")
        if not isinstance(width, int) or not isinstance(height, int):
            raise ContentError("map needs integer 'width' and 'height' or a 'layout'")
        return TileMap.generate(
            width,
            height,
            liquid_regions=_regions(data.get("liquid"), "map.liquid"),
            obstacles=_regions(data.get("obstacles"), "map.obstacles"),
        )
    except ContentError:
        raise
    except ValueError as exc:
        raise ContentError(f"Invalid map: {exc}") from exc


def _build_npcs(entries: Any) -> Tuple[NPC, ...]:
    npcs: List[NPC] = []
    for entry in entries or []:
        if not isinstance(entry, dict):
            raise ContentError(f"NPC entries must be mappings, got {entry!r}")
        name = str(entry.get("name", ""))
        x, y = _int_pair(entry.get("position"), f"NPC {name!r} position")
        lines = entry.get("lines") or []
        if isinstance(lines, str):
            lines = [lines]
        try:
            npcs.append(NPC(
                name=name,
                position=Position(x, y),
                color=str(entry.get("color", "#ffffff")),
                lines=tuple(lines),
            ))
        except ValueError as exc:
            raise ContentError(str(exc)) from exc
    return tuple(npcs)


def parse_content(data: Dict[str, Any]) -> OverworldContent:
    if not isinstance(data, dict):
        raise ContentError("Overworld content must be a mapping")
    map_data = data.get("map")
    if not isinstance(map_data, dict):
        raise ContentError("Overworld content needs a 'map' section")
    tilemap = _build_map(map_data)
    spawn = Position(*_int_pair(data.get("spawn"), "spawn"))
    npcs = _build_npcs(data.get("npcs"))
    return OverworldContent(tilemap, npcs, spawn)


def load_content(path: str | Path) -> OverworldContent:
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as fp:
            data = yaml.safe_load(fp) or {}
    except OSError as exc:
        raise ContentError(f"Cannot read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ContentError(f"Malformed YAML in {path}: {exc}") from exc
    return parse_content(data)
