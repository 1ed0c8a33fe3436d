from .camera import Camera, viewport_tiles
from .content import OverworldContent, load_content, parse_content
from .dialogue import DialogueController, DialogueSession
from .entities import NPC, Direction, Player, Position, npc_at
from .input import InputState, InteractEdge, KeyboardInput
from .movement import MovementController, resolve_direction
from .render import DrawSurface, Palette, PygameSurface, TileRenderer
from .tilemap import Region, Tile, TileMap
from .world import ContentError, Overworld, validate_world
__all__ = ["Camera","viewport_tiles","OverworldContent","load_content","parse_content","DialogueController","DialogueSession","NPC","Direction","Player","Position","npc_at","InputState","InteractEdge","KeyboardInput","MovementController","resolve_direction","DrawSurface","Palette","PygameSurface","TileRenderer","Region","Tile","TileMap","ContentError","Overworld","validate_world"]
