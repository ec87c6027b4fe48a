import colorsys
import random
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw

from maze_chase.actions import DIRECTION_DELTAS, Direction
from maze_chase.components import AppearanceName, Position
from maze_chase.grid import cell_at
from maze_chase.state import State
from maze_chase.types import CellKind
from maze_chase.utils.image import draw_direction_triangle, tint_image


DEFAULT_RESOLUTION = 640

RGBA = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Palette:
    background: RGBA = (0, 0, 128, 255)
    wall: RGBA = (0, 0, 255, 255)
    pellet: RGBA = (255, 215, 0, 255)
    power_pellet: RGBA = (255, 165, 0, 255)
    player: RGBA = (255, 230, 0, 255)
    caught: RGBA = (200, 40, 40, 255)


DEFAULT_PALETTE = Palette()

PICKUP_SCALE: Dict[CellKind, float] = {
    CellKind.PELLET: 0.2,
    CellKind.POWER_PELLET: 0.45,
}


@lru_cache(maxsize=2048)
def tag_to_color(tag: str) -> Tuple[int, int, int]:
    """
    Deterministically map an appearance tag to a bright RGB colour.
    """
    rng = random.Random(tag)
    h = rng.random()
    s = 0.6 + 0.3 * rng.random()
    v = 0.8 + 0.2 * rng.random()
    r, g, b = colorsys.hsv_to_rgb(h, s, v)
    return int(r * 255), int(g * 255), int(b * 255)


@lru_cache(maxsize=256)
def player_sprite(size: int, facing: Direction, color: RGBA) -> Image.Image:
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    margin = max(1, size // 10)
    draw.ellipse([margin, margin, size - margin, size - margin], fill=color)
    dx, dy = DIRECTION_DELTAS[facing]
    return draw_direction_triangle(img, size, dx, dy)


@lru_cache(maxsize=256)
def adversary_sprite(size: int, facing: Direction, tag: str) -> Image.Image:
    """
    Ghost silhouette drawn in white, then tinted with the tag colour.
    """
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    margin = max(1, size // 10)
    top, bottom = margin, size - margin
    left, right = margin, size - margin
    mid = (top + bottom) // 2
    draw.pieslice([left, top, right, bottom], 180, 360, fill=(255, 255, 255, 255))
    draw.rectangle([left, mid, right, bottom], fill=(230, 230, 230, 255))
    img = tint_image(img, tag_to_color(tag))
    dx, dy = DIRECTION_DELTAS[facing]
    return draw_direction_triangle(img, size, dx, dy)


def _draw_maze(
    draw: ImageDraw.ImageDraw, state: State, cell_size: int, palette: Palette
) -> None:
    for y in range(state.height):
        for x in range(state.width):
            kind = cell_at(state.grid, Position(x, y))
            x0, y0 = x * cell_size, y * cell_size
            if kind == CellKind.WALL:
                draw.rectangle(
                    [x0, y0, x0 + cell_size - 1, y0 + cell_size - 1], fill=palette.wall
                )
            elif kind in PICKUP_SCALE:
                radius = max(1, int(cell_size * PICKUP_SCALE[kind] / 2))
                cx, cy = x0 + cell_size // 2, y0 + cell_size // 2
                color = (
                    palette.power_pellet
                    if kind == CellKind.POWER_PELLET
                    else palette.pellet
                )
                draw.ellipse([cx - radius, cy - radius, cx + radius, cy + radius], fill=color)


def render(
    state: State,
    resolution: int = DEFAULT_RESOLUTION,
    palette: Optional[Palette] = None,
) -> Image.Image:
    """
    Renders the session as a PIL Image ``resolution`` pixels wide.
    Adversaries are drawn over the player so a catch is visible.
    """
    palette = palette or DEFAULT_PALETTE
    cell_size: int = max(1, resolution // state.width)
    img = Image.new(
        "RGBA", (state.width * cell_size, state.height * cell_size), palette.background
    )
    _draw_maze(ImageDraw.Draw(img), state, cell_size, palette)

    player_id = state.player_id
    player_pos = state.position[player_id]
    caught = any(state.position.get(eid) == player_pos for eid in state.roster)
    player_tex = player_sprite(
        cell_size,
        state.facing[player_id],
        palette.caught if caught else palette.player,
    )
    img.alpha_composite(player_tex, (player_pos.x * cell_size, player_pos.y * cell_size))

    for eid in state.roster:
        pos = state.position.get(eid)
        if pos is None:
            continue
        appearance = state.appearance.get(eid)
        tag = (
            appearance.tag
            if appearance is not None and appearance.name == AppearanceName.ADVERSARY
            else str(eid)
        )
        tex = adversary_sprite(cell_size, state.facing[eid], tag)
        img.alpha_composite(tex, (pos.x * cell_size, pos.y * cell_size))

    return img


@dataclass
class TextureRenderer:
    resolution: int = DEFAULT_RESOLUTION
    palette: Palette = field(default_factory=Palette)

    def render(self, state: State) -> Image.Image:
        return render(state, resolution=self.resolution, palette=self.palette)
