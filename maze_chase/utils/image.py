import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw
from typing import Tuple

# Type aliases for clarity
FloatArray = npt.NDArray[np.float32]
UInt8Array = npt.NDArray[np.uint8]


def tint_image(base: Image.Image, target_rgb: Tuple[int, int, int]) -> Image.Image:
    """
    Multiply the colour channels of every visible pixel by ``target_rgb``.
    White pixels take the target colour exactly; darker shading is preserved.
    """
    if base.mode != "RGBA":
        base = base.convert("RGBA")

    arr: UInt8Array = np.array(base, dtype=np.uint8)
    visible = arr[..., 3] > 0

    rgb: FloatArray = arr[..., :3].astype(np.float32) / 255.0
    target: FloatArray = np.array(target_rgb, dtype=np.float32)
    tinted: UInt8Array = np.clip(rgb * target, 0.0, 255.0).astype(np.uint8)

    out: UInt8Array = arr.copy()
    out[..., :3][visible] = tinted[visible]
    # alpha unchanged
    return Image.fromarray(out)


def draw_direction_triangle(
    image: Image.Image, size: int, dx: int, dy: int
) -> Image.Image:
    """
    Draw a filled triangle pointing (dx, dy) from the image center towards its
    edge, used as the facing marker on entity sprites.
    """
    if (dx, dy) == (0, 0):
        return image

    draw = ImageDraw.Draw(image)
    cx, cy = size // 2, size // 2

    tri_height = max(3, int(size * 0.3))
    tri_half_base = max(2, int(size * 0.14))

    px, py = -dy, dx  # perpendicular (for base width)
    tip = (cx + dx * tri_height, cy + dy * tri_height)
    base_a = (cx + px * tri_half_base, cy + py * tri_half_base)
    base_b = (cx - px * tri_half_base, cy - py * tri_half_base)

    draw.polygon([tip, base_a, base_b], fill=(0, 0, 0, 200))
    return image
