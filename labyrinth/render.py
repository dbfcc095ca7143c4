# region Imports
import io
import numpy as np
from PIL import Image
from labyrinth.config import BLOCKED_GLYPH, PASSABLE, PASSABLE_GLYPH, PNG_SCALE
# endregion


# region Text Glyphs
def to_glyphs(
    grid: np.ndarray,
    passable: str = PASSABLE_GLYPH,
    blocked: str = BLOCKED_GLYPH,
) -> str:
    """One line per grid row, one glyph per cell."""
    return "\n".join(
        "".join(passable if v == PASSABLE else blocked for v in row)
        for row in grid
    )
# endregion


# region PNG
def to_image(grid: np.ndarray, scale: int = PNG_SCALE) -> Image.Image:
    """Grayscale image, white = passable. Row 0 (southmost) is drawn at the top."""
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")
    px = np.where(grid == PASSABLE, 255, 0).astype("uint8")
    px = np.kron(px, np.ones((scale, scale), dtype="uint8"))
    return Image.fromarray(px, "L")


def to_png(grid: np.ndarray, scale: int = PNG_SCALE) -> bytes:
    buf = io.BytesIO()
    to_image(grid, scale).save(buf, "PNG")
    return buf.getvalue()
# endregion
