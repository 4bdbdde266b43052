"""Draw braille bit strings as dot images."""

from __future__ import annotations

import numpy as np
from PIL import Image, ImageDraw

from brailletables.constants import BRAILLE_WIDTH
from brailletables.errors import InvalidConfig, KeyNotFound
from brailletables.translator import split_every

# Colour palette
_BG = "#f5e6c8"
_DOT_RAISED = "#1a1a2e"
_DOT_FLAT = "#d8c9aa"

_CELL_ROWS = 3
_CELL_COLS = 2


def dot_matrix(bits: str) -> np.ndarray:
    """Boolean ``(3, 2 * cells)`` array of raised dots.

    Within a cell, dots 1-3 run down the left column and dots 4-6 down
    the right, matching the order of the bit string.
    """
    cells = split_every(bits, BRAILLE_WIDTH)
    matrix = np.zeros((_CELL_ROWS, _CELL_COLS * len(cells)), dtype=bool)
    for i, cell in enumerate(cells):
        if any(ch not in "01" for ch in cell):
            raise KeyNotFound(cell)
        dots = np.array([ch == "1" for ch in cell], dtype=bool)
        # column-major: dots 1,2,3 then 4,5,6
        matrix[:, _CELL_COLS * i:_CELL_COLS * (i + 1)] = dots.reshape(
            (_CELL_ROWS, _CELL_COLS), order="F"
        )
    return matrix


def render_cells(bits: str, cell_px: int = 24) -> Image.Image:
    """Render *bits* as an RGB image; *cell_px* is the width of one cell's dots."""
    if cell_px < 2:
        raise InvalidConfig(f"cell size must be at least 2 pixels, got {cell_px}")
    matrix = dot_matrix(bits)
    rows, cols = matrix.shape
    n_cells = cols // _CELL_COLS
    pitch = cell_px // 2  # distance between dot centres
    gap = pitch  # blank space between cells
    width = max(1, n_cells * (_CELL_COLS * pitch + gap) + gap)
    height = rows * pitch + 2 * gap

    img = Image.new("RGB", (width, height), _BG)
    draw = ImageDraw.Draw(img)
    radius = max(1, pitch // 3)
    for col in range(cols):
        cell, within = divmod(col, _CELL_COLS)
        cx = gap + cell * (_CELL_COLS * pitch + gap) + within * pitch + pitch // 2
        for row in range(rows):
            cy = gap + row * pitch + pitch // 2
            box = (cx - radius, cy - radius, cx + radius, cy + radius)
            if matrix[row, col]:
                draw.ellipse(box, fill=_DOT_RAISED)
            else:
                draw.ellipse(box, outline=_DOT_FLAT)
    return img
