import numpy as np

from asciipress.model import check_palette


def bucket_indices(grid, n: int) -> np.ndarray:
    """Map 8-bit intensities to palette indices by uniform bucketing.

    Each sample lands in bucket ``floor(sample / (256 / n))``, clamped to
    ``n - 1``. Callers must ensure ``n >= 1``.
    """
    arr = np.asarray(grid, dtype=np.float64)
    divider = 256.0 / n
    return np.minimum((arr / divider).astype(np.intp), n - 1)


def render_rows(grid, palette: str) -> list[str]:
    check_palette(palette)
    indices = bucket_indices(grid, len(palette))
    chars = np.array(list(palette))[indices]
    return ["".join(row) for row in chars]


def render(grid, palette: str) -> str:
    """Render a 2D intensity grid as text, one line per row, each ending in a newline."""
    return "".join(row + "\n" for row in render_rows(grid, palette))
