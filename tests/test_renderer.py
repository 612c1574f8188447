import numpy as np
import pytest

from asciipress.errors import ConfigurationError
from asciipress.renderer import bucket_indices, render, render_rows


def test_bucket_boundaries_four_colours():
    grid = np.array([[0, 63, 64, 127, 128, 191, 192, 255]], dtype=np.uint8)
    np.testing.assert_array_equal(bucket_indices(grid, 4), [[0, 0, 1, 1, 2, 2, 3, 3]])


def test_bucket_never_exceeds_last_index():
    grid = np.array([[85, 86, 170, 171, 255]], dtype=np.uint8)
    np.testing.assert_array_equal(bucket_indices(grid, 3), [[0, 1, 1, 2, 2]])


def test_single_colour_palette():
    grid = np.array([[0, 128, 255]], dtype=np.uint8)
    assert render_rows(grid, "x") == ["xxx"]


def test_one_bucket_per_intensity():
    palette = "".join(chr(0x100 + i) for i in range(256))
    grid = np.arange(256, dtype=np.uint8).reshape(1, 256)
    assert render_rows(grid, palette) == [palette]


def test_render_one_line_per_row():
    grid = np.array([[0, 255], [255, 0]], dtype=np.uint8)
    assert render(grid, " #") == " #\n# \n"


def test_render_accepts_nested_lists():
    assert render([[0, 100, 200]], " ░▒▓█") == " ░▓\n"


def test_render_empty_grid():
    assert render(np.zeros((0, 0), dtype=np.uint8), " #") == ""


def test_empty_palette_rejected():
    with pytest.raises(ConfigurationError, match="at least one character"):
        render([[0]], "")
