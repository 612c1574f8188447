import logging
from collections.abc import Iterator
from typing import TextIO

from asciipress.errors import ConfigurationError
from asciipress.model import CodeTable

logger = logging.getLogger(__name__)


def iter_runs(text: str, max_run: int) -> Iterator[tuple[str, int]]:
    """Yield (character, length) for each run in ``text``, splitting runs longer than ``max_run``."""
    start = 0
    while start < len(text):
        end = start + 1
        while end < len(text) and end - start < max_run and text[end] == text[start]:
            end += 1
        yield text[start], end - start
        start = end


def encode(text: str, palette: str) -> str:
    """Encode a flat string of palette characters into compact symbols.

    Each run becomes one index symbol, followed by a value symbol when the run
    is two or more characters long. Characters missing from the palette are
    encoded as palette index 0.
    """
    table = CodeTable.for_palette(palette)
    parts = []
    runs = 0
    for char, length in iter_runs(text, table.max_run):
        parts.append(table.index_symbols[table.colour_index.get(char, 0)])
        if length > 1:
            parts.append(table.value_symbols[length - 2])
        runs += 1
    logger.debug("Encoded %d characters as %d runs, %d symbols", len(text), runs, len(parts))
    return "".join(parts)


def decode(data: str, palette: str) -> str:
    """Expand compact symbols back into the flat character sequence."""
    table = CodeTable.for_palette(palette, check_capacity=False)
    out = []
    i = 0
    while i < len(data):
        colour = palette[table.symbol_index.get(data[i], 0)]
        i += 1
        extra = 0
        if i < len(data) and data[i] in table.symbol_extra:
            extra = table.symbol_extra[data[i]]
            i += 1
        out.append(colour * (1 + extra))
    logger.debug("Decoded %d symbols as %d runs", len(data), len(out))
    return "".join(out)


def flatten(rendered: str) -> str:
    """Join the lines of a rendered buffer, dropping their terminators."""
    return "".join(line.removesuffix("\r") for line in rendered.split("\n"))


def wrap(flat: str, width: int) -> list[str]:
    if width < 1:
        raise ConfigurationError(f"Width must be at least 1, got {width}")
    return [flat[i : i + width] for i in range(0, len(flat), width)]


def compress(rendered: str, palette: str) -> str:
    return encode(flatten(rendered), palette)


def decompress(line: str, palette: str, width: int) -> list[str]:
    return wrap(decode(line.rstrip("\r\n"), palette), width)


def write_compressed(out: TextIO, rendered: str, palette: str) -> None:
    data = compress(rendered, palette)
    out.write(data + "\n")


def write_decompressed(out: TextIO, line: str, palette: str, width: int) -> None:
    for row in decompress(line, palette, width):
        out.write(row + "\n")
