import logging
from dataclasses import dataclass, field

from asciipress.charsets import CODE_TABLE, code_overlap
from asciipress.errors import CapacityError, ConfigurationError

logger = logging.getLogger(__name__)


def check_palette(palette: str) -> None:
    if not palette:
        raise ConfigurationError("Palette must contain at least one character")


@dataclass(frozen=True)
class CodeTable:
    """Split of the code table into index symbols and value symbols for one palette.

    The first ``len(palette)`` symbols name palette colours; every remaining
    symbol at position j stands for a run of j + 2 characters.
    """

    palette: str
    index_symbols: str
    value_symbols: str
    colour_index: dict[str, int] = field(default_factory=dict)
    symbol_index: dict[str, int] = field(default_factory=dict)
    symbol_extra: dict[str, int] = field(default_factory=dict)

    @property
    def max_run(self) -> int:
        return len(self.value_symbols) + 1

    @classmethod
    def for_palette(cls, palette: str, check_capacity: bool = True) -> "CodeTable":
        check_palette(palette)
        # Oversized palettes can still be decoded, only the first colours are reachable
        if check_capacity and len(palette) > len(CODE_TABLE):
            raise CapacityError(f"Palette has {len(palette)} colours, the code table can index at most {len(CODE_TABLE)}")

        overlap = code_overlap(palette)
        if overlap:
            logger.debug("Palette characters %r are also code table symbols", overlap)

        n = len(palette)
        index_symbols = CODE_TABLE[:n]
        value_symbols = CODE_TABLE[n:]
        return cls(
            palette=palette,
            index_symbols=index_symbols,
            value_symbols=value_symbols,
            colour_index={c: i for i, c in enumerate(palette)},
            symbol_index={s: i for i, s in enumerate(index_symbols)},
            # Value symbol j adds j + 1 copies after the run's first character
            symbol_extra={s: j + 1 for j, s in enumerate(value_symbols)},
        )
