CODE_TABLE = " `1234567890-=~!@#$%^&*()_+qwertyuiop[]QWERTYUIOP{}|asdfghjkl;'ASDFGHJKL:zxcvbnm,./ZXCVBNM<>?"

# Shades from U+2591-U+2593 plus full block
BLOCKS = " ░▒▓█"

STANDARD = " .:-=+*#%@"
SIMPLE = " .oO@"
BINARY = " █"
DETAILED = " .'`^\",:;Il!i><~+_-?][}{1)(|/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

DEFAULT_PALETTE = BLOCKS

PALETTES = {
    "blocks": BLOCKS,
    "standard": STANDARD,
    "simple": SIMPLE,
    "binary": BINARY,
    "detailed": DETAILED,
}


def code_overlap(palette: str) -> str:
    """Return the palette characters that are also code table symbols, in palette order."""
    return "".join(c for c in dict.fromkeys(palette) if c in CODE_TABLE)
