from PIL import Image

# Palette " #": index symbols " `", value symbols start at "1"
PALETTE = " #"


def make_split_image(width=4, height=2, mode="L"):
    """Image whose left half is black and right half is white."""
    img = Image.new(mode, (width, height))
    pixels = img.load()
    white = 255 if mode == "L" else (255, 255, 255)
    black = 0 if mode == "L" else (0, 0, 0)
    for y in range(height):
        for x in range(width):
            pixels[x, y] = black if x < width // 2 else white
    return img
