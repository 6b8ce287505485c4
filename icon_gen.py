"""Generate the window icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

ICON_SIZE = 64
_HEADER_H = 14
_ACCENT = "#0078D4"


def _load_font(size: int) -> ImageFont.ImageFont:
    for name in ("segoeuib.ttf", "DejaVuSans-Bold.ttf"):
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default()


def create_icon_image(today: date | None = None) -> Image.Image:
    """Return a 64×64 RGBA tear-off calendar page showing the day of month."""
    size = ICON_SIZE
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)
    draw.rectangle((0, 0, size - 1, _HEADER_H - 1), fill=_ACCENT)

    today = today or date.today()
    text = str(today.day)
    body_h = size - _HEADER_H

    # Largest font size that fits under the header strip
    font_size = 60
    font = _load_font(font_size)
    while font_size > 10 and isinstance(font, ImageFont.FreeTypeFont):
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= size - 4 and bbox[3] - bbox[1] <= body_h - 4:
            break
        font_size -= 1
        font = _load_font(font_size)

    # Centre the visible pixels (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = _HEADER_H + (body_h - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img
