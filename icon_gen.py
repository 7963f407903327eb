"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

ACCENT = "#0078D4"


def create_icon_image(day: int | None = None) -> Image.Image:
    """Return a 64×64 RGBA image: a calendar page showing the day of month."""
    size = 64
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)

    # Calendar page header strip
    header_h = 14
    draw.rectangle((0, 0, size - 1, header_h), fill=ACCENT)
    draw.rectangle((0, 0, size - 1, size - 1), outline=ACCENT, width=2)

    text = str(day if day is not None else date.today().day)
    avail_h = size - header_h - 4

    # Find the largest font size that fits below the header
    font_size = 80
    font = None
    while font_size > 10:
        try:
            font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
        except OSError:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= size - 8 and bbox[3] - bbox[1] <= avail_h:
            break
        font_size -= 1

    # Centre the visible pixels (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = header_h + (size - header_h - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img
