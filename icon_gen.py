"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from PIL import Image, ImageDraw, ImageFont

WORK_COLOR = "#3498db"
OFF_COLOR = "#27ae60"


def create_icon_image(is_work_day: bool) -> Image.Image:
    """Return a 64×64 RGBA image: white ``T`` or ``F`` on a coloured tile."""
    size = 64
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)

    fill = WORK_COLOR if is_work_day else OFF_COLOR
    draw.rounded_rectangle((0, 0, size - 1, size - 1), radius=12, fill=fill)

    letter = "T" if is_work_day else "F"

    # Find the largest font size that fits inside the tile padding
    font_size = 56
    font = None
    while font_size > 10:
        try:
            font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
        except OSError:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), letter, font=font)
        if bbox[2] - bbox[0] <= size - 16 and bbox[3] - bbox[1] <= size - 16:
            break
        font_size -= 1

    # Centre the actual visible pixels (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), letter, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = (size - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), letter, fill="white", font=font)

    return img
