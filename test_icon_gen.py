"""Tray icon image tests."""

from icon_gen import create_icon_image


def test_icon_size_and_mode():
    img = create_icon_image(7)
    assert img.size == (64, 64)
    assert img.mode == "RGBA"


def test_icon_draws_day_number():
    img = create_icon_image(28)
    # Some dark text pixels below the header strip
    body = img.crop((4, 18, 60, 60)).convert("L")
    assert min(body.getdata()) < 100
