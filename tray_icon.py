"""System-tray icon setup via pystray."""

from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu

from calendar_logic import CalendarDate
from selection import MODE_LABELS, SelectionMode


def tray_title(today: CalendarDate, mode: SelectionMode) -> str:
    return f"Date Picker – {today.isoformat()} ({MODE_LABELS[mode]})"


def create_tray(
    icon_image: Image.Image,
    today: CalendarDate,
    current_mode: Callable[[], SelectionMode],
    on_show: Callable[[], None],
    on_exit: Callable[[], None],
    on_mode: Callable[[SelectionMode], None] | None = None,
    on_settings: Callable[[], None] | None = None,
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started).

    With *on_mode*, the menu offers one radio entry per selection mode,
    checked according to *current_mode*.
    """
    items: list[MenuItem | Menu] = [
        MenuItem("Show Picker", lambda _icon, _item: on_show(), default=True),
    ]
    if on_mode is not None:
        items.append(Menu.SEPARATOR)
        for mode, label in MODE_LABELS.items():
            items.append(MenuItem(
                label,
                lambda _icon, _item, m=mode: on_mode(m),
                checked=lambda _item, m=mode: current_mode() is m,
                radio=True,
            ))
        items.append(Menu.SEPARATOR)
    if on_settings is not None:
        items.append(MenuItem("Settings", lambda _icon, _item: on_settings()))
    items.append(Menu.SEPARATOR)
    items.append(MenuItem("Exit", lambda _icon, _item: on_exit()))
    return pystray.Icon(
        "mini-date-picker", icon_image, tray_title(today, current_mode()), Menu(*items),
    )
