"""Entry point: glues pystray (daemon thread) with tkinter (main thread)."""

import ctypes
import logging
import os
import threading
from datetime import date

from calendar_logic import CalendarDate
from calendar_window import CalendarWindow
from icon_gen import create_icon_image
from selection import SelectionMode
from tray_icon import create_tray, tray_title


def configure_logging() -> None:
    level = os.environ.get("MINI_DATE_PICKER_LOG", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    configure_logging()

    # DPI awareness so positions / fonts are crisp on Hi-DPI Windows monitors
    try:
        ctypes.windll.shcore.SetProcessDpiAwareness(1)
    except (AttributeError, OSError):
        pass

    def on_mode_change(mode: SelectionMode) -> None:
        # Keep the tray tooltip and radio entries in step with the picker
        tray.title = tray_title(CalendarDate.from_date(date.today()), mode)
        tray.update_menu()

    cal_win = CalendarWindow(on_mode_change=on_mode_change)

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        cal_win.root.after(0, cal_win.toggle)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            cal_win.root.destroy()
        cal_win.root.after(0, _quit)

    def on_mode(mode: SelectionMode) -> None:
        cal_win.root.after(0, cal_win.set_mode, mode)

    def on_settings() -> None:
        cal_win.root.after(0, cal_win.open_settings)

    today = date.today()
    tray = create_tray(create_icon_image(today.day), CalendarDate.from_date(today),
                       lambda: cal_win.state.mode, on_show, on_exit,
                       on_mode=on_mode, on_settings=on_settings)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()

    cal_win.root.mainloop()


if __name__ == "__main__":
    main()
