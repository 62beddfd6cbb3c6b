"""Entry point: glues pystray (daemon thread) with tkinter (main thread)."""

import ctypes
import logging
import threading
from datetime import date

from calendar_logic import classify
from calendar_window import CalendarWindow
from icon_gen import create_icon_image
from settings import load_settings
from tray_icon import create_tray, refresh_tray

log = logging.getLogger(__name__)

# How often the tray checks whether the calendar day changed
_DAY_CHECK_MS = 60_000


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings["log_level"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # DPI awareness so positions / fonts are crisp on Hi-DPI monitors
    try:
        ctypes.windll.shcore.SetProcessDpiAwareness(1)
    except (AttributeError, OSError):
        pass

    # Parity origin, fixed for the lifetime of the process
    reference = date.today()
    log.info("starting with reference date %s", reference)

    cal_win = CalendarWindow(reference)

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        cal_win.root.after(0, cal_win.toggle)

    def on_today() -> None:
        def _today() -> None:
            cal_win.go_today()
            cal_win.show()
        cal_win.root.after(0, _today)

    def on_exit() -> None:
        def _quit() -> None:
            log.info("exiting")
            tray.stop()
            cal_win.root.destroy()
        cal_win.root.after(0, _quit)

    is_work_day = classify(reference, reference)
    tray = create_tray(create_icon_image(is_work_day), is_work_day,
                       on_show, on_today, on_exit)

    shown_day = reference

    def watch_day() -> None:
        nonlocal shown_day
        today = date.today()
        if today != shown_day:
            shown_day = today
            is_work_day = refresh_tray(tray, reference, today)
            log.info("day changed to %s, tray now %s", today,
                     "work" if is_work_day else "off")
        cal_win.root.after(_DAY_CHECK_MS, watch_day)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()

    cal_win.show()
    cal_win.root.after(_DAY_CHECK_MS, watch_day)
    # tkinter main loop on the main thread
    cal_win.root.mainloop()


if __name__ == "__main__":
    main()
