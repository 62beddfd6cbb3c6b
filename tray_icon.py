"""System-tray icon setup via pystray."""

from datetime import date
from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu

from calendar_logic import PERSON, classify, status_label
from icon_gen import create_icon_image


def tray_title(is_work_day: bool) -> str:
    return f"{PERSON}: {status_label(is_work_day)} hoje"


def create_tray(
    icon_image: Image.Image,
    is_work_day: bool,
    on_show: Callable[[], None],
    on_today: Callable[[], None],
    on_exit: Callable[[], None],
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    menu = Menu(
        MenuItem("Mostrar calendário", lambda _icon, _item: on_show(), default=True),
        MenuItem("Ir para hoje", lambda _icon, _item: on_today()),
        Menu.SEPARATOR,
        MenuItem("Sair", lambda _icon, _item: on_exit()),
    )
    return pystray.Icon("shift-calendar", icon_image, tray_title(is_work_day), menu)


def refresh_tray(tray: pystray.Icon, reference: date, today: date | None = None) -> bool:
    """Point the tray image and tooltip at ``today``'s status and return it."""
    is_work_day = classify(today or date.today(), reference)
    tray.icon = create_icon_image(is_work_day)
    tray.title = tray_title(is_work_day)
    return is_work_day
