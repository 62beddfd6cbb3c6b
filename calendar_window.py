"""Single-month work/off calendar window (tkinter)."""

import logging
from datetime import date
from tkinter import font as tkfont
import tkinter as tk

from calendar_logic import (
    PERSON,
    WEEKDAY_HEADERS,
    DayCell,
    MonthNavigator,
    WeekGrid,
    build_grid,
    classify,
    count_days,
    day_abbr,
    month_title,
    status_label,
)
from settings import load_settings

log = logging.getLogger(__name__)

# Colours
LIGHT = {
    "bg": "#F0F2F5",
    "paper": "#FFFFFF",
    "title": "#1A237E",
    "text": "#2C3E50",
    "muted": "#555555",
    "accent": "#3498DB",
    "border": "#E0E0E0",
    "work_bg": "#E3F2FD",
    "off_bg": "#E8F5E9",
    "work_fg": "#3498DB",
    "off_fg": "#27AE60",
    "button": "#3949AB",
    "button_active": "#283593",
    "header_bg": "#3949AB",
    "header_fg": "#FFFFFF",
}

DARK = {
    "bg": "#0F1115",
    "paper": "#1C2430",
    "title": "#E9EEF5",
    "text": "#E9EEF5",
    "muted": "#9FB3C8",
    "accent": "#2D8CFF",
    "border": "#283448",
    "work_bg": "#1E3A5F",
    "off_bg": "#1F3D2B",
    "work_fg": "#90CAF9",
    "off_fg": "#81C784",
    "button": "#3949AB",
    "button_active": "#283593",
    "header_bg": "#283448",
    "header_fg": "#E9EEF5",
}

CELL_W = 72
CELL_H = 72
MAX_WEEKS = 6


class _MonthPanel:
    """Pre-allocated widget pool for one month (weekday header + 6 weeks max)."""

    __slots__ = ("frame", "day_headers", "day_cells")

    def __init__(self, parent: tk.Frame, palette: dict, fonts: dict) -> None:
        self.frame = tk.Frame(parent, bg=palette["paper"])

        self.day_headers: list[tk.Label] = []
        for col, abbr in enumerate(WEEKDAY_HEADERS):
            lbl = tk.Label(
                self.frame, text=abbr, font=fonts["bold"],
                bg=palette["header_bg"], fg=palette["header_fg"], pady=4,
            )
            lbl.grid(row=0, column=col, sticky="we", padx=2, pady=(0, 4))
            self.day_headers.append(lbl)

        self.day_cells: list[tk.Canvas] = []
        for r in range(MAX_WEEKS):
            for c in range(7):
                cell = tk.Canvas(
                    self.frame, width=CELL_W, height=CELL_H,
                    bg=palette["paper"], highlightthickness=0, borderwidth=0,
                )
                cell.grid(row=r + 1, column=c, padx=2, pady=2)
                self.day_cells.append(cell)


class CalendarWindow:
    """Month calendar showing which days are work days and which are off."""

    def __init__(self, reference: date) -> None:
        self.reference = reference
        self.navigator = MonthNavigator()
        self.grid: WeekGrid | None = None

        settings = load_settings()
        self.palette = DARK if settings["dark_mode"] else LIGHT

        self.root = tk.Tk()
        self.root.title(f"Escala do {PERSON}")
        self.root.resizable(False, False)
        self.root.configure(bg=self.palette["bg"])

        self._setup_fonts()

        self._build_shell()
        self._rebuild_month()

        self.root.bind("<Left>", lambda _e: self.previous_month())
        self.root.bind("<Right>", lambda _e: self.next_month())
        self.root.bind("<Home>", lambda _e: self.go_today())
        self.root.bind("<Escape>", lambda _e: self.hide())
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Roboto" if "Roboto" in families else "TkDefaultFont"
        self.font_title = tkfont.Font(family=base, size=16, weight="bold")
        self.font_header = tkfont.Font(family=base, size=12, weight="bold")
        self.font_day = tkfont.Font(family=base, size=11)
        self.font_day_today = tkfont.Font(family=base, size=11, weight="bold")
        self.font_small = tkfont.Font(family=base, size=8)
        self.font_bold = tkfont.Font(family=base, size=9, weight="bold")
        self.font_footer = tkfont.Font(family=base, size=9)

    # ------------------------------------------------------------------
    # Build shell (once): title, nav bar, month panel, footer
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        p = self.palette
        outer = tk.Frame(self.root, bg=p["bg"])
        outer.pack(padx=16, pady=12)

        tk.Label(
            outer, text=f"Será que o {PERSON} vai trabalhar hoje?",
            font=self.font_title, bg=p["bg"], fg=p["title"],
        ).pack(pady=(0, 10))

        paper = tk.Frame(outer, bg=p["paper"], padx=12, pady=12)
        paper.pack()

        # Navigation row: month label on the left, buttons on the right
        nav = tk.Frame(paper, bg=p["paper"])
        nav.pack(fill="x", pady=(0, 8))

        self._month_label = tk.Label(
            nav, font=self.font_header, bg=p["paper"], fg=p["text"],
        )
        self._month_label.pack(side="left")

        for text, command in (
            ("Próximo Mês", self.next_month),
            ("Hoje", self.go_today),
            ("Mês Anterior", self.previous_month),
        ):
            tk.Button(
                nav, text=text, command=command, font=self.font_bold,
                bg=p["button"], fg="white", activebackground=p["button_active"],
                activeforeground="white", relief="flat", padx=10, pady=2,
                cursor="hand2",
            ).pack(side="right", padx=(4, 0))

        self._panel = _MonthPanel(paper, p, {"bold": self.font_bold})
        self._panel.frame.pack()

        self._footer_label = tk.Label(
            outer, font=self.font_footer, bg=p["bg"], fg=p["muted"],
        )
        self._footer_label.pack(pady=(8, 0))

    # ------------------------------------------------------------------
    # Rebuild the grid for the displayed month and redraw the pool
    # ------------------------------------------------------------------
    def _rebuild_month(self) -> None:
        self.grid = build_grid(self.navigator.displayed_month, self.reference)
        self._render(self.grid)

    def _render(self, grid: WeekGrid) -> None:
        """Reconfigure the pooled canvases from ``grid`` without creating widgets."""
        self._month_label.configure(text=month_title(grid.month))

        for i, canvas in enumerate(self._panel.day_cells):
            cell = grid.slots[i] if i < len(grid.slots) else None
            self._draw_cell(canvas, cell)

        self._footer_label.configure(text=self._footer_text(grid))

    def _draw_cell(self, canvas: tk.Canvas, cell: DayCell | None) -> None:
        p = self.palette
        canvas.delete("all")
        canvas.configure(bg=p["paper"])
        if cell is None:
            return

        fill = p["work_bg"] if cell.is_work_day else p["off_bg"]
        outline = p["accent"] if cell.is_today else p["border"]
        width = 2 if cell.is_today else 1
        canvas.create_rectangle(
            1, 1, CELL_W - 1, CELL_H - 1, fill=fill, outline=outline, width=width,
        )

        fg = p["accent"] if cell.is_today else p["text"]
        canvas.create_text(
            CELL_W // 2, CELL_H * 0.27, text=str(cell.date.day), fill=fg,
            font=self.font_day_today if cell.is_today else self.font_day,
        )
        canvas.create_text(
            CELL_W // 2, CELL_H * 0.52, text=day_abbr(cell.date), fill=fg,
            font=self.font_small,
        )
        canvas.create_text(
            CELL_W // 2, CELL_H * 0.77, text=status_label(cell.is_work_day),
            fill=p["work_fg"] if cell.is_work_day else p["off_fg"],
            font=self.font_bold,
        )

    # ------------------------------------------------------------------
    # Footer text
    # ------------------------------------------------------------------
    def _footer_text(self, grid: WeekGrid) -> str:
        today = date.today()
        today_str = (f"Hoje: {today.strftime('%d/%m/%Y')} · "
                     f"{status_label(classify(today, self.reference))}")
        work, off = count_days(grid)
        return f"{today_str}     {work} dias de trabalho, {off} de folga"

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def previous_month(self) -> None:
        self.navigator.retreat()
        self._rebuild_month()

    def next_month(self) -> None:
        self.navigator.advance()
        self._rebuild_month()

    def go_today(self) -> None:
        self.navigator.reset()
        self._rebuild_month()

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        log.debug("showing %s", month_title(self.navigator.displayed_month))
        self._rebuild_month()
        self.root.deiconify()
        self._position_window()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        log.debug("hiding window")
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Centre on screen at the natural size
    # ------------------------------------------------------------------
    def _position_window(self) -> None:
        self.root.update_idletasks()
        win_w = self.root.winfo_reqwidth()
        win_h = self.root.winfo_reqheight()
        x = max(0, (self.root.winfo_screenwidth() - win_w) // 2)
        y = max(0, (self.root.winfo_screenheight() - win_h) // 2)
        self.root.geometry(f"{win_w}x{win_h}+{x}+{y}")
