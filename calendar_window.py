"""Single-month date picker window (tkinter) positioned above the taskbar."""

import logging
from typing import Callable
from datetime import date
from tkinter import font as tkfont
import tkinter as tk

import picker_state as ps
from calendar_logic import DAY_ABBR, CalendarDate, month_title
from selection import (
    MODE_LABELS,
    Highlight,
    SelectionMode,
    highlight,
    range_length,
    selection_bounds,
)
from settings import load_settings, selection_mode, update_settings

logger = logging.getLogger(__name__)

# Colours
ACCENT = "#0078D4"
SEL_BG = "#B3D7F2"
HEADER_BG = "#F3F3F3"
GRID_BG = "white"
WEEKEND_FG = "#CC0000"


def _today() -> CalendarDate:
    return CalendarDate.from_date(date.today())


class _MonthPanel:
    """Pre-allocated widget pool for one month (header + 6 weeks max)."""

    __slots__ = ("frame", "header", "day_headers", "day_cells")

    def __init__(self, parent: tk.Frame, fonts: dict, on_click) -> None:
        self.frame = tk.Frame(parent, bg=GRID_BG)

        self.header = tk.Label(
            self.frame, font=fonts["header"], bg=HEADER_BG, fg="#333333",
        )
        self.header.grid(row=0, column=0, columnspan=7, sticky="we", pady=(0, 2))

        self.day_headers: list[tk.Label] = []
        for col, abbr in enumerate(DAY_ABBR):
            fg = WEEKEND_FG if col >= 5 else "#333333"
            lbl = tk.Label(
                self.frame, text=abbr, font=fonts["bold"], bg=GRID_BG, fg=fg, width=3,
            )
            lbl.grid(row=1, column=col)
            self.day_headers.append(lbl)

        self.day_cells: list[list[tk.Label]] = []
        for r in range(6):  # max 6 weeks
            row_cells: list[tk.Label] = []
            for c in range(7):
                cell = tk.Label(
                    self.frame, font=fonts["normal"], bg=GRID_BG, width=3,
                )
                cell.grid(row=r + 2, column=c, padx=1, pady=1)
                cell.bind("<Button-1>", on_click)
                row_cells.append(cell)
            self.day_cells.append(row_cells)


class CalendarWindow:
    """Date picker that appears above the taskbar."""

    def __init__(self, on_mode_change: Callable[[SelectionMode], None] | None = None) -> None:
        self.root = tk.Tk()
        self.root.title("Date Picker")
        self.root.resizable(True, True)
        self.root.configure(bg=GRID_BG)
        self.root.attributes("-topmost", True)

        self._setup_fonts()

        settings = load_settings()
        self._saved_width: int | None = settings["window_width"]
        self._saved_height: int | None = settings["window_height"]

        self.state = ps.initial_state(selection_mode(settings), _today())
        self._on_mode_change = on_mode_change

        # Widget-to-date mapping (filled during _render)
        self._widget_dates: dict[int, CalendarDate] = {}
        self._footer_label: tk.Label | None = None

        self._build_shell()
        self._panel = _MonthPanel(
            self._month_frame,
            {"header": self.font_header, "bold": self.font_bold, "normal": self.font_normal},
            self._on_click,
        )
        self._panel.frame.pack()
        self._render()

        self.root.bind("<Escape>", self._on_escape)
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=9)
        self.font_bold = tkfont.Font(family=base, size=9, weight="bold")
        self.font_header = tkfont.Font(family=base, size=10, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=12, weight="bold")
        self.font_footer = tkfont.Font(family=base, size=9)

    # ------------------------------------------------------------------
    # Build shell (once): nav bar + month placeholder + footer
    # ------------------------------------------------------------------
    def _nav_button(self, parent: tk.Frame, text: str, side: str, action,
                    font=None, fg: str = "black") -> None:
        btn = tk.Label(
            parent, text=text, font=font or self.font_nav, bg=GRID_BG, fg=fg,
            cursor="hand2",
        )
        btn.pack(side=side, padx=6)
        btn.bind("<Button-1>", lambda _e: self._apply(action))

    def _build_shell(self) -> None:
        self._outer = tk.Frame(self.root, bg=GRID_BG)
        self._outer.pack(padx=6, pady=4)

        # Navigation row: ◀◀  ◀  Today  Reset  ▶  ▶▶
        nav = tk.Frame(self._outer, bg=GRID_BG)
        nav.pack(fill="x", pady=(0, 2))
        self._nav_button(nav, "◀◀", "left", ps.show_previous_year)
        self._nav_button(nav, "◀", "left", ps.show_previous_month)
        self._nav_button(nav, "Today", "left",
                         lambda s: ps.go_to_month(s, _today()),
                         font=self.font_bold, fg=ACCENT)
        self._nav_button(nav, "▶▶", "right", ps.show_next_year)
        self._nav_button(nav, "▶", "right", ps.show_next_month)
        self._nav_button(nav, "Reset", "right", ps.reset_selection,
                         font=self.font_bold, fg=ACCENT)

        self._month_frame = tk.Frame(self._outer, bg=GRID_BG)
        self._month_frame.pack()

        self._footer_label = tk.Label(
            self._outer, font=self.font_footer, bg=GRID_BG, fg="#555555",
        )
        self._footer_label.pack(pady=(4, 0))

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------
    def _apply(self, action) -> None:
        self.state = action(self.state)
        self._render()

    def _on_click(self, event: tk.Event) -> None:
        # Blank cells have no date and are ignored
        d = self._widget_dates.get(id(event.widget))
        if d is not None:
            self._apply(lambda s: ps.click(s, d))

    def _on_escape(self, _event: tk.Event) -> None:
        if self.state.selection is not None:
            self._apply(ps.reset_selection)
        else:
            self.hide()

    # ------------------------------------------------------------------
    # Render the displayed month into the panel (no widget creation)
    # ------------------------------------------------------------------
    def _render(self) -> None:
        self._widget_dates.clear()
        panel = self._panel
        panel.header.configure(text=month_title(self.state.year, self.state.month))

        rows = ps.grid(self.state)
        today = _today()
        for r in range(6):
            for c in range(7):
                cell = panel.day_cells[r][c]
                d = rows[r][c] if r < len(rows) else None
                if d is None:
                    cell.configure(text="", bg=GRID_BG, cursor="")
                    continue
                mark = highlight(self.state.mode, self.state.selection, d)
                bg, fg = self._day_colors(d == today, c >= 5, mark)
                cell.configure(
                    text=str(d.day), bg=bg, fg=fg, cursor="hand2",
                    font=self.font_bold if mark is Highlight.SELECTED else self.font_normal,
                )
                self._widget_dates[id(cell)] = d

        if self._footer_label:
            self._footer_label.configure(text=self._footer_text())

    @staticmethod
    def _day_colors(is_today: bool, is_weekend: bool, mark: Highlight) -> tuple[str, str]:
        if mark is Highlight.SELECTED:
            return ACCENT, "white"
        if mark is Highlight.IN_RANGE:
            return SEL_BG, "black"
        if is_today:
            return HEADER_BG, ACCENT
        if is_weekend:
            return GRID_BG, WEEKEND_FG
        return GRID_BG, "black"

    # ------------------------------------------------------------------
    # Footer text
    # ------------------------------------------------------------------
    def _footer_text(self) -> str:
        today = _today()
        today_str = f"Today: {today.day:02d}.{today.month:02d}.{today.year}"
        lo, hi = selection_bounds(self.state.mode, self.state.selection)
        if lo is None:
            return today_str
        if self.state.mode is SelectionMode.SINGLE or lo == hi:
            return f"{lo.day:02d}.{lo.month:02d}.{lo.year}     {today_str}"

        total_days = range_length(self.state.selection)
        full_weeks, rem_days = divmod(total_days, 7)
        parts: list[str] = []
        if full_weeks:
            parts.append(f"{full_weeks} week{'s' if full_weeks != 1 else ''}")
        if rem_days:
            parts.append(f"{rem_days} day{'s' if rem_days != 1 else ''}")

        range_str = f"{lo.day:02d}.{lo.month:02d} → {hi.day:02d}.{hi.month:02d}"
        return f"{range_str}:  {total_days} days  ({', '.join(parts)})     {today_str}"

    # ------------------------------------------------------------------
    # Settings dialog
    # ------------------------------------------------------------------
    def open_settings(self) -> None:
        dlg = tk.Toplevel(self.root)
        dlg.title("Settings")
        dlg.resizable(False, False)
        dlg.attributes("-topmost", True)
        dlg.grab_set()

        frame = tk.Frame(dlg, padx=12, pady=8)
        frame.pack()

        tk.Label(frame, text="Selection:", font=self.font_bold).grid(
            row=0, column=0, sticky="w", pady=4,
        )
        mode_var = tk.StringVar(value=self.state.mode.value)
        for row, (mode, label) in enumerate(MODE_LABELS.items(), start=1):
            tk.Radiobutton(
                frame, text=label, value=mode.value, variable=mode_var,
                font=self.font_normal,
            ).grid(row=row, column=0, sticky="w")

        btn_frame = tk.Frame(frame)
        btn_frame.grid(row=3, column=0, pady=(8, 0))

        def on_ok() -> None:
            dlg.destroy()
            self.set_mode(SelectionMode(mode_var.get()))

        tk.Button(btn_frame, text="OK", width=8, command=on_ok).pack(
            side="left", padx=4,
        )
        tk.Button(btn_frame, text="Cancel", width=8, command=dlg.destroy).pack(
            side="left", padx=4,
        )

    def set_mode(self, mode: SelectionMode) -> None:
        """Store *mode*; a different mode starts a new, empty picker."""
        update_settings(selection_mode=mode.value)
        if mode is self.state.mode:
            return
        logger.info("Selection mode changed to %s", mode.value)
        self.state = ps.initial_state(mode, _today())
        self._render()
        if self._on_mode_change is not None:
            self._on_mode_change(mode)

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self._apply(lambda s: ps.go_to_month(s, _today()))
        self.root.deiconify()
        self.root.update_idletasks()
        self._position_window()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        self._saved_width = self.root.winfo_width()
        self._saved_height = self.root.winfo_height()
        update_settings(window_width=self._saved_width, window_height=self._saved_height)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Position bottom-right of the screen
    # ------------------------------------------------------------------
    def _position_window(self) -> None:
        self.root.update_idletasks()
        win_w = self.root.winfo_reqwidth()
        win_h = self.root.winfo_reqheight()
        # Never shrink below what the grid needs
        if self._saved_width is not None and self._saved_height is not None:
            win_w = max(win_w, self._saved_width)
            win_h = max(win_h, self._saved_height)
        x = self.root.winfo_screenwidth() - win_w - 12
        # Leave room for a taskbar
        y = self.root.winfo_screenheight() - win_h - 60
        self.root.geometry(f"{win_w}x{win_h}+{x}+{y}")
