"""Date + time picker window (tkinter) with a live preview string."""

import logging
from datetime import date, datetime
from tkinter import font as tkfont
from typing import Callable
import tkinter as tk

from PIL import ImageTk

from calendar_logic import DAY_ABBR, InvalidArgument, MonthGrid, month_title
from icon_gen import create_icon_image
from picker_state import PickerState, parse_time_field
from settings import load_settings

logger = logging.getLogger(__name__)

# Colours
ACCENT = "#0078D4"
SEL_BG = "#B3D7F2"
GRID_BG = "white"
SEP_FG = "#D0D0D0"

WINDOW_TITLE = "Time Changer"
CALENDAR_MIN_SIZE = (350, 300)


def _separator(parent: tk.Widget) -> tk.Frame:
    sep = tk.Frame(parent, height=1, bg=SEP_FG)
    sep.pack(fill="x", pady=6)
    return sep


class CalendarView:
    """Month grid with previous/next navigation.

    Exposes ``render``, ``min_size`` and ``refresh`` to the window; the
    grid contents always come from a freshly built ``MonthGrid``.
    """

    def __init__(self, parent: tk.Widget, state: PickerState, fonts: dict,
                 on_date_selected: Callable[[date], None],
                 today: Callable[[], date] = date.today) -> None:
        self._state = state
        self._fonts = fonts
        self._on_date_selected = on_date_selected
        self._today = today
        self.day_buttons: dict[int, tk.Button] = {}

        self.frame = tk.Frame(parent, bg=GRID_BG)

        # Navigation row: <  Month Year  >
        nav = tk.Frame(self.frame, bg=GRID_BG)
        nav.pack(fill="x")
        self.prev_btn = tk.Button(nav, text="<", width=3, command=self.previous_month)
        self.prev_btn.pack(side="left")
        self.next_btn = tk.Button(nav, text=">", width=3, command=self.next_month)
        self.next_btn.pack(side="right")
        self.title_label = tk.Label(nav, font=fonts["header"], bg=GRID_BG)
        self.title_label.pack(fill="x", expand=True)

        _separator(self.frame)

        self.grid_frame = tk.Frame(self.frame, bg=GRID_BG)
        self.grid_frame.pack()
        for col in range(7):
            self.grid_frame.grid_columnconfigure(col, weight=1, uniform="day")

        self.render()

    # ------------------------------------------------------------------
    # Capabilities used by the window
    # ------------------------------------------------------------------
    @staticmethod
    def min_size() -> tuple[int, int]:
        return CALENDAR_MIN_SIZE

    def render(self) -> MonthGrid:
        """Throw away the old grid widgets and draw the displayed month."""
        grid = self._state.month_grid(self._today())
        self.title_label.configure(text=month_title(grid.year, grid.month))

        for child in self.grid_frame.winfo_children():
            child.destroy()
        self.day_buttons.clear()

        for col, abbr in enumerate(DAY_ABBR):
            tk.Label(
                self.grid_frame, text=abbr, font=self._fonts["bold"], bg=GRID_BG,
            ).grid(row=0, column=col, sticky="we")

        selected = self._state.selected.date()
        for idx, cell in enumerate(grid):
            row, col = divmod(idx, 7)
            if cell.is_blank:
                tk.Label(self.grid_frame, text="", bg=GRID_BG).grid(
                    row=row + 1, column=col)
                continue
            d = date(grid.year, grid.month, cell.day)
            btn = tk.Button(
                self.grid_frame, text=str(cell.day), width=3,
                font=self._fonts["bold"] if cell.is_today else self._fonts["normal"],
                command=lambda d=d: self._on_date_selected(d),
            )
            if cell.is_today:
                btn.configure(bg=ACCENT, fg="white", activebackground=ACCENT)
            elif d == selected:
                btn.configure(bg=SEL_BG)
            btn.grid(row=row + 1, column=col, padx=1, pady=1, sticky="we")
            self.day_buttons[cell.day] = btn
        return grid

    def refresh(self) -> None:
        self.render()
        self.frame.update_idletasks()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def previous_month(self) -> None:
        try:
            self._state.show_previous_month()
        except InvalidArgument as exc:
            logger.info("Staying on %s: %s", self.title_label.cget("text"), exc)
            return
        self.refresh()

    def next_month(self) -> None:
        try:
            self._state.show_next_month()
        except InvalidArgument as exc:
            logger.info("Staying on %s: %s", self.title_label.cget("text"), exc)
            return
        self.refresh()

    def set_month(self, year: int, month: int) -> None:
        self._state.show_month(year, month)
        self.refresh()


class TimePickerWindow:
    """Calendar, hour/minute/second selectors and the preview label."""

    def __init__(self, now: Callable[[], datetime] = datetime.now,
                 settings: dict | None = None) -> None:
        self._now = now
        settings = settings if settings is not None else load_settings()

        self.root = tk.Tk()
        self.root.title(WINDOW_TITLE)
        self.root.configure(bg=GRID_BG)
        self.root.geometry(f"{settings['window_width']}x{settings['window_height']}")
        if settings["always_on_top"]:
            self.root.attributes("-topmost", True)

        self._setup_fonts()
        self._icon = ImageTk.PhotoImage(create_icon_image(), master=self.root)
        self.root.iconphoto(True, self._icon)

        self.state = PickerState(self._now())

        outer = tk.Frame(self.root, bg=GRID_BG)
        outer.pack(fill="both", expand=True, padx=10, pady=8)
        self._build(outer)

        self.root.minsize(*CalendarView.min_size())
        self.root.protocol("WM_DELETE_WINDOW", self.close)

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=9)
        self.font_bold = tkfont.Font(family=base, size=9, weight="bold")
        self.font_header = tkfont.Font(family=base, size=10, weight="bold")
        self.fonts = {
            "normal": self.font_normal, "bold": self.font_bold,
            "header": self.font_header,
        }

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def _build(self, outer: tk.Frame) -> None:
        tk.Label(outer, text="Selected Date:", font=self.font_bold,
                 bg=GRID_BG, anchor="w").pack(fill="x")

        self.calendar = CalendarView(
            outer, self.state, self.fonts, self.on_date_selected,
            today=lambda: self._now().date(),
        )
        self.calendar.frame.pack(fill="x")

        self.date_label = tk.Label(outer, text=self.state.selected.date_text(),
                                   font=self.font_normal, bg=GRID_BG, anchor="w")
        self.date_label.pack(fill="x")

        _separator(outer)

        tk.Label(outer, text="Select Time:", font=self.font_bold,
                 bg=GRID_BG, anchor="w").pack(fill="x")
        time_row = tk.Frame(outer, bg=GRID_BG)
        time_row.pack(fill="x")
        sel = self.state.selected
        self.hour_spin = self._time_field(
            time_row, 0, "hour", 23, sel.hour, self.state.set_hour)
        self.minute_spin = self._time_field(
            time_row, 1, "minute", 59, sel.minute, self.state.set_minute)
        self.second_spin = self._time_field(
            time_row, 2, "second", 59, sel.second, self.state.set_second)

        _separator(outer)

        btn_row = tk.Frame(outer, bg=GRID_BG)
        btn_row.pack(fill="x")
        tk.Button(btn_row, text="Update Preview",
                  command=self.update_preview).pack(side="left", padx=(0, 4))
        tk.Button(btn_row, text="Set to Current Time",
                  command=self.set_current_time).pack(side="left")

        _separator(outer)

        tk.Label(outer, text="Preview:", font=self.font_normal,
                 bg=GRID_BG, anchor="w").pack(fill="x")
        self.preview_label = tk.Label(outer, text=self.state.preview,
                                      font=self.font_header, bg=GRID_BG, anchor="w")
        self.preview_label.pack(fill="x")

    def _time_field(self, parent: tk.Frame, column: int, name: str, high: int,
                    value: int, setter: Callable[[int], None]) -> tk.Spinbox:
        parent.grid_columnconfigure(column, weight=1, uniform="time")
        cell = tk.Frame(parent, bg=GRID_BG)
        cell.grid(row=0, column=column, sticky="we", padx=4)
        tk.Label(cell, text=name.capitalize(), font=self.font_normal, bg=GRID_BG,
                 anchor="w").pack(fill="x")
        spin = tk.Spinbox(cell, from_=0, to=high, format="%02.0f", wrap=True,
                          width=4, font=self.font_normal)
        # Arrow clicks carry a single field's new value
        spin.configure(command=lambda: self.on_time_stepped(spin, name, setter))
        self._set_spin(spin, value)
        spin.pack(fill="x")
        spin.bind("<Return>", lambda _e: self.update_preview())
        return spin

    @staticmethod
    def _set_spin(spin: tk.Spinbox, value: int) -> None:
        spin.delete(0, "end")
        spin.insert(0, f"{value:02d}")

    # ------------------------------------------------------------------
    # Callbacks
    # ------------------------------------------------------------------
    def on_date_selected(self, d: date) -> None:
        self.state.select_date(d)
        self.date_label.configure(text=self.state.selected.date_text())
        self.calendar.refresh()
        self.update_preview()

    def on_time_stepped(self, spin: tk.Spinbox, name: str,
                        setter: Callable[[int], None]) -> bool:
        try:
            setter(parse_time_field(spin.get(), name))
        except ValueError as exc:
            logger.warning("Ignoring %s field %r (%s)", name, spin.get(), exc)
            return False
        self.preview_label.configure(text=self.state.preview)
        return True

    def update_preview(self) -> bool:
        """Re-read the time fields; the preview is left alone if one is invalid."""
        ok = self.state.apply_time_text(
            self.hour_spin.get(), self.minute_spin.get(), self.second_spin.get(),
        )
        if ok:
            self.preview_label.configure(text=self.state.preview)
        return ok

    def set_current_time(self) -> None:
        self.state.set_now(self._now())
        sel = self.state.selected
        self.date_label.configure(text=sel.date_text())
        self._set_spin(self.hour_spin, sel.hour)
        self._set_spin(self.minute_spin, sel.minute)
        self._set_spin(self.second_spin, sel.second)
        self.calendar.refresh()
        self.update_preview()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def run(self) -> None:
        self.root.mainloop()

    def close(self) -> None:
        logger.debug("Window closed at %s", self.state.preview)
        self.root.destroy()
