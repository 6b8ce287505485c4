"""Smoke tests for the tkinter window; skipped when no display is available."""

from datetime import date, datetime

import pytest

tk = pytest.importorskip("tkinter")

from picker_window import ACCENT, CalendarView, TimePickerWindow  # noqa: E402

NOW = datetime(2024, 2, 15, 9, 30, 5)
SETTINGS = {
    "window_width": 500, "window_height": 500,
    "always_on_top": False, "log_level": "WARNING",
}


@pytest.fixture
def window():
    try:
        win = TimePickerWindow(now=lambda: NOW, settings=SETTINGS)
    except tk.TclError as exc:
        pytest.skip(f"no display: {exc}")
    win.root.update_idletasks()
    yield win
    win.root.destroy()


def _set(spin, text):
    spin.delete(0, "end")
    spin.insert(0, text)


def test_initial_layout(window):
    assert window.root.title() == "Time Changer"
    assert window.preview_label.cget("text") == "2024-02-15 09:30:05"
    assert window.date_label.cget("text") == "2024-02-15"
    assert window.calendar.title_label.cget("text") == "February 2024"
    assert sorted(window.calendar.day_buttons) == list(range(1, 30))
    assert window.hour_spin.get() == "09"


def test_today_button_highlighted(window):
    assert window.calendar.day_buttons[15].cget("bg") == ACCENT


def test_day_tap_updates_preview(window):
    window.calendar.day_buttons[3].invoke()
    assert window.date_label.cget("text") == "2024-02-03"
    assert window.preview_label.cget("text") == "2024-02-03 09:30:05"


def test_typed_time_updates_preview(window):
    _set(window.hour_spin, "23")
    _set(window.second_spin, "0")
    assert window.update_preview() is True
    assert window.preview_label.cget("text") == "2024-02-15 23:30:00"


def test_bad_typed_time_keeps_preview(window):
    _set(window.minute_spin, "xx")
    assert window.update_preview() is False
    assert window.preview_label.cget("text") == "2024-02-15 09:30:05"


def test_navigation_rebuilds_grid(window):
    window.calendar.next_btn.invoke()
    assert window.calendar.title_label.cget("text") == "March 2024"
    assert len(window.calendar.day_buttons) == 31
    window.calendar.prev_btn.invoke()
    window.calendar.prev_btn.invoke()
    assert window.calendar.title_label.cget("text") == "January 2024"


def test_set_current_time(window):
    window.calendar.next_btn.invoke()
    _set(window.hour_spin, "01")
    window.set_current_time()
    assert window.hour_spin.get() == "09"
    assert window.preview_label.cget("text") == "2024-02-15 09:30:05"
    assert window.calendar.title_label.cget("text") == "February 2024"


def test_calendar_min_size():
    assert CalendarView.min_size() == (350, 300)


def test_selected_day_marked(window):
    window.on_date_selected(date(2024, 2, 20))
    assert window.calendar.day_buttons[20].cget("bg") != window.calendar.day_buttons[21].cget("bg")


def test_hour_arrow_wraps_and_updates_preview(window):
    _set(window.hour_spin, "23")
    window.hour_spin.invoke("buttonup")
    assert window.hour_spin.get() == "00"
    assert window.preview_label.cget("text") == "2024-02-15 00:30:05"


def test_second_arrow_down_wraps(window):
    _set(window.second_spin, "00")
    window.second_spin.invoke("buttondown")
    assert window.second_spin.get() == "59"
    assert window.state.selected.second == 59


def test_previous_month_stops_at_year_one(window):
    window.state.show_month(1, 1)
    window.calendar.refresh()
    window.calendar.prev_btn.invoke()
    assert (window.state.view_year, window.state.view_month) == (1, 1)
    assert window.calendar.title_label.cget("text") == "January 1"
    assert len(window.calendar.day_buttons) == 31


def test_next_month_stops_at_year_9999(window):
    window.state.show_month(9999, 12)
    window.calendar.refresh()
    window.calendar.next_btn.invoke()
    assert (window.state.view_year, window.state.view_month) == (9999, 12)
    assert len(window.calendar.day_buttons) == 31
