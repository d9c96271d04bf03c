from __future__ import annotations

from kivymd.app import MDApp
from kivymd.uix.screen import MDScreen
from kivymd.toast import toast
from kivy.properties import ListProperty, StringProperty

from backend import settings as app_settings
from backend.routines import get_day, get_day_names, resolve_routine_id
from backend.session_builder import NoDataWarning, build_session, previous_values
from backend.timer import ElapsedTimer, format_elapsed
from ui.dialogs import confirm

DAY_PLACEHOLDER = "Select workout day"


class LogScreen(MDScreen):
    """Pick a routine day, enter sets and save the session."""

    day_names = ListProperty([])
    timer_label = StringProperty("00:00")
    selected_day = StringProperty("")

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.timer = ElapsedTimer(on_tick=self._show_elapsed)

    @property
    def routine_id(self) -> str:
        return resolve_routine_id(app_settings.get_value("routine_id"))

    def on_pre_enter(self, *args):
        self.day_names = get_day_names(self.routine_id)
        self.timer.ensure_refresh()
        self._show_elapsed(self.timer.elapsed_ms())
        return super().on_pre_enter(*args)

    def on_leave(self, *args):
        self.timer.dispose()
        return super().on_leave(*args)

    # ------------------------------------------------------------------
    # Day selection
    # ------------------------------------------------------------------
    def select_day(self, day: str) -> None:
        form = self.ids.form
        if day not in self.day_names:
            self.selected_day = ""
            form.clear()
            return
        self.selected_day = day
        exercises = get_day(day, self.routine_id)
        previous = None
        if app_settings.get_value("prefill_previous"):
            previous = MDApp.get_running_app().store.find_by_day(day)
        form.load(
            exercises,
            previous_values(exercises, previous),
            unit=app_settings.get_value("weight_unit"),
        )
        self.timer.reset()
        self.timer.start()
        self._show_elapsed(0)

    # ------------------------------------------------------------------
    # Stopwatch controls
    # ------------------------------------------------------------------
    def _show_elapsed(self, elapsed_ms: float) -> None:
        self.timer_label = format_elapsed(elapsed_ms)

    def start_timer(self) -> None:
        self.timer.start()

    def pause_timer(self) -> None:
        self.timer.pause()
        self._show_elapsed(self.timer.elapsed_ms())

    def reset_timer(self) -> None:
        self.timer.reset()
        self._show_elapsed(0)

    # ------------------------------------------------------------------
    # Saving
    # ------------------------------------------------------------------
    def save_workout(self, allow_empty: bool = False) -> None:
        if not self.selected_day:
            toast("Please select a workout day!")
            return
        store = MDApp.get_running_app().store
        try:
            session = build_session(
                self.selected_day,
                self.ids.form.read_grid(),
                self.timer.read_minutes(),
                routine_id=self.routine_id,
                session_id=store.next_id(),
                allow_empty=allow_empty,
            )
        except NoDataWarning:
            confirm(
                "No weight or rep data was entered. Save anyway?",
                lambda: self.save_workout(allow_empty=True),
            )
            return
        store.append(session)
        toast(f"Workout saved: {session['day']} ({session['durationMinutes']} min)")
        self.timer.reset()
        self._show_elapsed(0)
        self.ids.day_spinner.text = DAY_PLACEHOLDER
        self.manager.current = "history"

    def show_history(self) -> None:
        self.manager.current = "history"
