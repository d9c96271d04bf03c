from __future__ import annotations

from kivymd.app import MDApp
from kivymd.uix.screen import MDScreen
from kivymd.toast import toast
from kivy.properties import StringProperty

from backend import DEFAULT_ROUTINE
from backend import settings as app_settings
from backend.formatting import format_session_date
from backend.routines import get_day
from backend.session_builder import NoDataWarning, build_update, previous_values
from backend.sessions import SessionNotFoundError
from ui.dialogs import confirm


class EditSessionScreen(MDScreen):
    """Edit the sets of a saved session in place."""

    title = StringProperty("")
    session_id = None

    @property
    def store(self):
        return MDApp.get_running_app().store

    def edit(self, session_id) -> None:
        """Load ``session_id`` into the form and switch to this screen."""
        session = self.store.find_by_id(session_id)
        if session is None:
            toast("Workout not found")
            return
        try:
            exercises = get_day(session["day"], session.get("routineId", DEFAULT_ROUTINE))
        except KeyError:
            toast("This workout day is no longer part of the routine")
            return
        self.session_id = session_id
        self.title = f"{session.get('day', '')} - {format_session_date(session.get('createdAt'))}"
        self.ids.form.load(
            exercises,
            previous_values(exercises, session),
            unit=app_settings.get_value("weight_unit"),
        )
        self.manager.current = "edit_session"

    def save_changes(self, allow_empty: bool = False) -> None:
        session = self.store.find_by_id(self.session_id)
        if session is None:
            toast("Workout no longer exists")
            self.cancel()
            return
        try:
            updated = build_update(session, self.ids.form.read_grid(), allow_empty=allow_empty)
        except NoDataWarning:
            confirm(
                "No weight or rep data was entered. Save anyway?",
                lambda: self.save_changes(allow_empty=True),
            )
            return
        try:
            self.store.replace(self.session_id, updated)
        except SessionNotFoundError:
            toast("Workout no longer exists")
        else:
            toast("Workout updated")
        self.cancel()

    def cancel(self) -> None:
        self.session_id = None
        self.ids.form.clear()
        self.manager.current = "history"
