from __future__ import annotations

import logging
from pathlib import Path

from kivymd.app import MDApp
from kivymd.uix.button import MDFlatButton
from kivymd.uix.dialog import MDDialog
from kivymd.uix.filemanager import MDFileManager
from kivymd.uix.list import OneLineListItem, TwoLineListItem
from kivymd.uix.screen import MDScreen
from kivymd.toast import toast

from backend import settings as app_settings
from backend.export_utils import default_export_dir, export_sessions, load_import_file
from backend.formatting import format_session_date, session_details, session_subtitle
from backend.sessions import InvalidFormatError
from ui.dialogs import confirm


class HistoryScreen(MDScreen):
    """List saved workouts and manage the stored history."""

    file_manager: MDFileManager | None = None

    @property
    def store(self):
        return MDApp.get_running_app().store

    def on_pre_enter(self, *args):
        self.populate()
        return super().on_pre_enter(*args)

    def populate(self) -> None:
        """Fill the history list with saved sessions, newest first."""
        lst = self.ids.get("history_list")
        if not lst:
            return
        lst.clear_widgets()
        sessions = self.store.list()
        if not sessions:
            lst.add_widget(OneLineListItem(text="No workout logs found."))
            return
        for session in sessions:
            lst.add_widget(
                TwoLineListItem(
                    text=session.get("day", ""),
                    secondary_text=session_subtitle(session),
                    on_release=lambda _, sid=session.get("id"): self.open_session(sid),
                )
            )

    # ------------------------------------------------------------------
    # Single session actions
    # ------------------------------------------------------------------
    def open_session(self, session_id) -> None:
        session = self.store.find_by_id(session_id)
        if session is None:
            toast("Workout not found")
            self.populate()
            return
        dialog: MDDialog | None = None

        def _close_then(action):
            def _run(*_args):
                dialog.dismiss()
                action()
            return _run

        dialog = MDDialog(
            title=f"{session.get('day', '')} - {format_session_date(session.get('createdAt'))}",
            text=session_details(session, app_settings.get_value("weight_unit")),
            buttons=[
                MDFlatButton(text="Delete", on_release=_close_then(lambda: self.delete_session(session_id))),
                MDFlatButton(text="Edit", on_release=_close_then(lambda: self.edit_session(session_id))),
                MDFlatButton(text="Close", on_release=lambda *_: dialog.dismiss()),
            ],
        )
        dialog.open()

    def delete_session(self, session_id) -> None:
        def _delete():
            self.store.remove(session_id)
            self.populate()

        confirm("Delete this workout? This cannot be undone!", _delete, confirm_text="Delete")

    def edit_session(self, session_id) -> None:
        self.manager.get_screen("edit_session").edit(session_id)

    # ------------------------------------------------------------------
    # Whole history actions
    # ------------------------------------------------------------------
    def export_data(self) -> None:
        try:
            path = export_sessions(self.store)
        except ValueError as exc:
            toast(str(exc))
            return
        except OSError as exc:
            toast(f"Export failed: {exc}")
            return
        toast(f"Exported to {path}")

    def open_import(self) -> None:
        """Open a file picker to select a JSON export for import."""
        if self.file_manager is None:
            self.file_manager = MDFileManager(
                exit_manager=self.close_file_manager,
                select_path=self.select_import_file,
                ext=[".json"],
            )
        try:
            start_dir = default_export_dir()
        except OSError:
            logging.exception("Export directory unavailable")
            start_dir = Path.home()
        self.file_manager.show(str(start_dir))

    def close_file_manager(self, *_) -> None:
        if self.file_manager:
            self.file_manager.close()

    def select_import_file(self, path: str) -> None:
        """Validate ``path`` and, once confirmed, replace all sessions with it."""
        self.close_file_manager()
        try:
            sessions = load_import_file(Path(path))
        except InvalidFormatError as exc:
            toast(f"Error importing data: {exc}")
            return
        except OSError as exc:
            logging.exception("Import failed")
            toast(f"Error importing data: {exc}")
            return

        def _apply():
            try:
                self.store.replace_all(sessions)
            except InvalidFormatError as exc:
                toast(f"Error importing data: {exc}")
                return
            toast("Data imported successfully!")
            self.populate()

        confirm("Import will replace all existing data. Continue?", _apply)

    def clear_data(self) -> None:
        def _clear():
            self.store.clear()
            toast("All workout data has been cleared!")
            self.populate()

        confirm(
            "Are you sure you want to delete all workout data? This cannot be undone!",
            _clear,
            confirm_text="Delete all",
        )
