import logging
from pathlib import Path

from kivymd.app import MDApp
from kivy.lang import Builder

from backend.sessions import SessionStore

# Screens and widgets must be imported so ``main.kv`` can reference them
from ui.session_form import SessionForm  # noqa: F401
from ui.screens import EditSessionScreen, HistoryScreen, LogScreen  # noqa: F401


class WorkoutLogApp(MDApp):
    """Track sets for a routine day and keep a local workout history."""

    store: SessionStore | None = None

    def build(self):
        self.title = "Workout Log"
        self.store = SessionStore()
        return Builder.load_file(str(Path(__file__).with_name("main.kv")))

    def on_stop(self):
        # make sure no stopwatch refresh keeps firing after the window closes
        if self.root:
            self.root.get_screen("log").timer.dispose()


def run() -> None:
    logging.basicConfig(level=logging.INFO)
    WorkoutLogApp().run()


if __name__ == "__main__":
    run()
