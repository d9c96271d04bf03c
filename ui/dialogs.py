"""Small confirmation and message dialogs built on ``MDDialog``."""

from __future__ import annotations

from typing import Callable

from kivymd.uix.button import MDFlatButton
from kivymd.uix.dialog import MDDialog


def confirm(
    text: str,
    on_confirm: Callable[[], None],
    *,
    title: str = "Please confirm",
    confirm_text: str = "OK",
) -> MDDialog:
    """Open a dialog asking the user to confirm ``text``.

    ``on_confirm`` runs only when the confirm button is pressed.
    """

    dialog: MDDialog | None = None

    def _accept(*_args):
        dialog.dismiss()
        on_confirm()

    dialog = MDDialog(
        title=title,
        text=text,
        buttons=[
            MDFlatButton(text="Cancel", on_release=lambda *_: dialog.dismiss()),
            MDFlatButton(text=confirm_text, on_release=_accept),
        ],
    )
    dialog.open()
    return dialog
