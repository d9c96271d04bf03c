"""Weight/reps input grid shared by the log and edit screens."""

from __future__ import annotations

from kivy.metrics import dp
from kivymd.uix.boxlayout import MDBoxLayout
from kivymd.uix.card import MDCard
from kivymd.uix.label import MDLabel
from kivymd.uix.textfield import MDTextField

from backend.routines import ExerciseSpec


class SessionForm(MDBoxLayout):
    """One card per exercise with a weight and reps field for every set."""

    def __init__(self, **kwargs):
        kwargs.setdefault("orientation", "vertical")
        kwargs.setdefault("spacing", dp(8))
        kwargs.setdefault("adaptive_height", True)
        super().__init__(**kwargs)
        self._fields: list[list[tuple[MDTextField, MDTextField]]] = []

    def clear(self) -> None:
        self.clear_widgets()
        self._fields = []

    def load(
        self,
        exercises: list[ExerciseSpec],
        grid: list[list[tuple[str, str]]],
        unit: str = "kg",
    ) -> None:
        """Build input rows for ``exercises`` prefilled from ``grid``."""

        self.clear()
        for ex_idx, spec in enumerate(exercises):
            card = MDCard(
                orientation="vertical",
                padding=dp(12),
                spacing=dp(4),
                adaptive_height=True,
            )
            card.add_widget(MDLabel(text=spec.name, bold=True, adaptive_height=True))
            rows = []
            for set_idx in range(spec.sets):
                try:
                    weight, reps = grid[ex_idx][set_idx]
                except IndexError:
                    weight, reps = "", ""
                row = MDBoxLayout(spacing=dp(8), adaptive_height=True)
                row.add_widget(
                    MDLabel(text=f"Set {set_idx + 1}:", size_hint_x=0.3, adaptive_height=True)
                )
                weight_field = MDTextField(hint_text=unit, input_filter="float", text=weight)
                reps_field = MDTextField(hint_text="reps", input_filter="int", text=reps)
                row.add_widget(weight_field)
                row.add_widget(reps_field)
                card.add_widget(row)
                rows.append((weight_field, reps_field))
            self._fields.append(rows)
            self.add_widget(card)

    def read_grid(self) -> list[list[tuple[str, str]]]:
        """Return the current text of every weight/reps field."""

        return [[(w.text, r.text) for w, r in rows] for rows in self._fields]
