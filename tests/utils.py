import types


def make_session(session_id, day="Push", **overrides) -> dict:
    """Return a stored-session dict for the ``Test`` routine."""
    session = {
        "id": session_id,
        "createdAt": "2023-11-14T12:00:00.000Z",
        "day": day,
        "routineId": "Test",
        "durationMinutes": 47,
        "exercises": [
            {
                "name": "Bench Press",
                "sets": [
                    {"setNumber": 1, "weight": 20, "reps": 10},
                    {"setNumber": 2, "weight": 20, "reps": 8},
                ],
            }
        ],
    }
    session.update(overrides)
    return session


class FakeClock:
    """Manually advanced replacement for :func:`time.monotonic`."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeScheduler:
    """Records ``schedule_interval`` calls instead of running a Kivy loop."""

    def __init__(self) -> None:
        self.events: list = []

    def schedule_interval(self, callback, interval):
        event = types.SimpleNamespace(callback=callback, interval=interval, cancelled=False)

        def cancel():
            event.cancelled = True

        event.cancel = cancel
        self.events.append(event)
        return event

    @property
    def active(self) -> list:
        return [e for e in self.events if not e.cancelled]

    def tick(self) -> None:
        for event in self.active:
            event.callback(event.interval)
