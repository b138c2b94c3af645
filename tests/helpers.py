"""Test doubles shared across the suite."""


class FakeTicker:
    """Stands in for the pygame clock: never sleeps."""

    def __init__(self, dt=0.05, lagging=False):
        self.dt = dt
        self.lagging = lagging
        self.waits = 0

    def wait(self):
        self.waits += 1
        return int(self.dt * 1000)


class RecordingSave:
    """Save callable that remembers every value and can be told to fail."""

    def __init__(self, results=None):
        self.values = []
        self._results = list(results or [])

    def __call__(self, value):
        self.values.append(value)
        return self._results.pop(0) if self._results else True
