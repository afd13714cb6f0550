# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class RecordingListener:
    """
    Change listener used by store tests.

    Records the collection length seen on every notification.
    """

    seen: list[int] = field(default_factory=list)

    def __call__(self, store) -> None:
        self.seen.append(len(store))

    @property
    def calls(self) -> int:
        return len(self.seen)


class ExplodingListener:
    """Listener that always fails; the store must keep going."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self, store) -> None:
        self.calls += 1
        raise RuntimeError("listener boom")
