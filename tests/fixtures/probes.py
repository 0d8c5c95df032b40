from __future__ import annotations


class RecordingProbe:
    """Existence probe answering from a fixed set of paths and recording calls."""

    def __init__(self, existing: tuple[str, ...] = ()):
        self.existing = set(existing)
        self.calls: list[str] = []

    def __call__(self, path: str) -> bool:
        self.calls.append(path)
        return path in self.existing


def failing_probe(path: str) -> bool:
    raise PermissionError(f"Access is denied: {path}")
