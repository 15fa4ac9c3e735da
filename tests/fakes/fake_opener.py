"""Fake opener for tests: records open() calls instead of starting an editor."""


class FakeOpener:

    def __init__(self, note: str | None = None) -> None:
        self.calls: list[tuple[str, bool]] = []
        self.note = note

    def open(self, path: str, is_dir: bool) -> str | None:
        self.calls.append((path, is_dir))
        return self.note
