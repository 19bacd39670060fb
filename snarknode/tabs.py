"""Tab selection for the terminal dashboard."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["TabsState", "DEFAULT_TITLES"]

DEFAULT_TITLES: tuple[str, ...] = (" Overview ", " Logs ")


class TabsState:
    """A list of tab titles and the index of the selected one; wraps around."""

    def __init__(self, titles: Iterable[str] = DEFAULT_TITLES) -> None:
        self.titles: list[str] = list(titles)
        if not self.titles:
            raise ValueError("at least one tab title is required")
        self.index = 0

    def next(self) -> None:
        """Select the tab to the right, wrapping to the first."""
        self.index = (self.index + 1) % len(self.titles)

    def previous(self) -> None:
        """Select the tab to the left, wrapping to the last."""
        self.index = (self.index - 1) % len(self.titles)

    def title(self) -> str:
        """The title of the selected tab."""
        return self.titles[self.index]

    def __repr__(self) -> str:
        return f"TabsState(titles={self.titles!r}, index={self.index})"