"""Animated dots — cycling ``.`` / ``..`` / ``...`` suffix for running tools."""

from __future__ import annotations

from rich.text import Text
from textual.timer import Timer
from textual.widgets import Static

from toolmark.shared.formatters.indicator import dots_for_tick
from toolmark.shared.services.preferences import DEFAULT_DOT_INTERVAL


class AnimatedDots(Static):
    """Dot suffix that advances one frame per tick while mounted.

    The interval timer is created in ``on_mount`` and stopped in
    ``on_unmount``. Each mount starts again from the first frame.
    """

    DEFAULT_CSS = """
    AnimatedDots {
        width: auto;
        height: auto;
    }
    """

    def __init__(
        self,
        prefix: str = "",
        color: str = "",
        interval: float = DEFAULT_DOT_INTERVAL,
        **kwargs,
    ) -> None:
        super().__init__("", **kwargs)
        self._prefix = prefix
        self._color = color
        self._interval = interval
        self._tick: int = 0
        self._timer: Timer | None = None

    @property
    def tick(self) -> int:
        return self._tick

    @property
    def dots(self) -> str:
        return dots_for_tick(self._tick)

    @property
    def animating(self) -> bool:
        return self._timer is not None

    def on_mount(self) -> None:
        self._tick = 0
        self._render_text()
        self._timer = self.set_interval(self._interval, self.advance)

    def on_unmount(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def advance(self) -> None:
        self._tick += 1
        self._render_text()

    def _render_text(self) -> None:
        self.update(Text(f"{self._prefix}{self.dots}", style=self._color))
