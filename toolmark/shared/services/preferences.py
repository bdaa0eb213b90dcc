"""User preferences — persistent settings stored in ~/.toolmark/preferences.json.

Holds indicator display settings: the animation interval, whether single
indicators animate when a scenario does not say, and palette overrides.
"""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field, replace
from pathlib import Path

from toolmark.shared.formatters.presentation import Palette

logger = logging.getLogger(__name__)

PREFS_PATH = Path.home() / ".toolmark" / "preferences.json"

DEFAULT_DOT_INTERVAL = 0.5
MIN_DOT_INTERVAL = 0.05
MAX_DOT_INTERVAL = 5.0


@dataclass
class IndicatorPreferences:
    """Indicator preference settings.

    Attributes:
        dot_interval: Seconds between animation ticks.
        animate_by_default: Animate running single indicators whose
            scenario entry does not set ``animate``.
        palette_overrides: Overrides keyed by ``Palette`` field name, e.g.
            ``{"tool": "#7FB069", "network": "blue"}``.
    """

    dot_interval: float = DEFAULT_DOT_INTERVAL
    animate_by_default: bool = False
    palette_overrides: dict[str, str] = field(default_factory=dict)

    def validate(self) -> None:
        """Ensure all values are within allowed ranges."""
        if isinstance(self.dot_interval, bool) or not isinstance(
            self.dot_interval, (int, float)
        ):
            logger.warning(
                "Invalid dot_interval %r; using %s", self.dot_interval, DEFAULT_DOT_INTERVAL
            )
            self.dot_interval = DEFAULT_DOT_INTERVAL
        clamped = min(MAX_DOT_INTERVAL, max(MIN_DOT_INTERVAL, float(self.dot_interval)))
        if clamped != self.dot_interval:
            logger.warning(
                "dot_interval %s out of range [%s, %s]; clamped to %s",
                self.dot_interval, MIN_DOT_INTERVAL, MAX_DOT_INTERVAL, clamped,
            )
        self.dot_interval = clamped
        if not isinstance(self.animate_by_default, bool):
            self.animate_by_default = False
        if isinstance(self.palette_overrides, dict):
            known = Palette.field_names()
            cleaned: dict[str, str] = {}
            for key, value in self.palette_overrides.items():
                if key not in known:
                    logger.debug("Ignoring unknown palette key %r", key)
                    continue
                if isinstance(value, str) and value.strip():
                    cleaned[key] = value.strip()
            self.palette_overrides = cleaned
        else:
            self.palette_overrides = {}

    def palette(self) -> Palette:
        """Default palette with this user's overrides applied."""
        return replace(Palette(), **self.palette_overrides)

    def save(self, path: Path | None = None) -> None:
        """Persist preferences to disk."""
        target = path or PREFS_PATH
        target.parent.mkdir(parents=True, exist_ok=True)
        try:
            target.write_text(json.dumps(asdict(self), indent=2))
        except OSError:
            logger.debug("Failed to save preferences to %s", target)

    @classmethod
    def load(cls, path: Path | None = None) -> IndicatorPreferences:
        """Load preferences from disk, returning defaults if missing/corrupt."""
        target = path or PREFS_PATH
        try:
            if target.exists():
                data = json.loads(target.read_text())
                prefs = cls(**{
                    k: v for k, v in data.items()
                    if k in cls.__dataclass_fields__
                })
                prefs.validate()
                logger.debug("Loaded preferences from %s", target)
                return prefs
            else:
                logger.debug("Preferences file not found at %s; using defaults", target)
        except (OSError, ValueError, TypeError, AttributeError):
            logger.warning("Failed to load preferences from %s; using defaults", target)
        return cls()
