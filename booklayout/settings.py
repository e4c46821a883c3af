"""User settings for the book layout command line.

Settings are stored as JSON in the user's config directory and override
the layout defaults: ``max_line_width``, ``lines_per_page`` and
``font_name``. The layout engine never reads this file itself; callers
turn the settings into a ``LayoutConfig`` and pass it in.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import BookConstants
from .font_metrics import FontMetrics, MINECRAFT_FONT, get_font_metrics
from .layout_config import LayoutConfig

logger = logging.getLogger(__name__)

INTEGER_KEYS = ("max_line_width", "lines_per_page")


class LayoutSettings:
    """Loads and saves layout overrides from a JSON settings file."""

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize settings storage.

        Args:
            config_dir: Directory holding ``settings.json``. Defaults to the
                platform config directory for booklayout.
        """
        self._config_dir = Path(config_dir) if config_dir else Path(
            platformdirs.user_config_dir("booklayout"))
        self._settings_file = self._config_dir / "settings.json"

    @property
    def settings_file(self) -> Path:
        return self._settings_file

    def load(self) -> Dict[str, Any]:
        """Load valid settings from disk.

        Returns:
            Dictionary of recognized settings. Missing, unreadable or
            malformed files give an empty dict; invalid values are dropped.
        """
        if not self._settings_file.exists():
            return {}

        try:
            with open(self._settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not load settings from {self._settings_file}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning("Settings file has invalid format (not a dict), ignoring")
            return {}

        settings: Dict[str, Any] = {}
        for key, value in data.items():
            if self.validate_setting(key, value):
                settings[key] = value
            else:
                logger.warning(f"Ignoring invalid setting {key}={value!r}")
        return settings

    def save(self, settings: Dict[str, Any]) -> bool:
        """Save settings atomically (temp file + rename).

        Returns:
            True if save was successful, False otherwise.
        """
        temp_file = self._settings_file.with_suffix('.tmp')
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(settings, f, indent=2)
            temp_file.replace(self._settings_file)
            return True
        except OSError as e:
            logger.warning(f"Could not save settings to {self._settings_file}: {e}")
            if temp_file.exists():
                temp_file.unlink()
            return False

    @staticmethod
    def validate_setting(key: str, value: Any) -> bool:
        if key in INTEGER_KEYS:
            # bool is an int subclass but never a valid size
            return isinstance(value, int) and not isinstance(value, bool) and value > 0
        if key == "font_name":
            return isinstance(value, str)
        # Unknown settings are ignored
        return False

    def resolve(self, **overrides: Any) -> tuple[FontMetrics, LayoutConfig]:
        """Build font metrics and a layout config from stored settings.

        Keyword overrides that are not None take precedence over the file.
        Unknown font names fall back to the default font.
        """
        settings = self.load()
        settings.update({k: v for k, v in overrides.items() if v is not None})

        font_name = settings.get("font_name", BookConstants.DEFAULT_FONT)
        metrics = get_font_metrics(font_name)
        if metrics is None:
            logger.warning(f"Unknown font {font_name!r}, using {MINECRAFT_FONT.name}")
            metrics = MINECRAFT_FONT

        base = LayoutConfig.for_font(metrics)
        config = LayoutConfig(
            max_line_width=settings.get("max_line_width", base.max_line_width),
            lines_per_page=settings.get("lines_per_page", base.lines_per_page),
            font_name=metrics.name,
        )
        return metrics, config
