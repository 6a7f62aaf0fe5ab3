from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from dicegame.core.engine import DEFAULT_ROLL_DELAY_MS
from dicegame.core.rounds import Condition, ValidationError, parse_threshold

logger = logging.getLogger(__name__)

ROLL_DELAY_ENV = "DICEGAME_ROLL_DELAY_MS"


@dataclass(frozen=True)
class GameSettings:
    roll_delay_ms: int = DEFAULT_ROLL_DELAY_MS
    default_threshold: str = "50"
    default_condition: Condition = Condition.MORE


def default_settings_path() -> Path:
    return Path(__file__).resolve().parent.parent / "data" / "settings.yaml"


def load_settings(path: Optional[Path] = None) -> GameSettings:
    """Load settings from YAML, then apply the environment override.

    A missing or unreadable file falls back to defaults. Content that is
    present but malformed raises ValueError naming the file.
    """
    settings_path = path or default_settings_path()
    raw = _read_yaml(settings_path)

    defaults = GameSettings()
    roll_delay_ms = raw.get("roll_delay_ms", defaults.roll_delay_ms)
    threshold = raw.get("default_threshold", defaults.default_threshold)
    condition = raw.get("default_condition", defaults.default_condition)

    if isinstance(roll_delay_ms, bool) or not isinstance(roll_delay_ms, int) or roll_delay_ms < 0:
        raise ValueError(f"{settings_path.name}: 'roll_delay_ms' must be a non-negative integer")
    threshold = str(threshold).strip()
    try:
        parse_threshold(threshold)
        condition = Condition.coerce(condition)
    except ValidationError as e:
        raise ValueError(f"{settings_path.name}: {e}") from None

    env_delay = os.environ.get(ROLL_DELAY_ENV)
    if env_delay:
        try:
            roll_delay_ms = max(0, int(env_delay))
        except ValueError:
            logger.warning("Ignoring %s=%r: not an integer", ROLL_DELAY_ENV, env_delay)

    return GameSettings(
        roll_delay_ms=roll_delay_ms,
        default_threshold=threshold,
        default_condition=condition,
    )


def _read_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.warning("Could not read settings from %s: %s", path, e)
        return {}
    except yaml.YAMLError as e:
        raise ValueError(f"{path.name}: invalid YAML ({e})") from None
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name}: expected a mapping of settings")
    return raw
