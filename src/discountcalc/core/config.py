"""Single config object: passed to CalculatorApp(config=...); available via DI."""
from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_GST_MULTIPLIER = 1.18
DEFAULT_PRESET_DISCOUNTS: tuple[int, ...] = (45,) + tuple(range(50, 75))
DEFAULT_COPIED_FEEDBACK_SECONDS = 1.5
DEFAULT_SHARE_TITLE = "Discount Result"

ENV_PREFIX = "DISCOUNTCALC_"


class ConfigError(ValueError):
    """Malformed configuration value."""


@dataclass(frozen=True)
class CalculatorConfig:
    """
    Calculator settings. Defaults reproduce the fixed 18% GST screen;
    override via constructor or load_config_from_env().
    """

    gst_multiplier: float = DEFAULT_GST_MULTIPLIER
    preset_discounts: tuple[int, ...] = field(default=DEFAULT_PRESET_DISCOUNTS)
    copied_feedback_seconds: float = DEFAULT_COPIED_FEEDBACK_SECONDS
    share_title: str = DEFAULT_SHARE_TITLE
    share_url: Optional[str] = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.gst_multiplier) or self.gst_multiplier < 0:
            raise ConfigError(f"gst_multiplier must be a finite non-negative number, got {self.gst_multiplier!r}")
        if any(p < 0 for p in self.preset_discounts):
            raise ConfigError("preset_discounts must be non-negative")
        if len(set(self.preset_discounts)) != len(self.preset_discounts):
            raise ConfigError("preset_discounts must not repeat")
        if not math.isfinite(self.copied_feedback_seconds) or self.copied_feedback_seconds < 0:
            raise ConfigError(
                f"copied_feedback_seconds must be a finite non-negative number, got {self.copied_feedback_seconds!r}"
            )

    @classmethod
    def load_from_env(
        cls, prefix: str = ENV_PREFIX, environ: Mapping[str, str] | None = None, **defaults: Any
    ) -> dict[str, Any]:
        """Raw string values from environ with prefix, merged over defaults. Keys are lowercased."""
        result = dict(defaults)
        env = os.environ if environ is None else environ
        for key, value in env.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                result[name] = value
        return result


def _parse_float(name: str, value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{name}: expected a number, got {value!r}") from e


def _parse_presets(value: Any) -> tuple[int, ...]:
    if isinstance(value, (tuple, list)):
        items = list(value)
    else:
        items = [part.strip() for part in str(value).split(",") if part.strip()]
    try:
        return tuple(int(item) for item in items)
    except ValueError as e:
        raise ConfigError(f"preset_discounts: expected comma-separated integers, got {value!r}") from e


def load_config_from_env(prefix: str = ENV_PREFIX, environ: Mapping[str, str] | None = None) -> CalculatorConfig:
    """
    Build CalculatorConfig from environment variables.
    DISCOUNTCALC_GST_MULTIPLIER=1.12 -> gst_multiplier=1.12; unknown keys are ignored.
    """
    raw = CalculatorConfig.load_from_env(prefix, environ)
    kwargs: dict[str, Any] = {}
    if "gst_multiplier" in raw:
        kwargs["gst_multiplier"] = _parse_float("gst_multiplier", raw["gst_multiplier"])
    if "preset_discounts" in raw:
        kwargs["preset_discounts"] = _parse_presets(raw["preset_discounts"])
    if "copied_feedback_seconds" in raw:
        kwargs["copied_feedback_seconds"] = _parse_float("copied_feedback_seconds", raw["copied_feedback_seconds"])
    if "share_title" in raw:
        kwargs["share_title"] = raw["share_title"]
    if raw.get("share_url"):
        kwargs["share_url"] = raw["share_url"].strip()
    ignored = sorted(set(raw) - set(kwargs) - {"share_url"})
    if ignored:
        logger.debug("Ignoring unknown config keys: %s", ", ".join(ignored))
    return CalculatorConfig(**kwargs)
