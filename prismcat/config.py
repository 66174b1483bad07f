"""
Load and expose app config (YAML). Used by the CLI to get the default flag,
frequencies, and color mode; command-line options override it.
"""
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .patterns import get_pattern
from .render import ColorMode, OutputEncoder, make_offsets


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return {**_defaults(), **(data.get("render") or {}), **(data.get("input") or {})}


def _defaults() -> dict[str, Any]:
    return {
        "flag": "rainbow",
        "horizontal_frequency": 0.23,
        "vertical_frequency": 0.1,
        "true_color": False,
        "random": False,
        "seed": None,
        "force_color": False,
        "force_utf8": True,
    }


@dataclass(frozen=True)
class RenderSettings:
    """Resolved settings for one run."""
    flag: str | int = "rainbow"
    horizontal_frequency: float = 0.23
    vertical_frequency: float = 0.1
    true_color: bool = False
    random: bool = False
    seed: int | None = None
    force_color: bool = False
    force_utf8: bool = True

    @property
    def color_mode(self) -> ColorMode:
        return ColorMode.TRUE_COLOR if self.true_color else ColorMode.PALETTE


def _finite(merged: dict[str, Any], key: str) -> float:
    value = float(merged[key])
    if not math.isfinite(value):
        raise ValueError(f"{key} must be finite, got {merged[key]!r}")
    return value


def resolve_settings(config: dict[str, Any], **overrides: Any) -> RenderSettings:
    """Config values with non-None overrides (e.g. from the command line) on top."""
    merged = {**_defaults(), **config}
    merged.update({k: v for k, v in overrides.items() if v is not None})
    return RenderSettings(
        flag=merged["flag"],
        horizontal_frequency=_finite(merged, "horizontal_frequency"),
        vertical_frequency=_finite(merged, "vertical_frequency"),
        true_color=bool(merged["true_color"]),
        random=bool(merged["random"]),
        seed=int(merged["seed"]) if merged["seed"] is not None else None,
        force_color=bool(merged["force_color"]),
        force_utf8=bool(merged["force_utf8"]),
    )


def build_encoder(settings: RenderSettings, *, now: float | None = None) -> OutputEncoder:
    """Validate the flag and fix the run's offsets. Raises UnknownPatternError."""
    pattern = get_pattern(settings.flag)
    offsets = make_offsets(settings.random, seed=settings.seed, now=now)
    return OutputEncoder(
        pattern,
        settings.color_mode,
        settings.horizontal_frequency,
        settings.vertical_frequency,
        offsets,
    )
