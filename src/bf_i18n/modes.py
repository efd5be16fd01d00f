# src/bf_i18n/modes.py
"""
Backend-framework modes.

A mode bundles the interpolation affixes and the pluralization
representation of one framework convention:

- rails:   ``%{name}`` placeholders, key-based plural objects
- laravel: ``:name`` placeholders, pipe-delimited plural strings

Any other mode tag is accepted and behaves like rails.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Union

from .models import InterpolationOptions


class Mode(str, Enum):
    """Built-in modes."""

    RAILS = "rails"
    LARAVEL = "laravel"


ModeLike = Union[Mode, str]

PLURALIZATION_TYPES = ("key", "pipe", "icu", "custom")


@dataclass(frozen=True)
class ModeConfig:
    name: str
    interpolation_prefix: str
    interpolation_suffix: str
    pluralization_type: str  # 'key', 'pipe', 'icu', 'custom'
    supported_formats: List[str] = field(default_factory=list)

    @property
    def interpolation(self) -> InterpolationOptions:
        return InterpolationOptions(self.interpolation_prefix, self.interpolation_suffix)


RAILS_INTERPOLATION = InterpolationOptions(prefix="%{", suffix="}")
LARAVEL_INTERPOLATION = InterpolationOptions(prefix=":", suffix="")

BUILT_IN_MODE_CONFIGS: Dict[str, ModeConfig] = {
    Mode.RAILS.value: ModeConfig(
        name="rails",
        interpolation_prefix=RAILS_INTERPOLATION.prefix,
        interpolation_suffix=RAILS_INTERPOLATION.suffix,
        pluralization_type="key",
        supported_formats=["yaml", "json"],
    ),
    Mode.LARAVEL.value: ModeConfig(
        name="laravel",
        interpolation_prefix=LARAVEL_INTERPOLATION.prefix,
        interpolation_suffix=LARAVEL_INTERPOLATION.suffix,
        pluralization_type="pipe",
        supported_formats=["php", "json"],
    ),
}


def mode_name(mode: ModeLike) -> str:
    """Return the plain string tag of a mode."""
    return mode.value if isinstance(mode, Mode) else str(mode)


def get_mode_config(mode: ModeLike) -> ModeConfig:
    """Return the configuration for *mode*; unrecognised tags get rails."""
    return BUILT_IN_MODE_CONFIGS.get(mode_name(mode), BUILT_IN_MODE_CONFIGS[Mode.RAILS.value])


def interpolation_options_for(mode: ModeLike) -> InterpolationOptions:
    return get_mode_config(mode).interpolation
