# src/bf_i18n/options.py
"""
Validation of I18n construction options.

:func:`validate_options` checks a raw options mapping once and returns a
tagged :class:`OptionsResult`: either the normalized :class:`I18nOptions`
or the list of problems found.  The pydantic models stay private to this
module's callers; the data model types do not depend on them.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .modes import Mode
from .nodes import is_mapping, plain_copy

_PRIMITIVES = (str, int, float, bool, type(None))


class InterpolationOverrides(BaseModel):
    """Per-field overrides of the mode's interpolation affixes."""

    model_config = ConfigDict(extra="forbid")

    prefix: Optional[str] = None
    suffix: Optional[str] = None


class PluralizationOverrides(BaseModel):
    """Override of the mode's pluralization representation."""

    model_config = ConfigDict(extra="forbid")

    type: Optional[Literal["key", "pipe", "icu", "custom"]] = None


class I18nOptions(BaseModel):
    """Validated, normalized I18n options."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    translations: Dict[str, Dict[str, Any]]
    default_locale: str = Field(..., min_length=1)
    mode: str = Mode.RAILS.value
    locale: Optional[str] = None
    detect_locale: bool = False
    fallback_locale: Union[str, List[str], None] = None
    missing_translation_handler: Optional[Callable[[str, str], Optional[str]]] = None
    interpolation: Optional[InterpolationOverrides] = None
    pluralization: Optional[PluralizationOverrides] = None
    debug: bool = False

    @field_validator("mode", mode="before")
    @classmethod
    def validate_mode(cls, v):
        """Accept Mode members as well as plain tags."""
        if isinstance(v, Mode):
            return v.value
        return v

    @field_validator("default_locale")
    @classmethod
    def validate_default_locale(cls, v):
        if not v.strip():
            raise ValueError("default_locale must be a non-empty string")
        return v.strip()

    @field_validator("translations")
    @classmethod
    def validate_translations(cls, v):
        """Every leaf must be a string, number, boolean, None or a list of those."""
        for locale, root in v.items():
            _check_value(root, locale)
        return plain_copy(v)


def _check_value(value: Any, path: str) -> None:
    if is_mapping(value):
        for key, child in value.items():
            if not isinstance(key, str):
                raise ValueError(f"{path}: keys must be strings, got {key!r}")
            _check_value(child, f"{path}.{key}")
    elif isinstance(value, (list, tuple)):
        for index, child in enumerate(value):
            _check_value(child, f"{path}[{index}]")
    elif not isinstance(value, _PRIMITIVES):
        raise ValueError(f"{path}: unsupported translation value of type {type(value).__name__}")


@dataclass
class OptionError:
    field: str
    message: str


@dataclass
class OptionsResult:
    """Outcome of :func:`validate_options`; exactly one of the two is meaningful."""
    options: Optional[I18nOptions] = None
    errors: List[OptionError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.options is not None and not self.errors


def validate_options(raw: Mapping[str, Any]) -> OptionsResult:
    """
    Validate raw I18n options.

    Args:
        raw: Option names to values, as passed to :class:`bf_i18n.i18n.I18n`.

    Returns:
        OptionsResult: ``ok`` with normalized options, or the validation errors.
    """
    if not is_mapping(raw):
        return OptionsResult(errors=[OptionError("", "Options must be a mapping")])
    try:
        return OptionsResult(options=I18nOptions.model_validate(dict(raw)))
    except ValidationError as exc:
        errors = [
            OptionError(".".join(str(part) for part in err["loc"]), err["msg"])
            for err in exc.errors()
        ]
        return OptionsResult(errors=errors)
