# src/bf_i18n/converter.py
"""
Rewrites translation trees from one framework convention to another.

Strings have their placeholders rewritten.  Going from Rails to Laravel,
plural objects collapse into a single pipe string; going the other way
pipe strings keep their shape and only their placeholders change.  Use
:func:`laravel_plural_to_rails` to turn a pipe string into a plural
object explicitly.
"""
from typing import Any, Dict, Mapping, Optional

from .interpolator import Interpolator
from .modes import Mode, ModeLike, interpolation_options_for, mode_name
from .nodes import NodeKind, classify_node
from .pluralizer import Pluralizer


class Converter:
    def __init__(self, from_mode: ModeLike, to_mode: ModeLike):
        self.from_mode = mode_name(from_mode)
        self.to_mode = mode_name(to_mode)
        self.from_options = interpolation_options_for(self.from_mode)
        self.to_options = interpolation_options_for(self.to_mode)

    def convert_locale(self, node: Mapping[str, Any]) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for key, value in node.items():
            kind = classify_node(value)
            if kind is NodeKind.PLURAL_FORM:
                result[key] = self.convert_plural_object(value)
            elif kind is NodeKind.NAMESPACE:
                result[key] = self.convert_locale(value)
            elif isinstance(value, str):
                result[key] = self.convert_string(value)
            else:
                result[key] = value
        return result

    def convert_string(self, text: str) -> str:
        return Interpolator.convert(text, self.from_options, self.to_options)

    def convert_plural_object(self, forms: Mapping[str, Any]) -> Any:
        if self.from_mode == Mode.RAILS.value and self.to_mode == Mode.LARAVEL.value:
            converted = {
                category: self.convert_string(text)
                for category, text in forms.items()
                if isinstance(text, str)
            }
            return Pluralizer.key_to_pipe(converted)

        if self.from_mode == Mode.LARAVEL.value and self.to_mode == Mode.RAILS.value:
            return {
                category: self.convert_string(text) if isinstance(text, str) else text
                for category, text in forms.items()
            }

        return forms


def convert_translations(translations: Mapping[str, Mapping[str, Any]], from_mode: ModeLike,
                         to_mode: ModeLike) -> Mapping[str, Mapping[str, Any]]:
    """
    Convert every locale of *translations* from *from_mode* to *to_mode*.

    When both modes are equal the input object itself is returned, not a
    copy.
    """
    if mode_name(from_mode) == mode_name(to_mode):
        return translations

    converter = Converter(from_mode, to_mode)
    return {locale: converter.convert_locale(tree) for locale, tree in translations.items()}


def laravel_plural_to_rails(text: str) -> Optional[Dict[str, str]]:
    """
    Convert a pipe-delimited plural string into a Rails plural object.

    Raises:
        PluralSyntaxError: If *text* has unbalanced brackets or a
            malformed ``{n}``/``[a,b]`` marker.
    """
    return Pluralizer.pipe_to_key(text)
