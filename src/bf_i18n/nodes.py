# src/bf_i18n/nodes.py
"""
Structural helpers for translation trees.

A mapping whose keys are all CLDR plural categories is a plural object;
any other mapping is a namespace.  :func:`classify_node` is the single
place where that decision is made, so every tree walk in the package
agrees on it.
"""
from enum import Enum
from typing import Any, Dict, Iterator, List, Mapping, Sequence, Tuple

PLURAL_CATEGORIES = ("zero", "one", "two", "few", "many", "other")

MISSING = object()


class NodeKind(Enum):
    NAMESPACE = "namespace"
    PLURAL_FORM = "plural_form"
    LEAF = "leaf"


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_plural_object(value: Any) -> bool:
    """True when *value* is a non-empty mapping keyed only by plural categories."""
    return is_mapping(value) and len(value) > 0 and all(k in PLURAL_CATEGORIES for k in value)


def classify_node(value: Any) -> NodeKind:
    """Classify a translation value as namespace, plural object or leaf."""
    if not is_mapping(value):
        return NodeKind.LEAF
    if is_plural_object(value):
        return NodeKind.PLURAL_FORM
    return NodeKind.NAMESPACE


def join_key(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


def lookup(root: Mapping[str, Any], segments: Sequence[str]) -> Tuple[bool, Any]:
    """
    Follow *segments* through nested mappings.

    Returns ``(found, value)``.  A non-mapping intermediate value or an
    absent key ends the walk with ``(False, None)``; a stored ``None`` is
    reported as found.
    """
    current: Any = root
    for segment in segments:
        if not is_mapping(current):
            return False, None
        current = current.get(segment, MISSING)
        if current is MISSING:
            return False, None
    return True, current


def get_nested_value(root: Mapping[str, Any], key: str, default: Any = None) -> Any:
    """Look up a dot-path *key*; *default* when it is absent."""
    found, value = lookup(root, key.split("."))
    return value if found else default


def deep_merge(target: Dict[str, Any], source: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Merge *source* into *target* in place and return *target*.

    Two mappings under the same key are merged recursively; anything else
    (lists included) is overwritten by the value from *source*.
    """
    for key, source_value in source.items():
        target_value = target.get(key)
        if is_mapping(source_value) and isinstance(target_value, dict):
            deep_merge(target_value, source_value)
        else:
            target[key] = source_value
    return target


def iter_leaves(root: Mapping[str, Any], prefix: str = "") -> Iterator[Tuple[str, Any]]:
    """Yield ``(dot_path, value)`` for every non-mapping value under *root*."""
    for key, value in root.items():
        full_key = join_key(prefix, key)
        if is_mapping(value):
            yield from iter_leaves(value, full_key)
        else:
            yield full_key, value


def flatten_keys(root: Mapping[str, Any]) -> List[str]:
    """Return the dot-paths of every leaf, in document order."""
    return [key for key, _ in iter_leaves(root)]


def plain_copy(value: Any) -> Any:
    """Copy a translation value into fresh dicts and lists."""
    if is_mapping(value):
        return {str(k): plain_copy(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [plain_copy(v) for v in value]
    return value

