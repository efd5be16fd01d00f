# src/bf_i18n/parser.py
"""
Reading and writing translation files.

Supports JSON (``.json``) and YAML (``.yaml``/``.yml``).  A directory is
read as one file per locale, named after the locale (``en.yaml``,
``ja.json``).

Functions:
    detect_format: Map a file extension to a format name
    parse_file: Load one translation file
    load_translations_from_dir: Load a directory of per-locale files
    write_file: Save translations as JSON or YAML
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .errors import TranslationFileError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

FORMATS = ("json", "yaml")
_EXTENSIONS = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}


def detect_format(path: PathLike) -> str:
    """Return ``'json'`` or ``'yaml'`` for *path*'s extension."""
    ext = Path(path).suffix.lower()
    try:
        return _EXTENSIONS[ext]
    except KeyError:
        raise TranslationFileError(f"Unsupported file extension: {ext or '(none)'}") from None


def parse_file(path: PathLike) -> Dict[str, Any]:
    """
    Load a translation file.

    Raises:
        TranslationFileError: If the file is missing, has an unsupported
            extension, cannot be decoded, or its root is not a mapping.
    """
    file_path = Path(path).resolve()
    if not file_path.is_file():
        raise TranslationFileError(f"File not found: {file_path}")

    fmt = detect_format(file_path)
    content = file_path.read_text(encoding="utf-8")
    try:
        if fmt == "yaml":
            data = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise TranslationFileError(f"Could not parse {file_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise TranslationFileError(f"Root of {file_path} must be a mapping")
    return data


def load_translations_from_dir(path: PathLike) -> Dict[str, Dict[str, Any]]:
    """
    Load every ``<locale>.json``/``.yaml``/``.yml`` file in a directory.

    A file whose root is keyed by its own locale name (``en: {...}`` in
    ``en.yaml``) is unwrapped.
    """
    dir_path = Path(path).resolve()
    if not dir_path.exists():
        raise TranslationFileError(f"Directory not found: {dir_path}")
    if not dir_path.is_dir():
        raise TranslationFileError(f"Not a directory: {dir_path}")

    translations: Dict[str, Dict[str, Any]] = {}
    for file_path in sorted(dir_path.iterdir()):
        if file_path.suffix.lower() not in _EXTENSIONS:
            continue
        locale = file_path.stem
        content = parse_file(file_path)
        if isinstance(content.get(locale), dict):
            content = content[locale]
        translations[locale] = content
        logger.debug(f"Loaded {locale} from {file_path}")
    return translations


def dumps(data: Dict[str, Any], fmt: str) -> str:
    """Serialize *data* as JSON or YAML text."""
    if fmt == "yaml":
        return yaml.safe_dump(data, allow_unicode=True, default_flow_style=False,
                              sort_keys=False, indent=2, width=120)
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    raise TranslationFileError(f"Unsupported format: {fmt}")


def write_file(path: PathLike, data: Dict[str, Any], fmt: Optional[str] = None) -> Path:
    """Write *data* to *path*; the format defaults to the one implied by the extension."""
    file_path = Path(path).resolve()
    output_format = fmt or detect_format(file_path)
    file_path.write_text(dumps(data, output_format), encoding="utf-8")
    logger.info(f"Saved {output_format} translations to {file_path}")
    return file_path
