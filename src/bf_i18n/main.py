# src/bf_i18n/main.py
"""
Command-line interface for bf-i18n.

Subcommands:
- convert:  check compatibility, then rewrite translations between the
            Rails and Laravel conventions
- validate: compare every locale against a reference locale
- parse:    read a JSON/YAML translation file and re-emit it

Defaults for modes, output format, strictness, reference locale and log
level come from ``bf_i18n.ini`` (see :mod:`bf_i18n.config`).
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from bf_i18n.compatibility import check_compatibility
from bf_i18n.config import config
from bf_i18n.converter import convert_translations
from bf_i18n.errors import I18nError
from bf_i18n.models import CompatibilityReport, ValidationResult
from bf_i18n.parser import FORMATS, dumps, load_translations_from_dir, parse_file, write_file
from bf_i18n.validator import validate_translations

logger = logging.getLogger(__name__)

MODES = ["rails", "laravel"]


def print_compatibility_report(report: CompatibilityReport) -> None:
    if report.warnings:
        print("\nWarnings:")
        for warning in report.warnings:
            print(f"  [WARN] {warning.key}: {warning.message}")
            if warning.suggestion:
                print(f"         Suggestion: {warning.suggestion}")

    if report.errors:
        print("\nErrors:")
        for error in report.errors:
            print(f"  [ERROR] {error.key}: {error.message}")
            if error.suggestion:
                print(f"          Suggestion: {error.suggestion}")


def print_validation_result(result: ValidationResult) -> None:
    for error in result.errors:
        print(f"  [ERROR] {error.locale}: {error.message}")
    for warning in result.warnings:
        print(f"  [WARN] {warning.locale}: {warning.message}")


def _run_checks(translations: Dict[str, dict], args, label_locales: bool) -> Optional[int]:
    """Print compatibility issues; return an exit code when conversion must stop."""
    has_warnings = False
    has_errors = False

    for locale, tree in translations.items():
        report = check_compatibility(tree, args.from_mode, args.to_mode)
        if label_locales and (report.warnings or report.errors):
            print(f"\n=== {locale} ===")
        print_compatibility_report(report)
        has_warnings = has_warnings or bool(report.warnings)
        has_errors = has_errors or not report.compatible

    outcome = "Compatibility check failed" if args.check_only else "Conversion aborted"
    if has_errors:
        print(f"\n{outcome} due to errors.")
        return 1
    if has_warnings and args.strict:
        print(f"\n{outcome} due to warnings (strict mode).")
        return 1
    if args.check_only:
        print("\nCompatibility check passed.")
        return 0
    return None


def cmd_convert(args) -> int:
    source = Path(args.input)

    if source.is_dir():
        translations = load_translations_from_dir(source)
        code = _run_checks(translations, args, label_locales=True)
        if code is not None:
            return code

        converted = convert_translations(translations, args.from_mode, args.to_mode)
        output_dir = Path(args.output)
        output_dir.mkdir(parents=True, exist_ok=True)
        fmt = args.format or config.get('conversion', 'output_format', 'json')
        for locale, tree in converted.items():
            written = write_file(output_dir / f"{locale}.{fmt}", tree, fmt)
            print(f"Written: {written}")
    else:
        content = parse_file(source)
        code = _run_checks({"_": content}, args, label_locales=False)
        if code is not None:
            return code

        converted = convert_translations({"_": content}, args.from_mode, args.to_mode)
        written = write_file(args.output, converted["_"], args.format)
        print(f"Written: {written}")

    print("\nConversion complete.")
    return 0


def cmd_validate(args) -> int:
    source = Path(args.path)
    translations = load_translations_from_dir(source) if source.is_dir() else parse_file(source)

    result = validate_translations(translations, args.reference)
    print_validation_result(result)
    if not result.valid:
        print(f"\nValidation failed: {len(result.errors)} errors, {len(result.warnings)} warnings.")
        return 1
    print(f"\nValidation passed ({len(result.warnings)} warnings).")
    return 0


def cmd_parse(args) -> int:
    content = parse_file(args.input)
    if args.output:
        written = write_file(args.output, content, args.format)
        print(f"Written: {written}")
    else:
        sys.stdout.write(dumps(content, args.format or "json"))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bf-i18n",
        description="bf-i18n - Rails/Laravel translation tooling",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    convert = subparsers.add_parser("convert", help="Convert translation files between modes")
    convert.add_argument("input", help="Input file or directory")
    convert.add_argument("output", help="Output file or directory")
    convert.add_argument("--from-mode", choices=MODES,
                         default=config.get('conversion', 'from_mode', 'rails'),
                         help="Source mode")
    convert.add_argument("--to-mode", choices=MODES,
                         default=config.get('conversion', 'to_mode', 'laravel'),
                         help="Target mode")
    convert.add_argument("--format", choices=FORMATS, help="Output format (yaml, json)")
    convert.add_argument("--check-only", action="store_true",
                         help="Only check compatibility without converting")
    convert.add_argument("--strict", action="store_true",
                         default=config.get('conversion', 'strict', False),
                         help="Fail on warnings")
    convert.set_defaults(func=cmd_convert)

    validate = subparsers.add_parser("validate", help="Check locales against a reference locale")
    validate.add_argument("path", help="Directory of per-locale files, or one file keyed by locale")
    validate.add_argument("--reference", metavar="LOCALE",
                          default=config.get('validation', 'reference_locale', 'en'),
                          help="Reference locale")
    validate.set_defaults(func=cmd_validate)

    parse = subparsers.add_parser("parse", help="Read a translation file and print or rewrite it")
    parse.add_argument("input", help="Input file")
    parse.add_argument("--output", metavar="FILE", help="Output file (prints to stdout if omitted)")
    parse.add_argument("--format", choices=FORMATS, help="Output format (yaml, json)")
    parse.set_defaults(func=cmd_parse)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the ``bf-i18n`` command.

    Returns:
        int: Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.get('logging', 'log_level', 'WARNING'),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except I18nError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
