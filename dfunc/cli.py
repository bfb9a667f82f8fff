"""CLI entry point for looking up key paths in structure files."""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from dfunc.formats.loading import FormatNotFoundError
from dfunc.lookup import PathLookupError, dfunc
from dfunc.models.path import DEFAULT_SEPARATOR, KeyPath
from dfunc.models.result import LookupResult
from dfunc.structure_loader import load_structure

STATUS_SYMBOLS = {
    "found": "✓",
    "missing": "✗",
    "default": "~",
}

EXIT_OK = 0
EXIT_MISSING = 1
EXIT_ERROR = 2

_NO_DEFAULT = object()


def log_results_summary(
    log: logging.Logger, lookup_results: Sequence[LookupResult]
) -> None:
    """Log a formatted summary of lookup results."""
    log.info("=" * 80)
    log.info("Lookup Results Summary:")
    log.info("=" * 80)

    for result in lookup_results:
        symbol = STATUS_SYMBOLS.get(result.status, "?")
        log.info("%s %s: %s", symbol, result.path or "<root>", result.status)
        if result.message:
            log.info("  Message: %s", result.message)


def parse_default(raw: str | None) -> Any:
    """Parse the --default value as JSON, keeping plain words as strings."""
    if raw is None:
        return _NO_DEFAULT
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def resolve_paths(
    structure: Any,
    key_paths: Sequence[KeyPath],
    default: Any = _NO_DEFAULT,
) -> Sequence[LookupResult]:
    """Resolve every key path against structure."""
    lookup = dfunc(structure)
    results: list[LookupResult] = []

    for key_path in key_paths:
        try:
            value = lookup(*key_path.keys)
        except PathLookupError as e:
            if default is _NO_DEFAULT:
                results.append(
                    LookupResult(path=str(key_path), status="missing", message=str(e))
                )
            else:
                results.append(
                    LookupResult(
                        path=str(key_path),
                        status="default",
                        value=default,
                        message=str(e),
                    )
                )
        else:
            results.append(LookupResult(path=str(key_path), status="found", value=value))

    return results


def run(
    structure_path: Path,
    paths: Sequence[str],
    format_key: str | None = None,
    separator: str = DEFAULT_SEPARATOR,
    default: Any = _NO_DEFAULT,
) -> int:
    """Look up paths in a structure file and return exit code."""
    log = logging.getLogger("dfunc")

    try:
        key_paths = [KeyPath.parse(path, separator) for path in paths]
        log.info("Loading structure: %s", structure_path)
        structure = load_structure(structure_path, format_key)
    except (FileNotFoundError, ValueError, FormatNotFoundError) as e:
        log.error("%s", e)
        return EXIT_ERROR

    log.info("Resolving %d path(s)...", len(key_paths))
    lookup_results = resolve_paths(structure, key_paths, default)

    log_results_summary(log, lookup_results)

    output = format_output(lookup_results)
    print(json.dumps(output, indent=2, default=str))

    if any(result.status == "missing" for result in lookup_results):
        return EXIT_MISSING
    return EXIT_OK


def format_output(lookup_results: Sequence[LookupResult]) -> dict[str, Any]:
    """Format lookup results for JSON output."""
    all_results = [
        {
            "path": result.path,
            "status": result.status,
            "value": result.value,
            "message": result.message,
        }
        for result in lookup_results
    ]

    return {
        "total": len(all_results),
        "found": sum(1 for r in all_results if r["status"] == "found"),
        "missing": sum(1 for r in all_results if r["status"] == "missing"),
        "defaulted": sum(1 for r in all_results if r["status"] == "default"),
        "results": all_results,
    }


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Look up key paths in a JSON or YAML structure"
    )
    parser.add_argument(
        "structure",
        type=Path,
        help="Path to the JSON or YAML file to read",
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="Key paths to resolve (e.g., servers.0.host)",
    )
    parser.add_argument(
        "--format",
        dest="format_key",
        default=None,
        help="Format key (json, yaml); inferred from the file suffix by default",
    )
    parser.add_argument(
        "--separator",
        default=DEFAULT_SEPARATOR,
        help="Separator between keys in a path",
    )
    parser.add_argument(
        "--default",
        default=None,
        help="JSON value reported for missing paths instead of failing",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = run(
        structure_path=args.structure,
        paths=args.paths,
        format_key=args.format_key,
        separator=args.separator,
        default=parse_default(args.default),
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
