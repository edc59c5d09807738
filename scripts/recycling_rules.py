"""Command line access to recycling rules extraction and material comparison."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from config import settings
from services import compare_materials, get_rules, list_supported_materials
from services.recycling_rules import validate_zip_code


def _load_json(path: str):
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def _rules_command(args: argparse.Namespace) -> str:
    zip_code = validate_zip_code(args.zip)
    payload = _load_json(args.results)
    # Raw search provider payloads keep results under "organic_results".
    if isinstance(payload, dict):
        payload = payload.get("organic_results") or payload.get("results") or []
    rules = get_rules(zip_code, payload)
    return rules.model_dump_json(indent=2)


def _compare_command(args: argparse.Namespace) -> str:
    comparison = compare_materials(_load_json(args.items), _load_json(args.rules))
    return comparison.model_dump_json(indent=2)


def _materials_command(args: argparse.Namespace) -> str:
    return list_supported_materials().model_dump_json(indent=2)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=f"{settings.app_name} recycling rules utility")
    subparsers = parser.add_subparsers(dest="command", required=True)

    rules_parser = subparsers.add_parser("rules", help="Extract recycling rules from search results")
    rules_parser.add_argument("--zip", required=True, help="5-digit US ZIP code")
    rules_parser.add_argument("results", help="JSON file with a list of {title, url, snippet}")
    rules_parser.set_defaults(handler=_rules_command)

    compare_parser = subparsers.add_parser("compare", help="Compare detected items against rules")
    compare_parser.add_argument("rules", help="JSON file produced by the rules command")
    compare_parser.add_argument("items", help="JSON file with a list of detected items")
    compare_parser.set_defaults(handler=_compare_command)

    materials_parser = subparsers.add_parser("materials", help="List materials the taxonomy recognizes")
    materials_parser.set_defaults(handler=_materials_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=settings.log_level.upper())
    args = build_parser().parse_args(argv)

    try:
        output = args.handler(args)
    except (ValueError, OSError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
