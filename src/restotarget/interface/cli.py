"""CLI commands for inspecting candidates and stored targeting relations."""

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from ..config.runtime import get_settings
from ..domain.catalog import ReferenceCatalogs
from ..observability import configure_logging
from ..ports.targeting_store import Anchor, TargetingStoreError
from ..wiring import build_restaurant_selector, build_session
from .validation import validate_relation


def load_catalogs_from_file(path: Path) -> ReferenceCatalogs:
    """Load reference catalogs from a JSON file. Exits on missing file or invalid schema."""
    if not path.exists():
        print(f"Error: catalog file not found: {path}", file=sys.stderr)
        sys.exit(1)
    try:
        return ReferenceCatalogs.load_json(path)
    except ValidationError as e:
        print(f"Error: invalid catalog file {path}: {e}", file=sys.stderr)
        sys.exit(1)


def cmd_candidates(args: argparse.Namespace) -> int:
    catalogs = load_catalogs_from_file(args.catalog)
    try:
        selector = build_restaurant_selector(catalogs, campaign_id=args.campaign_id)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    candidates = selector.select(exclude_ids=args.exclude or (), search_term=args.search)
    output = [catalogs.restaurant_profile(r) for r in candidates]
    print(json.dumps({"count": len(output), "restaurants": output}, indent=2))
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    session = build_session(Anchor(kind=args.kind, id=args.id))
    print(json.dumps(session.relation.to_wire(), indent=2))
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    catalogs = load_catalogs_from_file(args.catalog)
    anchor = Anchor(kind=args.kind, id=args.id)
    session = build_session(anchor)
    report = validate_relation(session.relation, catalogs, anchor.counterpart_kind)
    print(json.dumps(report.to_dict(), indent=2))
    return 0 if report.is_valid else 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="restotarget", description="Restaurant campaign targeting")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    cand_parser = subparsers.add_parser("candidates", help="List restaurants eligible for bulk-add")
    cand_parser.add_argument("--catalog", type=Path, required=True, help="Reference catalog JSON file")
    cand_parser.add_argument(
        "--campaign-id",
        type=int,
        default=None,
        help="Seed attribute rules from this campaign's targeting rules",
    )
    cand_parser.add_argument("--search", type=str, default="", help="Case-insensitive name filter")
    cand_parser.add_argument("--exclude", type=int, nargs="*", default=None, help="Restaurant ids to skip")
    cand_parser.set_defaults(func=cmd_candidates)

    for name, help_text in (
        ("show", "Print the stored relation for an anchor"),
        ("check", "Validate the stored relation against the catalogs"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--kind", choices=["campaign", "restaurant"], required=True, help="Anchor kind")
        sub.add_argument("--id", type=int, required=True, help="Anchor id")
        if name == "check":
            sub.add_argument("--catalog", type=Path, required=True, help="Reference catalog JSON file")
            sub.set_defaults(func=cmd_check)
        else:
            sub.set_defaults(func=cmd_show)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_help()
        return 1
    configure_logging(get_settings().log_level)
    try:
        return args.func(args)
    except (TargetingStoreError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
