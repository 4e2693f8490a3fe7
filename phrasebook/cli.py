"""phrasebook CLI.

Inspect plural rules and try phrases from the command line:

    phrasebook transform "%{smart_count} file |||| %{smart_count} files" --count 3
    phrasebook plural ru 1 2 5 21
    phrasebook families
"""

import argparse
import logging
import os
import sys

from rich.console import Console
from rich.table import Table

from . import __version__
from .config import LOCALE_ENV
from .exceptions import PhrasebookError
from .pluralization import DEFAULT_PLURAL_RULES, FAMILY_FORMS, PluralFamily, plural_index
from .tokens import build_matcher
from .transformer import COUNT_FIELD, transform_phrase

console = Console()

DEFAULT_COUNTS = [0, 1, 2, 3, 5, 11, 21, 101]


def _parse_vars(pairs: list[str]) -> dict[str, str]:
    values: dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep:
            raise argparse.ArgumentTypeError(f"Expected NAME=VALUE, got '{pair}'")
        values[name] = value
    return values


def _family_label(name: str) -> str:
    try:
        forms = FAMILY_FORMS[PluralFamily(name)]
    except ValueError:
        return name
    return f"{name} ({', '.join(forms)})"


def cmd_transform(args: argparse.Namespace) -> int:
    """Handle transform command."""
    try:
        substitutions = _parse_vars(args.var)
    except argparse.ArgumentTypeError as e:
        console.print(f"Error: {e}", style="red")
        return 2

    if args.count is not None:
        substitutions[COUNT_FIELD] = args.count

    matcher = build_matcher(args.prefix, args.suffix)
    result = transform_phrase(
        args.phrase,
        substitutions if substitutions else None,
        args.locale,
        matcher,
    )
    # Print raw so markup characters in phrases survive
    console.print(result, markup=False, highlight=False)
    return 0


def cmd_plural(args: argparse.Namespace) -> int:
    """Handle plural command."""
    rules = DEFAULT_PLURAL_RULES
    family = rules.family_name(args.locale)
    counts = args.counts or DEFAULT_COUNTS

    table = Table(title=f"Plural categories for '{args.locale}'")
    table.add_column("Count", justify="right", style="cyan")
    table.add_column("Category", justify="right")

    labels = FAMILY_FORMS.get(PluralFamily(family), ()) if family else ()
    if labels:
        table.add_column("Form")

    for count in counts:
        index = plural_index(rules, args.locale, count)
        row = [str(count), str(index)]
        if labels:
            row.append(labels[index] if 0 <= index < len(labels) else "")
        table.add_row(*row)

    console.print(table)
    if not rules.supports_locale(args.locale):
        console.print(f"'{args.locale}' is not listed; using English rules", style="yellow")
    console.print(f"Family: {_family_label(family)}", style="dim")
    return 0


def cmd_families(args: argparse.Namespace) -> int:
    """Handle families command."""
    table = Table(title="Plural families")
    table.add_column("Family", style="green")
    table.add_column("Forms", justify="right")
    table.add_column("Locales", style="cyan")

    for name, locales in DEFAULT_PLURAL_RULES.type_to_languages.items():
        forms = FAMILY_FORMS.get(PluralFamily(name), ())
        table.add_row(name, str(len(forms)), ", ".join(locales))

    console.print(table)
    return 0


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phrasebook",
        description="Pluralize and interpolate phrases",
    )
    parser.add_argument("--version", "-V", action="version", version=f"phrasebook {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    transform_parser = subparsers.add_parser("transform", help="Transform a phrase")
    transform_parser.add_argument("phrase", help="Phrase template")
    transform_parser.add_argument("--count", "-c", type=int, help="Value of smart_count")
    transform_parser.add_argument(
        "--var",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Placeholder value (repeatable)",
    )
    transform_parser.add_argument(
        "--locale", "-l", default=os.environ.get(LOCALE_ENV) or "en", help="Locale code"
    )
    transform_parser.add_argument("--prefix", help="Placeholder prefix (default '%%{')")
    transform_parser.add_argument("--suffix", help="Placeholder suffix (default '}')")
    transform_parser.set_defaults(func=cmd_transform)

    plural_parser = subparsers.add_parser("plural", help="Show plural categories for a locale")
    plural_parser.add_argument("locale", help="Locale code")
    plural_parser.add_argument("counts", nargs="*", type=int, help="Counts to classify")
    plural_parser.set_defaults(func=cmd_plural)

    families_parser = subparsers.add_parser("families", help="List built-in plural families")
    families_parser.set_defaults(func=cmd_families)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for phrasebook CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if not args.command:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except PhrasebookError as e:
        console.print(f"Error: {e}", style="red")
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
