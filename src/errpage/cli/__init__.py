"""errpage CLI — inspect error page candidates and URI hostnames.

Entry point registered as ``errpage`` in ``pyproject.toml``::

    [project.scripts]
    errpage = "errpage.cli:main"
"""

import argparse
import logging
import sys

from errpage.errors import ErrpageError


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``errpage`` command."""
    parser = argparse.ArgumentParser(
        prog="errpage",
        description="errpage — localized error-page resource resolution.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log resolver decisions to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- errpage paths ----------------------------------------------------
    paths_parser = subparsers.add_parser("paths", help="List candidate paths, most specific first")
    paths_parser.add_argument(
        "location",
        nargs="?",
        default=None,
        help="Error page location (default: $ERRPAGE_LOCATION)",
    )
    paths_parser.add_argument(
        "--lang",
        default=None,
        help="Language tag, e.g. zh-Hant-TW (default: $ERRPAGE_LANGUAGE or $LANG)",
    )

    # -- errpage find -----------------------------------------------------
    find_parser = subparsers.add_parser("find", help="Print the first candidate that exists")
    find_parser.add_argument(
        "location",
        nargs="?",
        default=None,
        help="Error page location (default: $ERRPAGE_LOCATION)",
    )
    find_parser.add_argument("--lang", default=None, help="Language tag")

    # -- errpage host -----------------------------------------------------
    host_parser = subparsers.add_parser("host", help="Print the hostname of a URI")
    host_parser.add_argument("uri", help="URI to inspect")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        if args.command == "paths":
            from errpage.cli._paths import run_paths

            run_paths(args)
        elif args.command == "find":
            from errpage.cli._paths import run_find

            run_find(args)
        elif args.command == "host":
            from errpage.cli._host import run_host

            run_host(args)
    except ErrpageError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)
