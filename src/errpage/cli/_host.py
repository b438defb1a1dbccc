"""``errpage host`` — hostname extraction."""

import argparse

from errpage.uri import hostname_of


def run_host(args: argparse.Namespace) -> None:
    """Print the hostname of the URI (an empty line when there is none)."""
    print(hostname_of(args.uri))
