"""Command-line entry point for cvelookup.

Usage::

    cvelookup CVE-2021-34527
    cvelookup 2021-34527 -v
"""

import argparse
import sys
from typing import Optional, Sequence

import requests

from . import __version__
from .downloaders import fetch_cve_record
from .errors import LookupFailure, UsageError
from .parsers import normalize_cve_id
from .report import present


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="cvelookup",
        description="Look up a CVE record in the NVD and print its key fields.",
    )
    p.add_argument("cve_id", metavar="CVE-ID", help="CVE identifier; the CVE- prefix is added if missing")
    p.add_argument("-v", "--verbose", action="store_true", help="Print raw JSON response in verbose mode")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def lookup(raw_id: str, verbose: bool = False, session: Optional[requests.Session] = None) -> str:
    """Run the full pipeline for one identifier and print the table.

    Raises:
        UsageError: If the identifier is blank.
        LookupFailure: Any transport, decode, or not-found error.
    """
    if not raw_id.strip():
        raise UsageError("CVE-ID must not be empty")
    cve_id = normalize_cve_id(raw_id)
    body = fetch_cve_record(cve_id, session=session)
    return present(body, verbose=verbose, cve_id=cve_id)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments, run the lookup, and return an exit code.

    Argument errors exit through argparse with status 2 after printing
    the usage summary to stderr.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        lookup(args.cve_id, verbose=args.verbose)
    except LookupFailure as e:
        if isinstance(e, UsageError):
            parser.print_usage(sys.stderr)
        print(str(e), file=sys.stderr)
        return e.exit_code
    return 0


def main_entry() -> None:
    raise SystemExit(main())
