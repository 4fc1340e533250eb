"""webis-uuid command line entry point.

Usage: webis-uuid PREFIX INTERNAL_ID

Prints the record's version 5 UUID to stdout. Any argument count other than two
is an error: message on stderr, exit status 1. Arguments are never parsed as options.
"""

import argparse
import logging
import sys
from typing import Optional

from webis_uuid.core.config import settings
from webis_uuid.core.hashing import HashAlgorithmUnavailable
from webis_uuid.core.id_gen import generate_uuid

logger = logging.getLogger(__name__)

PROG = "webis-uuid"
EXIT_OK = 0
EXIT_ERROR = 1
ARGUMENT_COUNT = 2


def _build_parser() -> argparse.ArgumentParser:
    # Only renders usage; arguments are taken verbatim, never parsed as options
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Generate a version 5 UUID for a web corpus record.",
        add_help=False,
    )
    parser.add_argument("prefix", metavar="PREFIX", help="scheme prefix, e.g. clueweb12")
    parser.add_argument(
        "internal_id",
        metavar="INTERNAL_ID",
        help="scheme-specific record ID, e.g. clueweb12-0200wb-93-16911",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) != ARGUMENT_COUNT:
        logger.debug(f"Expected {ARGUMENT_COUNT} arguments, got {len(argv)}")
        sys.stderr.write("ERROR: Missing arguments!\n")
        sys.stderr.write(_build_parser().format_usage())
        return EXIT_ERROR

    prefix, internal_id = argv
    try:
        result = generate_uuid(prefix, internal_id)
    except HashAlgorithmUnavailable as e:
        logger.debug("UUID derivation failed", exc_info=True)
        sys.stderr.write(f"ERROR: {e}\n")
        return EXIT_ERROR
    except UnicodeEncodeError:
        # Undecodable argv bytes arrive as lone surrogates
        logger.debug("Argument is not valid UTF-8", exc_info=True)
        sys.stderr.write("ERROR: PREFIX and INTERNAL_ID must be valid UTF-8\n")
        return EXIT_ERROR

    sys.stdout.write(result + "\n")
    return EXIT_OK


def run() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format=settings.log_format,
        stream=sys.stderr,
    )
    sys.exit(main())


if __name__ == "__main__":
    run()
