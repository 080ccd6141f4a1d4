"""print the cache key a repository url maps to"""

import argparse
from typing import List

from git_dir_cache.cli.arguments import CLIArgumentNamespace
from git_dir_cache.cli.utils import non_empty_string
from git_dir_cache.utils.logging import get_logger
from git_dir_cache.utils.uri import canonicalize_uri

logger = get_logger(__name__)


def add_subparser(subparsers, parents: List[argparse.ArgumentParser]) -> argparse.ArgumentParser:  # noqa: ANN001
    parser = subparsers.add_parser(
        "key",
        help="print the cache key of a repo url",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        parents=parents,
    )
    parser.set_defaults(func=main)
    parser.add_argument("uri", type=non_empty_string)
    return parser


def setup(subparsers, parents: List[argparse.ArgumentParser]) -> None:  # noqa: ANN001
    add_subparser(subparsers, parents)


def main(args: CLIArgumentNamespace) -> int:
    logger.debug("running key subcommand")
    try:
        key = canonicalize_uri(args.uri)
    except ValueError as ex:
        logger.error(ex)
        return 1

    print(key)
    return 0
