"""make sure a repository is cloned into the cache and print its path"""

import argparse
from typing import List

from git_dir_cache.cli.arguments import CLIArgumentNamespace
from git_dir_cache.cli.utils import non_empty_string
from git_dir_cache.config import GitCacheConfig
from git_dir_cache.core import ensure_git_dir
from git_dir_cache.errors import GitCacheError
from git_dir_cache.utils.logging import get_logger

logger = get_logger(__name__)


def add_parser_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("uri", type=non_empty_string)


def add_subparser(subparsers, parents: List[argparse.ArgumentParser]) -> argparse.ArgumentParser:  # noqa: ANN001
    """Creates a subparser for the 'ensure' command.

    Args:
        subparsers: The subparsers object to add the 'ensure' command to.
        parents: parsers holding the options shared by all commands
    """
    parser = subparsers.add_parser(
        "ensure",
        help="clone a repo into the cache if needed and print its path",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        parents=parents,
    )
    parser.set_defaults(func=main)
    add_parser_arguments(parser)
    return parser


def setup(subparsers, parents: List[argparse.ArgumentParser]) -> None:  # noqa: ANN001
    add_subparser(subparsers, parents)


def main(args: CLIArgumentNamespace) -> int:
    """CLI entry point for the 'ensure' command.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    logger.debug("running ensure subcommand")

    config = GitCacheConfig.from_cli_namespace(args)
    logger.debug(config)

    try:
        git_dir = ensure_git_dir(config, args.uri)
    except GitCacheError as ex:
        logger.error(ex)
        return 1

    print(git_dir)
    return 0
