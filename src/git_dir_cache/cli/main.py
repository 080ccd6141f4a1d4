"""shared cache of bare git clones

To see usage info for a specific subcommand, run git-dir-cache <subcommand> [-h | --help]
"""

import argparse
import sys
from typing import List, Optional

from git_dir_cache.cli import commands
from git_dir_cache.cli.arguments import (
    CLIArgumentNamespace,
    DefaultSubcommandArgParse,
    get_log_level_options_parser,
    get_standard_options_parser,
)
from git_dir_cache.constants import defaults
from git_dir_cache.utils.logging import compute_log_level, configure_logger, get_logger

logger = get_logger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(
        argv if argv is not None else sys.argv[1:], namespace=CLIArgumentNamespace()
    )

    configure_logger(compute_log_level(args.verbose, args.quiet))

    logger.debug("received args: %s", argv)
    logger.debug("program args: %s", args)
    return args.func(args)


def create_parser() -> argparse.ArgumentParser:
    parser = DefaultSubcommandArgParse(
        description=__doc__,
        prog="git-dir-cache",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(help="subcommand help")

    parents = [get_log_level_options_parser(), get_standard_options_parser()]
    commands.ensure.setup(subparsers, parents)
    commands.key.setup(subparsers, parents)

    parser.set_default_subparser(defaults.DEFAULT_SUBCOMMAND)

    return parser


if __name__ == "__main__":
    sys.exit(main())
