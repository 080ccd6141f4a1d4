import argparse
from typing import Optional

from git_dir_cache.config import get_root_dir


class DefaultSubcommandArgParse(argparse.ArgumentParser):
    __default_subparser: Optional[str] = None

    def set_default_subparser(self, name: str) -> None:
        self.__default_subparser = name

    def _parse_known_args(self, arg_strings, *args, **kwargs):  # noqa: ANN001 ANN202
        in_args = set(arg_strings)
        d_sp = self.__default_subparser
        if d_sp is not None and not {"-h", "--help"}.intersection(in_args):
            for x in self._subparsers._actions:  # noqa: SLF001
                subparser_found = isinstance(
                    x,
                    argparse._SubParsersAction,  # noqa: SLF001
                ) and in_args.intersection(x._name_parser_map.keys())  # noqa: SLF001
                if subparser_found:
                    break
            else:
                # insert default in first position, this implies no
                # global options without a sub_parsers specified
                arg_strings = [d_sp, *arg_strings]
        return super()._parse_known_args(arg_strings, *args, **kwargs)


def get_standard_options_parser() -> argparse.ArgumentParser:
    standard_options_parser = argparse.ArgumentParser(add_help=False)
    standard_options_parser.add_argument(
        "--root-dir",
        metavar="PATH",
        default=None,
        help=f"cache root dir. default is '{get_root_dir()}'",
    )
    return standard_options_parser


def get_log_level_options_parser() -> argparse.ArgumentParser:
    log_level_parser = argparse.ArgumentParser(add_help=False)
    log_level_parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="be more verbose",
    )
    log_level_parser.add_argument(
        "-q",
        "--quiet",
        action="count",
        default=0,
        help="be more quiet",
    )
    return log_level_parser


class CLIArgumentNamespace(argparse.Namespace):
    # initial options, only used in main cli func
    verbose: int = 0
    quiet: int = 0

    # config options
    root_dir: Optional[str] = None

    # all
    uri: str

    @staticmethod
    def func(args: "CLIArgumentNamespace") -> int:  # type: ignore
        ...
