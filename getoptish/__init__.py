import logging

from . import const, vt100
from .errors import (
    AmbiguousOption,
    OptionDoesNotAllowArgument,
    ParseError,
    RequiredOptionArgumentMissing,
    UnknownOption,
)
from .parser import Option, Parser, Result, parse
from .spec import Arity

__all__ = [
    "AmbiguousOption",
    "Arity",
    "Option",
    "OptionDoesNotAllowArgument",
    "ParseError",
    "Parser",
    "RequiredOptionArgumentMissing",
    "Result",
    "UnknownOption",
    "ensure",
    "logger",
    "parse",
]


def ensure(version: tuple[int, int, int]):
    if (
        const.VERSION[0] == version[0]
        and const.VERSION[1] == version[1]
        and const.VERSION[2] >= version[2]
    ):
        return

    raise RuntimeError(
        f"Expected getoptish version {version[0]}.{version[1]}.{version[2]} but found {const.VERSION_STR}"
    )


class logger:
    @staticmethod
    def setup(verbose: bool = False):
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
