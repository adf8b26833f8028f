import logging

from typing import Optional

from . import const, utils
from .errors import (
    AmbiguousOption,
    OptionDoesNotAllowArgument,
    RequiredOptionArgumentMissing,
    UnknownOption,
)
from .scan import ArgScan
from .spec import Arity, LongOption, LongSpec, ShortSpec

_logger = logging.getLogger(__name__)

Option = tuple[str, Optional[str]]
Result = tuple[list[Option], list[str]]


# --- Short options ---------------------------------------------------------- #


def _parseShortOption(
    argument: str, spec: ShortSpec, options: list[Option], s: ArgScan
) -> None:
    """
    Resolves a cluster of bundled short options (e.g. "xvf" for "-xvf").

    An option that takes a value swallows the rest of the cluster as that
    value. A required value with nothing left in the cluster is taken from
    the next token.
    """
    for i, c in enumerate(argument):
        arity = None if c == ":" else spec.lookup(c)
        if arity is None:
            raise UnknownOption(f"-{c}")

        if arity != Arity.NONE and i + 1 < len(argument):
            options.append((c, argument[i + 1 :]))
            return

        value = None
        if arity == Arity.REQUIRED:
            value = s.next()
            if value is None:
                raise RequiredOptionArgumentMissing(f"-{c}")

        options.append((c, value))


# --- Long options ----------------------------------------------------------- #


def matchLongOption(name: str, spec: LongSpec) -> LongOption:
    """
    Finds the long option selected by `name`, which may be abbreviated to
    any prefix that selects a single entry.

    Raises:
        AmbiguousOption: More than one entry starts with `name`.
        UnknownOption: No entry starts with `name`.
    """
    similar: list[tuple[int, str]] = []
    for i, opt in enumerate(spec.options):
        similar.append((utils.levenshtein(opt.raw, name), opt.label))

        if not opt.name.startswith(name):
            continue

        if (
            len(opt.name) > len(name)
            and i + 1 < len(spec)
            and name != ""
            and spec.options[i + 1].name.startswith(name)
        ):
            raise AmbiguousOption(
                f"--{name}", [o.label for o in spec.startingWith(name)]
            )

        return opt

    raise UnknownOption(f"--{name}", utils.mostSimilar(similar, const.MAX_SUGGESTIONS))


def _parseLongOption(
    argument: str, spec: LongSpec, options: list[Option], s: ArgScan
) -> None:
    """Resolves a long option (e.g. "conf=config.xml" for "--conf=config.xml")."""
    name, sep, inline = argument.partition("=")
    value = inline if sep else None

    opt = matchLongOption(name, spec)
    if opt.arity == Arity.REQUIRED:
        if not value:
            value = s.next()
            if value is None:
                raise RequiredOptionArgumentMissing(f"--{name}")
    elif opt.arity == Arity.NONE and value is not None:
        raise OptionDoesNotAllowArgument(f"--{name}")

    _logger.debug(f"Resolved '--{name}' to '{opt.label}'")
    options.append((opt.label, value))


# --- Parser ----------------------------------------------------------------- #


class Parser:
    """
    Splits argument vectors into options and operands.

    The option specs are compiled once, so a single `Parser` can be reused
    (and shared between threads) for many argument vectors.
    """

    _short: ShortSpec
    _long: Optional[LongSpec]

    def __init__(self, shortOptions: str, longOptions: Optional[list[str]] = None):
        """
        Initializes a new `Parser` object.

        Args:
            shortOptions: Short options, e.g. "xc:o::". A trailing ':' makes
                the value required, '::' makes it optional.
            longOptions: Long options, e.g. ["exec", "conf=", "optn=="]. A
                trailing '=' makes the value required, '==' makes it
                optional. None disables long options, and "--foo" tokens
                are then treated as operands.
        """
        self._short = ShortSpec.compile(shortOptions)
        self._long = None if longOptions is None else LongSpec.compile(longOptions)

    def parse(self, argv: list[str]) -> Result:
        """
        Parses an argument vector.

        A leading token that doesn't start with '-' is taken to be the
        program name and skipped.

        Args:
            argv: The arguments to parse.

        Returns:
            The options as (name, value) pairs and the operands, both in
            the order they were given.
        """
        options: list[Option] = []
        operands: list[str] = []

        if len(argv) == 0:
            return options, operands

        args = [a.strip() for a in argv]
        s = ArgScan(args)
        if args[0] and not args[0].startswith("-"):
            _logger.debug(f"Skipping program name '{args[0]}'")
            s.next()

        while not s.eof():
            arg = s.next()
            assert arg is not None

            if arg == "":
                continue

            if arg == "--":
                rest = s.rest()
                _logger.debug(f"End of options, {len(rest)} operand(s) left")
                operands.extend(rest)
                break

            isLong = arg.startswith("--")
            if not arg.startswith("-") or (isLong and self._long is None):
                operands.append(arg)
            elif isLong:
                assert self._long is not None
                _parseLongOption(arg[2:], self._long, options, s)
            else:
                _parseShortOption(arg[1:], self._short, options, s)

        _logger.debug(f"Parsed {len(options)} option(s) and {len(operands)} operand(s)")
        return options, operands


def parse(
    argv: list[str], shortOptions: str, longOptions: Optional[list[str]] = None
) -> Result:
    """
    Parses an argument vector in one go.

    See `Parser` for the format of `shortOptions` and `longOptions`.
    """
    return Parser(shortOptions, longOptions).parse(argv)
