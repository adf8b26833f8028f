import dataclasses as dt

from enum import Enum
from typing import Optional


class Arity(Enum):
    """
    Whether an option takes a value.
    """

    NONE = 0
    REQUIRED = 1
    OPTIONAL = 2


# --- Short options ---------------------------------------------------------- #


@dt.dataclass(frozen=True)
class ShortSpec:
    """
    A compiled short-option spec string such as "xc:o::".

    Attributes:
        arities: Declared option characters mapped to their arity.
    """

    arities: dict[str, Arity] = dt.field(default_factory=dict)

    @staticmethod
    def compile(src: str) -> "ShortSpec":
        """
        Compiles a short-option spec string.

        Each character other than ':' declares an option. One trailing ':'
        makes its value required, two make it optional. The first
        declaration of a character wins.

        Args:
            src: The spec string.
        """
        arities: dict[str, Arity] = {}
        i = 0
        while i < len(src):
            c = src[i]
            i += 1
            if c == ":":
                continue

            colons = 0
            while i < len(src) and src[i] == ":":
                colons += 1
                i += 1

            arity = Arity.NONE
            if colons == 1:
                arity = Arity.REQUIRED
            elif colons > 1:
                arity = Arity.OPTIONAL

            arities.setdefault(c, arity)
        return ShortSpec(arities)

    def lookup(self, c: str) -> Optional[Arity]:
        """Returns the arity of option `c`, or None if it isn't declared."""
        return self.arities.get(c)


# --- Long options ----------------------------------------------------------- #


@dt.dataclass(frozen=True)
class LongOption:
    """
    A single long-option spec entry.

    Attributes:
        raw: The entry as declared (e.g. "conf=").
        name: The entry without its arity suffix (e.g. "conf").
        arity: The declared arity.
    """

    raw: str
    name: str
    arity: Arity

    @property
    def label(self) -> str:
        """Returns the option as it appears in results and messages."""
        return f"--{self.name}"

    @staticmethod
    def compile(raw: str) -> "LongOption":
        if raw.endswith("=="):
            return LongOption(raw, raw[:-2], Arity.OPTIONAL)
        if raw.endswith("="):
            return LongOption(raw, raw[:-1], Arity.REQUIRED)
        return LongOption(raw, raw, Arity.NONE)


@dt.dataclass(frozen=True)
class LongSpec:
    """
    A compiled long-option spec, sorted by bare name.
    """

    options: list[LongOption] = dt.field(default_factory=list)

    @staticmethod
    def compile(entries: list[str]) -> "LongSpec":
        options = [LongOption.compile(e) for e in entries]
        return LongSpec(sorted(options, key=lambda o: o.name))

    def __len__(self) -> int:
        return len(self.options)

    def startingWith(self, prefix: str) -> list[LongOption]:
        """Returns every option whose bare name starts with `prefix`, in order."""
        return [o for o in self.options if o.name.startswith(prefix)]
