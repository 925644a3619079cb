"""FFmpeg option validation and serialization"""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set
import logging
from numbers import Number
from os import PathLike, fspath

from ._typing import OptionValue, OptionsLike
from .errors import InvalidArgument
from .filtergraph.abc import FilterGraphObject
from .filtergraph.utils import stringify
from .utils.parser import FLAG

logger = logging.getLogger("ffmpegcmd")

__all__ = ["Option", "FILTER_OPTIONS", "FLAG", "as_options"]

FILTER_OPTIONS = (
    "filter",
    "filter:v",
    "vf",
    "filter:a",
    "af",
    "filter_complex",
    "lavfi",
)
"""option names that take a filtergraph"""


class Option:
    """FFmpeg option

    :param name: option name without the leading dash
    :param arg: option argument, defaults to `FLAG` (None) for a flag option

    The object is immutable. If `name` is one of `FILTER_OPTIONS` and `arg` is
    a filtergraph object (Filter, Chain, or Graph), the stored name is
    normalized to ``filter_complex``.
    """

    __slots__ = ("_name", "_arg")

    def __init__(self, name: str, arg: OptionValue = FLAG):
        self.validate(name, arg)
        if name in FILTER_OPTIONS and isinstance(arg, FilterGraphObject):
            name = "filter_complex"
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_arg", arg)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} object is immutable")

    @property
    def name(self) -> str:
        return self._name

    @property
    def arg(self) -> OptionValue:
        return self._arg

    @property
    def option_name(self) -> str:
        return f"-{self._name}"

    def __repr__(self):
        return f"Option({self._name!r}, {self._arg!r})"

    def __eq__(self, other):
        if not isinstance(other, Option):
            return NotImplemented
        return self._name == other._name and self._arg == other._arg

    def __hash__(self):
        return hash((self._name, str(self._arg)))

    def to_args(self) -> list[str]:
        """Generate the command argument segment for this FFmpeg option"""
        if self._arg is None:
            return [self.option_name]
        arg = fspath(self._arg) if isinstance(self._arg, PathLike) else self._arg
        return [self.option_name, stringify(arg)]

    def to_command_string(self) -> str:
        """Generate the (unquoted) command string segment for this FFmpeg option"""
        return " ".join(self.to_args())

    @staticmethod
    def validate(name: str, arg: OptionValue) -> bool:
        """Validate the option name and argument

        :param name: the option name
        :param arg: the argument for this option
        :return: True if valid; raises InvalidArgument if invalid
        """

        if not (isinstance(name, str) and name):
            raise InvalidArgument(f"option name ({name!r}) must be a non-empty str")

        if arg is None or isinstance(arg, str):
            return True

        if isinstance(arg, (Mapping, Set)) or (
            isinstance(arg, Sequence) and not isinstance(arg, FilterGraphObject)
        ):
            raise InvalidArgument(
                f"InvalidArgument: arg of option -{name} must be a string value or None, "
                "or must be a single-value type with a string conversion"
            )

        if not (
            isinstance(arg, (Number, PathLike, FilterGraphObject))
            or type(arg).__str__ is not object.__str__
        ):
            raise InvalidArgument(
                f"InvalidArgument: arg of option -{name} must be a string value or None, "
                "or must have a string conversion"
            )

        return True


def as_options(options: OptionsLike) -> list[Option]:
    """Validate and convert options to a list of Option objects

    :param options: dict of option name-argument pairs, sequence of `(name,)`
                    or `(name, arg)` tuples or Option objects, or None
    :return: list of validated options in the given order
    """

    logger.debug("Validating options: %s", options)

    if options is None:
        return []

    if isinstance(options, Mapping):
        return [Option(name, arg) for name, arg in options.items()]

    if isinstance(options, str) or not isinstance(options, Sequence):
        raise InvalidArgument(
            "options must be a dict or a sequence of (name, arg) pairs or Option objects"
        )

    def to_option(item):
        if isinstance(item, Option):
            return item
        if isinstance(item, tuple) and len(item) in (1, 2):
            return Option(*item)
        raise InvalidArgument(f"Invalid option item: {item!r}")

    return [to_option(item) for item in options]
