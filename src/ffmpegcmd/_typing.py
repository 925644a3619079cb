"""ffmpegcmd object independent common type hints"""

from __future__ import annotations

from typing import *
from typing_extensions import *

from fractions import Fraction
from os import PathLike

if TYPE_CHECKING:
    from .filtergraph import Filter, Chain, Graph
    from .option import Option
    from .progress import ProgressParser

OptionValue = Union[str, int, float, Fraction, PathLike, "Filter", "Chain", "Graph", None]
"""FFmpeg option argument. Use `None` or its alias `ffmpegcmd.FLAG` for a flag option
(e.g., -y) without any value."""

FFmpegOptionDict = dict[str, OptionValue]
"""FFmpeg options with their values keyed by the option names without preceding dash."""

OptionsLike = Union[
    FFmpegOptionDict, Sequence[Union[tuple[str], tuple[str, OptionValue], "Option"]], None
]
"""Any of the accepted forms of an option collection"""

StreamIndex = Union[str, int]
"""stream specifier string or stream/pad index"""

ProgressCallback = Callable[[dict[str, Any]], Any]
"""listener called with the fields of each completed progress record"""
