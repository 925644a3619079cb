"""FFmpeg input file"""

from __future__ import annotations

from os import PathLike, fspath

from ._typing import OptionsLike, StreamIndex
from .errors import RequiredFieldMissing
from .option import as_options
from .utils.parser import compose
from . import filtergraph as fgb
from . import stream_spec as _stream_spec

__all__ = ["Input"]


class Input:
    """FFmpeg input file

    :param url: the location of the input file or a filtergraph source (for
                ``-f lavfi``)
    :type url: str, PathLike, Filter, Chain, or Graph
    :param options: the options for the input, defaults to None

    `input_label` is assigned by :py:meth:`Command.add_input` (the input's
    position in the command) and is used by the stream specifiers.
    """

    def __init__(self, url, options: OptionsLike = None):
        if url is None or (isinstance(url, str) and not url):
            raise RequiredFieldMissing("url", "Input")
        self.url = fgb.Graph.wrap(url)
        self.options = as_options(options)
        self.input_label: str | None = None

    def __repr__(self):
        return f"Input(url: {self.url_string!r}, options: {self.options!r})"

    @property
    def url_string(self) -> str:
        """url as it appears on the command line"""
        url = self.url
        return fspath(url) if isinstance(url, PathLike) else str(url)

    def add_options(self, options: OptionsLike):
        """Add options to the input

        :param options: the options to be added
        """
        self.options.extend(as_options(options))

    def stream_specifier(self, specifier: StreamIndex) -> _stream_spec.StreamSpecifier:
        """Create a specifier of the input's stream(s)

        :param specifier: stream specifier string or stream index
        :return: stream specifier object
        """
        return _stream_spec.StreamSpecifier(self, specifier)

    def to_args(self) -> list[str]:
        """Generate the command argument segment for this FFmpeg input"""
        args = []
        for o in self.options:
            args.extend(o.to_args())
        args.extend(["-i", self.url_string])
        return args

    def to_command_string(self) -> str:
        """Generate the command string segment for this FFmpeg input"""
        return compose(self.to_args())
