"""FFmpeg output file"""

from __future__ import annotations

from collections.abc import Sequence

from ._typing import OptionsLike
from .errors import RequiredFieldMissing
from .option import as_options
from .stream_spec import StreamSpecifier, check_stream_specifiers
from .utils.parser import compose

__all__ = ["Output"]


class Output:
    """FFmpeg output file

    :param url: the location of the output file
    :param options: the options for the output, defaults to None

    Streams mapped into the output with :py:meth:`add_streams` keep their order,
    which sets the stream order of the output file. The same stream may be
    mapped more than once.
    """

    def __init__(self, url: str, options: OptionsLike = None):
        if not url:
            raise RequiredFieldMissing("url", "Output")
        self.url = url
        self.options = as_options(options)
        self.streams: list[StreamSpecifier] = []

    def __repr__(self):
        return f"Output(url: {self.url!r}, options: {self.options!r})"

    def to_args(self) -> list[str]:
        """Generate the command argument segment for this FFmpeg output

        The output url comes last as FFmpeg applies the preceding options and
        maps to the next output file.
        """
        args = []
        for o in self.options:
            args.extend(o.to_args())
        for s in self.streams:
            args.extend(["-map", str(s)])
        args.append(str(self.url))
        return args

    def to_command_string(self) -> str:
        """Generate the command string segment for this FFmpeg output"""
        return compose(self.to_args())

    def add_streams(self, stream_specifiers: Sequence[StreamSpecifier]):
        """Add media streams to the output

        :param stream_specifiers: specifiers for the streams to map into this
                                  output (in order)
        """
        self.streams.extend(check_stream_specifiers(stream_specifiers))

    def add_stream(self, stream_specifier: StreamSpecifier):
        """Add a single media stream to the output

        :param stream_specifier: specifier for the stream to map into this output
        """
        self.add_streams([stream_specifier])

    def add_options(self, options: OptionsLike):
        """Add options to the output

        :param options: the options to be added
        """
        self.options.extend(as_options(options))
