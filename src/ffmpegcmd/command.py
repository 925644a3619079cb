"""FFmpeg command composer"""

from __future__ import annotations

import logging

from ._typing import OptionsLike, ProgressCallback
from .filtergraph import Chain, Graph
from .input import Input
from .option import as_options
from .output import Output
from .progress import ProgressParser
from .utils.parser import compose
from . import path

logger = logging.getLogger("ffmpegcmd")

__all__ = ["Command"]


class Command:
    """FFmpeg command (``ffmpeg ...``)

    :param options: the global options for the command, defaults to None
    :param command: the FFmpeg executable, defaults to None to use the
                    configured one (see :py:func:`ffmpegcmd.path.find`)

    The command line is composed in the order: global options, inputs (each
    preceded by its options), ``-filter_complex`` if any filter chain is
    added, and outputs (each preceded by its options and maps).

    The command does not run FFmpeg. Feed the output of the FFmpeg process
    (started with ``-progress pipe:1``) to :py:attr:`progress` and register
    listeners with :py:meth:`add_listener` to receive the progress updates.
    """

    def __init__(self, options: OptionsLike = None, command: str | None = None):
        self.options = as_options(options)
        self.command = command or path.ffmpeg_command()
        self._inputs: list[Input] = []
        self._outputs: list[Output] = []
        self._filter_graph: Graph | None = None
        self.progress = ProgressParser()

    def __repr__(self):
        return f"Command({self.to_command_string()!r})"

    def __str__(self) -> str:
        return self.to_command_string()

    @property
    def inputs(self) -> list[Input]:
        """inputs of the command"""
        return self._inputs

    @property
    def outputs(self) -> list[Output]:
        """outputs of the command"""
        return self._outputs

    @property
    def filter_graph(self) -> Graph | None:
        """the command's filter graph, None if no filter chain was added"""
        return self._filter_graph

    def add_input(self, input: Input):
        """Add an input to the command and label it by its position

        :param input: ffmpeg input object
        """
        input.input_label = str(len(self._inputs))
        self._inputs.append(input)

    def add_output(self, output: Output):
        """Add an output to the command

        :param output: ffmpeg output object
        """
        self._outputs.append(output)

    def add_filter_chain(self, chain: Chain):
        """Add a filter chain to the command's filter graph

        :param chain: filter chain object
        """
        if self._filter_graph is None:
            self._filter_graph = Graph()
        self._filter_graph.add_filter_chain(chain)

    def add_options(self, options: OptionsLike):
        """Add global options to the command

        :param options: the options to be added
        """
        self.options.extend(as_options(options))

    def to_args(self) -> list[str]:
        """Generate the command arguments (without the command itself)"""
        args = []
        for o in self.options:
            args.extend(o.to_args())
        for input in self._inputs:
            args.extend(input.to_args())
        if self._filter_graph is not None and len(self._filter_graph):
            args.extend(["-filter_complex", str(self._filter_graph)])
        for output in self._outputs:
            args.extend(output.to_args())
        return args

    def to_command_tokens(self) -> list[str]:
        """Generate the command line as a list of arguments"""
        args = [self.command, *self.to_args()]
        logger.debug("composed command: %s", args)
        return args

    def to_command_string(self) -> str:
        """Generate the command line string"""
        return compose(self.to_args(), self.command)

    def add_listener(self, callback: ProgressCallback):
        """Register a progress update listener

        :param callback: function to be called with each progress record
        """
        self.progress.add_listener(callback)

    def remove_listener(self, callback: ProgressCallback):
        """Unregister a progress update listener

        :param callback: previously registered function
        """
        self.progress.remove_listener(callback)

    def log_lines(self, n: int = 1) -> str | list[str] | None:
        """Get most recent log lines from the FFmpeg run

        :param n: the number of lines to pull, defaults to 1
        """
        return self.progress.last(n)

    def log_data(self) -> list[str]:
        """Get the currently buffered log lines from the FFmpeg run"""
        return self.progress.log_data()

    def formatted_log(self) -> str:
        """Get the buffered log with the media time of each line"""
        return self.progress.formatted_log()
