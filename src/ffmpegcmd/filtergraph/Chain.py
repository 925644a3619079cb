from __future__ import annotations

from collections import UserList
from collections.abc import Sequence
import logging
import re
import weakref

from . import utils as filter_utils
from .abc import FilterGraphObject
from .Filter import Filter
from .convert import as_filter
from .. import stream_spec as _stream_spec
from ..errors import InvalidArgument, ResolutionError

logger = logging.getLogger("ffmpegcmd")

__all__ = ["Chain"]

_re_pad_index = re.compile(r"\d+")


class Chain(FilterGraphObject, UserList):
    """List of FFmpeg filters, connected in series

    Chain() to instantiate empty Chain object

    Chain(obj) to copy-instantiate Chain object from another (filters and
    explicit output labels only)

    :param filter_specs: filters of the chain, defaults to None
    :type filter_specs: Filter, Chain, or seq(Filter or filter tuple), optional
    :param inputs: stream specifiers feeding the first filter, defaults to None
    :type inputs: seq(StreamSpecifier), optional
    :param outputs: number of output pads or their labels (`None` to use the
                    positional label), defaults to 1
    :type outputs: int or seq(str or None), optional

    A chain belongs to at most one :py:class:`Graph`. Its unlabeled output pads
    are named after its position in the graph, ``chain{k}_{i}`` for the i-th pad
    of the k-th chain. The composed expression labels the pads in order up to
    the last one that was given an explicit label or is linked by a stream
    specifier.
    """

    def __init__(self, filter_specs=None, inputs=None, outputs=1):
        if isinstance(filter_specs, Chain):
            if outputs == 1:
                outputs = filter_specs._output_labels
            filter_specs = filter_specs.data
        elif isinstance(filter_specs, Filter):
            filter_specs = [filter_specs]

        if filter_specs is not None:
            if isinstance(filter_specs, str) or not isinstance(filter_specs, Sequence):
                raise InvalidArgument(
                    "filter_specs must be a Filter, Chain, or a sequence of filters."
                )
            filter_specs = (as_filter(fspec) for fspec in filter_specs)

        UserList.__init__(self, () if filter_specs is None else filter_specs)

        if isinstance(outputs, int) and not isinstance(outputs, bool):
            if outputs < 0:
                raise InvalidArgument("outputs must be a non-negative int.")
            outputs = [None] * outputs
        elif isinstance(outputs, str) or not isinstance(outputs, Sequence):
            raise InvalidArgument("outputs must be an int or a sequence of labels.")
        elif not all((label is None or (isinstance(label, str) and label)) for label in outputs):
            raise InvalidArgument("output labels must be non-empty str or None.")

        self._output_labels = list(outputs)
        self._linked = set()  # indices of output pads consumed by stream specifiers
        self._graph = None  # weak reference to the owning graph
        self.inputs = []
        if inputs is not None:
            self.add_inputs(inputs)

    def compose(self) -> str:
        """compose filterchain expression"""

        # FFmpeg assigns output labels to pads in order, so every pad up to the
        # last labeled or linked one must carry a label
        used = [
            i
            for i, label in enumerate(self._output_labels)
            if label is not None or i in self._linked
        ]
        n = used[-1] + 1 if used else 0
        return filter_utils.compose_chain(
            self.data,
            (s.link_label() for s in self.inputs),
            (self.output_pad_label(i) for i in range(n)),
        )

    def __str__(self) -> str:
        return self.compose()

    def __repr__(self):
        type_ = type(self)
        return f"""<{type_.__module__}.{type_.__qualname__} object at {hex(id(self))}>
    FFmpeg expression: \"{self.compose()}\"
    Number of filters: {len(self.data)}
    Number of inputs: {len(self.inputs)}
    Number of outputs: {self.get_num_outputs()}
"""

    def __setitem__(self, key, value):
        UserList.__setitem__(self, key, as_filter(value))

    def append(self, item):
        UserList.append(self, as_filter(item))

    def insert(self, i, item):
        UserList.insert(self, i, as_filter(item))

    def extend(self, other):
        UserList.extend(self, (as_filter(item) for item in other))

    def get_num_chains(self) -> int:
        return 1

    def get_num_filters(self) -> int:
        return len(self)

    def get_num_outputs(self) -> int:
        """get the number of output pads"""
        return len(self._output_labels)

    @property
    def graph(self):
        """owning Graph object or None if not attached"""
        return None if self._graph is None else self._graph()

    def _attach(self, graph):
        self._graph = weakref.ref(graph)
        logger.debug("attached filter chain '%s' to a filtergraph", self)

    def add_inputs(self, stream_specifiers: Sequence):
        """Add stream specifiers to the chain's input

        :param stream_specifiers: specifiers for the streams to feed into the
                                  chain (in order)
        """
        self.inputs.extend(_stream_spec.check_stream_specifiers(stream_specifiers))

    def add_input(self, stream_specifier):
        """Add a single stream specifier to the chain's input

        :param stream_specifier: specifier of the stream to feed into the chain
        """
        self.add_inputs([stream_specifier])

    def output_pad_index(self, specifier: str | int) -> int:
        """get the index of the output pad

        :param specifier: pad ordinal or pad label
        :return: pad index
        """

        n = len(self._output_labels)
        if isinstance(specifier, int) or _re_pad_index.fullmatch(str(specifier)):
            index = int(specifier)
            if not (0 <= index < n):
                raise ResolutionError(
                    f"output pad {index} does not exist (the chain has {n} output pads)"
                )
            return index
        try:
            return self._output_labels.index(specifier)
        except ValueError:
            raise ResolutionError(f"output pad label {specifier!r} does not exist")

    def output_pad_label(self, index: int) -> str:
        """get the link label of the output pad

        :param index: pad index
        :return: explicit label or the positional label of the pad
        """
        label = self._output_labels[index]
        if label is not None:
            return label
        graph = self.graph
        position = -1 if graph is None else graph.chain_position(self)
        if position < 0:
            raise ResolutionError(
                "filter chain must be added to a filtergraph before referencing its output pads"
            )
        return f"chain{position}_{index}"

    def resolve_output_pad(self, specifier: str | int) -> str:
        """resolve the output pad link label

        :param specifier: pad ordinal or pad label
        :return: link label of the pad (without brackets)
        """
        return self.output_pad_label(self.output_pad_index(specifier))

    def link_output_pad(self, specifier: str | int) -> str:
        """resolve the output pad and mark it as connected

        :param specifier: pad ordinal or pad label
        :return: link label of the pad (without brackets)
        """
        index = self.output_pad_index(specifier)
        label = self.output_pad_label(index)
        self._linked.add(index)
        return label
