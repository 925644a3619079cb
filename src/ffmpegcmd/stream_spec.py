"""stream specifier handling module

A stream specifier references a stream produced by either an input file or an
output pad of a filterchain, for the consumption by an output (via `-map`) or
by another filterchain (as its input link).

"""

from __future__ import annotations

from collections.abc import Sequence

from ._typing import StreamIndex
from .errors import InvalidArgument, InvalidEntity, ResolutionError
from . import filtergraph as fgb
from . import input as _input

__all__ = ["StreamSpecifier", "check_stream_specifiers"]


class StreamSpecifier:
    """FFmpeg stream specifier

    :param entity: the entity on which the stream specifier is applied
    :type entity: Input or Chain
    :param specifier: the stream specifier string or stream/pad index

    The specifier is resolved against its entity at construction so an invalid
    reference fails here rather than when the command is composed. Output pads
    of a chain are linked (and hence labeled) when resolved, which requires the
    chain to be already added to a filtergraph.

    ===========  ====================  ===============
    entity       ``str()``             ``as_link()``
    ===========  ====================  ===============
    Input        ``0:v``               ``[0:v]``
    Chain        ``[chain0_0]``        ``[chain0_0]``
    ===========  ====================  ===============
    """

    def __init__(self, entity: _input.Input | fgb.Chain, specifier: StreamIndex):
        self.entity = entity
        self.specifier = str(specifier)
        if isinstance(entity, _input.Input):
            self.entity_type = "Input"
        elif isinstance(entity, fgb.Chain):
            self.entity_type = "Chain"
        else:
            raise InvalidEntity(entity)

        try:
            if self.entity_type == "Chain":
                entity.link_output_pad(specifier)
            elif not self.specifier:
                raise ResolutionError("empty stream specifier")
        except ResolutionError as e:
            raise ResolutionError(
                f"Invalid specifier {specifier!r} for entity {entity!r}: {e}"
            ) from e

    def link_label(self) -> str:
        """link label of the stream (without brackets)"""
        if self.entity_type == "Input":
            label = self.entity.input_label
            if label is None:
                raise ResolutionError(
                    f"Input {self.entity.url!r} has no label. Add it to a Command first."
                )
            return f"{label}:{self.specifier}"
        return self.entity.resolve_output_pad(self.specifier)

    def as_link(self) -> str:
        """filtergraph link expression of the stream"""
        return f"[{self.link_label()}]"

    def __str__(self) -> str:
        return self.link_label() if self.entity_type == "Input" else self.as_link()

    def __repr__(self):
        return f"StreamSpecifier({self.entity!r}, {self.specifier!r})"


def check_stream_specifiers(stream_specifiers: Sequence) -> list[StreamSpecifier]:
    """Validate a list of stream specifiers

    :param stream_specifiers: specifiers for the streams to validate
    :return: the validated stream specifiers
    """
    if not isinstance(stream_specifiers, (list, tuple)):
        raise InvalidArgument(
            "Invalid argument: stream_specifiers must be a list of StreamSpecifier objects"
        )
    if not all(isinstance(s, StreamSpecifier) for s in stream_specifiers):
        raise InvalidArgument(
            "Invalid inputs specified: all items of stream_specifiers must be StreamSpecifier objects"
        )
    return list(stream_specifiers)
