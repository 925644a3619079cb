from __future__ import annotations

from collections.abc import Sequence

from .Filter import Filter
from ..errors import InvalidArgument

__all__ = ["as_filter"]


def as_filter(filter_spec) -> Filter:
    """Convert object to a Filter object

    :param filter_spec: Filter object, filter name, or a sequence of the
                        filter name followed by its options
    :return: Filter object
    """
    if isinstance(filter_spec, Filter):
        return filter_spec
    if isinstance(filter_spec, str):
        return Filter(filter_spec)
    if isinstance(filter_spec, Sequence) and len(filter_spec):
        return Filter(filter_spec[0], *filter_spec[1:])
    raise InvalidArgument(f"{filter_spec!r} cannot be converted to a Filter object.")
