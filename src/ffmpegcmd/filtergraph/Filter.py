from __future__ import annotations

from collections.abc import Sequence

from . import utils as filter_utils
from .abc import FilterGraphObject
from ..errors import InvalidArgument

__all__ = ["Filter"]


class Filter(FilterGraphObject, tuple):
    """FFmpeg filter definition immutable class

    :param filter_spec: filter name, (name, id) pair, or another Filter to copy
    :type filter_spec: str, (str, str), or Filter
    :param \\*opts: filter option values assigned in the order options are
                    declared. A single list/tuple argument is expanded, and a
                    trailing dict supplies named options.
    :type \\*opts: tuple, optional
    :param filter_id: filter instance id, rendered as ``name@id``, defaults to None
    :type filter_id: str, optional
    :param \\**kwopts: filter options in key=value pairs
    :type \\**kwopts: dict, optional

    Option order is preserved exactly as given: ordered options are composed
    first, then the named ones.

    >>> str(Filter("scale", 640, -1))
    'scale=640:-1'
    >>> str(Filter("sine", frequency=620, sample_rate=48000))
    'sine=frequency=620:sample_rate=48000'
    """

    def __new__(cls, filter_spec, *args, filter_id=None, **kwargs):
        proto = []
        if isinstance(filter_spec, Filter):
            if filter_id is not None:  # new id
                proto.append((filter_spec.name, filter_id))
                proto.extend(tuple.__getitem__(filter_spec, slice(1, None)))
            else:
                proto.extend(filter_spec)
        elif isinstance(filter_spec, str):
            if not filter_spec:
                raise InvalidArgument("filter name must be a non-empty str.")
            proto.append(filter_spec if filter_id is None else (filter_spec, filter_id))
        elif (
            isinstance(filter_spec, Sequence)
            and len(filter_spec) == 2
            and all((isinstance(i, str) and i for i in filter_spec))
        ):
            proto.append(
                tuple(filter_spec) if filter_id is None else (filter_spec[0], filter_id)
            )
        else:
            raise InvalidArgument(
                f"filter_spec ({filter_spec!r}) must be a str or 2-element str sequence."
            )

        # create named options dict
        proto_dict = {**proto.pop()} if isinstance(proto[-1], dict) else {}

        if len(args) == 1 and isinstance(args[0], (list, tuple)):
            args = tuple(args[0])
        if len(args) and isinstance(args[-1], dict):
            proto_dict = {**proto_dict, **args[-1]}
            args = args[:-1]

        proto.extend(args)

        # update named options
        if len(kwargs):
            proto_dict.update(kwargs)

        # validate named option keys to be str
        for k in proto_dict:
            if not isinstance(k, str):
                raise InvalidArgument(
                    "All keys of the named option dict must be of type str."
                )

        # add the named option dict to the prototype list
        if len(proto_dict):
            proto.append(proto_dict)

        return tuple.__new__(cls, proto)

    def __getitem__(self, key):
        value = tuple.__getitem__(self, key)

        if isinstance(value, dict):
            value = {**value}
        if isinstance(value, tuple) and len(value) and isinstance(value[-1], dict):
            value = tuple((*value[:-1], {**value[-1]}))
        return value

    def compose(self) -> str:
        """compose filter expression"""
        return filter_utils.compose_filter(*self)

    def __str__(self) -> str:
        return self.compose()

    def __repr__(self):
        type_ = type(self)
        return f"""<{type_.__module__}.{type_.__qualname__} object at {hex(id(self))}>
    FFmpeg expression: \"{self.compose()}\"
"""

    def get_num_chains(self) -> int:
        return 1

    def get_num_filters(self) -> int:
        return 1

    @property
    def name(self) -> str:
        name = self[0]
        return name if isinstance(name, str) else name[0]

    @property
    def fullname(self) -> str:
        name = self[0]
        return name if isinstance(name, str) else f"{name[0]}@{name[1]}"

    @property
    def id(self) -> str | None:
        name = self[0]
        return None if isinstance(name, str) else name[1]

    @property
    def ordered_options(self) -> tuple:
        opts = self[1:]
        return opts[:-1] if len(opts) and isinstance(opts[-1], dict) else opts

    @property
    def named_options(self) -> dict:
        opts = self[-1]
        return opts if len(self) > 1 and isinstance(opts, dict) else {}
