"""FFmpeg filtergraph expression composers"""

from __future__ import annotations

from typing import Any


def stringify(value: Any) -> str:
    """convert a filter or option value to its FFmpeg expression

    :param value: value to convert
    :return: `true`/`false` for a bool, else `str(value)`
    """
    if isinstance(value, bool):
        return str(value).lower()  # true|false
    return str(value)


def compose_filter_args(*args) -> str:
    """compose filter argument string

    :param *args: list of argument values; last element may be a dict of key-value pairs
    :return: filter argument string

    Values are inserted literally without escaping.
    """

    kwargs = args[-1] if len(args) > 0 and isinstance(args[-1], dict) else None
    if kwargs is not None:
        args = args[:-1]

    args = ":".join([stringify(i) for i in args])
    if kwargs:
        kwargs = ":".join([f"{k}={stringify(v)}" for k, v in kwargs.items()])
        args = ":".join([args, kwargs]) if args else kwargs
    return args


def compose_filter(name, *args) -> str:
    """Compose FFmpeg filter expression

    :param name: filter name, optionally seq of name & id
    :type name: str or (str, str)
    :param args: option value sequence
    :type args: seq of stringifyable items + last item may be a dict to hold
                key-value pairs
    :return: filter expression
    """

    expr = name if isinstance(name, str) else f"{name[0]}@{name[1]}"

    if len(args):
        expr = f"{expr}={compose_filter_args(*args)}"

    return expr


def compose_chain(filters, input_labels=(), output_labels=()) -> str:
    """Compose FFmpeg filterchain expression

    :param filters: filter expressions or objects, in order
    :param input_labels: link labels (without brackets) prepended to the chain
    :param output_labels: link labels (without brackets) appended to the chain
    :return: filterchain expression
    """

    return (
        "".join(f"[{label}]" for label in input_labels)
        + ",".join(str(f) for f in filters)
        + "".join(f"[{label}]" for label in output_labels)
    )


def compose_graph(chains) -> str:
    """Compose FFmpeg filtergraph expression

    :param chains: filterchain expressions or objects, in order
    :return: filtergraph expression
    """
    return ";".join(str(c) for c in chains)
