from __future__ import annotations

import logging

from . import utils as filter_utils
from .abc import FilterGraphObject
from .Filter import Filter
from .Chain import Chain
from ..errors import InvalidArgument

logger = logging.getLogger("ffmpegcmd")

__all__ = ["Graph"]


class Graph(FilterGraphObject):
    """FFmpeg filtergraph: an ordered collection of filterchains

    Graph() to instantiate empty Graph object

    :param chains: filterchains to add, defaults to None
    :type chains: seq(Chain), optional

    The graph owns its chains. The chain order is the order of insertion and it
    determines the positional link labels of the chains' output pads.
    """

    def __init__(self, chains=None):
        self.chains = []
        if chains is not None:
            for chain in chains:
                self.add_filter_chain(chain)

    def compose(self) -> str:
        """compose filtergraph expression"""
        return filter_utils.compose_graph(self.chains)

    def __str__(self) -> str:
        return self.compose()

    def __repr__(self):
        type_ = type(self)
        return f"""<{type_.__module__}.{type_.__qualname__} object at {hex(id(self))}>
    FFmpeg expression: \"{self.compose()}\"
    Number of chains: {len(self.chains)}
"""

    def __len__(self) -> int:
        return len(self.chains)

    def __iter__(self):
        return iter(self.chains)

    def __getitem__(self, key):
        return self.chains[key]

    def get_num_chains(self) -> int:
        return len(self.chains)

    def get_num_filters(self) -> int:
        return sum(len(chain) for chain in self.chains)

    def add_filter_chain(self, chain: Chain):
        """Adds a filter chain to the filter graph

        :param chain: the filter chain to be added
        """
        if not isinstance(chain, Chain):
            raise InvalidArgument("Invalid parameter chain: must be instance of Chain")
        if chain.graph is not None:
            raise InvalidArgument(
                "Invalid parameter chain: the chain already belongs to a filtergraph"
            )
        self.chains.append(chain)
        chain._attach(self)

    def chain_position(self, chain: Chain) -> int:
        """Returns the position of the chain in the graph

        :param chain: the filter chain to look for
        :return: position of the chain in the graph or -1 if not found
        """
        return next((i for i, c in enumerate(self.chains) if c is chain), -1)

    @staticmethod
    def wrap(obj):
        """Wrap a filter or filterchain in a Graph

        :param obj: object to wrap
        :type obj: Filter, Chain, Graph, or any
        :return: `obj` itself if Graph, a single-chain Graph if Filter or
                 Chain, or else `obj` unchanged

        A chain already owned by another graph is copied so its owner is left
        untouched.
        """
        if isinstance(obj, Graph):
            return obj
        if isinstance(obj, Filter):
            return Graph([Chain(obj)])
        if isinstance(obj, Chain):
            return Graph([obj if obj.graph is None else Chain(obj)])
        return obj
