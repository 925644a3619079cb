"""ffmpegcmd.filtergraph module - FFmpeg filtergraph classes

Filtergraph Construction
========================

    ----------  ----------------------------------------------------------------
    Class       Description
    ----------  ----------------------------------------------------------------
    `Filter`    a single filter with its ordered and/or named options
    `Chain`     filters connected in series, with optional input links and
                output pads
    `Graph`     ordered filterchains, composed as FFmpeg's `-filter_complex`
                argument
    ----------  ----------------------------------------------------------------

.. code-block::python

    fg = Graph()
    fg.add_filter_chain(Chain([Filter("scale", 640, -1)]))
    str(fg)  # 'scale=640:-1'

Output pads of a chain are referenced with stream specifiers, which link the
pads and label them by the chain position in the graph:

.. code-block::python

    chain = Chain([Filter("split")], outputs=2)
    fg.add_filter_chain(chain)
    StreamSpecifier(chain, 1)  # '[chain1_1]'

"""

from . import abc
from .Filter import Filter
from .Chain import Chain
from .Graph import Graph
from .convert import as_filter

__all__ = ["abc", "as_filter", "Filter", "Chain", "Graph"]
