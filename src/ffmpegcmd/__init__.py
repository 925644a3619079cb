"""FFmpeg command composer

Compose exact FFmpeg command lines from inputs, outputs, options, and
filtergraphs, and parse FFmpeg's progress output.

Filtergraph
-----------

`ffmpegcmd.Filter`
`ffmpegcmd.Chain`
`ffmpegcmd.Graph`

Command
-------

`ffmpegcmd.Command`
`ffmpegcmd.Input`
`ffmpegcmd.Output`
`ffmpegcmd.StreamSpecifier`

Progress
--------

`ffmpegcmd.ProgressParser`
"""

import logging

logger = logging.getLogger("ffmpegcmd")
logger.addHandler(logging.NullHandler())

from . import path, plugins

# register builtin plugins and external plugins found in site-packages
plugins.initialize()

# initialize the path
try:
    path.find()
except Exception as e:
    logger.warning(str(e))

from .errors import (
    FFmpegCmdError,
    FFmpegError,
    InvalidArgument,
    InvalidEntity,
    ResolutionError,
    RequiredFieldMissing,
)
from .filtergraph import Filter, Chain, Graph
from .option import Option, FLAG
from .stream_spec import StreamSpecifier
from .input import Input
from .output import Output
from .command import Command
from .progress import ProgressParser
from .utils.parser import compose

# fmt:off
__all__ = ["Command", "Input", "Output", "Option", "StreamSpecifier", "Filter", "Chain",
    "Graph", "ProgressParser", "compose", "FLAG", "set_path", "get_path", "is_ready",
    "FFmpegCmdError", "FFmpegError", "InvalidArgument", "InvalidEntity", "ResolutionError",
    "RequiredFieldMissing"]
# fmt:on

__version__ = "0.1.0"

set_path = path.find
get_path = path.where
is_ready = path.found
