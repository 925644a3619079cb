"""FFmpeg executable configuration

The executable is only located, never run. The resolved path is the command
name placed at the head of composed command lines.
"""

from __future__ import annotations

from os import path as _path, name as _os_name, environ
from shutil import which
import logging

logger = logging.getLogger("ffmpegcmd")

from .errors import FFmpegCmdError
from . import plugins

__all__ = ["found", "where", "find", "ffmpeg_command", "FFmpegNotFound", "ENV_VAR"]


class FFmpegNotFound(FFmpegCmdError):
    def __init__(self):
        super().__init__(
            "FFmpeg executable not found. Run `ffmpegcmd.set_path()` first, set the "
            f"{ENV_VAR} environment variable, or place FFmpeg executable in the system path."
        )


ENV_VAR = "FFMPEG_BIN"
"""environment variable to specify the ffmpeg executable path"""

FFMPEG_BIN = None


def found() -> bool:
    """`True` if ffmpeg executable is located"""

    return bool(FFMPEG_BIN)


def where() -> str:
    """Get the path to FFmpeg executable

    :return: Path to FFmpeg executable
    """

    if not FFMPEG_BIN:
        raise FFmpegNotFound()

    return FFMPEG_BIN


def ffmpeg_command() -> str:
    """Get the command name to compose the command line with

    :return: path to the located FFmpeg executable or ``"ffmpeg"`` if not located
    """
    return FFMPEG_BIN or "ffmpeg"


def find(ffmpeg_path: str | None = None) -> str | None:
    """Set FFmpeg executable

    :param ffmpeg_path: Full path to either the ffmpeg executable file or
                        to the folder housing it, defaults to None
    :returns: ffmpeg path
    :raises FFmpegNotFound: if auto-detection fails

    If no argument is specified, the executable is auto-detected in the following orders.

    (1) the path given by the `FFMPEG_BIN` environment variable
    (2) Run the `finder` plugin functions in the LIFO order and use the first valid
        path. The builtin `finder_syspath` plugin looks for the `ffmpeg` command
        in the system PATH.

    """

    global FFMPEG_BIN

    if ffmpeg_path is None:
        ffmpeg_path = environ.get(ENV_VAR, None) or None

    if ffmpeg_path is not None:
        if _path.isdir(ffmpeg_path):
            ext = ".exe" if _os_name == "nt" else ""
            ffmpeg_path = _path.join(ffmpeg_path, f"ffmpeg{ext}")
        if not which(ffmpeg_path):
            raise ValueError(f"ffmpeg executable not found at {ffmpeg_path}")
        FFMPEG_BIN = ffmpeg_path
    else:
        FFMPEG_BIN = plugins.get_hook().finder()
        if FFMPEG_BIN is None:
            raise FFmpegNotFound()

    logger.debug("using ffmpeg executable: %s", FFMPEG_BIN)
    return FFMPEG_BIN
