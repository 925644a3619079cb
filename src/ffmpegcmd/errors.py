from __future__ import annotations

import re
from typing import Sequence, Union


class FFmpegCmdError(Exception):
    pass


class InvalidArgument(TypeError, FFmpegCmdError):
    pass


class InvalidEntity(TypeError, FFmpegCmdError):
    def __init__(self, entity) -> None:
        super().__init__(
            f"Invalid entity type for entity {entity!r}: must be either Input or Chain"
        )
        self.entity = entity


class ResolutionError(LookupError, FFmpegCmdError):
    pass


class RequiredFieldMissing(ValueError, FFmpegCmdError):
    def __init__(self, field, owner) -> None:
        super().__init__(f"Invalid arguments: {field} parameter of {owner} is required")
        self.field = field


def scan_log(logs: Union[str, Sequence[str], None]) -> str:
    """pick the relevant error lines from the tail of FFmpeg log

    :param logs: FFmpeg log text or its lines
    :return: error message, empty if nothing recognizable is found
    """

    msg = ""

    if logs is None:
        return msg

    if isinstance(logs, str):
        logs = re.split(r"[\n\r]+", logs.rstrip())
    logs = [log.rstrip() for log in logs if log.strip()]

    if not len(logs):
        return msg

    if logs[0].startswith("Unknown help option "):
        msg = logs[0]
    else:
        msg0 = logs[-1]
        if msg0 == "Use -h to get full help or, even better, run 'man ffmpeg'":
            msg = "No ffmpeg command argument specified"
        elif msg0 == "Invalid argument" and len(logs) > 1:  # generic
            msg = logs[-2]
            if msg == "Error initializing complex filters." and len(logs) > 2:
                msg = f"{logs[-3]}\n  {msg}"
        elif msg0 in (
            "To ignore this, add a trailing '?' to the map.",
            "Filtering and streamcopy cannot be used together.",
            "FFmpeg cannot edit existing files in-place.",
        ):
            msg = "\n  ".join(logs[-2:])
        elif msg0.startswith("Error opening input file") or msg0.startswith(
            "Error opening output file"
        ):
            msg = "\n  ".join(logs[-2:])
        elif msg0 == "Conversion failed!" and len(logs) > 1:
            msg = logs[-2]
        elif re.match(r".+?: Invalid argument", msg0) and len(logs) > 1:
            msg = (
                f"{logs[-2]}\n  {msg0}" if logs[-2].startswith("[lavfi ") else logs[-2]
            )
        else:
            msg = msg0
    return msg


class FFmpegError(FFmpegCmdError, RuntimeError):
    """FFmpeg process failure

    :param returncode: exit code of the FFmpeg process
    :param cmd: command string of the failed run, defaults to None
    :param logs: FFmpeg log text or lines, defaults to None
    :param signal: signal that terminated the process if known, defaults to None
    """

    def __init__(self, returncode=None, cmd=None, logs=None, signal=None):
        msg = scan_log(logs)
        if not msg:
            msg = "FFmpeg failed for unknown reason (no log available)."

        super().__init__(
            f"FFmpeg terminated abnormally (returncode={returncode}, signal={signal}) with the error:\n\n  {msg}"
        )
        self.returncode = returncode
        self.signal = signal
        self.cmd = cmd
        self.logs = logs
        self.ffmpeg_msg = msg
