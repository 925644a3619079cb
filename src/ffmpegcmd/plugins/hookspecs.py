from __future__ import annotations

import pluggy

hookspec = pluggy.HookspecMarker("ffmpegcmd")


@hookspec(firstresult=True)
def finder() -> str | None:
    """find ffmpeg executable

    :return: path of the ffmpeg executable or None if not found
    """
    ...
