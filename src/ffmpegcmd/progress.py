"""FFmpeg progress/log stream parser

FFmpeg started with ``-progress pipe:1`` writes its progress as blocks of
``key=value`` lines, each block terminated by a ``progress=continue`` (or
``progress=end``) line. `ProgressParser` consumes the output line by line,
collects the blocks, and calls its listeners once per completed block. All
other lines are buffered as log lines, stamped with the media time of the last
completed block. Lines terminated only by a carriage return are FFmpeg's
transient status lines and are dropped.

.. code-block::python

    parser = ProgressParser(lambda data: print(data["out_time"]))
    for chunk in iter(lambda: proc.stdout.read1(), b""):
        parser.feed(chunk)
    parser.flush()

"""

from __future__ import annotations

import codecs
import logging
import re
from typing import Any, NamedTuple

from ._typing import ProgressCallback

logger = logging.getLogger("ffmpegcmd")

__all__ = ["ProgressParser", "LogEntry"]

_re_field = re.compile(r"[^\s=]+=[^=]+\n")
_re_number = re.compile(r"-?\d+(?:\.\d+)?")
_re_line = re.compile(r"[^\r\n]*(?:\r\n|\r|\n)")


class LogEntry(NamedTuple):
    text: str  # log line as received (with its line terminator)
    time: str | int | float  # media time of the last completed progress record


class ProgressParser:
    """FFmpeg progress/log stream parser

    :param callback: listener to be called with each completed progress record,
                     defaults to None
    :type callback: Callable[[dict], Any], optional

    Attributes
    ----------
    progress_data : dict
        fields of the last completed progress record
    partial_progress_data : dict
        fields of the record currently being received
    log_buffer : list[LogEntry]
        buffered log lines
    done : bool
        True once FFmpeg reported ``progress=end``
    """

    def __init__(self, callback: ProgressCallback | None = None):
        self.progress_data: dict[str, Any] = {}
        self.partial_progress_data: dict[str, Any] = {}
        self.log_buffer: list[LogEntry] = []
        self.done = False
        self._listeners: list[ProgressCallback] = []
        self._carryover = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        if callback is not None:
            self.add_listener(callback)

    def add_listener(self, callback: ProgressCallback):
        """register a progress update listener

        :param callback: function to be called with the progress data dict
        """
        self._listeners.append(callback)

    def remove_listener(self, callback: ProgressCallback):
        """unregister a progress update listener

        :param callback: previously registered function
        """
        self._listeners.remove(callback)

    def last(self, n: int = 1) -> str | list[str] | None:
        """Return the last n log lines

        :param n: the number of lines to return, defaults to 1
        :return: the last line (None if no line) if `n` is 1, else the list of
                 up to `n` last lines
        """
        if n == 1:
            return self.log_buffer[-1].text if len(self.log_buffer) else None
        return self.log_data()[max(len(self.log_buffer) - n, 0) :]

    def log_data(self) -> list[str]:
        """Return all the buffered log lines"""
        return [log.text for log in self.log_buffer]

    def formatted_log(self) -> str:
        """Return all the buffered log lines, each prefixed by its media time"""
        return "".join(f"({log.time}) {log.text}" for log in self.log_buffer)

    def last_media_time(self) -> str | int | float:
        """Get latest media time from the progress records

        :return: ``out_time`` of the last completed record, "0" if not available
        """
        return self.progress_data.get("out_time", "0")

    def write(self, chunk: str | bytes):
        """Parse a line of FFmpeg output

        :param chunk: a line including its line terminator
        """
        if isinstance(chunk, (bytes, bytearray)):
            chunk = chunk.decode("utf-8", errors="replace")

        if chunk.endswith("\r"):
            return

        if _re_field.fullmatch(chunk):
            self._parse_progress(chunk.strip())
        else:
            logger.debug(chunk.rstrip())
            self.log_buffer.append(LogEntry(chunk, self.last_media_time()))

    def feed(self, data: str | bytes):
        """Parse a chunk of FFmpeg output

        :param data: FFmpeg output of an arbitrary length

        The data is split into lines, which are passed to :py:meth:`write` in
        order. An unterminated line at the end is held until the next call or
        :py:meth:`flush`. Bytes are decoded as UTF-8 across calls, so a
        character may be split between chunks.
        """
        if isinstance(data, (bytes, bytearray)):
            data = self._decoder.decode(data)

        data = self._carryover + data
        end = 0
        for m in _re_line.finditer(data):
            # a lone CR at the end may be the first half of CRLF
            if m.end() == len(data) and data.endswith("\r"):
                break
            self.write(m[0])
            end = m.end()
        self._carryover = data[end:]

    def flush(self):
        """Parse the held unterminated line, if any"""
        carryover = self._carryover + self._decoder.decode(b"", final=True)
        self._carryover = ""
        if carryover:
            self.write(carryover)

    def _parse_progress(self, line: str):
        key, value = line.split("=", 1)
        value = value.strip()
        if key == "progress":
            self.done = value == "end"
            self._emit_update()
        else:
            if _re_number.fullmatch(value):
                value = float(value) if "." in value else int(value)
            self.partial_progress_data[key] = value

    def _emit_update(self):
        data = self.partial_progress_data

        # FFmpeg bug: out_time_ms may carry the out_time_us value
        out_time_ms = data.get("out_time_ms", None)
        out_time_us = data.get("out_time_us", None)
        if out_time_ms and out_time_us and out_time_ms == out_time_us:
            data["out_time_ms"] = out_time_us / 1000

        self.progress_data = {**data}
        self.partial_progress_data = {}
        logger.debug("[progress] %s", self.progress_data)

        for callback in self._listeners:
            try:
                callback(self.progress_data)
            except Exception as e:
                logger.critical(f"[progress] user callback error:\n\n{e}")
