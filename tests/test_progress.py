import logging

from ffmpegcmd import ProgressParser
import pytest

BLOCK = """frame=120
fps=29.97
stream_0_0_q=-1.0
bitrate=N/A
total_size=1048576
out_time_us=4004000
out_time_ms=4004000
out_time=00:00:04.004000
dup_frames=0
drop_frames=0
speed=1.5x
progress=continue
"""


def test_progress_record():
    updates = []
    parser = ProgressParser(updates.append)
    parser.feed(BLOCK)

    assert len(updates) == 1
    data = updates[0]
    assert data is parser.progress_data
    assert data["frame"] == 120
    assert data["fps"] == 29.97
    assert data["stream_0_0_q"] == -1.0
    assert data["bitrate"] == "N/A"
    assert data["total_size"] == 1048576
    assert data["out_time_us"] == 4004000
    assert data["out_time_ms"] == 4004.0
    assert data["out_time"] == "00:00:04.004000"
    assert data["speed"] == "1.5x"
    assert "progress" not in data
    assert parser.partial_progress_data == {}
    assert parser.log_buffer == []
    assert not parser.done


def test_out_time_fixup():
    updates = []
    parser = ProgressParser(updates.append)
    parser.feed("out_time_us=5000\nout_time_ms=5000\nprogress=continue\n")
    assert updates == [{"out_time_us": 5000, "out_time_ms": 5.0}]


@pytest.mark.parametrize(
    "block, expected",
    [
        ("out_time_us=5000\nout_time_ms=5\n", 5),
        ("out_time_us=0\nout_time_ms=0\n", 0),
        ("out_time_ms=5000\n", 5000),
    ],
)
def test_out_time_no_fixup(block, expected):
    parser = ProgressParser()
    parser.feed(block + "progress=continue\n")
    assert parser.progress_data["out_time_ms"] == expected


def test_partial_record():
    updates = []
    parser = ProgressParser(updates.append)
    parser.feed("frame=1\nfps=0.00\n")
    assert updates == []
    assert parser.partial_progress_data == {"frame": 1, "fps": 0.0}
    assert parser.progress_data == {}


def test_done():
    parser = ProgressParser()
    parser.feed("frame=1\nprogress=continue\n")
    assert not parser.done
    parser.feed("frame=2\nprogress=end\n")
    assert parser.done
    assert parser.progress_data == {"frame": 2}


def test_log_lines_stamped():
    parser = ProgressParser()
    parser.feed("Input #0, lavfi, from 'sine':\n")
    parser.feed("out_time=00:00:01.000000\nprogress=continue\n")
    parser.feed("[out#0/mp4] video:1kB audio:0kB\n")

    assert parser.log_data() == [
        "Input #0, lavfi, from 'sine':\n",
        "[out#0/mp4] video:1kB audio:0kB\n",
    ]
    assert [log.time for log in parser.log_buffer] == ["0", "00:00:01.000000"]
    assert parser.formatted_log() == (
        "(0) Input #0, lavfi, from 'sine':\n"
        "(00:00:01.000000) [out#0/mp4] video:1kB audio:0kB\n"
    )


def test_carriage_return_dropped():
    parser = ProgressParser()
    parser.write("frame=  10 fps=0.0 q=-1.0 size=0kB\r")
    parser.feed("size=   0kB time=00:00:00.40 bitrate=0.0kbits/s\rError\n")
    assert parser.log_data() == ["Error\n"]


@pytest.mark.parametrize(
    "line",
    [
        "Stream mapping:\n",
        "  Stream #0:0 -> #0:0 (wrapped_avframe (native) -> rawvideo (native))\n",
        "a=b=c\n",
        "key =value\n",
    ],
)
def test_non_field_lines_logged(line):
    parser = ProgressParser()
    parser.write(line)
    assert parser.log_data() == [line]
    assert parser.partial_progress_data == {}


def test_write_bytes():
    parser = ProgressParser()
    parser.write(b"frame=3\n")
    parser.write(b"Error\n")
    assert parser.partial_progress_data == {"frame": 3}
    assert parser.last() == "Error\n"


def test_feed_split_chunks():
    updates = []
    parser = ProgressParser(updates.append)
    parser.feed(b"fra")
    parser.feed(b"me=1\npro")
    assert parser.partial_progress_data == {"frame": 1}
    parser.feed(b"gress=end\r\n")
    assert updates == [{"frame": 1}]
    assert parser.done


def test_feed_trailing_cr_held():
    parser = ProgressParser()
    parser.feed("Error opening output\r")
    assert parser.log_data() == []
    parser.feed("\n")
    assert parser.log_data() == ["Error opening output\r\n"]


def test_feed_lone_cr_dropped_on_next_chunk():
    parser = ProgressParser()
    parser.feed("status line\r")
    parser.feed("frame=2\n")
    assert parser.log_data() == []
    assert parser.partial_progress_data == {"frame": 2}


def test_flush():
    parser = ProgressParser()
    parser.feed("Conversion failed!")
    assert parser.log_data() == []
    parser.flush()
    assert parser.log_data() == ["Conversion failed!"]
    parser.flush()
    assert len(parser.log_buffer) == 1


def test_last():
    parser = ProgressParser()
    assert parser.last() is None
    assert parser.last(3) == []

    parser.feed("a\nb\nc\n")
    assert parser.last() == "c\n"
    assert parser.last(2) == ["b\n", "c\n"]
    assert parser.last(5) == ["a\n", "b\n", "c\n"]
    assert parser.last(0) == []


def test_listeners():
    calls_a, calls_b = [], []
    parser = ProgressParser()
    parser.add_listener(calls_a.append)
    parser.add_listener(calls_b.append)
    parser.feed("frame=1\nprogress=continue\n")
    parser.remove_listener(calls_a.append)
    parser.feed("frame=2\nprogress=continue\n")
    assert calls_a == [{"frame": 1}]
    assert calls_b == [{"frame": 1}, {"frame": 2}]

    with pytest.raises(ValueError):
        parser.remove_listener(calls_a.append)


def test_listener_error_logged(caplog):
    def bad_listener(data):
        raise RuntimeError("listener failed")

    calls = []
    parser = ProgressParser(bad_listener)
    parser.add_listener(calls.append)

    with caplog.at_level(logging.CRITICAL, logger="ffmpegcmd"):
        parser.feed("frame=1\nprogress=continue\n")

    assert calls == [{"frame": 1}]
    assert "listener failed" in caplog.text


def test_feed_split_multibyte_char():
    parser = ProgressParser()
    data = "Metadata: title=café — x\n".encode()
    i = data.index("é".encode()) + 1
    parser.feed(data[:i])
    parser.feed(data[i:])
    assert parser.log_data() == ["Metadata: title=café — x\n"]


def test_flush_incomplete_multibyte_char():
    parser = ProgressParser()
    parser.feed(b"caf\xc3")
    parser.flush()
    assert parser.log_data() == ["caf\ufffd"]
