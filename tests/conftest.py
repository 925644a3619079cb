import pytest

import ffmpegcmd as ff


@pytest.fixture
def command():
    """command with a fixed executable name"""
    return ff.Command({"y": ff.FLAG}, command="ffmpeg")


@pytest.fixture
def graph():
    """filtergraph with a 2-output split chain"""
    fg = ff.Graph()
    fg.add_filter_chain(ff.Chain([ff.Filter("scale", 640, -1)]))
    fg.add_filter_chain(ff.Chain([ff.Filter("split")], outputs=2))
    return fg
