from pluggy import HookimplMarker

from ffmpegcmd import path, plugins
import pytest

hookimpl = HookimplMarker("ffmpegcmd")


class StaticFinder:
    def __init__(self, ffmpeg_path):
        self.ffmpeg_path = ffmpeg_path

    @hookimpl
    def finder(self):
        return self.ffmpeg_path


@pytest.fixture
def finder_plugin():
    def register(ffmpeg_path):
        plugins.register(StaticFinder(ffmpeg_path), "test_finder")

    yield register
    if "test_finder" in plugins.list_plugins():
        plugins.unregister("test_finder")


@pytest.fixture(autouse=True)
def reset_path(monkeypatch):
    monkeypatch.setattr(path, "FFMPEG_BIN", None)
    monkeypatch.delenv(path.ENV_VAR, raising=False)


def test_builtin_registered():
    assert "ffmpegcmd.plugins.finder_syspath" in plugins.list_plugins()


def test_initialize_idempotent():
    n = len(plugins.list_plugins())
    plugins.initialize()
    assert len(plugins.list_plugins()) == n


def test_finder_plugin(finder_plugin):
    finder_plugin("/opt/ffmpeg/bin/ffmpeg")
    assert plugins.get_hook().finder() == "/opt/ffmpeg/bin/ffmpeg"
    assert path.find() == "/opt/ffmpeg/bin/ffmpeg"
    assert path.where() == "/opt/ffmpeg/bin/ffmpeg"


def test_finder_none(finder_plugin, monkeypatch):
    from ffmpegcmd.plugins import finder_syspath

    monkeypatch.setattr(finder_syspath, "which", lambda cmd: None)
    finder_plugin(None)
    with pytest.raises(path.FFmpegNotFound):
        path.find()


def test_unregister(finder_plugin):
    finder_plugin("/opt/ffmpeg/bin/ffmpeg")
    assert "test_finder" in plugins.list_plugins()
    plugins.unregister("test_finder")
    assert "test_finder" not in plugins.list_plugins()
