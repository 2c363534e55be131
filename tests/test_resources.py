import threading

import pytest

from blockmaze.resources import ResourceLoader


class CountingLoader:
    def __init__(self, factory=lambda name: {"name": name}):
        self.calls = []
        self.factory = factory

    def __call__(self, filename):
        self.calls.append(filename)
        return self.factory(filename)


@pytest.fixture
def loaders():
    return CountingLoader(), CountingLoader(), CountingLoader()


@pytest.fixture
def loader(loaders):
    image, model, sound = loaders
    return ResourceLoader(image, model, sound)


def test_graph_is_cached(loader, loaders):
    first = loader.load_graph("data/image/chara.png")
    second = loader.load_graph("data/image/chara.png")
    assert first is second
    assert loaders[0].calls == ["data/image/chara.png"]


def test_sound_is_cached(loader, loaders):
    first = loader.load_sound("a.wav")
    assert loader.load_sound("a.wav") is first
    assert loaders[2].calls == ["a.wav"]


def test_model_returns_copies(loader, loaders):
    first = loader.load_model("m.mv1")
    second = loader.load_model("m.mv1")
    assert first == second
    assert first is not second
    assert loaders[1].calls == ["m.mv1"]


def test_failed_load_is_not_cached():
    attempts = []

    def failing(name):
        attempts.append(name)
        raise OSError("cannot read")

    res = ResourceLoader(image_loader=failing)
    with pytest.raises(OSError):
        res.load_graph("x.png")
    with pytest.raises(OSError):
        res.load_graph("x.png")
    assert attempts == ["x.png", "x.png"]
    assert "x.png" not in res


def test_release_all_forgets_files(loader, loaders):
    loader.load_graph("a.png")
    loader.load_sound("b.wav")
    loader.release_all()
    assert len(loader) == 0
    loader.load_graph("a.png")
    assert loaders[0].calls == ["a.png", "a.png"]


def test_load_folder_missing_raises(loader, tmp_path):
    with pytest.raises(FileNotFoundError):
        loader.load_folder(tmp_path / "missing")


def test_load_folder_registers_known_files(loader, loaders, tmp_path):
    (tmp_path / "a.png").write_bytes(b"")
    (tmp_path / "b.wav").write_bytes(b"")
    (tmp_path / "c.mv1").write_bytes(b"")
    (tmp_path / "notes.txt").write_text("skip")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "d.png").write_bytes(b"")
    names = loader.load_folder(tmp_path)
    expected = sorted(str(tmp_path / n) for n in ["a.png", "b.wav", "c.mv1"])
    assert names == expected
    assert loaders[0].calls == [str(tmp_path / "a.png")]
    assert loaders[1].calls == [str(tmp_path / "c.mv1")]
    assert loaders[2].calls == [str(tmp_path / "b.wav")]
    assert str(sub / "d.png") not in loader


def test_load_folder_recursive(loader, tmp_path):
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "d.png").write_bytes(b"")
    names = loader.load_folder(tmp_path, recursive=True)
    assert names == [str(sub / "d.png")]
    assert str(sub / "d.png") in loader


def test_async_loading_reports_progress():
    gate = threading.Event()

    def slow(name):
        gate.wait(5)
        return name.upper()

    res = ResourceLoader(image_loader=slow, async_loading=True)
    future = res.load_graph("a.png")
    assert res.is_loading()
    gate.set()
    assert future.result(timeout=5) == "A.PNG"
    assert not res.is_loading()


def test_async_model_returns_copy():
    res = ResourceLoader(model_loader=lambda name: [name], async_loading=True)
    first = res.load_model("m.mv1").result(timeout=5)
    second = res.load_model("m.mv1").result(timeout=5)
    assert first == second == ["m.mv1"]
    assert first is not second


def test_not_loading_when_synchronous(loader):
    loader.load_graph("a.png")
    assert loader.is_loading() is False