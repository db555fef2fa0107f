import pytest
from fastapi.testclient import TestClient

from chill.main import create_app
from chill.models.media import CategoryConfig


@pytest.fixture()
def media_root(tmp_path):
    """
    Two category directories:
        movies/  a.mp4, b.MKV, notes.txt, extras/c.mp4
        music/   song.mp3, cover.jpg
    """
    movies = tmp_path / "movies"
    (movies / "extras").mkdir(parents=True)
    (movies / "a.mp4").write_bytes(b"movie-a")
    (movies / "b.MKV").write_bytes(b"movie-b")
    (movies / "notes.txt").write_text("not media")
    (movies / "extras" / "c.mp4").write_bytes(b"movie-c")

    music = tmp_path / "music"
    music.mkdir()
    (music / "song.mp3").write_bytes(b"ID3-song")
    (music / "cover.jpg").write_bytes(b"jpeg")
    return tmp_path


@pytest.fixture()
def categories(media_root):
    return [
        CategoryConfig(name="Movies", directory=str(media_root / "movies"), file_types=[".mp4", ".mkv"]),
        CategoryConfig(name="Music", directory=str(media_root / "music"), file_types=[".mp3"]),
    ]


@pytest.fixture()
def client(categories):
    return TestClient(create_app(categories))
