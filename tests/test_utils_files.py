import os

import pytest

from podfeed.utils.files import atomic_write


def test_atomic_write_creates_file(tmp_path):
    target = tmp_path / "feed.xml"
    with atomic_write(target, mode="w", encoding="utf-8") as f:
        f.write("<rss></rss>")

    assert target.read_text(encoding="utf-8") == "<rss></rss>"


def test_atomic_write_creates_parent_directories(tmp_path):
    target = tmp_path / "public" / "podcast" / "feed.xml"
    with atomic_write(target) as f:
        f.write("<rss></rss>")

    assert target.exists()


def test_atomic_write_overwrites_existing(tmp_path):
    target = tmp_path / "feed.xml"
    target.write_text("Old", encoding="utf-8")

    with atomic_write(target, mode="w") as f:
        f.write("New")

    assert target.read_text(encoding="utf-8") == "New"


def test_atomic_write_no_overwrite(tmp_path):
    target = tmp_path / "feed.xml"
    target.write_text("Old", encoding="utf-8")

    with pytest.raises(FileExistsError):
        with atomic_write(target, overwrite=False) as f:
            f.write("New")

    assert target.read_text(encoding="utf-8") == "Old"


def test_atomic_write_cleanup_on_error(tmp_path):
    target = tmp_path / "feed.xml"

    with pytest.raises(RuntimeError):
        with atomic_write(target) as f:
            f.write("<rss>")
            raise RuntimeError("Boom")

    assert not target.exists()
    assert list(tmp_path.glob("feed.xml.*.tmp")) == []


def test_atomic_write_binary(tmp_path):
    target = tmp_path / "feed.xml"
    data = '<title>Café</title>'.encode("utf-8")

    with atomic_write(target, mode="wb") as f:
        f.write(data)

    assert target.read_bytes() == data


def test_atomic_write_permissions(tmp_path):
    if os.name == "nt":
        pytest.skip("Permissions not fully supported on Windows")

    private = tmp_path / "private.xml"
    with atomic_write(private, permissions=0o600) as f:
        f.write("<rss></rss>")
    assert private.stat().st_mode & 0o777 == 0o600

    public = tmp_path / "public.xml"
    with atomic_write(public) as f:
        f.write("<rss></rss>")
    assert public.stat().st_mode & 0o777 == 0o644
