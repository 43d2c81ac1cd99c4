import os

from film_studio.forms import PreviewSlot

from conftest import FakeUpload


def test_select_writes_preview_file(tmp_path, png_upload):
    slot = PreviewSlot(directory=str(tmp_path))

    path = slot.select(png_upload)

    assert path.endswith(".png")
    with open(path, "rb") as f:
        assert f.read() == png_upload.getvalue()


def test_same_selection_keeps_preview(tmp_path, png_upload):
    slot = PreviewSlot(directory=str(tmp_path))

    assert slot.select(png_upload) == slot.select(png_upload)
    assert len(os.listdir(tmp_path)) == 1


def test_new_selection_releases_previous_file(tmp_path, png_upload):
    slot = PreviewSlot(directory=str(tmp_path))
    first = slot.select(png_upload)

    second = slot.select(FakeUpload(b"\xff\xd8\xff", "image/jpeg", name="other.jpg"))

    assert not os.path.exists(first)
    assert os.path.exists(second)
    assert os.listdir(tmp_path) == [os.path.basename(second)]


def test_clearing_selection_releases_file(tmp_path, png_upload):
    slot = PreviewSlot(directory=str(tmp_path))
    path = slot.select(png_upload)

    assert slot.select(None) is None
    assert not os.path.exists(path)
    assert slot.path is None


def test_teardown_releases_file(tmp_path, png_upload):
    with PreviewSlot(directory=str(tmp_path)) as slot:
        path = slot.select(png_upload)
        assert os.path.exists(path)

    assert not os.path.exists(path)
    assert os.listdir(tmp_path) == []


def test_garbage_collected_slot_releases_file(tmp_path, png_upload):
    slot = PreviewSlot(directory=str(tmp_path))
    path = slot.select(png_upload)

    del slot

    assert not os.path.exists(path)
