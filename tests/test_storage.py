import io
import os

import pytest
from werkzeug.datastructures import FileStorage

from imt_fitness.errors import ValidationError
from imt_fitness.storage import store_photo


def _upload(filename="proof.png", content_type="image/png", payload=b"fake-image-bytes"):
    return FileStorage(stream=io.BytesIO(payload), filename=filename, content_type=content_type)


def test_store_photo_writes_file(app):
    url = store_photo(_upload())

    assert url.startswith("/uploads/workout-")
    assert url.endswith(".png")
    assert os.path.exists(os.path.join(app.config["UPLOAD_FOLDER"], url.rsplit("/", 1)[1]))


def test_missing_file_is_rejected(app):
    with pytest.raises(ValidationError):
        store_photo(None)


@pytest.mark.parametrize("filename, content_type", [
    ("notes.pdf", "application/pdf"),
    ("proof", "image/png"),
    ("proof.png", "text/plain"),
])
def test_non_images_are_rejected(app, filename, content_type):
    with pytest.raises(ValidationError):
        store_photo(_upload(filename, content_type))


def test_oversized_file_is_rejected(app):
    app.config["MAX_PHOTO_SIZE"] = 10
    with pytest.raises(ValidationError):
        store_photo(_upload(payload=b"x" * 11))
    assert not os.path.exists(app.config["UPLOAD_FOLDER"]) or not os.listdir(app.config["UPLOAD_FOLDER"])
