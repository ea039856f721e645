import os
import uuid
import logging
from datetime import datetime

from flask import current_app
from werkzeug.utils import secure_filename

from imt_fitness.errors import ValidationError

logger = logging.getLogger(__name__)

ALLOWED_MIMETYPES = {'image/jpeg', 'image/jpg', 'image/png', 'image/gif', 'image/webp'}
URL_PREFIX = '/uploads'


def allowed_file(filename):
    allowed = current_app.config['ALLOWED_PHOTO_EXTENSIONS']
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in allowed


def _file_size(file):
    stream = file.stream
    position = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(position)
    return size


def store_photo(file):
    """Validate an uploaded image and write it under UPLOAD_FOLDER.

    Returns the public URL path of the stored file. The file is written
    before any database row references it and is not removed if that write
    later fails.
    """
    if file is None or not file.filename:
        raise ValidationError("A workout photo is required")

    if not allowed_file(file.filename) or (file.mimetype or '').lower() not in ALLOWED_MIMETYPES:
        raise ValidationError("Only image files are allowed (jpg, png, gif, webp)")

    max_size = current_app.config['MAX_PHOTO_SIZE']
    if _file_size(file) > max_size:
        raise ValidationError(f"Maximum file size is {max_size // (1024 * 1024)}MB")

    extension = file.filename.rsplit('.', 1)[1].lower()
    filename = secure_filename(
        f"workout-{datetime.now().strftime('%Y%m%d%H%M%S')}-{uuid.uuid4().hex[:12]}.{extension}"
    )

    upload_folder = current_app.config['UPLOAD_FOLDER']
    os.makedirs(upload_folder, exist_ok=True)
    file.save(os.path.join(upload_folder, filename))
    logger.info(f"Stored upload {filename}")
    return f"{URL_PREFIX}/{filename}"
