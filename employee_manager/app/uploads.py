import logging
import os
import time

from flask import current_app
from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)

# Upload field name -> folder under UPLOAD_FOLDER
UPLOAD_FOLDERS = {
    'resume': 'resumes',
    'profile_img': 'profile_images',
}


def save_upload(field_name, file_storage):
    """Store an uploaded file and return its stored filename, or None."""
    if file_storage is None or not file_storage.filename:
        return None
    folder = UPLOAD_FOLDERS[field_name]
    filename = f"{int(time.time() * 1000)}-{secure_filename(file_storage.filename)}"
    destination = os.path.join(current_app.config['UPLOAD_FOLDER'], folder, filename)
    file_storage.save(destination)
    logger.info("Stored %s upload as %s", field_name, destination)
    return filename


def upload_url(field_name, filename):
    if not filename:
        return None
    return f"/uploads/{UPLOAD_FOLDERS[field_name]}/{filename}"
