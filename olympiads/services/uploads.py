# olympiads/services/uploads.py
# Stores multipart files on local disk and hands back their public path.

import os
import re
import uuid

from flask import current_app

# Suffixes kept on stored files; anything else is dropped.
_EXTENSION_RE = re.compile(r'^\.[A-Za-z0-9]{1,10}$')


def _unique_filename(original_name):
    """
    Generates a collision-resistant name that keeps the original extension.
    'Final Results.PDF' -> '3f2a...e9.pdf', 'масала.pdf' -> '7c1b...04.pdf'
    """
    _, ext = os.path.splitext(os.path.basename(original_name or ''))
    if not _EXTENSION_RE.match(ext):
        ext = ''
    return f"{uuid.uuid4().hex}{ext.lower()}"


def save_upload(file_storage):
    """
    Writes one uploaded file to UPLOAD_FOLDER.

    Returns the public path ('/uploads/<name>') or None when the field was
    empty.
    """
    if file_storage is None or not file_storage.filename:
        return None

    upload_folder = current_app.config['UPLOAD_FOLDER']
    os.makedirs(upload_folder, exist_ok=True)

    filename = _unique_filename(file_storage.filename)
    file_storage.save(os.path.join(upload_folder, filename))

    public_path = f"{current_app.config['UPLOAD_URL_PREFIX']}/{filename}"
    current_app.logger.info(f"Stored upload '{file_storage.filename}' as {public_path}")
    return public_path


def save_uploads(files, field_names):
    """
    Saves each named file field of a request.

    Returns {field_name: public_path_or_None}.
    """
    return {name: save_upload(files.get(name)) for name in field_names}
