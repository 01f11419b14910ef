"""Disk storage for images attached to new posts."""
import logging
import shutil
import uuid
from pathlib import Path

from fastapi import UploadFile

from backend.core import config

logger = logging.getLogger(__name__)


def build_upload_filename(field_name: str, original_filename: str) -> str:
    extension = Path(Path(original_filename or "").name).suffix.lower()
    return f"{field_name}_{uuid.uuid4().hex}{extension}"


def save_upload(upload: UploadFile, field_name: str = "file") -> str:
    upload_dir = Path(config.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)

    filename = build_upload_filename(field_name, upload.filename)
    destination = upload_dir / filename
    upload.file.seek(0)
    try:
        with destination.open("wb") as out:
            shutil.copyfileobj(upload.file, out)
    except OSError:
        destination.unlink(missing_ok=True)
        raise

    logger.info("Stored upload %r as %s", upload.filename, destination)
    return filename


def remove_upload(filename: str) -> None:
    (Path(config.UPLOAD_DIR) / filename).unlink(missing_ok=True)
