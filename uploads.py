"""
File uploads into the public directory.

The upload type decides the sub-directory; the returned path is relative to
the public root, ready to be stored on a record (imageUrl, icon, ...).
"""

import logging
import time
from pathlib import Path
from typing import Union

from errors import InvalidUploadError

logger = logging.getLogger(__name__)

UPLOAD_DIRS = {
    "3d-model": ("models",),
    "logo": ("images", "logos"),
    "favicon": (),
    "project": ("images", "projects"),
    "profile": ("images", "profile"),
    "gallery": ("images", "gallery"),
    "testimonials": ("images", "testimonials"),
    "social-icon": ("images", "social-icons"),
    "skill-icon": ("images", "skills"),
}


def save_upload(public_dir: Union[str, Path], file_type: str, original_name: str, data: bytes) -> str:
    if not original_name:
        raise InvalidUploadError("No file uploaded")
    if file_type not in UPLOAD_DIRS:
        raise InvalidUploadError(f"Invalid file type: {file_type!r}")

    parts = UPLOAD_DIRS[file_type]
    upload_dir = Path(public_dir).joinpath(*parts)
    upload_dir.mkdir(parents=True, exist_ok=True)

    extension = Path(original_name).name.rsplit(".", 1)[-1]
    file_name = f"{file_type}-{int(time.time() * 1000)}.{extension}"
    (upload_dir / file_name).write_bytes(data)
    logger.info("Stored %s upload %s as %s", file_type, original_name, file_name)

    if file_type == "favicon":
        # favicons are served under a fixed name
        file_name = f"favicon.{extension}"
        (upload_dir / file_name).write_bytes(data)

    return "/" + "/".join(parts + (file_name,))
