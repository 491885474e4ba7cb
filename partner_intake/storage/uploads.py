"""Local storage for supporting documents uploaded with an intake."""
import logging
import re
import shutil
import time
from pathlib import Path
from typing import Optional, Union

from partner_intake.config import settings

logger = logging.getLogger(__name__)


def generate_storage_path(intake_id: str, file_name: str, timestamp_ms: Optional[int] = None) -> str:
    """
    Build the storage key for an uploaded file.

    Args:
        intake_id: Owning intake id
        file_name: Original file name
        timestamp_ms: Upload time in epoch milliseconds (now if not provided)

    Returns:
        Path of the form ``<intake_id>/<timestamp>_<clean name>``
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    clean_file_name = re.sub(r"[^a-zA-Z0-9.-]", "_", file_name)
    return f"{intake_id}/{timestamp_ms}_{clean_file_name}"


def _resolve(storage_path: str, root: Optional[Path]) -> Path:
    root = Path(root or settings.uploads_dir).resolve()
    target = (root / storage_path).resolve()
    if root not in target.parents:
        raise ValueError(f"Storage path escapes upload directory: {storage_path}")
    return target


def save_upload(
    source: Union[str, Path],
    storage_path: str,
    root: Optional[Path] = None
) -> Path:
    """
    Copy a file into upload storage.

    Args:
        source: File to store
        storage_path: Key from generate_storage_path()
        root: Storage root (uses settings if not provided)

    Returns:
        Path of the stored copy

    Raises:
        FileNotFoundError: If source doesn't exist
    """
    source = Path(source)
    if not source.exists():
        raise FileNotFoundError(f"File not found: {source}")

    target = _resolve(storage_path, root)
    target.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, target)
    logger.info(f"Stored upload {storage_path}")
    return target


def delete_upload(storage_path: str, root: Optional[Path] = None) -> bool:
    """
    Remove a stored upload.

    Returns:
        True if a file was deleted, False if nothing was stored under the path
    """
    target = _resolve(storage_path, root)
    if not target.exists():
        logger.warning(f"Upload not found for deletion: {storage_path}")
        return False
    target.unlink()
    logger.info(f"Deleted upload {storage_path}")
    return True
