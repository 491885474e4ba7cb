"""Logging setup for command-line jobs."""
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from partner_intake.config import settings


class JSONFormatter(logging.Formatter):
    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName
        }
        if hasattr(record, "duration"):
            log_entry["duration_seconds"] = record.duration
        return json.dumps(log_entry)


def setup_job_logging(job_name: str, log_dir: Optional[Path] = None, level: int = logging.INFO) -> Path:
    """
    Configure the root logger for a job: JSON lines to a file, plain text to console.

    Args:
        job_name: Log file stem, e.g. "submit_intake"
        log_dir: Directory for the log file (uses settings if not provided)
        level: Root log level

    Returns:
        Path of the log file
    """
    log_dir = Path(log_dir or settings.logs_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{job_name}.log"

    # Setup file handler with JSON formatter
    file_handler = logging.FileHandler(log_file)
    file_handler.setFormatter(JSONFormatter())

    # Setup console handler with standard format
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    return log_file
