"""File I/O utilities for intake JSON, CSV and XLSX."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import pandas as pd

from partner_intake.profile.form import from_form
from partner_intake.profile.models import ApplicantProfile
from partner_intake.storage.intakes import from_record, profile_columns

logger = logging.getLogger(__name__)


def read_data_file(file_path: Union[str, Path]) -> pd.DataFrame:
    """
    Read CSV or XLSX file into DataFrame.

    Args:
        file_path: Path to CSV or XLSX file

    Returns:
        DataFrame with file contents

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file format is not supported
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    suffix = file_path.suffix.lower()

    if suffix == ".csv":
        df = pd.read_csv(file_path, low_memory=False)
    elif suffix == ".xlsx":
        df = pd.read_excel(file_path, engine="openpyxl")
    else:
        raise ValueError(f"Unsupported file format: {suffix}")

    logger.info(f"Loaded {len(df)} rows from {file_path}")
    return df


def profile_from_dict(data: Dict[str, Any]) -> ApplicantProfile:
    """
    Build a profile from either the form shape or the flattened record shape.

    Record-shaped dicts are recognised by their flattened group columns.
    """
    if "languages_english" in data or "network_independents" in data:
        return from_record(data)
    return from_form(data)


def load_profile(file_path: Union[str, Path]) -> ApplicantProfile:
    """
    Load a single profile from a JSON file.

    Raises:
        FileNotFoundError: If file doesn't exist
        pydantic.ValidationError: If the content is not a valid profile
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    with open(file_path, encoding="utf-8") as f:
        data = json.load(f)
    return profile_from_dict(data)


def records_from_frame(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """
    Convert a flattened intake table into record dicts.

    Empty cells become None, and list columns given as text
    ("ON, QC" or "ON;QC") are split into code lists.
    """
    columns = profile_columns()
    list_columns = [name for name, col_type in columns.items() if col_type == "VARCHAR[]"]
    text_columns = [name for name, col_type in columns.items() if col_type == "VARCHAR"]
    records = []
    for row in df.to_dict(orient="records"):
        record = {key: (None if _is_missing(value) else _native(value)) for key, value in row.items()}
        # Spreadsheet readers infer numbers for zip codes, phones, etc.
        for column in text_columns:
            value = record.get(column)
            if value is not None and not isinstance(value, str):
                record[column] = str(value)
        for column in list_columns:
            value = record.get(column)
            if isinstance(value, str):
                record[column] = [code for code in value.replace(";", ",").split(",") if code.strip()]
        records.append(record)
    return records


def _native(value: Any) -> Any:
    # numpy scalars -> Python scalars for validation
    if hasattr(value, "item") and not hasattr(value, "__len__"):
        return value.item()
    return value


def _is_missing(value: Any) -> bool:
    if isinstance(value, (list, tuple)):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False
