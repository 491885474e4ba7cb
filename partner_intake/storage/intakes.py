"""
Intake persistence in DuckDB.

Profiles are stored flattened, one column per field, using the snake_case
column names of the `distributor_intakes` table (`languages_english`,
`network_beauty_supply`, `chain_walmart`, `category_pharmacy_otc`, ...).
Score and tier are written once at submission and read back as stored.
"""
import logging
import uuid
from typing import Any, Dict, List, Optional, get_origin

import duckdb
import pandas as pd

from partner_intake.config import settings
from partner_intake.profile.models import ApplicantProfile

logger = logging.getLogger(__name__)

TABLE_NAME = "distributor_intakes"

# Nested profile groups and the column prefix each is flattened under
GROUP_PREFIXES: Dict[str, str] = {
    "languages": "languages_",
    "network_counts": "network_",
    "chain_access": "chain_",
    "logistics": "",
    "compliance": "",
    "categories": "category_",
    "requested_services": "service_",
}

# Top-level fields stored under a different column name
COLUMN_RENAMES: Dict[str, str] = {
    "categories_other": "categories_other_description",
}


def _column_type(annotation: Any) -> str:
    """DuckDB column type for a profile field annotation."""
    if annotation is bool:
        return "BOOLEAN"
    if annotation is int:
        return "BIGINT"
    if annotation is float:
        return "DOUBLE"
    if get_origin(annotation) in (list, List):
        return "VARCHAR[]"
    return "VARCHAR"


def profile_columns() -> Dict[str, str]:
    """Ordered mapping of profile column name -> DuckDB type."""
    columns = {}
    for name, field in ApplicantProfile.model_fields.items():
        if name in GROUP_PREFIXES:
            group_model = field.annotation
            for sub_name, sub_field in group_model.model_fields.items():
                columns[GROUP_PREFIXES[name] + sub_name] = _column_type(sub_field.annotation)
        else:
            columns[COLUMN_RENAMES.get(name, name)] = _column_type(field.annotation)
    return columns


def to_record(
    profile: ApplicantProfile,
    computed_score: Optional[int] = None,
    computed_tier: Optional[str] = None,
    submitted_at: Optional[str] = None
) -> Dict[str, Any]:
    """
    Flatten a profile into a table row.

    Args:
        profile: Profile to store
        computed_score: Score computed at submission time
        computed_tier: Tier label computed at submission time
        submitted_at: ISO-8601 submission timestamp

    Returns:
        Dict keyed by column name
    """
    data = profile.model_dump()
    record = {}
    for name, value in data.items():
        if name in GROUP_PREFIXES:
            for sub_name, sub_value in value.items():
                record[GROUP_PREFIXES[name] + sub_name] = sub_value
        else:
            record[COLUMN_RENAMES.get(name, name)] = value

    record["computed_score"] = computed_score
    record["computed_tier"] = computed_tier
    record["submitted_at"] = submitted_at
    return record


def from_record(record: Dict[str, Any]) -> ApplicantProfile:
    """
    Rebuild a profile from a table row.

    Columns outside the profile (id, timestamps, computed values) are
    ignored, and NULL columns fall back to the field default.
    """
    data: Dict[str, Any] = {}
    for name, field in ApplicantProfile.model_fields.items():
        if name in GROUP_PREFIXES:
            prefix = GROUP_PREFIXES[name]
            group = {}
            for sub_name in field.annotation.model_fields:
                value = record.get(prefix + sub_name)
                if value is not None:
                    group[sub_name] = value
            data[name] = group
        else:
            value = record.get(COLUMN_RENAMES.get(name, name))
            if value is not None:
                data[name] = list(value) if isinstance(value, tuple) else value
    return ApplicantProfile.model_validate(data)


def init_intake_table(db_path: Optional[str] = None):
    """Initialize the intake table."""
    db_path = db_path or settings.duckdb_path
    column_sql = ",\n            ".join(
        f"{name} {col_type}" for name, col_type in profile_columns().items()
    )
    conn = duckdb.connect(db_path)
    conn.execute(f"""
        CREATE TABLE IF NOT EXISTS {TABLE_NAME} (
            id VARCHAR PRIMARY KEY,
            {column_sql},
            computed_score INTEGER,
            computed_tier VARCHAR,
            submitted_at VARCHAR,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)
    conn.close()


def _fetch_dict(conn: duckdb.DuckDBPyConnection) -> Optional[Dict[str, Any]]:
    row = conn.fetchone()
    if row is None:
        return None
    columns = [desc[0] for desc in conn.description]
    return dict(zip(columns, row))


def submit_intake(record: Dict[str, Any], db_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Insert an intake record.

    Args:
        record: Row from to_record()
        db_path: DuckDB path (uses settings if not provided)

    Returns:
        Stored row including its assigned id and timestamps
    """
    db_path = db_path or settings.duckdb_path
    init_intake_table(db_path)

    intake_id = str(uuid.uuid4())
    row = {"id": intake_id, **record}
    list_columns = {
        name for name, col_type in profile_columns().items() if col_type == "VARCHAR[]"
    }
    placeholders = ", ".join(
        "CAST(? AS VARCHAR[])" if name in list_columns else "?" for name in row
    )

    conn = duckdb.connect(db_path)
    try:
        conn.execute(
            f"INSERT INTO {TABLE_NAME} ({', '.join(row)}) VALUES ({placeholders})",
            list(row.values())
        )
        conn.execute(f"SELECT * FROM {TABLE_NAME} WHERE id = ?", [intake_id])
        stored = _fetch_dict(conn)
    finally:
        conn.close()

    logger.info(f"Stored intake {intake_id} for {record.get('company') or 'unknown company'}")
    return stored


def get_intake(intake_id: str, db_path: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """
    Get an intake by id.

    Returns:
        Stored row, or None if no intake has this id
    """
    db_path = db_path or settings.duckdb_path
    init_intake_table(db_path)
    conn = duckdb.connect(db_path)
    try:
        conn.execute(f"SELECT * FROM {TABLE_NAME} WHERE id = ?", [intake_id])
        return _fetch_dict(conn)
    finally:
        conn.close()


def list_intakes(
    db_path: Optional[str] = None,
    role: Optional[str] = None,
    country: Optional[str] = None,
    submission_status: Optional[str] = None,
    min_score: Optional[int] = None
) -> pd.DataFrame:
    """
    List intakes, newest first, with optional filters.

    Args:
        db_path: DuckDB path (uses settings if not provided)
        role: Only this role
        country: Only this country
        submission_status: Only "draft" or "final"
        min_score: Only intakes whose stored score is at least this

    Returns:
        DataFrame of matching rows
    """
    db_path = db_path or settings.duckdb_path
    init_intake_table(db_path)

    clauses = []
    params: List[Any] = []
    if role:
        clauses.append("role = ?")
        params.append(role)
    if country:
        clauses.append("country = ?")
        params.append(country)
    if submission_status:
        clauses.append("submission_status = ?")
        params.append(submission_status)
    if min_score is not None:
        clauses.append("computed_score >= ?")
        params.append(min_score)

    where_clause = f"WHERE {' AND '.join(clauses)}" if clauses else ""
    query = f"SELECT * FROM {TABLE_NAME} {where_clause} ORDER BY created_at DESC"

    conn = duckdb.connect(db_path)
    try:
        return conn.execute(query, params).df()
    finally:
        conn.close()
