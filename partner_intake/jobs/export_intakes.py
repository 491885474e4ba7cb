"""Export stored intakes to CSV."""
import argparse
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from partner_intake.config import settings
from partner_intake.profile.catalog import COUNTRIES, ROLES
from partner_intake.storage.intakes import list_intakes
from partner_intake.utils.logs import setup_job_logging

logger = logging.getLogger(__name__)


def export_intakes(
    out_dir: Optional[Path] = None,
    db_path: Optional[str] = None,
    role: Optional[str] = None,
    country: Optional[str] = None,
    submission_status: Optional[str] = None,
    min_score: Optional[int] = None
) -> Optional[Path]:
    """
    Export intakes matching the filters to a timestamped CSV.

    Returns:
        Path of the CSV, or None if nothing matched
    """
    df = list_intakes(
        db_path,
        role=role,
        country=country,
        submission_status=submission_status,
        min_score=min_score
    )
    if df.empty:
        logger.warning("No intakes matched the export filters")
        return None

    # List columns as comma-separated codes
    for column in ("coverage_provinces", "coverage_states", "files"):
        if column in df.columns:
            df[column] = df[column].apply(lambda codes: ",".join(codes) if codes is not None else "")

    out_dir = Path(out_dir or settings.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M")
    output_path = out_dir / f"intakes_{timestamp}.csv"
    df.to_csv(output_path, index=False, encoding="utf-8")
    logger.info(f"Exported {len(df)} intakes to {output_path}")
    return output_path


def main():
    """Main entry point for intake export."""
    parser = argparse.ArgumentParser(description="Export stored intakes to CSV")
    parser.add_argument("--role", choices=ROLES)
    parser.add_argument("--country", choices=COUNTRIES)
    parser.add_argument("--status", choices=["draft", "final"], dest="submission_status")
    parser.add_argument("--min-score", type=int)
    parser.add_argument("--out-dir", type=Path)
    args = parser.parse_args()

    setup_job_logging("export_intakes")
    start_time = datetime.now()
    export_intakes(
        out_dir=args.out_dir,
        role=args.role,
        country=args.country,
        submission_status=args.submission_status,
        min_score=args.min_score
    )
    duration = (datetime.now() - start_time).total_seconds()
    logger.info(f"Export complete in {duration:.2f} seconds", extra={"duration": duration})


if __name__ == "__main__":
    main()
