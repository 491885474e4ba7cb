"""Submit an intake profile from a JSON file."""
import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from partner_intake.intake.submit import export_json, submit
from partner_intake.profile.validation import IntakeValidationError, validate_intake
from partner_intake.score.scorer import score_profile
from partner_intake.utils.io import load_profile
from partner_intake.utils.logs import setup_job_logging

logger = logging.getLogger(__name__)


def main():
    """Main entry point for intake submission."""
    parser = argparse.ArgumentParser(description="Submit a distributor intake")
    parser.add_argument("file", type=Path, help="Profile JSON (form or record shape)")
    parser.add_argument(
        "--no-email",
        action="store_true",
        default=False,
        help="Store the intake without emailing the admin"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        help="Dry run mode: validate and score without storing or emailing"
    )
    parser.add_argument(
        "--export-json",
        action="store_true",
        default=False,
        help="Also write the submitted intake to a JSON file in the output directory"
    )
    args = parser.parse_args()

    setup_job_logging("submit_intake")
    start_time = datetime.now()
    profile = load_profile(args.file)

    if args.dry_run:
        errors = validate_intake(profile)
        score, tier = score_profile(profile)
        logger.info(f"DRY RUN: {profile.company or args.file.name} would score {score} ({tier})")
        for error in errors:
            logger.warning(f"  Validation: {error}")
        return

    try:
        result = submit(profile, send_email=not args.no_email)
    except IntakeValidationError as e:
        for error in e.errors:
            logger.error(f"Validation: {error}")
        sys.exit(1)

    if args.export_json:
        export_json(result)

    duration = (datetime.now() - start_time).total_seconds()
    logger.info(
        f"Submitted intake {result.intake_id}: score={result.computed_score} "
        f"tier={result.computed_tier} in {duration:.2f} seconds",
        extra={"duration": duration}
    )


if __name__ == "__main__":
    main()
