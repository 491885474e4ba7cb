"""
Intake submission workflow.

Validate -> score once -> persist -> notify. The score and tier computed here
are stored with the record and never recomputed afterwards. A failed email
does not fail the submission; the stored record is authoritative.
"""
import json
import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Union

from partner_intake.config import settings
from partner_intake.notify.mailer import EmailResult, ResendClient, send_intake_email
from partner_intake.profile.form import to_form
from partner_intake.profile.models import ApplicantProfile
from partner_intake.profile.validation import ensure_valid
from partner_intake.score.scorer import score_profile
from partner_intake.storage.intakes import submit_intake, to_record

logger = logging.getLogger(__name__)


@dataclass
class SubmissionResult:
    """A stored submission and its notification outcome."""
    intake_id: str
    profile: ApplicantProfile
    computed_score: Optional[int]
    computed_tier: Optional[str]
    submitted_at: Optional[str]
    email: Optional[EmailResult] = None

    def to_dict(self) -> Dict[str, Any]:
        """Form-shaped dict with the computed fields, as shown after submission."""
        return {
            **to_form(self.profile),
            "id": self.intake_id,
            "computedScore": self.computed_score,
            "computedTier": self.computed_tier,
            "submittedAt": self.submitted_at,
        }


def submit(
    profile: ApplicantProfile,
    db_path: Optional[str] = None,
    send_email: bool = True,
    client: Optional[ResendClient] = None
) -> SubmissionResult:
    """
    Finalize and store an intake, then notify the admin.

    Args:
        profile: Completed profile
        db_path: DuckDB path (uses settings if not provided)
        send_email: Send the admin notification
        client: Optional ResendClient instance

    Returns:
        SubmissionResult

    Raises:
        IntakeValidationError: If the profile is not ready for submission
    """
    ensure_valid(profile, final=True)

    computed_score, computed_tier = score_profile(profile)
    submitted_at = datetime.now(timezone.utc).isoformat()
    final_profile = profile.model_copy(update={"submission_status": "final"})

    stored = submit_intake(
        to_record(final_profile, computed_score, computed_tier, submitted_at),
        db_path
    )
    logger.info(f"Intake {stored['id']} submitted: score={computed_score} tier={computed_tier}")

    result = SubmissionResult(
        intake_id=stored["id"],
        profile=final_profile,
        computed_score=computed_score,
        computed_tier=computed_tier,
        submitted_at=submitted_at,
    )

    if not send_email:
        return result

    if client is None and not settings.email_configured:
        logger.warning("Email delivery not configured, skipping admin notification")
        result.email = EmailResult(success=False, message="Email delivery not configured")
        return result

    result.email = send_intake_email(final_profile, computed_score, computed_tier, submitted_at, client)
    if not result.email.success:
        logger.warning(f"Email sending failed for intake {result.intake_id}: {result.email.message}")
    return result


def save_draft(profile: ApplicantProfile, db_path: Optional[str] = None) -> SubmissionResult:
    """
    Store an incomplete intake as a draft.

    Drafts carry no score or tier; those are only fixed on final submission.

    Raises:
        IntakeValidationError: If a filled-in value is malformed
    """
    ensure_valid(profile, final=False)
    draft = profile.model_copy(update={"submission_status": "draft"})
    stored = submit_intake(to_record(draft), db_path)
    logger.info(f"Draft intake {stored['id']} saved")
    return SubmissionResult(
        intake_id=stored["id"],
        profile=draft,
        computed_score=None,
        computed_tier=None,
        submitted_at=None,
    )


def export_json(
    data: Union[SubmissionResult, ApplicantProfile],
    out_dir: Optional[Path] = None
) -> Path:
    """
    Write a submission (or an unsubmitted profile) to a JSON file.

    Unsubmitted profiles are exported with their current live score.

    Args:
        data: Submission result or profile
        out_dir: Output directory (uses settings if not provided)

    Returns:
        Path of the written file
    """
    if isinstance(data, SubmissionResult):
        payload = data.to_dict()
    else:
        score, tier = score_profile(data)
        payload = {**to_form(data), "computedScore": score, "computedTier": tier}

    out_dir = Path(out_dir or settings.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    output_path = out_dir / f"intake-{int(time.time() * 1000)}.json"
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)

    logger.info(f"Intake exported to {output_path}")
    return output_path
