"""Boundary validation for intake submissions."""
import logging
import re
from typing import List

from partner_intake.profile.catalog import REGIONS_BY_COUNTRY
from partner_intake.profile.models import ApplicantProfile

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
URL_PATTERN = re.compile(r"^https?://\S+$", re.IGNORECASE)


class IntakeValidationError(ValueError):
    """Raised when a submission fails boundary validation."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


def validate_intake(profile: ApplicantProfile, final: bool = True) -> List[str]:
    """
    Validate a profile before it is submitted.

    Drafts are only checked for malformed values; final submissions must
    also carry the required contact fields and privacy consent.

    Args:
        profile: Profile to check
        final: Apply the full set of final-submission checks

    Returns:
        List of error messages (empty if valid)
    """
    errors = []

    if final:
        if not profile.company.strip():
            errors.append("Company name is required")
        if not profile.first_name.strip() or not profile.last_name.strip():
            errors.append("Contact person name is required")
        if not profile.email.strip():
            errors.append("Email is required")
        if not profile.city.strip():
            errors.append("City is required")
        if not profile.agree_privacy:
            errors.append("Privacy policy must be accepted")

    # Format checks
    if profile.email.strip() and not EMAIL_PATTERN.match(profile.email.strip()):
        errors.append("Please enter a valid email address")
    if profile.website.strip() and not URL_PATTERN.match(profile.website.strip()):
        errors.append("Website must be an http(s) URL")
    if profile.linkedin.strip() and not URL_PATTERN.match(profile.linkedin.strip()):
        errors.append("LinkedIn must be an http(s) URL")

    # Coverage codes must belong to the selected country
    valid_codes = REGIONS_BY_COUNTRY[profile.country]
    unknown = [code for code in profile.covered_regions if code not in valid_codes]
    if unknown:
        errors.append(f"Unknown region codes for {profile.country}: {', '.join(unknown)}")

    return errors


def ensure_valid(profile: ApplicantProfile, final: bool = True) -> ApplicantProfile:
    """
    Validate a profile, raising on failure.

    Raises:
        IntakeValidationError: If any check fails
    """
    errors = validate_intake(profile, final=final)
    if errors:
        logger.warning(f"Intake validation failed for {profile.company or 'unknown company'}: {errors}")
        raise IntakeValidationError(errors)
    return profile
