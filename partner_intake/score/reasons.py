"""Human-readable reason generation."""
from typing import Dict, List

from partner_intake.profile.models import ApplicantProfile
from partner_intake.score.rules import (
    TIER_ESTABLISHED_MIN,
    TIER_STRATEGIC_MIN,
    TIER_STRONG_MIN,
)


def format_reason_code(code: str, profile: ApplicantProfile) -> str:
    """
    Format a reason code into human-readable text.

    Args:
        code: Reason code (e.g., "NETWORK", "SELL_IN")
        profile: Profile the code was scored from, for values

    Returns:
        Human-readable reason string
    """
    logistics = profile.logistics
    reason_map = {
        "ROLE": f"Role: {profile.role}",
        "GEO": f"{len(profile.covered_regions)} regions covered in {profile.country}",
        "LANG": "Sells in " + ", ".join(
            name for name, spoken in [
                ("English", profile.languages.english),
                ("French", profile.languages.french),
                ("Spanish", profile.languages.spanish),
            ] if spoken
        ),
        "NETWORK": f"Retail network of {profile.network_counts.total:,} doors",
        "DOORS": f"{profile.monthly_doors_serviced:,} doors serviced monthly",
        "DECISION_MAKERS": f"{profile.decision_makers:,} decision-maker contacts",
        "SELL_IN": f"Avg monthly sell-in ${profile.avg_monthly_sell_in_cad:,.0f} CAD",
        "DEALS": f"{profile.deals_last_12mo} deals closed in last 12 months",
        "CHAINS": f"Access to {profile.chain_access.named_count} major chains",
        "WAREHOUSE": f"Warehouse {logistics.warehouse_sq_ft:,.0f} sq ft",
        "COLD_CHAIN": "Cold chain capable",
        "TRUCKS": f"{logistics.trucks_owned} trucks owned",
        "OWN_LOGISTICS": "Own logistics (no 3PL)",
        "COMPLIANCE": "Compliance certifications held",
        "PROOF": "LinkedIn / references provided",
        "CATEGORY_FIT": "Interest in priority categories",
    }

    return reason_map.get(code, code)


def compose_reasons(breakdown: Dict[str, int], profile: ApplicantProfile) -> str:
    """
    Compose human-readable reasons from a score breakdown.

    Only rules that contributed points are listed.

    Args:
        breakdown: Reason code -> points, from score_breakdown()
        profile: Scored profile

    Returns:
        Human-readable reason string
    """
    reasons: List[str] = []

    for code, points in breakdown.items():
        if points <= 0:
            continue
        reasons.append(f"{format_reason_code(code, profile)} (+{points})")

    return "; ".join(reasons)


def next_step(score: int) -> str:
    """Recommended follow-up for a score."""
    if score >= TIER_STRATEGIC_MIN:
        return "Invite to strategic partner call within 48h."
    if score >= TIER_STRONG_MIN:
        return "Schedule capabilities deep-dive and brand alignment."
    if score >= TIER_ESTABLISHED_MIN:
        return "Request additional proof (references, case studies) and pilot region."
    return "Add more details; consider a referral-only pilot to build traction."
