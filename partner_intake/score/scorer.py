"""
Applicant qualification scoring.

Each rule reads the profile and returns a non-negative number of points.
Rules are independent of one another; the total is clamped once at the end.
Nothing in this module performs I/O or raises for a well-typed profile.
"""
from typing import Callable, Dict, List, Tuple

from partner_intake.profile.models import ApplicantProfile
from partner_intake.score.rules import (
    BONUS_CATEGORIES,
    CATEGORY_BONUS_POINTS,
    CHAIN_CAP,
    CHAIN_POINTS,
    COLD_CHAIN_POINTS,
    COMPLIANCE_POINTS,
    DEALS_THRESHOLDS,
    DECISION_MAKER_THRESHOLDS,
    DOORS_THRESHOLDS,
    GEO_THRESHOLDS,
    LANGUAGE_CAP,
    LANGUAGE_POINTS,
    MAX_SCORE,
    NETWORK_THRESHOLDS,
    OWN_LOGISTICS_POINTS,
    PROOF_FIELDS,
    PROOF_POINTS,
    ROLE_POINTS,
    SELL_IN_THRESHOLDS,
    TIER_EMERGING,
    TIER_ESTABLISHED,
    TIER_ESTABLISHED_MIN,
    TIER_STRATEGIC,
    TIER_STRATEGIC_MIN,
    TIER_STRONG,
    TIER_STRONG_MIN,
    TRUCKS_MIN,
    TRUCKS_POINTS,
    WAREHOUSE_THRESHOLDS,
)

ScoringRule = Callable[[ApplicantProfile], int]


def cumulative_points(value: float, thresholds: List[Tuple[float, int]]) -> int:
    """
    Sum the points of every threshold the value reaches.

    Args:
        value: Metric value
        thresholds: (minimum, points) pairs

    Returns:
        Total points for all thresholds with minimum <= value
    """
    return sum(points for minimum, points in thresholds if value >= minimum)


def role_points(profile: ApplicantProfile) -> int:
    return ROLE_POINTS.get(profile.role, 0)


def geography_points(profile: ApplicantProfile) -> int:
    return cumulative_points(len(profile.covered_regions), GEO_THRESHOLDS)


def language_points(profile: ApplicantProfile) -> int:
    langs = profile.languages
    spoken = sum([langs.english, langs.french, langs.spanish])
    return min(spoken * LANGUAGE_POINTS, LANGUAGE_CAP)


def network_points(profile: ApplicantProfile) -> int:
    return cumulative_points(profile.network_counts.total, NETWORK_THRESHOLDS)


def doors_points(profile: ApplicantProfile) -> int:
    return cumulative_points(profile.monthly_doors_serviced, DOORS_THRESHOLDS)


def decision_maker_points(profile: ApplicantProfile) -> int:
    return cumulative_points(profile.decision_makers, DECISION_MAKER_THRESHOLDS)


def sell_in_points(profile: ApplicantProfile) -> int:
    return cumulative_points(profile.avg_monthly_sell_in_cad, SELL_IN_THRESHOLDS)


def deals_points(profile: ApplicantProfile) -> int:
    return cumulative_points(profile.deals_last_12mo, DEALS_THRESHOLDS)


def chain_points(profile: ApplicantProfile) -> int:
    # Free-text "other" chain is not scored
    return min(profile.chain_access.named_count * CHAIN_POINTS, CHAIN_CAP)


def warehouse_points(profile: ApplicantProfile) -> int:
    return cumulative_points(profile.logistics.warehouse_sq_ft, WAREHOUSE_THRESHOLDS)


def cold_chain_points(profile: ApplicantProfile) -> int:
    return COLD_CHAIN_POINTS if profile.logistics.cold_chain else 0


def trucks_points(profile: ApplicantProfile) -> int:
    return TRUCKS_POINTS if profile.logistics.trucks_owned >= TRUCKS_MIN else 0


def own_logistics_points(profile: ApplicantProfile) -> int:
    # Vertically integrated: no reliance on a 3PL
    return 0 if profile.logistics.third_party_logistics else OWN_LOGISTICS_POINTS


def compliance_points(profile: ApplicantProfile) -> int:
    return sum(
        points for field, points in COMPLIANCE_POINTS.items()
        if getattr(profile.compliance, field)
    )


def proof_points(profile: ApplicantProfile) -> int:
    return sum(PROOF_POINTS for field in PROOF_FIELDS if getattr(profile, field))


def category_fit_points(profile: ApplicantProfile) -> int:
    return sum(
        CATEGORY_BONUS_POINTS for field in BONUS_CATEGORIES
        if getattr(profile.categories, field)
    )


# Ordered rule table: (reason code, rule)
RULES: List[Tuple[str, ScoringRule]] = [
    ("ROLE", role_points),
    ("GEO", geography_points),
    ("LANG", language_points),
    ("NETWORK", network_points),
    ("DOORS", doors_points),
    ("DECISION_MAKERS", decision_maker_points),
    ("SELL_IN", sell_in_points),
    ("DEALS", deals_points),
    ("CHAINS", chain_points),
    ("WAREHOUSE", warehouse_points),
    ("COLD_CHAIN", cold_chain_points),
    ("TRUCKS", trucks_points),
    ("OWN_LOGISTICS", own_logistics_points),
    ("COMPLIANCE", compliance_points),
    ("PROOF", proof_points),
    ("CATEGORY_FIT", category_fit_points),
]


def score_breakdown(profile: ApplicantProfile) -> Dict[str, int]:
    """
    Points contributed by each rule, before the cap.

    Args:
        profile: Applicant profile

    Returns:
        Dict of reason code -> points, in rule order
    """
    return {code: rule(profile) for code, rule in RULES}


def calculate_score(profile: ApplicantProfile) -> int:
    """
    Calculate the qualification score for an applicant.

    Args:
        profile: Applicant profile

    Returns:
        Integer score in [0, 100]
    """
    total = sum(score_breakdown(profile).values())
    return int(min(total, MAX_SCORE))


def score_tier(score: int) -> str:
    """Map a score to its qualification tier label."""
    if score >= TIER_STRATEGIC_MIN:
        return TIER_STRATEGIC
    elif score >= TIER_STRONG_MIN:
        return TIER_STRONG
    elif score >= TIER_ESTABLISHED_MIN:
        return TIER_ESTABLISHED
    return TIER_EMERGING


def score_profile(profile: ApplicantProfile) -> Tuple[int, str]:
    """
    Score an applicant and classify the result.

    Returns:
        Tuple of (score, tier)
    """
    score = calculate_score(profile)
    return score, score_tier(score)
