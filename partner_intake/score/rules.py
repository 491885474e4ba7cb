"""Scoring rules and constants."""
from typing import Dict, List, Tuple

# Role weight (exactly one applies)
ROLE_POINTS: Dict[str, int] = {
    "distributor": 8,
    "referral": 4,
    "both": 10,
}

# Cumulative thresholds: every (minimum, points) pair reached is added,
# so crossing a higher step adds to the lower ones rather than replacing them.
GEO_THRESHOLDS: List[Tuple[float, int]] = [(1, 4), (3, 8), (6, 12)]
NETWORK_THRESHOLDS: List[Tuple[float, int]] = [(10, 6), (50, 12), (150, 20)]
DOORS_THRESHOLDS: List[Tuple[float, int]] = [(10, 4), (50, 10), (150, 16)]
DECISION_MAKER_THRESHOLDS: List[Tuple[float, int]] = [(5, 4), (25, 8), (75, 12)]
SELL_IN_THRESHOLDS: List[Tuple[float, int]] = [(10000, 6), (50000, 10), (200000, 14)]
DEALS_THRESHOLDS: List[Tuple[float, int]] = [(3, 4), (10, 8), (25, 12)]
WAREHOUSE_THRESHOLDS: List[Tuple[float, int]] = [(1000, 3), (5000, 6), (20000, 10)]

# Per-item weights with a ceiling
LANGUAGE_POINTS = 2
LANGUAGE_CAP = 6
CHAIN_POINTS = 4
CHAIN_CAP = 20

# Logistics
COLD_CHAIN_POINTS = 5
TRUCKS_MIN = 2
TRUCKS_POINTS = 4
OWN_LOGISTICS_POINTS = 2  # no 3PL reliance

# Compliance certifications
COMPLIANCE_POINTS: Dict[str, int] = {
    "cfia_importer": 5,
    "fda_registered": 5,
    "gs1": 3,
    "coi_insurance": 3,
}

# Proof fields (non-empty)
PROOF_FIELDS: List[str] = ["linkedin", "reference1", "reference2"]
PROOF_POINTS = 2

# Category fit bonus for this program
BONUS_CATEGORIES: List[str] = ["skincare", "beauty", "afro_grocery"]
CATEGORY_BONUS_POINTS = 2

# Tier bands: Strategic Partner=80–100, Strong=60–79, Established=30–59, Emerging<30
TIER_STRATEGIC_MIN = 80
TIER_STRONG_MIN = 60
TIER_ESTABLISHED_MIN = 30

TIER_STRATEGIC = "Strategic Partner"
TIER_STRONG = "Strong"
TIER_ESTABLISHED = "Established"
TIER_EMERGING = "Emerging"

TIERS: List[str] = [TIER_STRATEGIC, TIER_STRONG, TIER_ESTABLISHED, TIER_EMERGING]

# Maximum score cap: Cap total at 100
MAX_SCORE = 100
