"""Static reference data for the intake form."""
from typing import Dict, List

PROVINCES_CA: List[str] = [
    "AB", "BC", "MB", "NB", "NL", "NS", "NT", "NU", "ON", "PE", "QC", "SK", "YT",
]

STATES_US: List[str] = [
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA", "HI", "ID", "IL",
    "IN", "IA", "KS", "KY", "LA", "ME", "MD", "MA", "MI", "MN", "MS", "MO", "MT",
    "NE", "NV", "NH", "NJ", "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI",
    "SC", "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
]

COUNTRIES: List[str] = ["Canada", "United States"]

# Region codes accepted for each country
REGIONS_BY_COUNTRY: Dict[str, List[str]] = {
    "Canada": PROVINCES_CA,
    "United States": STATES_US,
}

ROLES: List[str] = ["distributor", "referral", "both"]

# Product categories, keyed by profile field name
PRODUCT_CATEGORIES: Dict[str, str] = {
    "afro_grocery": "Afro-Caribbean Grocery",
    "beverages": "Beverages (non-alcoholic)",
    "spices_sauces": "Spices, Sauces & Condiments",
    "snacks": "Snacks & Confectionery",
    "frozen": "Frozen & Ready-to-Eat",
    "fresh_produce": "Fresh Produce",
    "beauty": "Beauty & Personal Care",
    "skincare": "Skincare & Hydration",
    "haircare": "Hair Care",
    "home": "Home & Cleaning",
    "textiles": "Textiles & Apparel",
    "pharmacy_otc": "Pharmacy (OTC only)",
    "other": "Other (describe below)",
}

# Retail network types, keyed by profile field name
NETWORK_TYPES: Dict[str, str] = {
    "independents": "Independent Grocery / Ethnic Stores",
    "chains": "Chains & Big Box (e.g., Walmart, Loblaws, Kroger)",
    "convenience": "Convenience & Gas",
    "beauty_supply": "Beauty Supply / Cosmetics Retail",
    "pharmacies": "Pharmacies & Drugstores",
    "food_service": "Food Service / HORECA",
    "wholesalers": "Wholesalers & Distributors",
    "marketplaces": "E-commerce & Marketplaces (Amazon, Walmart.ca)",
    "specialty": "Specialty (Halal, Organic, Fair-Trade, etc.)",
}

CHAIN_LABELS: Dict[str, str] = {
    "walmart": "Walmart",
    "costco": "Costco",
    "loblaws": "Loblaws",
    "sobeys": "Sobeys",
    "metro": "Metro",
    "kroger": "Kroger",
    "amazon": "Amazon",
}

COMPLIANCE_LABELS: Dict[str, str] = {
    "cfia_importer": "CFIA Importer",
    "fda_registered": "FDA Registered",
    "gs1": "GS1",
    "coi_insurance": "COI Insurance",
}

# Quote-request service bundles
SERVICE_BUNDLES: List[Dict] = [
    {
        "key": "starter_brand_kit",
        "title": "Starter Brand Kit",
        "bullets": ["Logo refresh", "Basic brand guide", "3 product labels", "One-page website"],
    },
    {
        "key": "retail_ready",
        "title": "Retail-Ready Packaging & Compliance",
        "bullets": ["Nutrition facts (US/CA)", "Bilingual labelling (EN/FR)", "GS1 barcodes", "Shelf tests"],
    },
    {
        "key": "ecom_launch",
        "title": "E-commerce Launch",
        "bullets": ["Shopify setup", "Payment & tax config", "Shipping rules", "3 PDP copy blocks"],
    },
    {
        "key": "photo_video",
        "title": "Photo & Video Kit",
        "bullets": ["Studio photos (10)", "Lifestyle photos (5)", "15-sec product video", "Editing"],
    },
    {
        "key": "social_media",
        "title": "Social Media Pack",
        "bullets": ["Content calendar (30 days)", "10 feed posts", "8 stories", "Hashtag & CTA guide"],
    },
    {
        "key": "trade_readiness",
        "title": "Trade Readiness",
        "bullets": ["Export coaching", "Certification checklist", "Buyer pitch deck", "Pricing model"],
    },
]


def service_title(key: str) -> str:
    """Return the display title for a service bundle key."""
    for bundle in SERVICE_BUNDLES:
        if bundle["key"] == key:
            return bundle["title"]
    return key
