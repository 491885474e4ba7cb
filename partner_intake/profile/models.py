"""
Applicant profile schemas.

The profile is an immutable aggregate of small value groups. Attribute names
are snake_case; each field also carries the camelCase alias used by the intake
form, and either spelling is accepted on input.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

Role = Literal["distributor", "referral", "both"]
Country = Literal["Canada", "United States"]
SubmissionStatus = Literal["draft", "final"]
Exclusivity = Literal["no", "regional", "national"]


class ProfileModel(BaseModel):
    """Base for all profile groups: frozen, camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# =============================================================================
# VALUE GROUPS
# =============================================================================

class Languages(ProfileModel):
    """Languages the applicant can sell in."""
    english: bool = False
    french: bool = False
    spanish: bool = False
    other: str = ""


class NetworkCounts(ProfileModel):
    """Retail doors the applicant has relationships with, by channel."""
    independents: int = Field(default=0, ge=0)
    chains: int = Field(default=0, ge=0)
    convenience: int = Field(default=0, ge=0)
    beauty_supply: int = Field(default=0, ge=0)
    pharmacies: int = Field(default=0, ge=0)
    food_service: int = Field(default=0, ge=0)
    wholesalers: int = Field(default=0, ge=0)
    marketplaces: int = Field(default=0, ge=0)
    specialty: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        return (
            self.independents + self.chains + self.convenience
            + self.beauty_supply + self.pharmacies + self.food_service
            + self.wholesalers + self.marketplaces + self.specialty
        )


class ChainAccess(ProfileModel):
    """Named retail chains the applicant can reach. `other` is free text."""
    walmart: bool = False
    costco: bool = False
    loblaws: bool = False
    sobeys: bool = False
    metro: bool = False
    kroger: bool = False
    amazon: bool = False
    other: str = ""

    @property
    def named_count(self) -> int:
        return sum([
            self.walmart, self.costco, self.loblaws, self.sobeys,
            self.metro, self.kroger, self.amazon,
        ])


class Logistics(ProfileModel):
    """Warehousing and delivery capability."""
    warehouse_sq_ft: float = Field(default=0.0, ge=0)
    cold_chain: bool = False
    trucks_owned: int = Field(default=0, ge=0)
    # Absent means the applicant relies on a 3PL, matching the form default
    third_party_logistics: bool = True


class Compliance(ProfileModel):
    """Regulatory and commercial certifications."""
    cfia_importer: bool = False
    fda_registered: bool = False
    gs1: bool = False
    coi_insurance: bool = False


class Categories(ProfileModel):
    """Product categories of interest."""
    afro_grocery: bool = False
    beverages: bool = False
    spices_sauces: bool = False
    snacks: bool = False
    frozen: bool = False
    fresh_produce: bool = False
    beauty: bool = False
    skincare: bool = False
    haircare: bool = False
    home: bool = False
    textiles: bool = False
    pharmacy_otc: bool = Field(default=False, alias="pharmacyOTC")
    other: bool = False


class RequestedServices(ProfileModel):
    """Service bundles the applicant asked to be quoted on."""
    starter_brand_kit: bool = False
    retail_ready: bool = False
    ecom_launch: bool = False
    photo_video: bool = False
    social_media: bool = False
    trade_readiness: bool = False


# =============================================================================
# AGGREGATE PROFILE
# =============================================================================

class ApplicantProfile(ProfileModel):
    """Complete intake profile for a prospective distributor or referral partner."""
    submission_status: SubmissionStatus = "draft"
    role: Optional[Role] = None

    # Contact
    company: str = ""
    website: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""

    # Location and coverage
    country: Country = "Canada"
    city: str = ""
    province_state: str = ""
    postal_zip: str = ""
    coverage_description: str = ""
    coverage_provinces: List[str] = Field(default_factory=list)
    coverage_states: List[str] = Field(default_factory=list)
    languages: Languages = Field(default_factory=Languages)

    # Network and activity
    network_counts: NetworkCounts = Field(default_factory=NetworkCounts)
    monthly_doors_serviced: int = Field(default=0, ge=0)
    decision_makers: int = Field(default=0, ge=0)
    avg_monthly_sell_in_cad: float = Field(default=0.0, ge=0, alias="avgMonthlySellInCAD")
    deals_last_12mo: int = Field(default=0, ge=0, alias="dealsLast12mo")
    chain_access: ChainAccess = Field(default_factory=ChainAccess)

    # Capabilities
    logistics: Logistics = Field(default_factory=Logistics)
    compliance: Compliance = Field(default_factory=Compliance)

    # Product interests
    categories: Categories = Field(default_factory=Categories)
    categories_other: str = ""
    exclusivity_interest: Exclusivity = "no"
    moq_capacity_units: int = Field(default=0, ge=0)

    # Proof and references
    linkedin: str = ""
    reference1: str = ""
    reference2: str = ""
    files: List[str] = Field(default_factory=list)

    # Services quote
    requested_services: RequestedServices = Field(default_factory=RequestedServices)
    service_notes: str = ""

    # Consent
    heard_from: str = ""
    agree_contact: bool = False
    agree_privacy: bool = False

    @field_validator("coverage_provinces", "coverage_states", mode="before")
    @classmethod
    def _normalize_regions(cls, value):
        """Upper-case region codes and drop duplicates, keeping first-seen order."""
        if value is None:
            return []
        if isinstance(value, str):
            raise ValueError("region codes must be a list, not a single string")
        seen = []
        for code in value:
            code = str(code).strip().upper()
            if code and code not in seen:
                seen.append(code)
        return seen

    @property
    def covered_regions(self) -> List[str]:
        """Regions for the selected country only."""
        if self.country == "Canada":
            return self.coverage_provinces
        return self.coverage_states

    @property
    def contact_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
