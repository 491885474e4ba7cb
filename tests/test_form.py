"""Unit tests for the profile model and form helpers."""
import pytest
from pydantic import ValidationError

from partner_intake.profile.form import (
    from_form,
    get_field,
    initial_form,
    live_score,
    set_field,
    to_form,
    toggle,
)
from partner_intake.profile.models import ApplicantProfile, Logistics


FORM_DATA = {
    "submissionStatus": "draft",
    "role": "distributor",
    "company": "Acme Foods",
    "firstName": "Ada",
    "lastName": "Mensah",
    "email": "ada@acmefoods.ca",
    "country": "Canada",
    "city": "Toronto",
    "coverageProvinces": ["on", "QC"],
    "coverageStates": [],
    "languages": {"english": True, "french": True, "spanish": False, "other": "Twi"},
    "networkCounts": {"independents": 40, "beautySupply": 12, "foodService": 3},
    "monthlyDoorsServiced": 55,
    "decisionMakers": 6,
    "avgMonthlySellInCAD": 12000,
    "dealsLast12mo": 4,
    "chainAccess": {"walmart": True, "other": "FreshCo"},
    "logistics": {"warehouseSqFt": 2500, "coldChain": True, "trucksOwned": 1, "thirdPartyLogistics": True},
    "compliance": {"cfiaImporter": True, "gs1": True},
    "categories": {"afroGrocery": True, "pharmacyOTC": True},
    "categoriesOther": "",
    "exclusivityInterest": "regional",
    "requestedServices": {"retailReady": True},
    "agreePrivacy": True,
}


class TestProfileModel:
    """Test profile construction rules."""

    def test_defaults(self):
        """Test that every group has zero defaults except 3PL reliance."""
        profile = ApplicantProfile()
        assert profile.role is None
        assert profile.country == "Canada"
        assert profile.network_counts.total == 0
        assert profile.logistics.third_party_logistics is True
        assert profile.languages.english is False

    def test_frozen(self):
        """Test that profiles cannot be mutated in place."""
        profile = ApplicantProfile()
        with pytest.raises(ValidationError):
            profile.company = "Changed"
        with pytest.raises(ValidationError):
            profile.logistics.cold_chain = True

    def test_negative_numbers_rejected(self):
        """Test that negative counts fail at construction, not scoring."""
        with pytest.raises(ValidationError):
            ApplicantProfile(monthly_doors_serviced=-1)
        with pytest.raises(ValidationError):
            ApplicantProfile(logistics=Logistics(trucks_owned=-2))

    def test_unknown_role_rejected(self):
        """Test role must be one of the three options."""
        with pytest.raises(ValidationError):
            ApplicantProfile(role="wholesaler")

    def test_covered_regions_follow_country(self):
        """Test covered_regions switches with the country."""
        profile = ApplicantProfile(coverage_provinces=["ON"], coverage_states=["NY", "NJ"])
        assert profile.covered_regions == ["ON"]
        assert profile.model_copy(update={"country": "United States"}).covered_regions == ["NY", "NJ"]


class TestFormRoundTrip:
    """Test camelCase form data round trips."""

    def test_from_form_aliases(self):
        """Test camelCase keys, including the irregular ones, are read."""
        profile = from_form(FORM_DATA)
        assert profile.first_name == "Ada"
        assert profile.avg_monthly_sell_in_cad == 12000
        assert profile.deals_last_12mo == 4
        assert profile.categories.pharmacy_otc is True
        assert profile.network_counts.beauty_supply == 12
        assert profile.coverage_provinces == ["ON", "QC"]

    def test_to_form_keys(self):
        """Test serialization uses the form's key names."""
        data = to_form(from_form(FORM_DATA))
        assert data["avgMonthlySellInCAD"] == 12000
        assert data["dealsLast12mo"] == 4
        assert data["categories"]["pharmacyOTC"] is True
        assert data["networkCounts"]["beautySupply"] == 12
        assert data["logistics"]["thirdPartyLogistics"] is True
        assert data["chainAccess"]["other"] == "FreshCo"

    def test_round_trip(self):
        """Test from_form(to_form(p)) reproduces the profile exactly."""
        profile = from_form(FORM_DATA)
        assert from_form(to_form(profile)) == profile

    def test_region_string_rejected(self):
        """Test a bare region string is an error rather than split into letters."""
        with pytest.raises(ValidationError):
            from_form({"country": "Canada", "coverageProvinces": "ON"})
        with pytest.raises(ValidationError):
            ApplicantProfile(coverage_states="NY")
        assert from_form({"coverageProvinces": ["ON"]}).coverage_provinces == ["ON"]

    def test_snake_case_accepted(self):
        """Test attribute names are accepted as well as aliases."""
        profile = from_form({"deals_last_12mo": 3, "logistics": {"cold_chain": True}})
        assert profile.deals_last_12mo == 3
        assert profile.logistics.cold_chain is True

    def test_unknown_keys_ignored(self):
        """Test unrelated form keys such as UI mode do not break loading."""
        profile = from_form({"mode": "services", "role": "referral"})
        assert profile.role == "referral"


class TestFieldEdits:
    """Test immutable field updates."""

    def test_initial_form(self):
        """Test the blank form's defaults and live score."""
        profile = initial_form()
        assert profile.role == "distributor"
        assert profile.languages.english is True
        assert profile.logistics.third_party_logistics is True
        assert live_score(profile) == (10, "Emerging")

    def test_set_nested_field(self):
        """Test a nested update returns a new profile and leaves the original alone."""
        original = initial_form()
        updated = set_field(original, "network_counts.chains", 25)
        assert updated.network_counts.chains == 25
        assert original.network_counts.chains == 0
        assert updated.languages == original.languages

    def test_set_field_coerces_form_values(self):
        """Test form strings are coerced like on load."""
        updated = set_field(initial_form(), "monthly_doors_serviced", "60")
        assert updated.monthly_doors_serviced == 60

    def test_set_field_rejects_bad_values(self):
        """Test validation still applies to edits."""
        with pytest.raises(ValidationError):
            set_field(initial_form(), "decision_makers", -5)

    def test_set_unknown_field(self):
        """Test unknown paths raise KeyError."""
        with pytest.raises(KeyError):
            set_field(initial_form(), "logistics.drones", 3)

    def test_toggle(self):
        """Test toggling a flag twice restores it."""
        profile = initial_form()
        toggled = toggle(profile, "logistics.cold_chain")
        assert get_field(toggled, "logistics.cold_chain") is True
        assert toggle(toggled, "logistics.cold_chain") == profile

    def test_live_score_tracks_edits(self):
        """Test the live score follows each change."""
        profile = initial_form()
        profile = toggle(profile, "logistics.third_party_logistics")
        assert live_score(profile) == (12, "Emerging")
        profile = set_field(profile, "coverage_provinces", ["ON", "QC", "BC"])
        assert live_score(profile) == (24, "Emerging")
        profile = set_field(profile, "network_counts.independents", 60)
        assert live_score(profile) == (42, "Established")
