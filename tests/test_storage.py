"""Unit tests for intake persistence and upload storage."""
import pytest

from partner_intake.profile.models import (
    ApplicantProfile,
    Categories,
    ChainAccess,
    Languages,
    Logistics,
    NetworkCounts,
    RequestedServices,
)
from partner_intake.storage.intakes import (
    from_record,
    get_intake,
    list_intakes,
    profile_columns,
    submit_intake,
    to_record,
)
from partner_intake.storage.uploads import delete_upload, generate_storage_path, save_upload


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "intake_test.duckdb")


def sample_profile(**overrides) -> ApplicantProfile:
    data = {
        "submission_status": "final",
        "role": "both",
        "company": "Acme Foods",
        "first_name": "Ada",
        "last_name": "Mensah",
        "email": "ada@acmefoods.ca",
        "country": "Canada",
        "city": "Toronto",
        "coverage_provinces": ["ON", "QC", "BC"],
        "languages": Languages(english=True, other="Twi"),
        "network_counts": NetworkCounts(independents=40, beauty_supply=12),
        "avg_monthly_sell_in_cad": 12500.5,
        "deals_last_12mo": 4,
        "chain_access": ChainAccess(walmart=True, other="FreshCo"),
        "logistics": Logistics(warehouse_sq_ft=2500, cold_chain=True),
        "categories": Categories(pharmacy_otc=True, skincare=True),
        "requested_services": RequestedServices(retail_ready=True),
        "files": ["abc/1_deck.pdf"],
        "agree_privacy": True,
    }
    data.update(overrides)
    return ApplicantProfile(**data)


class TestRecordMapping:
    """Test profile flattening."""

    def test_column_names(self):
        """Test flattened columns follow the intake table naming."""
        columns = profile_columns()
        for name in [
            "languages_english", "languages_other", "network_beauty_supply",
            "chain_walmart", "chain_other", "warehouse_sq_ft", "third_party_logistics",
            "cfia_importer", "category_afro_grocery", "category_pharmacy_otc",
            "categories_other_description", "service_starter_brand_kit",
            "avg_monthly_sell_in_cad", "deals_last_12mo", "reference1",
        ]:
            assert name in columns, name
        assert columns["coverage_provinces"] == "VARCHAR[]"
        assert columns["cold_chain"] == "BOOLEAN"
        assert columns["trucks_owned"] == "BIGINT"
        assert columns["warehouse_sq_ft"] == "DOUBLE"
        assert columns["role"] == "VARCHAR"

    def test_to_record_values(self):
        """Test record values and the computed fields."""
        record = to_record(sample_profile(), 55, "Established", "2026-01-01T00:00:00+00:00")
        assert record["languages_english"] is True
        assert record["network_beauty_supply"] == 12
        assert record["chain_other"] == "FreshCo"
        assert record["category_pharmacy_otc"] is True
        assert record["computed_score"] == 55
        assert record["computed_tier"] == "Established"
        assert "languages" not in record

    def test_record_round_trip(self):
        """Test from_record(to_record(p)) reproduces the profile."""
        profile = sample_profile()
        assert from_record(to_record(profile, 55, "Established")) == profile

    def test_null_columns_use_defaults(self):
        """Test NULL columns fall back to field defaults."""
        profile = from_record({"role": None, "third_party_logistics": None, "company": "X"})
        assert profile.role is None
        assert profile.logistics.third_party_logistics is True
        assert profile.company == "X"


class TestIntakeStore:
    """Test DuckDB persistence."""

    def test_submit_and_get(self, db_path):
        """Test a stored intake is read back intact with its stored score."""
        profile = sample_profile()
        stored = submit_intake(to_record(profile, 55, "Established", "2026-01-01T00:00:00+00:00"), db_path)
        assert stored["id"]
        assert stored["created_at"] is not None

        row = get_intake(stored["id"], db_path)
        assert row["computed_score"] == 55
        assert row["computed_tier"] == "Established"
        assert row["submitted_at"] == "2026-01-01T00:00:00+00:00"
        assert list(row["coverage_provinces"]) == ["ON", "QC", "BC"]
        assert from_record(row) == profile

    def test_empty_lists_stored(self, db_path):
        """Test empty region lists are accepted."""
        profile = sample_profile(coverage_provinces=[], files=[])
        stored = submit_intake(to_record(profile, 10, "Emerging"), db_path)
        assert from_record(get_intake(stored["id"], db_path)) == profile

    def test_get_unknown(self, db_path):
        """Test unknown ids return None."""
        assert get_intake("does-not-exist", db_path) is None

    def test_list_filters(self, db_path):
        """Test role, country, status and score filters."""
        submit_intake(to_record(sample_profile(), 55, "Established"), db_path)
        submit_intake(to_record(sample_profile(role="referral"), 20, "Emerging"), db_path)
        submit_intake(
            to_record(
                sample_profile(country="United States", coverage_states=["NY"], submission_status="draft")
            ),
            db_path
        )

        assert len(list_intakes(db_path)) == 3
        assert len(list_intakes(db_path, role="referral")) == 1
        assert len(list_intakes(db_path, country="United States")) == 1
        assert len(list_intakes(db_path, submission_status="final")) == 2
        high = list_intakes(db_path, min_score=50)
        assert list(high["computed_score"]) == [55]
        assert len(list_intakes(db_path, min_score=0)) == 2


class TestUploads:
    """Test upload storage helpers."""

    def test_storage_path(self):
        """Test file names are cleaned and prefixed."""
        path = generate_storage_path("intake-1", "my deck (final).pdf", timestamp_ms=1700000000000)
        assert path == "intake-1/1700000000000_my_deck__final_.pdf"

    def test_storage_path_strips_separators(self):
        """Test path separators in names cannot create directories."""
        path = generate_storage_path("intake-1", "../../etc/passwd", timestamp_ms=1)
        assert path == "intake-1/1_.._.._etc_passwd"

    def test_save_and_delete(self, tmp_path):
        """Test a file is copied in and removed."""
        source = tmp_path / "deck.pdf"
        source.write_bytes(b"%PDF-1.4 test")
        root = tmp_path / "uploads"

        key = generate_storage_path("intake-1", source.name, timestamp_ms=5)
        stored = save_upload(source, key, root=root)
        assert stored.read_bytes() == b"%PDF-1.4 test"

        assert delete_upload(key, root=root) is True
        assert not stored.exists()
        assert delete_upload(key, root=root) is False

    def test_save_missing_source(self, tmp_path):
        """Test missing source files raise."""
        with pytest.raises(FileNotFoundError):
            save_upload(tmp_path / "nope.pdf", "intake-1/1_nope.pdf", root=tmp_path)

    def test_escape_rejected(self, tmp_path):
        """Test keys outside the upload root are refused."""
        with pytest.raises(ValueError):
            delete_upload("../outside.txt", root=tmp_path / "uploads")
