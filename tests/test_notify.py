"""Unit tests for the PDF summary and admin email."""
import base64
from unittest.mock import Mock, patch

import pytest
import requests

from partner_intake.config import settings
from partner_intake.notify.mailer import (
    ResendClient,
    attachment_filename,
    build_email_payload,
    send_intake_email,
)
from partner_intake.notify.pdf import generate_intake_pdf
from partner_intake.profile.models import ApplicantProfile, ChainAccess, NetworkCounts, RequestedServices


def sample_profile(**overrides) -> ApplicantProfile:
    data = {
        "role": "distributor",
        "company": "Acme Foods",
        "first_name": "Ada",
        "last_name": "Mensah",
        "email": "ada@acmefoods.ca",
        "city": "Toronto",
        "coverage_provinces": ["ON", "QC"],
        "network_counts": NetworkCounts(independents=40),
        "chain_access": ChainAccess(walmart=True),
        "requested_services": RequestedServices(retail_ready=True),
        "agree_privacy": True,
    }
    data.update(overrides)
    return ApplicantProfile(**data)


class TestIntakePdf:
    """Test PDF rendering."""

    def test_renders_pdf(self):
        """Test output is a PDF document."""
        pdf_bytes = generate_intake_pdf(
            sample_profile(), 42, "Established", "2026-01-01T00:00:00+00:00", brand_name="Test Brand"
        )
        assert pdf_bytes.startswith(b"%PDF")

    def test_blank_profile(self):
        """Test an empty profile still renders."""
        assert generate_intake_pdf(ApplicantProfile()).startswith(b"%PDF")

    def test_non_latin_text(self):
        """Test characters outside the core fonts do not break rendering."""
        profile = sample_profile(company="Ōkami 東京 Trading", service_notes="Need help with 包装")
        assert generate_intake_pdf(profile, brand_name="Brand").startswith(b"%PDF")


class TestEmailPayload:
    """Test notification payload construction."""

    def test_attachment_filename(self):
        """Test company names are slugged into the file name."""
        assert attachment_filename("Acme Foods & Co.", 123) == "distributor-application-Acme-Foods---Co--123.pdf"
        assert attachment_filename("", 1) == "distributor-application-unknown-1.pdf"

    def test_payload_fields(self):
        """Test subject, recipients and the base64 attachment."""
        payload = build_email_payload(
            sample_profile(),
            b"%PDF-1.4 fake",
            computed_score=42,
            computed_tier="Established",
            submitted_at="2026-01-01T00:00:00+00:00",
            from_email="intake@example.com",
            to_email="admin@example.com"
        )
        assert payload["subject"] == "New Distributor Application - Acme Foods"
        assert payload["from"] == "intake@example.com"
        assert payload["to"] == ["admin@example.com"]
        attachment = payload["attachments"][0]
        assert attachment["filename"].startswith("distributor-application-Acme-Foods-")
        assert attachment["content_type"] == "application/pdf"
        assert base64.b64decode(attachment["content"]) == b"%PDF-1.4 fake"
        assert "42 (Established)" in payload["html"]

    def test_unknown_company(self):
        """Test the subject fallback when no company was given."""
        payload = build_email_payload(ApplicantProfile(), b"")
        assert payload["subject"] == "New Distributor Application - Unknown Company"

    def test_html_escaped(self):
        """Test applicant text is escaped in the email body."""
        payload = build_email_payload(sample_profile(company="<b>Acme</b>"), b"")
        assert "&lt;b&gt;Acme&lt;/b&gt;" in payload["html"]
        assert "<b>Acme</b>" not in payload["html"]


class TestSendIntakeEmail:
    """Test delivery outcomes."""

    def test_success(self):
        """Test a delivered email reports its id."""
        client = Mock()
        client.send.return_value = {"id": "email_123"}

        result = send_intake_email(sample_profile(), 42, "Established", "2026-01-01", client=client)

        assert result.success is True
        assert result.email_id == "email_123"
        payload = client.send.call_args[0][0]
        assert payload["subject"] == "New Distributor Application - Acme Foods"

    def test_failure_reported_not_raised(self):
        """Test provider errors come back as a failed result."""
        client = Mock()
        client.send.side_effect = requests.HTTPError("500 Server Error")

        result = send_intake_email(sample_profile(), 42, "Established", "2026-01-01", client=client)

        assert result.success is False
        assert "500 Server Error" in result.message

    def test_missing_api_key_reported(self, monkeypatch):
        """Test an unconfigured client is a failed result, not an exception."""
        monkeypatch.setattr(settings, "resend_api_key", "")
        result = send_intake_email(sample_profile())
        assert result.success is False
        assert "RESEND_API_KEY" in result.message


class TestResendClient:
    """Test the REST client."""

    def test_requires_api_key(self, monkeypatch):
        """Test construction fails without a key."""
        monkeypatch.setattr(settings, "resend_api_key", "")
        with pytest.raises(ValueError):
            ResendClient()

    def test_send_posts_payload(self):
        """Test the request URL, auth header and returned JSON."""
        client = ResendClient(api_key="re_test", base_url="https://api.example.com/")
        response = Mock()
        response.json.return_value = {"id": "email_456"}

        with patch("partner_intake.notify.mailer.requests.post", return_value=response) as post:
            result = client.send({"subject": "Hello"})

        assert result == {"id": "email_456"}
        args, kwargs = post.call_args
        assert args[0] == "https://api.example.com/emails"
        assert kwargs["headers"]["Authorization"] == "Bearer re_test"
        assert kwargs["json"] == {"subject": "Hello"}
