"""Admin email notification via the Resend REST API."""
import base64
import html
import logging
import re
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from tenacity import retry, stop_after_attempt, wait_exponential

from partner_intake.config import settings
from partner_intake.notify.pdf import generate_intake_pdf
from partner_intake.profile.models import ApplicantProfile

logger = logging.getLogger(__name__)


@dataclass
class EmailResult:
    """Outcome of a notification attempt."""
    success: bool
    message: str
    email_id: Optional[str] = None


class ResendClient:
    """Resend REST API client."""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None):
        """
        Initialize Resend client.

        Args:
            api_key: Resend API key (uses settings if not provided)
            base_url: API base URL (uses settings if not provided)
        """
        self.api_key = api_key or settings.resend_api_key
        self.base_url = (base_url or settings.resend_api_base).rstrip("/")

        if not self.api_key:
            raise ValueError("Resend API key not configured. Set RESEND_API_KEY")

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        reraise=True
    )
    def send(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Send an email with retry logic.

        Args:
            payload: Resend email payload

        Returns:
            Response JSON as dict
        """
        url = f"{self.base_url}/emails"
        try:
            response = requests.post(url, headers=self.headers, json=payload, timeout=30)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            logger.error(f"Resend API request failed: {e}")
            raise


def attachment_filename(company: str, timestamp_ms: Optional[int] = None) -> str:
    """File name for the PDF attachment."""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    slug = re.sub(r"[^a-zA-Z0-9]", "-", company) if company else "unknown"
    return f"distributor-application-{slug}-{timestamp_ms}.pdf"


def render_email_body(
    profile: ApplicantProfile,
    computed_score: Optional[int],
    computed_tier: Optional[str],
    submitted_at: Optional[str]
) -> str:
    """HTML summary shown above the attached PDF."""
    def esc(value) -> str:
        return html.escape(str(value)) if value not in (None, "") else "Not provided"

    return f"""
      <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
        <h2 style="color: #1f2937; border-bottom: 2px solid #3b82f6; padding-bottom: 10px;">
          New Distributor Application Received
        </h2>
        <div style="background-color: #f8fafc; padding: 20px; border-radius: 8px; margin: 20px 0;">
          <h3 style="color: #374151; margin-top: 0;">Applicant Details:</h3>
          <p><strong>Company:</strong> {esc(profile.company)}</p>
          <p><strong>Contact Person:</strong> {esc(profile.contact_name)}</p>
          <p><strong>Email:</strong> {esc(profile.email)}</p>
          <p><strong>Phone:</strong> {esc(profile.phone)}</p>
          <p><strong>Role:</strong> {esc(profile.role)}</p>
          <p><strong>Location:</strong> {esc(", ".join(p for p in [profile.city, profile.province_state, profile.country] if p))}</p>
          <p><strong>Score:</strong> {esc(computed_score)} ({esc(computed_tier)})</p>
        </div>
        <div style="background-color: #ecfdf5; padding: 15px; border-radius: 8px; border-left: 4px solid #10b981;">
          <p style="margin: 0; color: #065f46;">
            <strong>Complete application details are attached as a PDF document.</strong>
          </p>
        </div>
        <div style="margin-top: 30px; padding-top: 20px; border-top: 1px solid #e5e7eb; color: #6b7280; font-size: 14px;">
          <p>This email was automatically generated by the {esc(settings.brand_name)} distributor intake system.</p>
          <p>Submitted on: {esc(submitted_at)}</p>
        </div>
      </div>
    """


def build_email_payload(
    profile: ApplicantProfile,
    pdf_bytes: bytes,
    computed_score: Optional[int] = None,
    computed_tier: Optional[str] = None,
    submitted_at: Optional[str] = None,
    from_email: Optional[str] = None,
    to_email: Optional[str] = None
) -> Dict[str, Any]:
    """
    Build the Resend payload for an admin notification.

    Args:
        profile: Submitted profile
        pdf_bytes: Rendered PDF to attach
        computed_score: Stored score
        computed_tier: Stored tier
        submitted_at: ISO-8601 submission timestamp
        from_email: Sender (uses settings if not provided)
        to_email: Recipient (uses settings if not provided)

    Returns:
        Email payload dictionary
    """
    return {
        "from": from_email or settings.from_email,
        "to": [to_email or settings.admin_email],
        "subject": f"New Distributor Application - {profile.company or 'Unknown Company'}",
        "html": render_email_body(profile, computed_score, computed_tier, submitted_at),
        "attachments": [
            {
                "filename": attachment_filename(profile.company),
                "content": base64.b64encode(pdf_bytes).decode("ascii"),
                "content_type": "application/pdf",
            }
        ],
    }


def send_intake_email(
    profile: ApplicantProfile,
    computed_score: Optional[int] = None,
    computed_tier: Optional[str] = None,
    submitted_at: Optional[str] = None,
    client: Optional[ResendClient] = None
) -> EmailResult:
    """
    Email the admin a PDF summary of a submission.

    Never raises: any failure is reported in the returned EmailResult.

    Args:
        profile: Submitted profile
        computed_score: Stored score
        computed_tier: Stored tier
        submitted_at: ISO-8601 submission timestamp
        client: Optional ResendClient instance

    Returns:
        EmailResult
    """
    try:
        if client is None:
            client = ResendClient()

        pdf_bytes = generate_intake_pdf(profile, computed_score, computed_tier, submitted_at)
        payload = build_email_payload(profile, pdf_bytes, computed_score, computed_tier, submitted_at)
        logger.info(f"Sending intake email for {profile.company or 'unknown company'} "
                    f"(PDF {len(pdf_bytes)} bytes)")

        result = client.send(payload)
        return EmailResult(
            success=True,
            message="Distributor application sent successfully to admin",
            email_id=result.get("id"),
        )
    except Exception as e:
        logger.error(f"Email sending error: {e}")
        return EmailResult(success=False, message=str(e) or "Failed to send distributor application email")
