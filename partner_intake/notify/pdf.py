"""PDF summary of a submitted intake."""
import logging
from datetime import datetime
from typing import List, Optional, Union

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from partner_intake.config import settings
from partner_intake.profile.catalog import (
    CHAIN_LABELS,
    COMPLIANCE_LABELS,
    NETWORK_TYPES,
    PRODUCT_CATEGORIES,
    service_title,
)
from partner_intake.profile.models import ApplicantProfile

logger = logging.getLogger(__name__)

MARGIN = 20
LINE_HEIGHT = 7
LABEL_WIDTH = 60
SECTION_SPACING = 6


def _latin1(text: str) -> str:
    # Core PDF fonts are latin-1 only
    return text.encode("latin-1", "replace").decode("latin-1")


class IntakeDocument(FPDF):
    """A4 document with a page-numbered footer."""

    def __init__(self, brand_name: str):
        super().__init__(format="A4")
        self.brand_name = brand_name
        self.set_margins(MARGIN, MARGIN, MARGIN)
        self.set_auto_page_break(auto=True, margin=20)

    def footer(self):
        self.set_y(-15)
        self.set_font("helvetica", "", 8)
        self.set_text_color(128, 128, 128)
        self.cell(0, 10, _latin1(f"Page {self.page_no()} of {{nb}} | Generated by {self.brand_name} System"))
        self.set_text_color(0, 0, 0)

    def header_band(self, subtitle: str):
        self.set_fill_color(31, 41, 55)
        self.rect(0, 0, self.w, 35, style="F")
        self.set_text_color(255, 255, 255)
        self.set_font("helvetica", "B", 18)
        self.text(MARGIN, 20, _latin1(self.brand_name))
        self.set_font("helvetica", "", 12)
        self.text(MARGIN, 28, _latin1(subtitle))
        self.set_text_color(0, 0, 0)
        self.set_y(45)

    def section(self, title: str):
        self.ln(SECTION_SPACING)
        self.set_fill_color(59, 130, 246)
        self.set_text_color(255, 255, 255)
        self.set_font("helvetica", "B", 12)
        self.cell(0, 10, _latin1(f" {title}"), fill=True, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.set_text_color(0, 0, 0)
        self.ln(3)

    def field(self, label: str, value: Union[str, int, float, List[str], None]):
        """Label/value row. Empty values are skipped."""
        if value is None:
            return
        if isinstance(value, list):
            display = ", ".join(str(v) for v in value)
        else:
            display = str(value)
        if not display.strip():
            return

        self.set_font("helvetica", "B", 10)
        self.cell(LABEL_WIDTH, LINE_HEIGHT, _latin1(f"{label}:"))
        self.set_font("helvetica", "", 10)
        self.multi_cell(0, LINE_HEIGHT, _latin1(display), new_x=XPos.LMARGIN, new_y=YPos.NEXT)


def _selected(group, labels) -> List[str]:
    return [label for key, label in labels.items() if getattr(group, key)]


def generate_intake_pdf(
    profile: ApplicantProfile,
    computed_score: Optional[int] = None,
    computed_tier: Optional[str] = None,
    submitted_at: Optional[str] = None,
    brand_name: Optional[str] = None
) -> bytes:
    """
    Render an intake as a PDF document.

    Args:
        profile: Submitted profile
        computed_score: Score stored with the submission
        computed_tier: Tier stored with the submission
        submitted_at: ISO-8601 submission timestamp
        brand_name: Header brand (uses settings if not provided)

    Returns:
        PDF file contents
    """
    doc = IntakeDocument(brand_name or settings.brand_name)
    doc.add_page()
    doc.header_band("Distributor Intake & Qualification")

    doc.set_font("helvetica", "I", 10)
    generated = datetime.now().strftime("%B %d, %Y %I:%M %p")
    doc.cell(0, LINE_HEIGHT, f"Generated: {generated}", new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    doc.section("Contact Information")
    doc.field("Company Name", profile.company)
    doc.field("First Name", profile.first_name)
    doc.field("Last Name", profile.last_name)
    doc.field("Email", profile.email)
    doc.field("Phone", profile.phone)
    doc.field("Website", profile.website)
    doc.field("Role", profile.role)
    doc.field("Country", profile.country)
    doc.field("City", profile.city)
    doc.field("Province/State", profile.province_state)
    doc.field("Postal/Zip Code", profile.postal_zip)

    doc.section("Coverage Area")
    doc.field("Coverage Description", profile.coverage_description)
    doc.field("Coverage Provinces", profile.coverage_provinces)
    doc.field("Coverage States", profile.coverage_states)
    languages = [
        name for name, spoken in [
            ("English", profile.languages.english),
            ("French", profile.languages.french),
            ("Spanish", profile.languages.spanish),
        ] if spoken
    ]
    if profile.languages.other.strip():
        languages.append(profile.languages.other.strip())
    doc.field("Languages", languages)

    doc.section("Network & Business Metrics")
    networks = [
        f"{label}: {getattr(profile.network_counts, key)}"
        for key, label in NETWORK_TYPES.items()
        if getattr(profile.network_counts, key) > 0
    ]
    doc.field("Network Counts", networks)
    doc.field("Monthly Doors Serviced", profile.monthly_doors_serviced)
    doc.field("Decision Makers", profile.decision_makers)
    if profile.avg_monthly_sell_in_cad:
        doc.field("Avg Monthly Sell-In (CAD)", f"${profile.avg_monthly_sell_in_cad:,.0f}")
    doc.field("Deals Last 12 Months", profile.deals_last_12mo)
    chains = _selected(profile.chain_access, CHAIN_LABELS)
    if profile.chain_access.other.strip():
        chains.append(profile.chain_access.other.strip())
    doc.field("Chain Access", chains)

    doc.section("Logistics & Compliance")
    doc.field("Warehouse Sq Ft", f"{profile.logistics.warehouse_sq_ft:,.0f}")
    doc.field("Cold Chain", "Yes" if profile.logistics.cold_chain else "No")
    doc.field("Trucks Owned", profile.logistics.trucks_owned)
    doc.field("Third Party Logistics", "Yes" if profile.logistics.third_party_logistics else "No")
    doc.field("Compliance Certifications", _selected(profile.compliance, COMPLIANCE_LABELS))

    doc.section("Product Categories & Services")
    doc.field("Product Categories", _selected(profile.categories, PRODUCT_CATEGORIES))
    doc.field("Categories Other", profile.categories_other)
    doc.field("Exclusivity Interest", profile.exclusivity_interest)
    doc.field("MOQ Capacity Units", profile.moq_capacity_units)
    services = [
        service_title(key) for key, wanted in profile.requested_services.model_dump().items() if wanted
    ]
    doc.field("Requested Services", services)
    doc.field("Service Notes", profile.service_notes)

    doc.section("References & Additional Information")
    doc.field("LinkedIn", profile.linkedin)
    doc.field("Reference 1", profile.reference1)
    doc.field("Reference 2", profile.reference2)
    doc.field("How did you hear about us?", profile.heard_from)
    doc.field("Computed Score", computed_score)
    doc.field("Computed Tier", computed_tier)
    doc.field("Submitted At", submitted_at)

    logger.debug(f"Rendered intake PDF with {doc.page_no()} pages")
    return bytes(doc.output())
