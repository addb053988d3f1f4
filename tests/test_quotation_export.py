from datetime import datetime
from decimal import Decimal
from io import BytesIO

from openpyxl import load_workbook

from backend.app.models.customer import Customer
from backend.app.models.quotation import Quotation
from backend.app.models.quotation_item import QuotationItem
from backend.app.models.user import User
from backend.app.services.quotation_export import (
    CompanyDetails,
    build_quotation_workbook,
    export_quotation_xlsx,
    quotation_export_filename,
)

COMPANY = CompanyDetails(name="Test Glass Co", address="Dubai", phone="000", email="info@test.ae")


def _quotation(**overrides) -> Quotation:
    data = dict(
        quotation_number="CRY-2025-0007",
        project_name="Marina Tower",
        site_location=None,
        vat_percentage=Decimal("5.00"),
        # Deliberately inconsistent with the items: the exporter must print stored values
        subtotal=Decimal("1000"),
        vat_amount=Decimal("50"),
        total=Decimal("1050"),
        terms="Payment 50% advance",
        created_at=datetime(2025, 3, 9, 10, 0),
    )
    data.update(overrides)
    quotation = Quotation(**data)
    quotation.customer = Customer(company_name="Acme LLC", contact_person="Omar", phone=None, email="omar@acme.ae")
    quotation.items = [
        QuotationItem(
            scope_of_work="Shower glass",
            description="10mm clear",
            quantity=Decimal("2"),
            rate=Decimal("300"),
            vat_rate=Decimal("30"),
            sub_total=Decimal("600"),
            sort_order=0,
        )
    ]
    return quotation


def _rows(ws):
    return {row[0]: row for row in ws.iter_rows(values_only=True) if row[0] is not None}


def test_export_prints_stored_totals():
    ws = build_quotation_workbook(_quotation(), COMPANY).active
    rows = _rows(ws)

    assert rows["Subtotal:"][5] == 1000.0
    assert rows["VAT (5%):"][5] == 50.0
    assert rows["GRAND TOTAL:"][5] == 1050.0
    assert rows[1][1] == "Shower glass\n\n10mm clear"
    assert rows[1][2:] == (2.0, 300.0, 30.0, 600.0)


def test_export_header_and_details():
    ws = build_quotation_workbook(_quotation(), COMPANY).active
    rows = _rows(ws)

    assert ws["A1"].value == "Test Glass Co"
    assert "QUOTATION" in rows
    assert rows["Quotation No:"][2] == "CRY-2025-0007"
    assert rows["Date:"][2] == "09/03/2025"
    assert "Site Location:" not in rows
    values = [cell for row in ws.iter_rows(values_only=True) for cell in row if cell is not None]
    assert "Acme LLC" in values
    assert "omar@acme.ae" in values
    assert "Phone:" not in values


def test_export_optional_sections():
    quotation = _quotation(site_location="Dubai Marina", terms=None, vat_percentage=Decimal("12.50"))
    rows = _rows(build_quotation_workbook(quotation, COMPANY).active)

    assert rows["Site Location:"][2] == "Dubai Marina"
    assert "TERMS & CONDITIONS:" not in rows
    assert "VAT (12.5%):" in rows
    assert rows["Prepared By:"] is not None


def test_export_terms_and_prepared_by():
    quotation = _quotation()
    quotation.created_by = User(email="estimator@example.com", full_name="Rana Estimator", hashed_password="x")
    ws = load_workbook(BytesIO(export_quotation_xlsx(quotation, COMPANY))).active
    rows = _rows(ws)

    assert "TERMS & CONDITIONS:" in rows
    assert rows["Payment 50% advance"] is not None
    assert rows["Rana Estimator"] is not None


def test_export_without_author_uses_system_user():
    rows = _rows(build_quotation_workbook(_quotation(), COMPANY).active)
    assert rows["System User"] is not None


def test_export_filename_replaces_non_alphanumerics():
    quotation = _quotation(project_name="Villa 12 (Palm/Jumeirah)")
    assert quotation_export_filename(quotation) == "Quotation_CRY-2025-0007_Villa_12__Palm_Jumeirah_.xlsx"
