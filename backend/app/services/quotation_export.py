"""Render a quotation as an xlsx workbook.

The exporter formats what is stored on the quotation and never recomputes
totals. Layout: company header, title, quotation and customer details, the
line-item table, totals, terms and a signature block, across columns A to F.
"""

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from io import BytesIO
from typing import Optional

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.worksheet.worksheet import Worksheet

from backend.app.core.settings import get_settings
from backend.app.models.quotation import Quotation

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

TABLE_HEADERS = ["S.No", "Scope of Work", "Quantity", "Rate", "VAT Rate", "Sub-Total"]
COLUMN_WIDTHS = {"A": 8, "B": 50, "C": 12, "D": 15, "E": 15, "F": 18}

THIN = Side(style="thin")
BOX_BORDER = Border(left=THIN, right=THIN, top=THIN, bottom=THIN)
BOTTOM_BORDER = Border(bottom=THIN)
TITLE_FILL = PatternFill(fill_type="solid", fgColor="E7E6E6")
HEADER_FILL = PatternFill(fill_type="solid", fgColor="4472C4")
TOTAL_FILL = PatternFill(fill_type="solid", fgColor="F2F2F2")


@dataclass(frozen=True)
class CompanyDetails:
    name: str
    address: str
    phone: str
    email: str
    currency: str = "AED"

    @classmethod
    def from_settings(cls) -> "CompanyDetails":
        settings = get_settings()
        return cls(
            name=settings.company_name,
            address=settings.company_address,
            phone=settings.company_phone,
            email=settings.company_email,
            currency=settings.currency,
        )


def quotation_export_filename(quotation: Quotation) -> str:
    project = re.sub(r"[^a-zA-Z0-9]", "_", quotation.project_name or "")
    return f"Quotation_{quotation.quotation_number}_{project}.xlsx"


def _amount(value) -> float:
    return float(Decimal(value if value is not None else 0))


def _format_percentage(value) -> str:
    pct = Decimal(value if value is not None else 0).normalize()
    # normalize() turns 10 into 1E+1
    return f"{pct:f}"


def _label(ws: Worksheet, ref: str, text: str) -> None:
    ws[ref] = text
    ws[ref].font = Font(bold=True)


def _merged(ws: Worksheet, cell_range: str, value) -> None:
    ws.merge_cells(cell_range)
    ws[cell_range.split(":")[0]] = value


def _setup_sheet(ws: Worksheet) -> None:
    ws.title = "Quotation"
    ws.page_setup.paperSize = ws.PAPERSIZE_A4
    ws.page_setup.orientation = ws.ORIENTATION_PORTRAIT
    ws.sheet_properties.pageSetUpPr.fitToPage = True
    ws.page_setup.fitToWidth = 1
    ws.page_setup.fitToHeight = 0
    for column, width in COLUMN_WIDTHS.items():
        ws.column_dimensions[column].width = width


def _write_header(ws: Worksheet, row: int, company: CompanyDetails) -> int:
    _merged(ws, f"A{row}:F{row}", company.name)
    ws[f"A{row}"].font = Font(size=20, bold=True, color="002060")
    ws[f"A{row}"].alignment = Alignment(horizontal="center", vertical="center")
    ws.row_dimensions[row].height = 30
    row += 1

    _merged(ws, f"A{row}:F{row}", f"{company.address} | Phone: {company.phone} | Email: {company.email}")
    ws[f"A{row}"].font = Font(size=10, color="404040")
    ws[f"A{row}"].alignment = Alignment(horizontal="center", vertical="center")
    row += 2

    _merged(ws, f"A{row}:F{row}", "QUOTATION")
    ws[f"A{row}"].font = Font(size=16, bold=True)
    ws[f"A{row}"].alignment = Alignment(horizontal="center", vertical="center")
    ws[f"A{row}"].fill = TITLE_FILL
    ws.row_dimensions[row].height = 25
    return row + 2


def _write_details(ws: Worksheet, row: int, quotation: Quotation) -> int:
    details = [
        ("Quotation No:", quotation.quotation_number),
        ("Date:", quotation.created_at.strftime("%d/%m/%Y") if quotation.created_at else ""),
        ("Project:", quotation.project_name),
    ]
    if quotation.site_location:
        details.append(("Site Location:", quotation.site_location))

    customer_row = row
    for label, value in details:
        ws.merge_cells(f"A{row}:B{row}")
        _label(ws, f"A{row}", label)
        _merged(ws, f"C{row}:D{row}", value)
        row += 1

    customer = quotation.customer
    customer_lines = [("Customer:", customer.company_name if customer else "")]
    if customer is not None:
        for label, value in (
            ("Attn:", customer.contact_person),
            ("Phone:", customer.phone),
            ("Email:", customer.email),
        ):
            if value:
                customer_lines.append((label, value))
    for label, value in customer_lines:
        _label(ws, f"E{customer_row}", label)
        ws[f"F{customer_row}"] = value
        customer_row += 1

    return max(row, customer_row) + 2


def _write_items(ws: Worksheet, row: int, quotation: Quotation, currency_format: str) -> int:
    for column, header in enumerate(TABLE_HEADERS, start=1):
        cell = ws.cell(row=row, column=column, value=header)
        cell.font = Font(bold=True, color="FFFFFF")
        cell.fill = HEADER_FILL
        cell.alignment = Alignment(horizontal="center", vertical="center")
        cell.border = BOX_BORDER
    ws.row_dimensions[row].height = 20
    row += 1

    for index, item in enumerate(quotation.items, start=1):
        scope = item.scope_of_work
        if item.description:
            scope = f"{scope}\n\n{item.description}"

        values = [index, scope, _amount(item.quantity), _amount(item.rate), _amount(item.vat_rate), _amount(item.sub_total)]
        for column, value in enumerate(values, start=1):
            cell = ws.cell(row=row, column=column, value=value)
            cell.border = BOX_BORDER
            if column == 2:
                cell.alignment = Alignment(horizontal="left", vertical="top", wrap_text=True)
            elif column in (1, 3):
                cell.alignment = Alignment(horizontal="center", vertical="top")
            else:
                cell.number_format = currency_format
                cell.alignment = Alignment(horizontal="right", vertical="top")
        ws.row_dimensions[row].height = max(30, math.ceil(len(scope) / 80) * 15)
        row += 1

    return row + 1


def _write_totals(ws: Worksheet, row: int, quotation: Quotation, currency_format: str) -> int:
    lines = [
        ("Subtotal:", quotation.subtotal, False),
        (f"VAT ({_format_percentage(quotation.vat_percentage)}%):", quotation.vat_amount, False),
        ("GRAND TOTAL:", quotation.total, True),
    ]
    for label, value, grand in lines:
        _merged(ws, f"A{row}:E{row}", label)
        label_cell = ws[f"A{row}"]
        amount_cell = ws[f"F{row}"]
        amount_cell.value = _amount(value)
        amount_cell.number_format = currency_format
        for cell in (label_cell, amount_cell):
            cell.alignment = Alignment(horizontal="right")
            if grand:
                cell.font = Font(bold=True, size=14, color="FFFFFF")
                cell.fill = HEADER_FILL
            else:
                cell.font = Font(bold=True, size=12)
        if not grand:
            amount_cell.fill = TOTAL_FILL
        row += 1
    return row + 2


def _write_terms(ws: Worksheet, row: int, terms: Optional[str]) -> int:
    if not terms:
        return row
    _merged(ws, f"A{row}:F{row}", "TERMS & CONDITIONS:")
    ws[f"A{row}"].font = Font(bold=True, size=12)
    ws[f"A{row}"].fill = TITLE_FILL
    row += 1

    _merged(ws, f"A{row}:F{row + 5}", terms)
    ws[f"A{row}"].alignment = Alignment(horizontal="left", vertical="top", wrap_text=True)
    ws[f"A{row}"].font = Font(size=10)
    return row + 6


def _write_signatures(ws: Worksheet, row: int, prepared_by: str) -> int:
    ws.merge_cells(f"A{row}:C{row}")
    _label(ws, f"A{row}", "Prepared By:")
    ws.merge_cells(f"D{row}:F{row}")
    _label(ws, f"D{row}", "Authorized Signature:")
    row += 1

    _merged(ws, f"A{row}:C{row + 2}", prepared_by)
    ws[f"A{row}"].alignment = Alignment(horizontal="left", vertical="bottom")
    ws[f"A{row}"].border = BOTTOM_BORDER
    ws.merge_cells(f"D{row}:F{row + 2}")
    ws[f"D{row}"].border = BOTTOM_BORDER
    return row + 3


def build_quotation_workbook(quotation: Quotation, company: Optional[CompanyDetails] = None) -> Workbook:
    company = company or CompanyDetails.from_settings()
    currency_format = f'#,##0.00 "{company.currency}"'

    wb = Workbook()
    ws = wb.active
    _setup_sheet(ws)

    row = _write_header(ws, 1, company)
    row = _write_details(ws, row, quotation)
    row = _write_items(ws, row, quotation, currency_format)
    row = _write_totals(ws, row, quotation, currency_format)
    row = _write_terms(ws, row, quotation.terms)

    created_by = quotation.created_by
    prepared_by = (created_by.full_name or created_by.email) if created_by else "System User"
    _write_signatures(ws, row + 2, prepared_by)
    return wb


def export_quotation_xlsx(quotation: Quotation, company: Optional[CompanyDetails] = None) -> bytes:
    buffer = BytesIO()
    build_quotation_workbook(quotation, company).save(buffer)
    return buffer.getvalue()
