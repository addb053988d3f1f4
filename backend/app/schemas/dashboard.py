"""Dashboard summary schema."""

from typing import List

from pydantic import BaseModel

from backend.app.schemas.quotation import QuotationSummary


class DashboardSummary(BaseModel):
    total_quotations: int
    draft_quotations: int
    customers: int
    active_items: int
    recent_quotations: List[QuotationSummary]
