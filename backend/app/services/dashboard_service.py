"""Headline counts and recent quotations for the dashboard."""

from sqlalchemy.orm import Session, joinedload

from backend.app.models.catalog_item import CatalogItem
from backend.app.models.customer import Customer
from backend.app.models.quotation import Quotation

RECENT_QUOTATIONS_LIMIT = 5


def get_dashboard_summary(db: Session) -> dict:
    recent = (
        db.query(Quotation)
        .options(joinedload(Quotation.customer))
        .order_by(Quotation.created_at.desc(), Quotation.id.desc())
        .limit(RECENT_QUOTATIONS_LIMIT)
        .all()
    )
    return {
        "total_quotations": db.query(Quotation).count(),
        "draft_quotations": db.query(Quotation).filter(Quotation.status == "DRAFT").count(),
        "customers": db.query(Customer).count(),
        "active_items": db.query(CatalogItem).filter(CatalogItem.is_active.is_(True)).count(),
        "recent_quotations": [
            {
                "id": q.id,
                "quotation_number": q.quotation_number,
                "project_name": q.project_name,
                "customer_name": q.customer.company_name if q.customer else None,
                "status": q.status,
                "total": q.total,
                "created_at": q.created_at,
            }
            for q in recent
        ],
    }
