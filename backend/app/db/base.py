from backend.app.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all in tests
from backend.app.models.user import User  # noqa: F401
from backend.app.models.customer import Customer  # noqa: F401
from backend.app.models.catalog_item import CatalogItem  # noqa: F401
from backend.app.models.quotation import Quotation  # noqa: F401
from backend.app.models.quotation_item import QuotationItem  # noqa: F401
from backend.app.models.setting import Setting  # noqa: F401
