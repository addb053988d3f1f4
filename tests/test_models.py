from decimal import Decimal

from backend.app.db.types import ExactDecimal
from backend.app.models.quotation import Quotation
from backend.app.models.quotation_item import QuotationItem
from backend.app.models.setting import Setting
from backend.app.models.user import User


def test_user_model_has_columns():
    column_names = {column.name for column in User.__table__.columns}
    assert {"id", "email", "full_name", "hashed_password", "is_active", "created_at"} <= column_names


def test_quotation_number_is_unique():
    unique_columns = [
        {column.name for column in constraint.columns}
        for constraint in Quotation.__table__.constraints
        if constraint.__class__.__name__ == "UniqueConstraint"
    ]
    assert {"quotation_number"} in unique_columns


def test_amount_columns_are_stored_exactly():
    for table, name in [
        (Quotation.__table__, "subtotal"),
        (Quotation.__table__, "vat_amount"),
        (Quotation.__table__, "total"),
        (Quotation.__table__, "vat_percentage"),
        (QuotationItem.__table__, "sub_total"),
        (QuotationItem.__table__, "vat_rate"),
        (QuotationItem.__table__, "quantity"),
        (QuotationItem.__table__, "rate"),
    ]:
        assert isinstance(table.columns[name].type, ExactDecimal)


def test_exact_decimal_round_trips_every_digit():
    column_type = ExactDecimal(64)
    value = Decimal("121932640603689.70927894")
    stored = column_type.process_bind_param(value, dialect=None)
    assert stored == "121932640603689.70927894"
    assert column_type.process_result_value(stored, dialect=None) == value
    assert column_type.process_bind_param(Decimal("1E+1"), dialect=None) == "10"
    assert column_type.process_bind_param(None, dialect=None) is None


def test_setting_is_keyed_by_name():
    assert [column.name for column in Setting.__table__.primary_key.columns] == ["key"]
