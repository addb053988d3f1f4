from datetime import UTC

from backend.app.core.time import current_year, utc_now


def test_utc_now_is_timezone_aware_utc():
    value = utc_now()
    assert value.tzinfo is UTC


def test_current_year_matches_utc_now():
    assert current_year() == utc_now().year
