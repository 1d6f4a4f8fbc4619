import datetime

import pytest
import pytz

from wxdecoder import dates
from wxdecoder.errors import DateError


def utc(*args):
    return datetime.datetime(*args, tzinfo=pytz.utc)


def test_same_day(reftime):
    assert dates.set_date('02', '14', '51', reftime=reftime) == utc(2024, 5, 2, 14, 51)


def test_day_ahead_of_reference_is_previous_month(reftime):
    assert dates.set_date('30', '12', '00', reftime=reftime) == utc(2024, 4, 30, 12, 0)


def test_day_far_behind_reference_is_next_month():
    reftime = utc(2024, 12, 31, 23, 0)
    assert dates.set_date('01', '00', '10', reftime=reftime) == utc(2025, 1, 1, 0, 10)


def test_previous_month_crosses_year():
    reftime = utc(2025, 1, 1, 0, 30)
    assert dates.set_date('31', '23', '55', reftime=reftime) == utc(2024, 12, 31, 23, 55)


def test_hour_24_is_midnight(reftime):
    assert dates.set_date('02', '24', '00', reftime=reftime) == utc(2024, 5, 3, 0, 0)


def test_forecast_window_allows_later_days(reftime):
    # one day ahead is too far for an observation but not for a forecast
    assert dates.set_date('04', '00', '00', reftime=reftime) == utc(2024, 4, 4, 0, 0)
    assert dates.set_date('04', '00', '00', reftime=reftime,
                          ahead=dates.FORECAST_WINDOW) == utc(2024, 5, 4, 0, 0)


def test_explicit_month_and_year(reftime):
    assert dates.set_date('02', '14', '51', '01', '2023', reftime=reftime) == utc(2023, 1, 2, 14, 51)


@pytest.mark.parametrize('day, hour, minute', [
    ('32', '00', '00'),
    ('02', '25', '00'),
    ('02', '10', '60'),
    ('AB', '10', '00'),
    (None, '10', '00'),
])
def test_invalid_fields(reftime, day, hour, minute):
    with pytest.raises(DateError):
        dates.set_date(day, hour, minute, reftime=reftime)


def test_day_not_in_month():
    with pytest.raises(DateError):
        dates.set_date('30', '00', '00', '02', '2024')


def test_valid_day():
    assert dates.valid_day((2024, 2, 29))
    assert not dates.valid_day((2023, 2, 29))
    assert not dates.valid_day((2024, 6, 31))


def test_format_time():
    assert dates.format_time(None) == 'cannot be determined'
    assert dates.format_time(utc(2024, 5, 2, 14, 51)) == '2024-05-02 14:51 UTC'


def test_utcnow_is_aware():
    now = dates.utcnow()
    assert now.tzinfo is not None
    assert now.second == 0
