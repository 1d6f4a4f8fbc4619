#
# Name: dates.py
# Purpose: Turns the day/hour/minute groups of a report into UTC timestamps.
#          Reports carry only the day of the month, so the month and year are
#          taken from a reference time and corrected across month boundaries.
#
import calendar
import datetime

import pytz

from .errors import DateError

ONE_DAY = datetime.timedelta(days=1)
FORECAST_WINDOW = datetime.timedelta(days=2)
MONTH_BACK = datetime.timedelta(days=25)


def utcnow():
    return datetime.datetime.now(pytz.utc).replace(second=0, microsecond=0)


def valid_day(tms):
    """Checks if day of month is valid"""
    year, month, day = tms[:3]
    if day < 1 or day > 31:
        return False
    if month in [4, 6, 9, 11] and day > 30:
        return False
    if month == 2 and day > (29 if calendar.isleap(year) else 28):
        return False
    return True


def fix_date(tms, reftime, ahead=ONE_DAY, behind=MONTH_BACK):
    """Moves tms (year, month, day, hour, minute, second) into the month that
places it closest to reftime. A time more than 'ahead' after reftime belongs to
the previous month; one more than 'behind' before reftime to the next month.
"""
    now = calendar.timegm(reftime.utctimetuple())
    t = calendar.timegm(tuple(tms))
    if t > now + ahead.total_seconds():
        if tms[1] > 1:
            tms[1] -= 1
        else:
            tms[1] = 12
            tms[0] -= 1
    elif t < now - behind.total_seconds():
        if tms[1] < 12:
            tms[1] += 1
        else:
            tms[1] = 1
            tms[0] += 1


def set_date(day, hour, minute, month=None, year=None, reftime=None, ahead=ONE_DAY):
    """Returns an aware UTC datetime for the given report fields.

When month and year are both given they are used as is; otherwise they come
from reftime (default: now) with fix_date applied. Hour 24 is accepted and
means midnight at the end of the day.
"""
    try:
        mday, hh, mm = int(day), int(hour), int(minute)
    except (TypeError, ValueError):
        raise DateError('Date is not a number: %s %s %s' % (day, hour, minute))

    if mday > 31 or hh > 24 or mm > 59:
        raise DateError('Invalid time: day %d hour %d minute %d' % (mday, hh, mm))

    if reftime is None:
        reftime = utcnow()

    if month is not None and year is not None:
        try:
            tms = [int(year), int(month), mday, 0, 0, 0]
        except ValueError:
            raise DateError('Invalid month/year: %s/%s' % (month, year))
    else:
        tms = [reftime.year, reftime.month, mday, hh, mm, 0]
        fix_date(tms, reftime, ahead=ahead)

    if not 1 <= tms[1] <= 12 or not valid_day(tms):
        raise DateError('Invalid day: %04d-%02d-%02d' % tuple(tms[:3]))

    start = datetime.datetime(tms[0], tms[1], tms[2], tzinfo=pytz.utc)
    return start + datetime.timedelta(hours=hh, minutes=mm)


def format_time(value):
    if value is None:
        return 'cannot be determined'
    return value.strftime('%Y-%m-%d %H:%M UTC')
