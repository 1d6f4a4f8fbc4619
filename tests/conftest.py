import datetime

import pytest
import pytz


@pytest.fixture
def reftime():
    """Mid-afternoon on 2 May 2024; reports below are issued that morning"""
    return datetime.datetime(2024, 5, 2, 15, 0, tzinfo=pytz.utc)
