from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from servertime.main import create_app
from servertime.utils import timefmt


@pytest.fixture
def client():
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def frozen_clock(monkeypatch):
    """Pin the clock to 2016-09-23T11:39:00+01:00."""
    moment = datetime(2016, 9, 23, 11, 39, tzinfo=timezone(timedelta(hours=1)))
    monkeypatch.setattr(timefmt, "now", lambda: moment)
    return moment
