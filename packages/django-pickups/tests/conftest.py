"""Pytest configuration for django-pickups tests."""

from datetime import date

import pytest

# A Wednesday
TODAY = date(2024, 3, 13)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def region(db):
    """Create a region with its own admin address."""
    from django_pickups.models import Region

    return Region.objects.create(name="Boulder", admin_email="boulder-admin@example.org")


@pytest.fixture
def other_region(db):
    """Create a region relying on PICKUPS_ADMIN_EMAILS."""
    from django_pickups.models import Region

    return Region.objects.create(name="Denver")


@pytest.fixture
def make_location(region):
    """Factory for locations in the default region."""
    from django_pickups.models import Location, LocationType

    def _make(name, location_type=LocationType.DONOR, in_region=None):
        return Location.objects.create(
            name=name,
            location_type=location_type,
            region=in_region or region,
        )

    return _make


@pytest.fixture
def make_chain(region):
    """Factory for schedule chains.

    Stops are given as (kind, location) pairs where kind is "D" for a
    pickup and "R" for a drop-off; location may be None.
    """
    from django_pickups.models import Frequency, ScheduleChain, ScheduleStop

    def _make(stops, frequency=Frequency.DAILY, volunteers=(), **kwargs):
        kwargs.setdefault("region", region)
        chain = ScheduleChain.objects.create(frequency=frequency, **kwargs)
        for position, (kind, location) in enumerate(stops):
            ScheduleStop.objects.create(
                schedule_chain=chain,
                location=location,
                is_pickup_stop=(kind == "D"),
                position=position,
            )
        for volunteer in volunteers:
            volunteer.schedule_chains.add(chain)
        return chain

    return _make


@pytest.fixture
def volunteer(db):
    """Create a volunteer with default preferences."""
    from django_pickups.models import Volunteer

    return Volunteer.objects.create(name="Alice", email="alice@example.org")


@pytest.fixture
def other_volunteer(db):
    from django_pickups.models import Volunteer

    return Volunteer.objects.create(name="Bob", email="bob@example.org")


@pytest.fixture
def make_log(region, make_location):
    """Factory for logs with optional volunteers."""
    from django_pickups.models import Log

    def _make(when, volunteers=(), donor=None, **kwargs):
        kwargs.setdefault("region", region)
        log = Log.objects.create(
            donor=donor or make_location("Bakery"),
            when=when,
            **kwargs,
        )
        log.volunteers.set(volunteers)
        return log

    return _make
