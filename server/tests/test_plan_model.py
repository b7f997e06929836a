# server/tests/test_plan_model.py
from datetime import date, datetime

import pytest

from tripboard.model import Member, Destination, Plan, DestinationName, Vehicle


@pytest.fixture
def trip(app):
    jeju = Destination(DestinationName.JEJU)
    jeju.id = "dest-jeju"
    return Plan(jeju, datetime(2024, 6, 1), datetime(2024, 6, 3), Vehicle.CAR)


def _member(member_id, login_id):
    member = Member(login_id=login_id, name=login_id.title())
    member.id = member_id
    return member


def test_duration_counts_inclusive_calendar_days(trip):
    assert trip.duration == 3


def test_duration_ignores_time_of_day(app):
    destination = Destination(DestinationName.BUSAN)
    destination.id = "dest-busan"
    plan = Plan(destination, datetime(2024, 6, 1, 22, 0), datetime(2024, 6, 2, 6, 0), Vehicle.WALK)
    assert plan.duration == 2


def test_single_day_plan_lasts_one_day(app):
    destination = Destination(DestinationName.SEOUL)
    destination.id = "dest-seoul"
    plan = Plan(destination, datetime(2024, 6, 1, 9), datetime(2024, 6, 1, 18), Vehicle.BICYCLE)
    assert plan.duration == 1
    assert plan.get_nth_day_date(1) == date(2024, 6, 1)


def test_nth_day_maps_to_calendar_date(trip):
    assert trip.get_nth_day_date(1) == date(2024, 6, 1)
    assert trip.get_nth_day_date(2) == date(2024, 6, 2)
    assert trip.get_nth_day_date(3) == date(2024, 6, 3)


def test_contains_is_inclusive_at_both_bounds(trip):
    assert trip.contains(datetime(2024, 6, 1))
    assert trip.contains(datetime(2024, 6, 2, 12))
    assert trip.contains(datetime(2024, 6, 3))
    assert not trip.contains(datetime(2024, 5, 31, 23, 59))
    assert not trip.contains(datetime(2024, 6, 3, 0, 1))


def test_add_plan_member_is_idempotent(trip):
    alice = _member("m-alice", "alice")

    first = trip.add_plan_member(alice)
    second = trip.add_plan_member(alice)

    assert first is second
    assert len(trip.plan_members) == 1
    assert trip.members == [alice]


def test_has_member(trip):
    alice = _member("m-alice", "alice")
    bob = _member("m-bob", "bob")
    trip.add_plan_member(alice)

    assert trip.has_member(alice)
    assert not trip.has_member(bob)


def test_new_plan_is_not_deleted(trip):
    assert not trip.is_deleted
    trip.mark_as_deleted()
    assert trip.is_deleted
