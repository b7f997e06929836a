# server/tests/test_place_service.py
from datetime import datetime

import pytest

from tripboard import db
from tripboard.common.error_messages import ErrorMessage
from tripboard.common.exceptions import NotFoundError, ConflictError, ForbiddenError, BadRequestError
from tripboard.model import Place
from tripboard.schema import PlaceCreateRequest, PlaceShareRequest, PlaceVisitTimeUpdateRequest


def _share(place_service, plan, place, member):
    return place_service.share_place(PlaceShareRequest(plan_id=plan.id, place_id=place.id), member)


def _visit(started_at, ended_at):
    return PlaceVisitTimeUpdateRequest(started_at=started_at, ended_at=ended_at)


class TestCreatePlace:
    def test_proposal_starts_private(self, propose, plan, members, category):
        info = propose(plan, members["alice"])

        assert info.plan_id == plan.id
        assert info.member_id == members["alice"].id
        assert info.category_name == "cafe"

        stored = db.session.get(Place, info.id)
        assert stored.activated_at is None
        assert stored.started_at is None

    def test_names_are_trimmed(self, propose, plan, members):
        info = propose(plan, members["alice"], place_name="  Cafe  ", address=" 123 Main ")
        assert info.place_name == "Cafe"
        assert info.address == "123 Main"

    def test_duplicate_by_same_member_conflicts(self, propose, plan, members):
        propose(plan, members["alice"])

        with pytest.raises(ConflictError) as exc:
            propose(plan, members["alice"])
        assert exc.value.error is ErrorMessage.PLACE_CONFLICT
        assert exc.value.status_code == 409

    def test_same_place_by_another_member_is_allowed(self, propose, plan, members):
        first = propose(plan, members["alice"])
        second = propose(plan, members["bob"])
        assert first.id != second.id

    def test_deleted_proposal_can_be_proposed_again(self, place_service, propose, plan, members):
        first = propose(plan, members["alice"])
        place_service.delete_place(plan.id, first.id, members["alice"])

        again = propose(plan, members["alice"])
        assert again.id != first.id

    def test_non_member_cannot_propose(self, propose, plan, members):
        with pytest.raises(NotFoundError) as exc:
            propose(plan, members["carol"])
        assert exc.value.error is ErrorMessage.PLAN_MEMBER_NOT_FOUND

    def test_unknown_category(self, place_service, plan, members):
        request = PlaceCreateRequest(place_name="Cafe", address="123 Main", category_id="nope")
        with pytest.raises(NotFoundError) as exc:
            place_service.create_place(plan.id, members["alice"], request)
        assert exc.value.error is ErrorMessage.CATEGORY_NOT_FOUND

    def test_unknown_plan(self, place_service, members, category):
        request = PlaceCreateRequest(place_name="Cafe", address="123 Main", category_id=category.id)
        with pytest.raises(NotFoundError) as exc:
            place_service.create_place("nope", members["alice"], request)
        assert exc.value.error is ErrorMessage.PLAN_NOT_FOUND


class TestVisibility:
    def test_creator_reads_private_place(self, place_service, propose, plan, members):
        info = propose(plan, members["alice"])

        place = place_service.get_place(plan.id, info.id, members["alice"])
        assert place.shared is False
        assert place.member_name == "Alice"

    def test_other_member_cannot_read_private_place(self, place_service, propose, plan, members):
        info = propose(plan, members["alice"])

        with pytest.raises(ForbiddenError) as exc:
            place_service.get_place(plan.id, info.id, members["bob"])
        assert exc.value.error is ErrorMessage.FORBIDDEN_ACCESS

    def test_other_member_reads_shared_place(self, place_service, propose, plan, members):
        info = propose(plan, members["alice"])
        _share(place_service, plan, info, members["alice"])

        place = place_service.get_place(plan.id, info.id, members["bob"])
        assert place.shared is True

    def test_non_member_gets_not_found(self, place_service, propose, plan, members):
        info = propose(plan, members["alice"])
        with pytest.raises(NotFoundError):
            place_service.get_place(plan.id, info.id, members["carol"])

    def test_place_is_scoped_to_its_plan(self, place_service, propose, make_plan, members):
        first = make_plan()
        second = make_plan()
        info = propose(first, members["alice"])

        with pytest.raises(NotFoundError) as exc:
            place_service.get_place(second.id, info.id, members["alice"])
        assert exc.value.error is ErrorMessage.PLACE_NOT_FOUND

    def test_private_listing_is_per_member(self, place_service, propose, plan, members):
        mine = propose(plan, members["alice"], place_name="Cafe")
        shared = propose(plan, members["alice"], place_name="Beach")
        propose(plan, members["bob"], place_name="Museum")
        _share(place_service, plan, shared, members["alice"])

        listed = place_service.get_all_places(plan.id, members["alice"])
        assert [p.id for p in listed] == [mine.id]

    def test_shared_listing(self, place_service, propose, plan, members):
        propose(plan, members["alice"], place_name="Cafe")
        beach = propose(plan, members["bob"], place_name="Beach")
        _share(place_service, plan, beach, members["bob"])

        listed = place_service.get_shared_places(plan.id, members["alice"])
        assert [p.id for p in listed] == [beach.id]
        assert listed[0].started_at == plan.started_at
        assert listed[0].ended_at == plan.ended_at


class TestSharedPlacesByDay:
    @pytest.fixture
    def itinerary(self, place_service, propose, plan, members):
        alice = members["alice"]
        places = {}
        windows = {
            "Breakfast": (datetime(2024, 6, 1, 8), datetime(2024, 6, 1, 9)),
            "Hike": (datetime(2024, 6, 2, 10), datetime(2024, 6, 2, 15)),
            "Late show": (datetime(2024, 6, 1, 22), datetime(2024, 6, 2, 1)),
        }
        for name, (start, end) in windows.items():
            info = propose(plan, alice, place_name=name)
            _share(place_service, plan, info, alice)
            place_service.update_visit_time(plan.id, info.id, alice, _visit(start, end))
            places[name] = info.id
        return places

    def test_day_filter_uses_overlap(self, place_service, plan, members, itinerary):
        day_one = place_service.get_shared_places_by_day(plan.id, 1, members["bob"])
        day_two = place_service.get_shared_places_by_day(plan.id, 2, members["bob"])
        day_three = place_service.get_shared_places_by_day(plan.id, 3, members["bob"])

        assert {p.id for p in day_one} == {itinerary["Breakfast"], itinerary["Late show"]}
        assert {p.id for p in day_two} == {itinerary["Hike"], itinerary["Late show"]}
        assert day_three == []

    @pytest.mark.parametrize("day", [0, -1, 4])
    def test_day_out_of_duration(self, place_service, plan, members, day):
        with pytest.raises(BadRequestError) as exc:
            place_service.get_shared_places_by_day(plan.id, day, members["alice"])
        assert exc.value.error is ErrorMessage.BAD_REQUEST_DAY_NOT_IN_DURATION

    def test_last_day_is_valid(self, place_service, plan, members):
        assert place_service.get_shared_places_by_day(plan.id, plan.duration, members["alice"]) == []

    def test_window_ending_at_midnight_stays_on_its_day(self, place_service, propose, plan, members):
        alice = members["alice"]
        info = propose(plan, alice, place_name="Night market")
        _share(place_service, plan, info, alice)
        place_service.update_visit_time(
            plan.id, info.id, alice, _visit(datetime(2024, 6, 1, 22), datetime(2024, 6, 2))
        )

        day_one = place_service.get_shared_places_by_day(plan.id, 1, alice)
        day_two = place_service.get_shared_places_by_day(plan.id, 2, alice)

        assert [p.id for p in day_one] == [info.id]
        assert day_two == []

    def test_default_window_skips_day_it_ends_on(self, place_service, propose, plan, members):
        # Sharing spans 2024-06-01 00:00 .. 2024-06-03 00:00
        alice = members["alice"]
        info = propose(plan, alice)
        _share(place_service, plan, info, alice)

        assert [p.id for p in place_service.get_shared_places_by_day(plan.id, 1, alice)] == [info.id]
        assert [p.id for p in place_service.get_shared_places_by_day(plan.id, 2, alice)] == [info.id]
        assert place_service.get_shared_places_by_day(plan.id, 3, alice) == []


class TestDeletePlace:
    def test_soft_delete_keeps_row(self, place_service, propose, plan, members):
        info = propose(plan, members["alice"])
        place_service.delete_place(plan.id, info.id, members["alice"])

        assert db.session.get(Place, info.id).deleted_at is not None
        with pytest.raises(NotFoundError) as exc:
            place_service.get_place(plan.id, info.id, members["alice"])
        assert exc.value.error is ErrorMessage.PLACE_NOT_FOUND

    def test_other_member_cannot_delete_private_place(self, place_service, propose, plan, members):
        info = propose(plan, members["alice"])
        with pytest.raises(ForbiddenError):
            place_service.delete_place(plan.id, info.id, members["bob"])
        assert db.session.get(Place, info.id).deleted_at is None

    def test_any_member_can_delete_shared_place(self, place_service, propose, plan, members):
        info = propose(plan, members["alice"])
        _share(place_service, plan, info, members["alice"])

        place_service.delete_place(plan.id, info.id, members["bob"])
        assert place_service.get_shared_places(plan.id, members["alice"]) == []


class TestUpdateVisitTime:
    @pytest.fixture
    def shared(self, place_service, propose, plan, members):
        info = propose(plan, members["alice"])
        _share(place_service, plan, info, members["alice"])
        return info

    def test_narrow_window(self, place_service, plan, members, shared):
        response = place_service.update_visit_time(
            plan.id, shared.id, members["bob"],
            _visit(datetime(2024, 6, 2, 10), datetime(2024, 6, 2, 12))
        )
        assert response.started_at == datetime(2024, 6, 2, 10)
        assert response.ended_at == datetime(2024, 6, 2, 12)

    def test_window_may_touch_plan_bounds(self, place_service, plan, members, shared):
        response = place_service.update_visit_time(
            plan.id, shared.id, members["alice"], _visit(plan.started_at, plan.ended_at)
        )
        assert response.started_at == plan.started_at

    def test_private_place_rejected_first(self, place_service, propose, plan, members):
        info = propose(plan, members["alice"], place_name="Beach")
        # Out-of-range window still reports the inactive place
        with pytest.raises(BadRequestError) as exc:
            place_service.update_visit_time(
                plan.id, info.id, members["alice"],
                _visit(datetime(2030, 1, 1), datetime(2029, 1, 1))
            )
        assert exc.value.error is ErrorMessage.BAD_REQUEST_PLACE_NOT_ACTIVE

    @pytest.mark.parametrize("start,end", [
        (datetime(2024, 5, 31, 23), datetime(2024, 6, 1, 10)),
        (datetime(2024, 6, 2), datetime(2024, 6, 3, 0, 1)),
    ])
    def test_outside_plan(self, place_service, plan, members, shared, start, end):
        with pytest.raises(BadRequestError) as exc:
            place_service.update_visit_time(plan.id, shared.id, members["alice"], _visit(start, end))
        assert exc.value.error is ErrorMessage.BAD_REQUEST_PLACE_VISIT_TIME

    @pytest.mark.parametrize("start,end", [
        (datetime(2024, 6, 2, 12), datetime(2024, 6, 2, 10)),
        (datetime(2024, 6, 2, 12), datetime(2024, 6, 2, 12)),
    ])
    def test_start_must_precede_end(self, place_service, plan, members, shared, start, end):
        with pytest.raises(BadRequestError) as exc:
            place_service.update_visit_time(plan.id, shared.id, members["alice"], _visit(start, end))
        assert exc.value.error is ErrorMessage.BAD_REQUEST_PLACE_VISIT_START_TIME

    def test_failed_update_leaves_window(self, place_service, plan, members, shared):
        with pytest.raises(BadRequestError):
            place_service.update_visit_time(
                plan.id, shared.id, members["alice"],
                _visit(datetime(2024, 6, 2, 12), datetime(2024, 6, 2, 10))
            )
        stored = db.session.get(Place, shared.id)
        assert stored.started_at == plan.started_at
        assert stored.ended_at == plan.ended_at
