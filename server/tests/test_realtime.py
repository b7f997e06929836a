# server/tests/test_realtime.py
import pytest

from tripboard.core.di_container import DIContainer
from tripboard.realtime import PlanShareHub, PlaceShareHandler


class Inbox:
    """Sink that records every event it receives."""

    def __init__(self):
        self.events = []

    def __call__(self, event):
        self.events.append(event)


def _dead_sink(event):
    raise ConnectionError("socket closed")


class TestPlanShareHub:
    def test_broadcast_reaches_only_the_room(self):
        hub = PlanShareHub()
        alice, bob, outsider = Inbox(), Inbox(), Inbox()
        hub.register("plan-1", "alice", alice)
        hub.register("plan-1", "bob", bob)
        hub.register("plan-2", "carol", outsider)

        delivered = hub.broadcast("plan-1", {"type": "ping"})

        assert delivered == 2
        assert alice.events == [{"type": "ping"}]
        assert bob.events == [{"type": "ping"}]
        assert outsider.events == []

    def test_send_to_member_in_one_plan(self):
        hub = PlanShareHub()
        in_plan_1, in_plan_2 = Inbox(), Inbox()
        hub.register("plan-1", "alice", in_plan_1)
        hub.register("plan-2", "alice", in_plan_2)

        assert hub.send_to_member("alice", {"type": "x"}, plan_id="plan-1") == 1
        assert in_plan_1.events == [{"type": "x"}]
        assert in_plan_2.events == []

    def test_send_to_member_without_plan_reaches_every_session(self):
        hub = PlanShareHub()
        in_plan_1, in_plan_2, bob = Inbox(), Inbox(), Inbox()
        hub.register("plan-1", "alice", in_plan_1)
        hub.register("plan-2", "alice", in_plan_2)
        hub.register("plan-1", "bob", bob)

        assert hub.send_to_member("alice", {"type": "x"}) == 2
        assert bob.events == []

    def test_dead_sessions_are_dropped(self):
        hub = PlanShareHub()
        alive = Inbox()
        hub.register("plan-1", "alice", alive)
        hub.register("plan-1", "bob", _dead_sink)

        assert hub.broadcast("plan-1", {"type": "ping"}) == 1
        assert hub.room_size("plan-1") == 1

    def test_reconnected_session_survives_dead_one(self):
        hub = PlanShareHub()
        fresh = Inbox()

        def reconnect_then_fail(event):
            # Member reconnects before the old socket reports the failure
            hub.register("plan-1", "alice", fresh)
            raise ConnectionError("socket closed")

        hub.register("plan-1", "alice", reconnect_then_fail)

        assert hub.broadcast("plan-1", {"type": "ping"}) == 0
        assert hub.room_size("plan-1") == 1
        assert hub.send_to_member("alice", {"type": "pong"}, plan_id="plan-1") == 1
        assert fresh.events == [{"type": "pong"}]

    def test_unregister_with_stale_sink_keeps_current(self):
        hub = PlanShareHub()
        old, current = Inbox(), Inbox()
        hub.register("plan-1", "alice", old)
        hub.register("plan-1", "alice", current)

        hub.unregister("plan-1", "alice", old)

        assert hub.room_size("plan-1") == 1

    def test_unregister_removes_empty_room(self):
        hub = PlanShareHub()
        hub.register("plan-1", "alice", Inbox())
        hub.unregister("plan-1", "alice")
        hub.unregister("plan-1", "alice")

        assert hub.room_size("plan-1") == 0
        assert hub.broadcast("plan-1", {"type": "ping"}) == 0


class TestPlaceShareHandler:
    @pytest.fixture
    def hub(self):
        return PlanShareHub()

    @pytest.fixture
    def handler(self, place_service, hub):
        return PlaceShareHandler(place_service, hub)

    @pytest.fixture
    def sessions(self, hub, plan, members):
        inboxes = {name: Inbox() for name in ("alice", "bob")}
        for name, inbox in inboxes.items():
            hub.register(plan.id, members[name].id, inbox)
        return inboxes

    def test_container_builds_handler(self, app):
        handler = DIContainer.get_instance().resolve(PlaceShareHandler.__name__)
        assert isinstance(handler, PlaceShareHandler)
        assert isinstance(handler.hub, PlanShareHub)

    def test_success_is_broadcast_to_plan(self, handler, propose, plan, members, sessions):
        info = propose(plan, members["alice"])

        event = handler.handle({"plan_id": plan.id, "place_id": info.id}, members["alice"])

        assert event["type"] == "place.shared"
        assert event["plan_id"] == plan.id
        assert event["place"]["id"] == info.id
        assert event["place"]["shared"] is True
        assert sessions["alice"].events == [event]
        assert sessions["bob"].events == [event]

    def test_failure_goes_only_to_actor(self, handler, propose, plan, members, sessions):
        info = propose(plan, members["alice"])

        event = handler.handle({"plan_id": plan.id, "place_id": info.id}, members["bob"])

        assert event["type"] == "place.share_error"
        assert event["error"] == "FORBIDDEN_ACCESS"
        assert event["plan_id"] == plan.id
        assert sessions["bob"].events == [event]
        assert sessions["alice"].events == []

    def test_unknown_plan_reaches_actor_everywhere(self, handler, hub, members, sessions):
        elsewhere = Inbox()
        hub.register("other-plan", members["bob"].id, elsewhere)

        event = handler.handle({"plan_id": "no-such-plan", "place_id": "x"}, members["bob"])

        assert event["error"] == "PLAN_NOT_FOUND"
        assert event["plan_id"] is None
        assert sessions["bob"].events == [event]
        assert elsewhere.events == [event]
        assert sessions["alice"].events == []

    def test_malformed_message(self, handler, members, sessions):
        event = handler.handle({"plan_id": ""}, members["alice"])

        assert event["error"] == "INVALID_REQUEST"
        assert event["code"] == "B005"
        assert event["details"]
        assert sessions["alice"].events == [event]
        assert sessions["bob"].events == []
