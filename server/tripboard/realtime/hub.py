"""
In-memory session hub for real-time place sharing.

Each live session is a sink: any callable that accepts one event dict (for
example a websocket's send function). Sessions join the room of the plan they
are editing, so shared places can be broadcast to every member in that plan,
while errors go back only to the acting member.
"""

import logging
import threading
from typing import Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

Sink = Callable[[dict], None]


class PlanShareHub:
    """
    Room-per-plan registry of session sinks.

    Maps plan_id -> {member_id: sink}; one session per member and plan.
    """

    def __init__(self):
        self._rooms: Dict[str, Dict[str, Sink]] = {}
        self._lock = threading.Lock()

    def register(self, plan_id: str, member_id: str, sink: Sink) -> None:
        with self._lock:
            self._rooms.setdefault(plan_id, {})[member_id] = sink
            logger.debug(f"[HUB] Registered member {member_id} in plan {plan_id}. Total: {len(self._rooms[plan_id])}")

    def unregister(self, plan_id: str, member_id: str, sink: Optional[Sink] = None) -> None:
        """Drop a session. With a sink, only if it is still the registered one."""
        with self._lock:
            room = self._rooms.get(plan_id)
            if room is None:
                return
            if sink is not None and room.get(member_id) is not sink:
                return
            room.pop(member_id, None)
            if not room:
                del self._rooms[plan_id]
            logger.debug(f"[HUB] Unregistered member {member_id} from plan {plan_id}")

    def room_size(self, plan_id: str) -> int:
        with self._lock:
            return len(self._rooms.get(plan_id, {}))

    def broadcast(self, plan_id: str, event: dict) -> int:
        """Send an event to every session in the plan room. Returns the delivery count."""
        with self._lock:
            targets = list(self._rooms.get(plan_id, {}).items())
        return self._deliver(plan_id, targets, event)

    def send_to_member(self, member_id: str, event: dict, plan_id: Optional[str] = None) -> int:
        """
        Send an event to one member's session(s).

        With a plan_id only that plan's session is targeted; without one (the
        plan could not be resolved) every session of the member receives it.
        """
        with self._lock:
            if plan_id is not None:
                rooms = [(plan_id, self._rooms.get(plan_id, {}))]
            else:
                rooms = list(self._rooms.items())
            targets = [
                (room_id, room[member_id])
                for room_id, room in rooms
                if member_id in room
            ]

        delivered = 0
        for room_id, sink in targets:
            delivered += self._deliver(room_id, [(member_id, sink)], event)
        return delivered

    def _deliver(self, plan_id: str, targets: List[Tuple[str, Sink]], event: dict) -> int:
        delivered = 0
        dead = []
        for member_id, sink in targets:
            try:
                sink(event)
                delivered += 1
            except Exception as e:
                logger.warning(f"[HUB] Dropping dead session of member {member_id} in plan {plan_id}: {e}")
                dead.append((member_id, sink))
        for member_id, sink in dead:
            self.unregister(plan_id, member_id, sink)
        return delivered
