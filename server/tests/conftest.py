# server/tests/conftest.py
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from config import Config
from tripboard import create_app, db
from tripboard.core.di_container import DIContainer
from tripboard.model import Member, Destination, Category, Plan, DestinationName, Gender, Vehicle
from tripboard.schema import PlanCreateRequest, PlaceCreateRequest
from tripboard.service import PlanService, PlaceService


JWT_TEST_SECRET = "test-secret"


class ConfigForTests(Config):
    TESTING = True
    SECRET_KEY = JWT_TEST_SECRET
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    LOG_TO_FILE = False


@pytest.fixture
def app():
    """Application with a fresh in-memory database per test."""
    app = create_app(ConfigForTests)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def plan_service(app) -> PlanService:
    return DIContainer.get_instance().resolve(PlanService.__name__)


@pytest.fixture
def place_service(app) -> PlaceService:
    return DIContainer.get_instance().resolve(PlaceService.__name__)


@pytest.fixture
def members(app):
    """Three registered members: alice, bob and carol."""
    alice = Member(login_id="alice", name="Alice", gender=Gender.FEMALE)
    bob = Member(login_id="bob", name="Bob", gender=Gender.MALE)
    carol = Member(login_id="carol", name="Carol")
    db.session.add_all([alice, bob, carol])
    db.session.commit()
    return {"alice": alice, "bob": bob, "carol": carol}


@pytest.fixture
def destinations(app):
    jeju = Destination(DestinationName.JEJU)
    busan = Destination(DestinationName.BUSAN)
    db.session.add_all([jeju, busan])
    db.session.commit()
    return {"jeju": jeju, "busan": busan}


@pytest.fixture
def category(app):
    cafe = Category("cafe")
    db.session.add(cafe)
    db.session.commit()
    return cafe


@pytest.fixture
def make_plan(plan_service, members, destinations):
    """
    Factory: create a plan as `creator` and add the other given members.

    Defaults to a Jeju trip from 2024-06-01 00:00 to 2024-06-03 00:00 (3 days).
    """
    def _make_plan(creator="alice", others=("bob",), destination="jeju",
                   started_at=datetime(2024, 6, 1), ended_at=datetime(2024, 6, 3)):
        info = plan_service.create_plan(
            PlanCreateRequest(
                destination_id=destinations[destination].id,
                started_at=started_at,
                ended_at=ended_at,
                vehicle=Vehicle.CAR
            ),
            members[creator].id
        )
        plan = db.session.get(Plan, info.id)
        for name in others:
            plan.add_plan_member(members[name])
        db.session.commit()
        return plan
    return _make_plan


@pytest.fixture
def plan(make_plan):
    """Plan shared by alice (creator) and bob; carol is an outsider."""
    return make_plan()


@pytest.fixture
def propose(place_service, category):
    """Factory: propose a private place as a member."""
    def _propose(plan, member, place_name="Cafe", address="123 Main"):
        return place_service.create_place(
            plan.id,
            member,
            PlaceCreateRequest(place_name=place_name, address=address, category_id=category.id)
        )
    return _propose


@pytest.fixture
def auth_header():
    """Factory: Authorization header carrying a token for the member."""
    def _auth_header(member, expires_in=3600):
        token = jwt.encode(
            {
                "member_id": member.id,
                "exp": datetime.now(tz=timezone.utc) + timedelta(seconds=expires_in)
            },
            JWT_TEST_SECRET,
            algorithm="HS256"
        )
        return {"Authorization": f"Bearer {token}"}
    return _auth_header
