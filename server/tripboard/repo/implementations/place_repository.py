import logging
from datetime import datetime, time, timedelta
from sqlalchemy import and_

from ..interfaces.place_repository_interface import PlaceInterface
from ...model.place import Place as PlaceModel
from ... import db

logger = logging.getLogger(__name__)


class PlaceRepository(PlaceInterface):
    def __init__(self):
        pass

    def _alive_in(self, plan):
        return db.select(PlaceModel).where(
            and_(
                PlaceModel.plan_id == plan.id,
                PlaceModel.deleted_at.is_(None)
            )
        )

    def _by_natural_key(self, place_name, address, member, plan):
        return self._alive_in(plan).where(
            and_(
                PlaceModel.place_name == place_name,
                PlaceModel.address == address,
                PlaceModel.member_id == member.id
            )
        )

    def get_by_id_and_plan(self, place_id, plan) -> PlaceModel | None:
        return db.session.execute(
            self._alive_in(plan).where(PlaceModel.id == place_id)
        ).unique().scalar_one_or_none()

    def exists_by_place_name_and_address_and_member_and_plan(self, place_name, address, member, plan) -> bool:
        return db.session.execute(
            db.select(self._by_natural_key(place_name, address, member, plan).exists())
        ).scalar()

    def get_by_place_name_and_address_and_member_and_plan(self, place_name, address, member, plan) -> PlaceModel | None:
        return db.session.execute(
            self._by_natural_key(place_name, address, member, plan)
        ).unique().scalar_one_or_none()

    def exists_shared_by_plan_and_place_name_and_address(self, plan, place_name, address) -> bool:
        query = self._alive_in(plan).where(
            and_(
                PlaceModel.place_name == place_name,
                PlaceModel.address == address,
                PlaceModel.activated_at.is_not(None)
            )
        )
        return db.session.execute(db.select(query.exists())).scalar()

    def get_private_by_member_and_plan(self, member, plan) -> list[PlaceModel]:
        return list(db.session.execute(
            self._alive_in(plan)
            .where(
                and_(
                    PlaceModel.member_id == member.id,
                    PlaceModel.activated_at.is_(None)
                )
            )
            .order_by(PlaceModel.created_at)
        ).unique().scalars())

    def get_shared_by_plan(self, plan) -> list[PlaceModel]:
        return list(db.session.execute(
            self._alive_in(plan)
            .where(PlaceModel.activated_at.is_not(None))
            .order_by(PlaceModel.started_at, PlaceModel.activated_at)
        ).unique().scalars())

    def get_shared_by_plan_and_date(self, plan, visit_date) -> list[PlaceModel]:
        day_start = datetime.combine(visit_date, time.min)
        next_day_start = day_start + timedelta(days=1)
        return list(db.session.execute(
            self._alive_in(plan)
            .where(
                and_(
                    PlaceModel.activated_at.is_not(None),
                    PlaceModel.started_at < next_day_start,
                    PlaceModel.ended_at > day_start
                )
            )
            .order_by(PlaceModel.started_at)
        ).unique().scalars())

    def save(self, place: PlaceModel, commit: bool = False) -> PlaceModel:
        try:
            return place.save(commit=commit)
        except Exception as e:
            logger.error(f"Error saving place: {str(e)}")
            raise
