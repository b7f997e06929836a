import logging
from sqlalchemy import and_

from ..interfaces.plan_repository_interface import PlanInterface
from ...model.destination import Destination as DestinationModel
from ...model.plan import Plan as PlanModel
from ... import db

logger = logging.getLogger(__name__)


class PlanRepository(PlanInterface):
    def __init__(self):
        pass

    def _alive(self):
        return db.select(PlanModel).where(PlanModel.deleted_at.is_(None))

    def get_by_id(self, plan_id: str) -> PlanModel | None:
        return db.session.execute(
            self._alive().where(PlanModel.id == plan_id)
        ).unique().scalar_one_or_none()

    def get_all(self) -> list[PlanModel]:
        return list(db.session.execute(
            self._alive().order_by(PlanModel.created_at)
        ).unique().scalars())

    def get_all_order_by_started_at_desc(self) -> list[PlanModel]:
        return list(db.session.execute(
            self._alive().order_by(PlanModel.started_at.desc())
        ).unique().scalars())

    def get_by_destination_name(self, destination_name) -> list[PlanModel]:
        return list(db.session.execute(
            self._alive()
            .join(DestinationModel, PlanModel.destination_id == DestinationModel.id)
            .where(DestinationModel.destination_name == destination_name)
            .order_by(PlanModel.started_at.desc())
        ).unique().scalars())

    def get_by_destination_name_and_started_between(self, destination_name, start, end) -> list[PlanModel]:
        return list(db.session.execute(
            self._alive()
            .join(DestinationModel, PlanModel.destination_id == DestinationModel.id)
            .where(
                and_(
                    DestinationModel.destination_name == destination_name,
                    PlanModel.started_at.between(start, end)
                )
            )
            .order_by(PlanModel.started_at.desc())
        ).unique().scalars())

    def save(self, plan: PlanModel, commit: bool = False) -> PlanModel:
        try:
            return plan.save(commit=commit)
        except Exception as e:
            logger.error(f"Error saving plan: {str(e)}")
            raise
