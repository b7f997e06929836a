from ..interfaces.destination_repository_interface import DestinationInterface
from ...model.destination import Destination as DestinationModel
from ... import db


class DestinationRepository(DestinationInterface):
    def __init__(self):
        pass

    def get_all(self) -> list[DestinationModel]:
        return list(db.session.execute(
            db.select(DestinationModel).order_by(DestinationModel.destination_name)
        ).scalars())

    def get_by_id(self, destination_id: str) -> DestinationModel | None:
        return db.session.get(DestinationModel, destination_id)
