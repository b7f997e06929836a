from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from ..core.base_model import BaseModel
from .enums import DestinationName


class Destination(BaseModel):
    """Reference data: the regions a plan can target."""
    __tablename__ = 'destinations'

    destination_name: Mapped[DestinationName] = mapped_column(
        SAEnum(DestinationName), unique=True, nullable=False, index=True
    )

    def __init__(self, destination_name: DestinationName, **kwargs):
        self.destination_name = destination_name

    def __repr__(self):
        return f"<Destination id='{self.id}' name='{self.destination_name.value}'>"
