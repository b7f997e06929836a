from abc import ABC, abstractmethod
from typing import List, Optional

from ...model.destination import Destination as DestinationModel


class DestinationInterface(ABC):
    def __init__(self):
        pass

    @abstractmethod
    def get_all(self) -> List[DestinationModel]:
        pass

    @abstractmethod
    def get_by_id(self, destination_id: str) -> Optional[DestinationModel]:
        pass
