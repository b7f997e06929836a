from abc import ABC, abstractmethod
from typing import Optional

from ...model.member import Member as MemberModel


class MemberInterface(ABC):
    def __init__(self):
        pass

    @abstractmethod
    def get_member_by_id(self, member_id: str) -> Optional[MemberModel]:
        pass
