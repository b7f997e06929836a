from sqlalchemy import and_

from ..interfaces.member_repository_interface import MemberInterface
from ...model.member import Member as MemberModel
from ... import db


class MemberRepository(MemberInterface):
    def __init__(self):
        pass

    def get_member_by_id(self, member_id: str) -> MemberModel | None:
        return db.session.execute(
            db.select(MemberModel).where(
                and_(
                    MemberModel.id == member_id,
                    MemberModel.deleted_at.is_(None)
                )
            )
        ).scalar_one_or_none()
