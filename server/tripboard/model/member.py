from typing import Optional
from sqlalchemy import String, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column

from ..core.base_model import BaseModel
from .enums import Gender


class Member(BaseModel):
    __tablename__ = 'members'

    # Credentials live with the external auth service; only the profile is kept here
    login_id: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    gender: Mapped[Optional[Gender]] = mapped_column(SAEnum(Gender), nullable=True)

    def __init__(self, login_id: str, name: str, gender: Optional[Gender] = None, **kwargs):
        self.login_id = login_id
        self.name = name
        self.gender = gender

    def __repr__(self):
        return f"<Member login_id='{self.login_id}' name='{self.name}'>"
