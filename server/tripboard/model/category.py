from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from ..core.base_model import BaseModel


class Category(BaseModel):
    __tablename__ = 'categories'

    category_name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)

    def __init__(self, category_name: str, **kwargs):
        self.category_name = category_name

    def __repr__(self):
        return f"<Category id='{self.id}' name='{self.category_name}'>"
