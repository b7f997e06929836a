from ..interfaces.category_repository_interface import CategoryInterface
from ...model.category import Category as CategoryModel
from ... import db


class CategoryRepository(CategoryInterface):
    def __init__(self):
        pass

    def get_by_id(self, category_id: str) -> CategoryModel | None:
        return db.session.get(CategoryModel, category_id)
