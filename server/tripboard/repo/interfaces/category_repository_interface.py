from abc import ABC, abstractmethod
from typing import Optional

from ...model.category import Category as CategoryModel


class CategoryInterface(ABC):
    def __init__(self):
        pass

    @abstractmethod
    def get_by_id(self, category_id: str) -> Optional[CategoryModel]:
        pass
