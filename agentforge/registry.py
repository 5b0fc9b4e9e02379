import logging
from types import MappingProxyType
from typing import Iterable, List, Optional
from agentforge.catalog import CATEGORY_TABLE
from agentforge.models import BusinessCategory, CapabilityDescriptor

logger = logging.getLogger(__name__)

class CategoryRegistry:
    """
    Read-only lookup of business categories.

    Built once from a sequence of categories and passed to whoever needs it,
    so tests can hand in their own fixture categories.
    """

    def __init__(self, categories: Iterable[BusinessCategory]):
        table = {}
        for category in categories:
            if category.id in table:
                raise ValueError(f"duplicate category id '{category.id}'")
            table[category.id] = category
        self._categories = MappingProxyType(table)

    def get_category(self, category_id: Optional[str]) -> Optional[BusinessCategory]:
        # Unknown ids mean "nothing selected yet", not an error
        if not category_id:
            return None
        return self._categories.get(category_id)

    def list_categories(self) -> List[BusinessCategory]:
        return list(self._categories.values())

    def __contains__(self, category_id: str) -> bool:
        return category_id in self._categories

    def __len__(self) -> int:
        return len(self._categories)

def build_categories(table=CATEGORY_TABLE) -> List[BusinessCategory]:
    return [
        BusinessCategory(
            id=category_id,
            display_name=name,
            description=description,
            capabilities=tuple(
                CapabilityDescriptor(id=cap_id, label=label, default_enabled=enabled)
                for cap_id, label, enabled in capabilities
            ),
        )
        for category_id, name, description, capabilities in table
    ]

_default_registry: Optional[CategoryRegistry] = None

def default_registry() -> CategoryRegistry:
    global _default_registry
    if _default_registry is None:
        _default_registry = CategoryRegistry(build_categories())
        logger.info(f"Loaded {len(_default_registry)} business categories")
    return _default_registry
