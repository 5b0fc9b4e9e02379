import logging
from typing import Dict, Iterable, Tuple
from agentforge.errors import DraftValidationError
from agentforge.models import AgentDraft, BusinessCategory
from agentforge.registry import CategoryRegistry

logger = logging.getLogger(__name__)

def initialize_for_category(category: BusinessCategory) -> Tuple[str, ...]:
    """Capabilities switched on when a category is first picked."""
    return tuple(c.id for c in category.capabilities if c.default_enabled)

def order_by_category(capability_ids: Iterable[str], category: BusinessCategory) -> Tuple[str, ...]:
    """Keep only ids the category offers, in the category's declared order."""
    selected = set(capability_ids)
    return tuple(c.id for c in category.capabilities if c.id in selected)

def toggle(current: Tuple[str, ...], capability_id: str, category: BusinessCategory) -> Tuple[str, ...]:
    if category.get_capability(capability_id) is None:
        logger.warning(f"Ignoring toggle of '{capability_id}': not offered by category '{category.id}'")
        return current

    if capability_id in current:
        updated = [c for c in current if c != capability_id]
    else:
        updated = list(current) + [capability_id]
    return order_by_category(updated, category)

def is_valid(selection: Tuple[str, ...]) -> bool:
    return len(selection) >= 1

def validate_draft(draft: AgentDraft, registry: CategoryRegistry) -> BusinessCategory:
    """
    Checks a draft before anything is synthesized or submitted.

    Returns the resolved category; raises DraftValidationError listing every
    problem found so the dashboard can show them inline.
    """
    errors: Dict[str, str] = {}

    if not draft.business_details.name:
        errors["name"] = "Business name is required"

    category = registry.get_category(draft.category_id)
    if category is None:
        errors["businessCategory"] = "Please select a category"

    if not is_valid(draft.active_capability_ids):
        errors["capabilities"] = "Select at least one capability"
    elif category is not None:
        unknown = [c for c in draft.active_capability_ids if category.get_capability(c) is None]
        if unknown:
            errors["capabilities"] = f"Not available for {category.display_name}: {', '.join(unknown)}"

    if errors:
        logger.info(f"Draft rejected: {errors}")
        raise DraftValidationError(errors)
    return category
