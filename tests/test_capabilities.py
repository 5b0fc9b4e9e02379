import pytest
from agentforge.errors import DraftValidationError
from agentforge.models import AgentDraft, BusinessDetails
from agentforge.registry import default_registry
from agentforge.services.capabilities import initialize_for_category, is_valid, toggle, validate_draft

@pytest.fixture
def restaurant():
    return default_registry().get_category("restaurant")

def test_initialize_returns_defaults_in_registry_order(restaurant):
    assert initialize_for_category(restaurant) == (
        "reservations", "menu", "orders", "delivery", "offers", "billing",
    )

@pytest.mark.parametrize("category", default_registry().list_categories(), ids=lambda c: c.id)
def test_initialize_matches_default_flags(category):
    expected = tuple(c.id for c in category.capabilities if c.default_enabled)
    assert initialize_for_category(category) == expected
    assert initialize_for_category(category) == initialize_for_category(category)

def test_toggle_adds_and_removes(restaurant):
    current = initialize_for_category(restaurant)
    added = toggle(current, "feedback", restaurant)
    assert "feedback" in added
    removed = toggle(current, "menu", restaurant)
    assert "menu" not in removed

def test_toggle_twice_restores_original(restaurant):
    current = initialize_for_category(restaurant)
    for capability in restaurant.capability_ids():
        assert toggle(toggle(current, capability, restaurant), capability, restaurant) == current

def test_toggle_keeps_category_order(restaurant):
    selection = toggle(("billing",), "reservations", restaurant)
    assert selection == ("reservations", "billing")

def test_toggle_rejects_foreign_capability(restaurant):
    current = initialize_for_category(restaurant)
    assert toggle(current, "prescriptions", restaurant) == current

def test_empty_selection_is_invalid():
    assert not is_valid(())
    assert is_valid(("menu",))

def test_validate_draft_collects_errors():
    draft = AgentDraft(
        business_details=BusinessDetails(name="Joe's Pizza"),
        category_id="spaceport",
        active_capability_ids=(),
    )
    with pytest.raises(DraftValidationError) as exc_info:
        validate_draft(draft, default_registry())
    assert set(exc_info.value.errors) == {"businessCategory", "capabilities"}

def test_validate_draft_rejects_capabilities_from_other_category():
    draft = AgentDraft(
        business_details=BusinessDetails(name="Joe's Pizza"),
        category_id="restaurant",
        active_capability_ids=("menu", "prescriptions"),
    )
    with pytest.raises(DraftValidationError) as exc_info:
        validate_draft(draft, default_registry())
    assert "prescriptions" in exc_info.value.errors["capabilities"]

def test_validate_draft_returns_category(restaurant):
    draft = AgentDraft(
        business_details=BusinessDetails(name="Joe's Pizza"),
        category_id="restaurant",
        active_capability_ids=("menu",),
    )
    assert validate_draft(draft, default_registry()) == restaurant

def test_validate_draft_reports_blank_name():
    draft = AgentDraft(
        business_details=BusinessDetails(name="   "),
        category_id="restaurant",
        active_capability_ids=("menu",),
    )
    with pytest.raises(DraftValidationError) as exc_info:
        validate_draft(draft, default_registry())
    assert exc_info.value.errors == {"name": "Business name is required"}
