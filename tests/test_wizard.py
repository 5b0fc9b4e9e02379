import pytest
from agentforge import wizard
from agentforge.errors import DraftValidationError, WizardStepError
from agentforge.registry import default_registry
from agentforge.services.agent_builder import build_whatsapp_payload

@pytest.fixture
def registry():
    return default_registry()

def test_full_walkthrough(registry):
    state = wizard.WizardState()
    state = wizard.select_category(state, "restaurant", registry)
    state = wizard.next_step(state, registry)
    state = wizard.update_details(state, name="Joe's Pizza", phone="555-0100", email="")
    state = wizard.next_step(state, registry)
    state = wizard.toggle_capability(state, "feedback", registry)
    state = wizard.set_custom_instructions(state, "Mention the lunch deal.")

    assert state.step == 3
    draft = wizard.to_draft(state)
    assert draft.business_details.email is None
    assert draft.active_capability_ids == (
        "reservations", "menu", "orders", "delivery", "offers", "feedback", "billing",
    )

    payload = build_whatsapp_payload(draft, registry)
    assert payload.name == "Joe's Pizza WhatsApp Assistant"
    assert payload.system_prompt.endswith("## Additional Instructions\nMention the lunch deal.")

def test_transitions_return_new_states(registry):
    start = wizard.WizardState()
    chosen = wizard.select_category(start, "salon", registry)
    assert start.category_id is None
    assert start.active_capability_ids == ()
    assert chosen.category_id == "salon"

def test_changing_category_reseeds_defaults(registry):
    state = wizard.select_category(wizard.WizardState(), "restaurant", registry)
    state = wizard.toggle_capability(state, "menu", registry)
    state = wizard.select_category(state, "general", registry)
    assert state.active_capability_ids == ("appointments", "reminders", "inquiries", "billing", "support")

def test_unknown_category_clears_selection(registry):
    state = wizard.select_category(wizard.WizardState(), "restaurant", registry)
    state = wizard.select_category(state, "spaceport", registry)
    assert state.category_id is None
    assert state.active_capability_ids == ()

def test_cannot_leave_step_one_without_category(registry):
    with pytest.raises(WizardStepError):
        wizard.next_step(wizard.WizardState(), registry)

def test_cannot_leave_step_two_without_name(registry):
    state = wizard.select_category(wizard.WizardState(), "retail", registry)
    state = wizard.next_step(state, registry)
    state = wizard.update_details(state, name="   ")
    with pytest.raises(WizardStepError):
        wizard.next_step(state, registry)

def test_cannot_go_past_last_step(registry):
    state = wizard.WizardState(step=wizard.LAST_STEP, category_id="retail")
    with pytest.raises(WizardStepError):
        wizard.next_step(state, registry)

def test_previous_step_floors_at_first():
    state = wizard.previous_step(wizard.WizardState(step=2))
    assert state.step == 1
    assert wizard.previous_step(state).step == 1

def test_toggle_without_category_is_ignored(registry):
    state = wizard.WizardState()
    assert wizard.toggle_capability(state, "menu", registry) == state

def test_unknown_detail_field_rejected():
    with pytest.raises(ValueError):
        wizard.update_details(wizard.WizardState(), fax="123")

def test_to_draft_reports_bad_details():
    state = wizard.update_details(wizard.WizardState(), name="Joe's Pizza", email="not-an-email")
    with pytest.raises(DraftValidationError) as exc_info:
        wizard.to_draft(state)
    assert "email" in exc_info.value.errors

def test_to_draft_requires_name():
    with pytest.raises(DraftValidationError) as exc_info:
        wizard.to_draft(wizard.WizardState())
    assert "name" in exc_info.value.errors
