"""
WhatsApp agent wizard as plain data.

The dashboard keeps a WizardState per browser session and calls these
functions on every interaction. Each one returns a new state; nothing here
touches I/O, so a sequence of states can be replayed or undone.

Steps:
    1. Business Type     - pick a category (seeds default capabilities)
    2. Business Details  - name, contact info, description
    3. Capabilities      - toggle features, optional extra instructions
"""

from typing import Dict, Optional, Tuple
from pydantic import BaseModel, ValidationError
from agentforge.errors import DraftValidationError, WizardStepError
from agentforge.models import AgentDraft, BusinessDetails
from agentforge.registry import CategoryRegistry
from agentforge.services import capabilities

STEPS = (
    (1, "Business Type", "Select your category"),
    (2, "Business Details", "Add your info"),
    (3, "Capabilities", "Choose features"),
)
FIRST_STEP = STEPS[0][0]
LAST_STEP = STEPS[-1][0]

DETAIL_FIELDS = ("name", "phone", "email", "address", "working_hours", "description")

class WizardState(BaseModel):
    step: int = FIRST_STEP
    category_id: Optional[str] = None
    details: Dict[str, str] = {}
    active_capability_ids: Tuple[str, ...] = ()
    custom_instructions: str = ""

def select_category(state: WizardState, category_id: str, registry: CategoryRegistry) -> WizardState:
    category = registry.get_category(category_id)
    if category is None:
        return state.model_copy(update={"category_id": None, "active_capability_ids": ()})
    return state.model_copy(update={
        "category_id": category.id,
        "active_capability_ids": capabilities.initialize_for_category(category),
    })

def update_details(state: WizardState, **fields: str) -> WizardState:
    unknown = set(fields) - set(DETAIL_FIELDS)
    if unknown:
        raise ValueError(f"Unknown business detail fields: {', '.join(sorted(unknown))}")
    details = dict(state.details)
    details.update(fields)
    return state.model_copy(update={"details": details})

def toggle_capability(state: WizardState, capability_id: str, registry: CategoryRegistry) -> WizardState:
    category = registry.get_category(state.category_id)
    if category is None:
        return state
    toggled = capabilities.toggle(state.active_capability_ids, capability_id, category)
    return state.model_copy(update={"active_capability_ids": toggled})

def set_custom_instructions(state: WizardState, text: str) -> WizardState:
    return state.model_copy(update={"custom_instructions": text})

def next_step(state: WizardState, registry: CategoryRegistry) -> WizardState:
    if state.step >= LAST_STEP:
        raise WizardStepError("Already on the last step")
    if state.step == 1 and registry.get_category(state.category_id) is None:
        raise WizardStepError("Please select a category")
    if state.step == 2 and not state.details.get("name", "").strip():
        raise WizardStepError("Business name is required")
    return state.model_copy(update={"step": state.step + 1})

def previous_step(state: WizardState) -> WizardState:
    return state.model_copy(update={"step": max(FIRST_STEP, state.step - 1)})

def to_draft(state: WizardState) -> AgentDraft:
    try:
        details = BusinessDetails(**state.details)
    except ValidationError as e:
        errors = {}
        for err in e.errors():
            field = str(err["loc"][0]) if err["loc"] else "businessDetails"
            errors[field] = err["msg"]
        raise DraftValidationError(errors)

    return AgentDraft(
        business_details=details,
        category_id=state.category_id or "",
        active_capability_ids=state.active_capability_ids,
        custom_instructions=state.custom_instructions or None,
    )
