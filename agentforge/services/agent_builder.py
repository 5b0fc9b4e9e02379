import logging
from agentforge.models import (
    AgentDraft,
    AgentSubmissionPayload,
    AgentType,
    BusinessInfo,
    WebsiteAgentForm,
    MAX_SUGGESTED_QUESTIONS,
)
from agentforge.registry import CategoryRegistry
from agentforge.services.capabilities import order_by_category, validate_draft
from agentforge.services.messages import build_suggested_questions, build_welcome_message
from agentforge.services.prompts import build_system_prompt

logger = logging.getLogger(__name__)

def build_whatsapp_payload(draft: AgentDraft, registry: CategoryRegistry) -> AgentSubmissionPayload:
    """
    Turns a finished wizard draft into the create-agent request.

    Raises DraftValidationError before any text is generated if the draft
    is incomplete.
    """
    category = validate_draft(draft, registry)
    details = draft.business_details
    # Click order -> category order for the capabilities array
    capabilities = order_by_category(draft.active_capability_ids, category)

    payload = AgentSubmissionPayload(
        name=f"{details.name} WhatsApp Assistant",
        description=details.description or f"AI assistant for {details.name}",
        system_prompt=build_system_prompt(details, category, capabilities, draft.custom_instructions),
        welcome_message=build_welcome_message(details, category, capabilities),
        suggested_questions=build_suggested_questions(capabilities),
        agent_type=AgentType.WHATSAPP,
        business_category=category.id,
        capabilities=list(capabilities),
        business_info=BusinessInfo(
            name=details.name,
            phone=details.phone,
            email=details.email,
            address=details.address,
            working_hours=details.working_hours,
        ),
    )
    logger.info(f"Built WhatsApp agent payload for '{details.name}' ({category.id}, {len(capabilities)} capabilities)")
    return payload

def build_website_payload(form: WebsiteAgentForm) -> AgentSubmissionPayload:
    questions = []
    if form.suggested_questions:
        questions = [q.strip() for q in form.suggested_questions.splitlines() if q.strip()]

    return AgentSubmissionPayload(
        name=form.name,
        description=form.description or f"AI assistant for {form.name}",
        welcome_message=form.welcome_message,
        suggested_questions=questions[:MAX_SUGGESTED_QUESTIONS],
        agent_type=AgentType.WEBSITE,
        website_url=str(form.website_url),
        tone_of_voice=form.tone_of_voice,
        purpose=form.purpose,
    )
