from typing import Optional
from fastapi import APIRouter, Depends, Header, HTTPException
from agentforge.core.config import settings
from agentforge.models import AgentDraft, PreviewChatRequest, WebsiteAgentRequest, WidgetSnippetRequest
from agentforge.registry import CategoryRegistry, default_registry
from agentforge.services.agent_builder import build_website_payload, build_whatsapp_payload
from agentforge.services.preview import preview_reply
from agentforge.services.widget import generate_embed_snippet, generate_script_component
from agentforge.utils import create_agent
import logging

router = APIRouter()
logger = logging.getLogger(__name__)

def get_registry() -> CategoryRegistry:
    return default_registry()

@router.get("/categories")
async def list_categories(registry: CategoryRegistry = Depends(get_registry)):
    return [c.model_dump(by_alias=True) for c in registry.list_categories()]

@router.get("/categories/{category_id}")
async def get_category(category_id: str, registry: CategoryRegistry = Depends(get_registry)):
    category = registry.get_category(category_id)
    if category is None:
        raise HTTPException(status_code=404, detail=f"Unknown business category '{category_id}'")
    return category.model_dump(by_alias=True)

@router.post("/agents/whatsapp/preview")
async def preview_whatsapp_agent(draft: AgentDraft, registry: CategoryRegistry = Depends(get_registry)):
    """
    Shows what would be sent without creating anything.
    """
    payload = build_whatsapp_payload(draft, registry)
    return payload.to_request_body()

@router.post("/agents/whatsapp", status_code=201)
async def create_whatsapp_agent(
    draft: AgentDraft,
    registry: CategoryRegistry = Depends(get_registry),
    authorization: Optional[str] = Header(default=None)
):
    logger.info(f"Creating WhatsApp agent for category {draft.category_id}")
    payload = build_whatsapp_payload(draft, registry)
    agent = await create_agent(payload, authorization)
    return {"agent": agent}

@router.post("/agents/website", status_code=201)
async def create_website_agent(
    request: WebsiteAgentRequest,
    authorization: Optional[str] = Header(default=None)
):
    logger.info(f"Creating website agent for {request.form.website_url}")
    payload = build_website_payload(request.form)
    agent = await create_agent(payload, authorization)
    embed_code = generate_embed_snippet(str(agent["id"]), request.widget, settings.WIDGET_ORIGIN)
    return {"agent": agent, "embedCode": embed_code}

@router.post("/widget/snippet")
async def widget_snippet(request: WidgetSnippetRequest):
    origin = request.origin or settings.WIDGET_ORIGIN
    return {
        "snippet": generate_embed_snippet(request.agent_id, request.config, origin, request.greeting),
        "scriptComponent": generate_script_component(request.agent_id, request.config, origin, request.greeting),
    }

@router.post("/agents/preview-chat")
async def preview_chat(request: PreviewChatRequest, registry: CategoryRegistry = Depends(get_registry)):
    payload = build_whatsapp_payload(request.draft, registry)
    reply = await preview_reply(payload, request.message, request.history)
    return {"reply": reply}
