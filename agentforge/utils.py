import httpx
import logging
from typing import Any, Dict, Optional
from agentforge.core.config import settings
from agentforge.errors import SessionExpiredError, SubmissionError
from agentforge.models import AgentSubmissionPayload

logger = logging.getLogger(__name__)

def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text

async def create_agent(
    payload: AgentSubmissionPayload,
    auth_token: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None
) -> Dict[str, Any]:
    """
    Sends a built payload to the AgentForge agents API.

    Exactly one request is made. A 401 raises SessionExpiredError, any other
    failure raises SubmissionError with the service's own message.
    """
    url = f"{settings.AGENTFORGE_API_URL}/api/agents"
    headers = {"Content-Type": "application/json"}
    if auth_token:
        headers["Authorization"] = auth_token

    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(timeout=settings.REQUEST_TIMEOUT)

    try:
        response = await client.post(url, json=payload.to_request_body(), headers=headers)
    except httpx.HTTPError as e:
        logger.error(f"Failed to reach agent service at {url}: {e}")
        raise SubmissionError(f"Could not reach agent service: {e}")
    finally:
        if owns_client:
            await client.aclose()

    if response.status_code == 401:
        logger.info("Agent service rejected the session")
        raise SessionExpiredError(_error_message(response), status_code=401)
    if response.is_error:
        message = _error_message(response)
        logger.error(f"Agent creation failed ({response.status_code}): {message}")
        raise SubmissionError(message, status_code=response.status_code)

    try:
        agent = response.json()
    except ValueError:
        logger.error(f"Agent service returned a non-JSON body ({response.status_code}): {response.text[:200]}")
        raise SubmissionError("Agent service returned an invalid response", status_code=response.status_code)
    if not isinstance(agent, dict) or "id" not in agent:
        logger.error(f"Agent service response has no id: {agent}")
        raise SubmissionError("Agent service returned no agent id", status_code=response.status_code)
    logger.info(f"Agent created: id={agent.get('id')} type={payload.agent_type.value}")
    return agent
