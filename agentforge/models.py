from enum import Enum
from typing import Dict, List, Optional, Any, Tuple
from pydantic import BaseModel, ConfigDict, EmailStr, Field, HttpUrl, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_DISPLAY_NAME = "AI Assistant"
DEFAULT_PRIMARY_COLOR = "#6366f1"
DEFAULT_WEBSITE_WELCOME = "Hi! I'm here to help you with any questions about our website. How can I assist you today?"
MAX_SUGGESTED_QUESTIONS = 4

class CamelModel(BaseModel):
    # Dashboard clients speak camelCase; python code uses snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class AgentType(str, Enum):
    WHATSAPP = "whatsapp"
    WEBSITE = "website"

class WidgetPosition(str, Enum):
    BOTTOM_RIGHT = "bottom-right"
    BOTTOM_LEFT = "bottom-left"
    TOP_RIGHT = "top-right"
    TOP_LEFT = "top-left"

class ToneOfVoice(str, Enum):
    PROFESSIONAL = "professional"
    FRIENDLY = "friendly"
    CASUAL = "casual"
    FORMAL = "formal"
    ENTHUSIASTIC = "enthusiastic"
    EMPATHETIC = "empathetic"

class AgentPurpose(str, Enum):
    SALES = "sales"
    SUPPORT = "support"
    INFORMATIONAL = "informational"
    LEAD_GENERATION = "lead_generation"
    BOOKING = "booking"

# --- Category registry entries ---
class CapabilityDescriptor(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    default_enabled: bool = False

class BusinessCategory(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str
    description: str = ""
    capabilities: Tuple[CapabilityDescriptor, ...] = ()

    @field_validator("capabilities")
    @classmethod
    def capability_ids_unique(cls, value: Tuple[CapabilityDescriptor, ...]):
        seen = set()
        for capability in value:
            if capability.id in seen:
                raise ValueError(f"duplicate capability id '{capability.id}'")
            seen.add(capability.id)
        return value

    def capability_ids(self) -> Tuple[str, ...]:
        return tuple(c.id for c in self.capabilities)

    def get_capability(self, capability_id: str) -> Optional[CapabilityDescriptor]:
        for capability in self.capabilities:
            if capability.id == capability_id:
                return capability
        return None

# --- Wizard input ---
class BusinessDetails(CamelModel):
    name: str
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    address: Optional[str] = None
    working_hours: Optional[str] = None
    description: Optional[str] = Field(default=None, max_length=500)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        # Blank names are reported by validate_draft alongside the other draft errors
        return value.strip()

    @field_validator("phone", "email", "address", "working_hours", "description", mode="before")
    @classmethod
    def blank_as_missing(cls, value):
        # Form fields arrive as "" when left empty
        if isinstance(value, str) and not value.strip():
            return None
        return value

class AgentDraft(CamelModel):
    business_details: BusinessDetails
    category_id: str
    active_capability_ids: Tuple[str, ...] = ()
    custom_instructions: Optional[str] = None

class WebsiteAgentForm(CamelModel):
    website_url: HttpUrl
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    tone_of_voice: ToneOfVoice = ToneOfVoice.FRIENDLY
    purpose: AgentPurpose = AgentPurpose.SUPPORT
    welcome_message: str = Field(default=DEFAULT_WEBSITE_WELCOME, max_length=500)
    suggested_questions: Optional[str] = None

# --- Outgoing payload ---
class BusinessInfo(CamelModel):
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    working_hours: Optional[str] = None

class AgentSubmissionPayload(CamelModel):
    name: str
    description: str
    system_prompt: Optional[str] = None
    welcome_message: str
    suggested_questions: List[str] = Field(default_factory=list, max_length=MAX_SUGGESTED_QUESTIONS)
    agent_type: AgentType
    business_category: Optional[str] = None
    capabilities: List[str] = Field(default_factory=list)
    business_info: Optional[BusinessInfo] = None
    website_url: Optional[str] = None
    tone_of_voice: Optional[ToneOfVoice] = None
    purpose: Optional[AgentPurpose] = None

    @field_validator("suggested_questions")
    @classmethod
    def questions_not_blank(cls, value: List[str]) -> List[str]:
        if any(not q.strip() for q in value):
            raise ValueError("suggested questions must not be empty")
        return value

    def to_request_body(self) -> Dict[str, Any]:
        """Body for the create-agent endpoint; questions travel newline-joined."""
        body = self.model_dump(by_alias=True, exclude_none=True, mode="json")
        body["suggestedQuestions"] = "\n".join(self.suggested_questions)
        return body

# --- Widget ---
class WidgetConfig(CamelModel):
    display_name: str = DEFAULT_DISPLAY_NAME
    primary_color: str = DEFAULT_PRIMARY_COLOR
    position: WidgetPosition = WidgetPosition.BOTTOM_RIGHT
    avatar_url: Optional[str] = None
    show_branding: bool = True
    auto_open: bool = False

# --- API request/response schemas ---
class WidgetSnippetRequest(CamelModel):
    agent_id: str = Field(min_length=1)
    config: WidgetConfig = Field(default_factory=WidgetConfig)
    greeting: Optional[str] = None
    origin: Optional[str] = None

class ChatTurn(BaseModel):
    role: str
    content: str

class PreviewChatRequest(CamelModel):
    draft: AgentDraft
    message: str = Field(min_length=1)
    history: List[ChatTurn] = Field(default_factory=list)

class WebsiteAgentRequest(CamelModel):
    form: WebsiteAgentForm
    widget: WidgetConfig = Field(default_factory=WidgetConfig)
