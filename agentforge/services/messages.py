from typing import FrozenSet, Iterable, List, Tuple
from agentforge.models import BusinessCategory, BusinessDetails, MAX_SUGGESTED_QUESTIONS
from agentforge.services.prompts import resolve_labels

WELCOME_PREVIEW_SIZE = 4

# Checked top to bottom; first matching group wins its slot
SUGGESTED_QUESTION_GROUPS: Tuple[Tuple[FrozenSet[str], str], ...] = (
    (frozenset({"appointments", "reservations", "viewings"}), "I want to book an appointment"),
    (frozenset({"billing", "fees"}), "Check my pending payment"),
    (frozenset({"orders", "tracking"}), "Track my order status"),
    (frozenset({"menu", "services", "catalog"}), "Show me your services/menu"),
    (frozenset({"support", "inquiries"}), "I have a question"),
)

def build_welcome_message(details: BusinessDetails, category: BusinessCategory, active_ids: Iterable[str]) -> str:
    labels = resolve_labels(category, active_ids)[:WELCOME_PREVIEW_SIZE]
    parts = [f"👋 Hi! Welcome to {details.name}!"]
    if labels:
        bullets = "\n".join(f"• {label}" for label in labels)
        parts.append(f"I'm your AI assistant and I'm here to help you with:\n{bullets}")
    else:
        parts.append("I'm your AI assistant.")
    parts.append("How can I help you today?")
    return "\n\n".join(parts)

def build_suggested_questions(active_ids: Iterable[str]) -> List[str]:
    active = set(active_ids)
    questions = [question for group, question in SUGGESTED_QUESTION_GROUPS if group & active]
    return questions[:MAX_SUGGESTED_QUESTIONS]
