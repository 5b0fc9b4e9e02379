from typing import Iterable, List, Optional
from agentforge.models import BusinessCategory, BusinessDetails

GUIDELINES = """## Guidelines
1. Be friendly, professional, and conversational - remember this is WhatsApp, not email
2. Use short, clear messages - don't send walls of text
3. When collecting information, ask one thing at a time
4. Always confirm details before finalizing any booking/order
5. If you can't help with something, politely explain and suggest alternatives
6. Respond in the same language the customer uses
7. Use emojis sparingly to keep it friendly 😊"""

IMPORTANT_RULES = """## Important Rules
- Never make up business information you don't have
- For appointments/bookings: collect name, phone, date/time preference, service needed
- For billing queries: always verify customer identity first
- For orders: confirm items, quantity, delivery address
- Always end with a helpful follow-up or call-to-action"""

# (label, BusinessDetails attribute) in the order they appear in the prompt
BUSINESS_INFO_FIELDS = [
    ("Business Name", "name"),
    ("Phone", "phone"),
    ("Email", "email"),
    ("Address", "address"),
    ("Working Hours", "working_hours"),
]

def resolve_labels(category: BusinessCategory, active_ids: Iterable[str]) -> List[str]:
    """Labels of the active capabilities, in the category's order rather than click order."""
    active = set(active_ids)
    return [c.label for c in category.capabilities if c.id in active]

def business_info_lines(details: BusinessDetails) -> List[str]:
    lines = []
    for label, attr in BUSINESS_INFO_FIELDS:
        value = getattr(details, attr)
        if value:
            lines.append(f"- {label}: {value}")
    return lines

def build_system_prompt(
    details: BusinessDetails,
    category: BusinessCategory,
    active_ids: Iterable[str],
    custom_instructions: Optional[str] = None
) -> str:
    sections = [
        f"You are a helpful WhatsApp assistant for {details.name}, a {category.display_name.lower()} business.",
        "\n".join(["## Business Information"] + business_info_lines(details)),
        "\n".join(["## Your Capabilities", "You can help customers with:"]
                  + [f"- {label}" for label in resolve_labels(category, active_ids)]),
        GUIDELINES,
        IMPORTANT_RULES,
    ]
    if custom_instructions and custom_instructions.strip():
        sections.append(f"## Additional Instructions\n{custom_instructions}")
    return "\n\n".join(sections)
