from typing import List, Optional
from agentforge.models import WidgetConfig, WidgetPosition, DEFAULT_DISPLAY_NAME, DEFAULT_PRIMARY_COLOR

def escape_attribute(value: str) -> str:
    return value.replace('"', "&quot;")

def widget_attributes(config: WidgetConfig, greeting: Optional[str] = None) -> List[str]:
    """
    Optional data-* attributes for the widget loader.

    An attribute is only emitted when it differs from what widget.js assumes
    when the attribute is missing, so the pasted markup stays minimal.
    """
    attributes = []
    if config.display_name != DEFAULT_DISPLAY_NAME:
        attributes.append(f'data-agent-name="{escape_attribute(config.display_name)}"')
    if config.primary_color.lower() != DEFAULT_PRIMARY_COLOR:
        attributes.append(f'data-primary-color="{escape_attribute(config.primary_color)}"')
    if config.position != WidgetPosition.BOTTOM_RIGHT:
        attributes.append(f'data-position="{config.position.value}"')
    if config.avatar_url:
        attributes.append(f'data-avatar-url="{escape_attribute(config.avatar_url)}"')
    if not config.show_branding:
        attributes.append('data-show-branding="false"')
    if config.auto_open:
        attributes.append('data-auto-open="true"')
    if greeting:
        attributes.append(f'data-greeting="{escape_attribute(greeting)}"')
    return attributes

def generate_embed_snippet(agent_id: str, config: WidgetConfig, origin: str, greeting: Optional[str] = None) -> str:
    lines = [
        f'<script src="{origin.rstrip("/")}/widget.js"',
        f'  data-agent-id="{escape_attribute(agent_id)}"',
    ]
    lines.extend(f"  {attr}" for attr in widget_attributes(config, greeting))
    lines[-1] += ">"
    return "\n".join(lines) + "\n</script>"

def generate_script_component(agent_id: str, config: WidgetConfig, origin: str, greeting: Optional[str] = None) -> str:
    """Same embed as a Next.js <Script> element."""
    lines = [
        "<Script",
        f'  src="{origin.rstrip("/")}/widget.js"',
        f'  data-agent-id="{escape_attribute(agent_id)}"',
    ]
    lines.extend(f"  {attr}" for attr in widget_attributes(config, greeting))
    lines.append('  strategy="afterInteractive"')
    lines.append("/>")
    return "\n".join(lines)
