"""Message template loading and rendering."""

from pathlib import Path

import yaml


_templates: dict | None = None

# Placeholders users may put in their own reminder template
USER_TEMPLATE_PLACEHOLDERS = ("friendName", "birthDate", "age", "daysUntil")


def load_templates() -> dict:
    """
    Load message templates from YAML file.

    Caches templates after first load.
    """
    global _templates
    if _templates is not None:
        return _templates

    yaml_path = Path(__file__).parent / "messages.yaml"
    with open(yaml_path, encoding="utf-8") as f:
        _templates = yaml.safe_load(f)

    return _templates


def render_message(template: str, context: dict) -> str:
    """
    Render a message template with context variables.

    Raises:
        KeyError: If a required variable is missing from context
    """
    return template.format(**context)


def get_message(message_type: str, field: str, context: dict) -> str:
    """
    Get and render one field of a message type.

    Args:
        message_type: e.g. "birthday_reminder", "test_notification"
        field: e.g. "email_subject", "email_body"
        context: Variables to substitute
    """
    templates = load_templates()
    template = templates[message_type][field]
    return render_message(template, context)


def render_user_template(template: str, values: dict) -> str:
    """
    Substitute {friendName}-style placeholders in a user-written template.

    Plain replacement rather than str.format, so stray braces or unknown
    placeholders in user text are left as-is instead of raising.

    Example:
        >>> render_user_template("Hi {friendName}!", {"friendName": "Ana"})
        'Hi Ana!'
    """
    rendered = template
    for name in USER_TEMPLATE_PLACEHOLDERS:
        if name in values:
            rendered = rendered.replace("{" + name + "}", str(values[name]))
    return rendered
