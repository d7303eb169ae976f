"""Message templates.

Cards are usually plotted from a template with ``{field}`` placeholders
filled in per recipient. Required fields must be supplied; optional ones
fall back to sample values.
"""

import re
from datetime import date

from pydantic import BaseModel, Field

from plottext.exceptions import InvalidRequestError

_PLACEHOLDER = re.compile(r"\{(\w+)\}")

SAMPLE_VALUES: dict[str, str] = {
    "name": "John Doe",
    "username": "johndoe",
    "email": "john@example.com",
    "address": "123 Main St",
    "code": "123456",
    "body": "This is a sample message.",
}


class MessageTemplate(BaseModel):
    """A text template for one card format."""

    label: str
    required_fields: list[str] = Field(default_factory=list)
    optional_fields: list[str] = Field(default_factory=list)
    template: str

    def placeholders(self) -> list[str]:
        """Get placeholder names in order of first appearance."""
        seen: list[str] = []
        for name in _PLACEHOLDER.findall(self.template):
            if name not in seen:
                seen.append(name)
        return seen

    def render(self, values: dict[str, str]) -> str:
        """Fill the template.

        Args:
            values: Field values by name

        Returns:
            The rendered text

        Raises:
            InvalidRequestError: If a required field is missing or blank
        """
        missing = [name for name in self.required_fields if not values.get(name, "").strip()]
        if missing:
            raise InvalidRequestError(
                f"template '{self.label}' is missing required fields: {', '.join(missing)}"
            )

        def substitute(match: re.Match[str]) -> str:
            name = match.group(1)
            value = values.get(name, "").strip()
            if value:
                return value
            if name == "date":
                return date.today().isoformat()
            return SAMPLE_VALUES.get(name, match.group(0))

        return _PLACEHOLDER.sub(substitute, self.template)


BUILTIN_TEMPLATES: dict[str, MessageTemplate] = {
    "chumba": MessageTemplate(
        label="Chumba",
        required_fields=["name", "email", "code"],
        optional_fields=["username", "date"],
        template="Hello {name},\n{body}\nYour code is: {code}\nThank you!",
    ),
    "stake": MessageTemplate(
        label="Stake",
        required_fields=["name", "email", "username", "code"],
        optional_fields=["date"],
        template="Hi {username},\n{body}\nYour Stake code: {code}\nEnjoy!",
    ),
}


def get_template(name: str) -> MessageTemplate:
    """Look up a built-in template.

    Raises:
        InvalidRequestError: If no template has that name
    """
    try:
        return BUILTIN_TEMPLATES[name.lower()]
    except KeyError:
        valid = ", ".join(sorted(BUILTIN_TEMPLATES))
        raise InvalidRequestError(f"unknown template '{name}' (valid: {valid})") from None
