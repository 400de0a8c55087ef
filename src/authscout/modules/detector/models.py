"""Finding variants produced by the authentication classifier."""

from dataclasses import dataclass, field, fields
from typing import Any

NOT_AVAILABLE = "N/A"


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


@dataclass
class Finding:
    """Common evidence fields shared by every finding variant.

    ``script_rendered`` marks findings inferred from raw markup text only;
    their ``html`` is a placeholder, not real markup.
    """

    html: str
    script_rendered: bool = field(default=False, kw_only=True)

    def to_dict(self) -> dict[str, Any]:
        return {_camel(f.name): getattr(self, f.name) for f in fields(self)}


@dataclass
class FormFinding(Finding):
    index: int
    has_password: bool
    has_email: bool
    has_username: bool
    action: str = NOT_AVAILABLE
    method: str = "GET"
    id: str = NOT_AVAILABLE


@dataclass
class InputFinding(Finding):
    """Password, email or username field."""

    index: int
    id: str = NOT_AVAILABLE
    name: str = NOT_AVAILABLE
    placeholder: str = NOT_AVAILABLE
    autocomplete: str = NOT_AVAILABLE
    input_type: str | None = None


@dataclass
class ButtonFinding(Finding):
    index: int
    text: str = NOT_AVAILABLE
    type: str = NOT_AVAILABLE
    id: str = NOT_AVAILABLE


@dataclass
class ContainerFinding(Finding):
    index: int
    class_name: str = NOT_AVAILABLE
    id: str = NOT_AVAILABLE
    tag_name: str = ""


@dataclass
class SocialFinding(Finding):
    provider: str
    text: str = ""


@dataclass
class Findings:
    """All findings of one scan, grouped by category."""

    forms: list[FormFinding] = field(default_factory=list)
    password_inputs: list[InputFinding] = field(default_factory=list)
    username_inputs: list[InputFinding] = field(default_factory=list)
    email_inputs: list[InputFinding] = field(default_factory=list)
    login_buttons: list[ButtonFinding] = field(default_factory=list)
    auth_containers: list[ContainerFinding] = field(default_factory=list)
    social_auth: list[SocialFinding] = field(default_factory=list)

    def categories(self) -> dict[str, list[Finding]]:
        """Category name (camelCase) to findings, in report order."""
        return {_camel(f.name): getattr(self, f.name) for f in fields(self)}

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {
            name: [finding.to_dict() for finding in items]
            for name, items in self.categories().items()
        }
