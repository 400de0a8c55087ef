"""Authentication component detection over static page markup."""

from .classifier import classify_markup, detect_auth_components
from .document import Element, ParsedDocument, parse_document
from .models import (
    ButtonFinding,
    ContainerFinding,
    Finding,
    Findings,
    FormFinding,
    InputFinding,
    SocialFinding,
)

__all__ = [
    "ButtonFinding",
    "ContainerFinding",
    "Element",
    "Finding",
    "Findings",
    "FormFinding",
    "InputFinding",
    "ParsedDocument",
    "SocialFinding",
    "classify_markup",
    "detect_auth_components",
    "parse_document",
]
