"""Detection of login buttons, auth containers and social sign-in controls."""

from .document import Element, ParsedDocument
from .evidence import (
    SHORT_SNIPPET_LIMIT,
    script_rendered_placeholder,
    truncate,
    unique_elements,
)
from .models import NOT_AVAILABLE, ButtonFinding, ContainerFinding, SocialFinding

LOGIN_BUTTON_KEYWORDS = ("login", "sign in", "signin", "log in", "submit", "continue", "enter")

AUTH_CONTAINER_SELECTORS = (
    ("class", "login"),
    ("class", "auth"),
    ("id", "login"),
    ("id", "auth"),
    ("class", "signin"),
    ("id", "signin"),
)
MAX_AUTH_CONTAINERS = 5
MAX_CONTAINER_MARKUP = 3000

SOCIAL_PROVIDERS = ("google", "facebook", "twitter", "github", "microsoft", "apple", "linkedin")
SOCIAL_INTENT_HINTS = ("sign", "login")
SOCIAL_TEXT_LIMIT = 50


def _button_label(element: Element) -> str:
    if element.tag_name == "input":
        return element.attr("value")
    return element.text


def detect_login_buttons(document: ParsedDocument) -> list[ButtonFinding]:
    """Buttons and submit inputs whose label reads like a login action."""
    candidates = [
        el
        for el in document.by_tag("button", "input")
        if el.tag_name == "button" or el.input_type == "submit"
    ]

    matched = []
    for element in candidates:
        label = _button_label(element).lower()
        if any(keyword in label for keyword in LOGIN_BUTTON_KEYWORDS):
            matched.append(element)

    findings = []
    for index, element in enumerate(unique_elements(matched)):
        findings.append(
            ButtonFinding(
                html=truncate(element.outer_html, SHORT_SNIPPET_LIMIT, marker=False),
                index=index,
                text=_button_label(element).strip() or NOT_AVAILABLE,
                # <button> without a type attribute submits its form
                type=element.input_type or "submit",
                id=element.id or NOT_AVAILABLE,
            )
        )

    if not findings and ('type="submit"' in document.html_lower or "<button" in document.html_lower):
        findings.append(
            ButtonFinding(
                html=script_rendered_placeholder("submit button"),
                index=0,
                script_rendered=True,
            )
        )
    return findings


def detect_auth_containers(document: ParsedDocument) -> list[ContainerFinding]:
    """Login/auth-named elements that wrap at least one input, capped at five."""
    findings: list[ContainerFinding] = []
    seen: set[str] = set()

    for attr, needle in AUTH_CONTAINER_SELECTORS:
        for element in document.by_attr_contains(attr, needle):
            if len(findings) >= MAX_AUTH_CONTAINERS:
                return findings
            markup = element.outer_html
            if markup in seen or len(markup) >= MAX_CONTAINER_MARKUP:
                continue
            if not element.has_descendant("input"):
                continue
            seen.add(markup)
            findings.append(
                ContainerFinding(
                    html=truncate(markup),
                    index=len(findings),
                    class_name=element.attr("class") or NOT_AVAILABLE,
                    id=element.id or NOT_AVAILABLE,
                    tag_name=element.tag_name,
                )
            )
    return findings


def _is_social_candidate(element: Element) -> bool:
    return (
        element.tag_name in ("button", "a")
        or element.attr("role").strip().lower() == "button"
    )


def _social_candidates(document: ParsedDocument) -> list[Element]:
    return document.matching(_is_social_candidate)


def detect_social_auth(document: ParsedDocument) -> list[SocialFinding]:
    """Third-party sign-in buttons and links."""
    findings: list[SocialFinding] = []
    seen: set[str] = set()

    for element in _social_candidates(document):
        text = element.text
        combined = f"{text} {element.attr('class')} {element.id}".lower()
        if not any(hint in combined for hint in SOCIAL_INTENT_HINTS):
            continue

        markup = element.outer_html
        for provider in SOCIAL_PROVIDERS:
            if provider not in combined or markup in seen:
                continue
            seen.add(markup)
            findings.append(
                SocialFinding(
                    html=truncate(markup, SHORT_SNIPPET_LIMIT, marker=False),
                    provider=provider.capitalize(),
                    text=text.strip()[:SOCIAL_TEXT_LIMIT],
                )
            )
    return findings
