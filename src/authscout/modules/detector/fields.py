"""Detection of login forms and credential input fields."""

from .document import Element, ParsedDocument
from .evidence import script_rendered_placeholder, truncate, unique_elements
from .models import NOT_AVAILABLE, FormFinding, InputFinding

USERNAME_HINTS = ("user", "login")

# (attribute, substring) pairs, evaluated in this order.
USERNAME_SELECTORS = (
    ("name", "user"),
    ("name", "login"),
    ("name", "username"),
    ("id", "user"),
    ("id", "login"),
    ("id", "username"),
    ("placeholder", "user"),
    ("placeholder", "email"),
)
USERNAME_LEXICAL_PATTERNS = ('name="username"', 'name="user"', 'name="login"', 'id="username"')


def _inputs_of_type(document: ParsedDocument, input_type: str) -> list[Element]:
    return [el for el in document.by_tag("input") if el.input_type == input_type]


def _looks_like_username(element: Element) -> bool:
    name = element.name.lower()
    ident = element.id.lower()
    return any(hint in name or hint in ident for hint in USERNAME_HINTS)


def detect_forms(document: ParsedDocument) -> list[FormFinding]:
    """Forms carrying at least one credential signal."""
    findings: list[FormFinding] = []
    for form in unique_elements(document.by_tag("form")):
        markup = form.outer_html
        lower = markup.lower()
        inputs = form.find_all("input")

        has_password = any(el.input_type == "password" for el in inputs) or (
            'type="password"' in lower or "type=password" in lower
        )
        has_email = any(el.input_type == "email" for el in inputs) or (
            'type="email"' in lower or "type=email" in lower
        )
        has_username = any(_looks_like_username(el) for el in inputs) or (
            'name="user' in lower or 'name="login' in lower
        )
        if not (has_password or has_email or has_username):
            continue

        findings.append(
            FormFinding(
                html=truncate(markup),
                index=len(findings),
                has_password=has_password,
                has_email=has_email,
                has_username=has_username,
                action=form.attr("action") or NOT_AVAILABLE,
                method=(form.attr("method") or "GET").upper(),
                id=form.id or NOT_AVAILABLE,
            )
        )
    return findings


def _input_finding(element: Element, index: int) -> InputFinding:
    return InputFinding(
        html=truncate(element.outer_html),
        index=index,
        id=element.id or NOT_AVAILABLE,
        name=element.name or NOT_AVAILABLE,
        placeholder=element.attr("placeholder") or NOT_AVAILABLE,
        autocomplete=element.attr("autocomplete") or NOT_AVAILABLE,
        input_type=element.input_type or None,
    )


def _synthetic_input(what: str, input_type: str | None) -> InputFinding:
    return InputFinding(
        html=script_rendered_placeholder(what),
        index=0,
        input_type=input_type,
        script_rendered=True,
    )


def _typed_inputs(document: ParsedDocument, input_type: str) -> list[InputFinding]:
    elements = unique_elements(_inputs_of_type(document, input_type))
    findings = [_input_finding(el, i) for i, el in enumerate(elements)]
    if not findings and f'type="{input_type}"' in document.html_lower:
        findings.append(_synthetic_input(f"{input_type} field", input_type))
    return findings


def detect_password_inputs(document: ParsedDocument) -> list[InputFinding]:
    return _typed_inputs(document, "password")


def detect_email_inputs(document: ParsedDocument) -> list[InputFinding]:
    return _typed_inputs(document, "email")


def detect_username_inputs(document: ParsedDocument) -> list[InputFinding]:
    """Inputs named or labelled like a username, excluding password/email fields."""
    matches: list[Element] = []
    for attr, needle in USERNAME_SELECTORS:
        matches.extend(
            el
            for el in document.by_attr_contains(attr, needle, tag="input")
            if el.input_type not in ("password", "email")
        )

    elements = unique_elements(matches)
    findings = [_input_finding(el, i) for i, el in enumerate(elements)]
    if not findings and any(p in document.html_lower for p in USERNAME_LEXICAL_PATTERNS):
        findings.append(_synthetic_input("username field", None))
    return findings
