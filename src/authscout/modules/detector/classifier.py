"""Heuristic classification of authentication surfaces in a page."""

from authscout.utils.debug import debug_detection

from .controls import detect_auth_containers, detect_login_buttons, detect_social_auth
from .document import ParsedDocument, parse_document
from .fields import (
    detect_email_inputs,
    detect_forms,
    detect_password_inputs,
    detect_username_inputs,
)
from .models import Findings


def detect_auth_components(document: ParsedDocument) -> Findings:
    """Run every category detector over ``document``.

    Structural matches always take precedence. A category falls back to a
    single script-rendered finding only when the tree has no match but the
    raw markup mentions the construct.
    """
    findings = Findings(
        forms=detect_forms(document),
        password_inputs=detect_password_inputs(document),
        username_inputs=detect_username_inputs(document),
        email_inputs=detect_email_inputs(document),
        login_buttons=detect_login_buttons(document),
        auth_containers=detect_auth_containers(document),
        social_auth=detect_social_auth(document),
    )

    categories = findings.categories()
    debug_detection(
        {name: len(items) for name, items in categories.items()},
        [name for name, items in categories.items() if any(f.script_rendered for f in items)],
    )
    return findings


def classify_markup(source_text: str) -> Findings:
    """Parse raw markup and classify it."""
    return detect_auth_components(parse_document(source_text))
