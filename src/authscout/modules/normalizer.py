"""Normalization of user-supplied scan targets."""

from urllib.parse import urlsplit

from authscout.errors import InvalidUrlError

DEFAULT_SCHEME = "https://"


def normalize_url(raw_input: str) -> str:
    """Return an absolute, scheme-qualified URL for ``raw_input``.

    Inputs without an ``http://`` or ``https://`` prefix get ``https://``.
    Raises InvalidUrlError when the result has no parseable host.
    """
    if raw_input is None:
        raise InvalidUrlError("", "no URL given")

    candidate = str(raw_input).strip()
    if not candidate:
        raise InvalidUrlError(raw_input, "no URL given")

    if not candidate.lower().startswith(("http://", "https://")):
        candidate = DEFAULT_SCHEME + candidate

    try:
        parts = urlsplit(candidate)
        # Accessing .port validates the port component.
        parts.port
    except ValueError as exc:
        raise InvalidUrlError(raw_input, str(exc)) from exc

    if not parts.scheme or not parts.hostname:
        raise InvalidUrlError(raw_input, "missing host")
    if any(ch.isspace() for ch in parts.netloc):
        raise InvalidUrlError(raw_input, "host contains whitespace")

    return candidate
