"""Well-known login pages useful for trying the detector."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PresetTarget:
    key: str
    name: str
    url: str


PRESET_TARGETS: tuple[PresetTarget, ...] = (
    PresetTarget("nytimes", "NY Times (News)", "https://myaccount.nytimes.com/auth/login"),
    PresetTarget("etsy", "Etsy (E-commerce)", "https://www.etsy.com/signin"),
    PresetTarget("trello", "Trello (SaaS)", "https://trello.com/login"),
    PresetTarget("medium", "Medium (Blog)", "https://medium.com/m/signin"),
    PresetTarget("github", "GitHub (Dev)", "https://github.com/login"),
)


def get_preset(key: str) -> PresetTarget | None:
    """Find a preset by key, case-insensitively."""
    lowered = key.strip().lower()
    for preset in PRESET_TARGETS:
        if preset.key == lowered:
            return preset
    return None
