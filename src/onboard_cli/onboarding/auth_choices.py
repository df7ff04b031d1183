"""Auth choices offered by the onboarding command, and their grouping."""

from dataclasses import dataclass

from ..ui.prompter import SelectOption
from .presets import AuthChoice

LOCAL_GROUP = "local"
CUSTOM_GROUP = "custom"

GROUP_TITLES = {
    LOCAL_GROUP: "Local providers",
    CUSTOM_GROUP: "Custom API",
}


@dataclass(frozen=True)
class AuthChoiceOption:
    value: str
    label: str
    hint: str
    group: str

    def as_select_option(self) -> SelectOption:
        return SelectOption(value=self.value, label=self.label, hint=self.hint)


def build_auth_choice_options() -> list[AuthChoiceOption]:
    """All auth choices, local providers first."""
    return [
        AuthChoiceOption(
            value=AuthChoice.OLLAMA_LOCAL.value,
            label="Ollama (local)",
            hint="OpenAI-compatible API on 127.0.0.1:11434",
            group=LOCAL_GROUP,
        ),
        AuthChoiceOption(
            value=AuthChoice.LM_STUDIO_LOCAL.value,
            label="LM Studio (local)",
            hint="Local server mode on 127.0.0.1:1234",
            group=LOCAL_GROUP,
        ),
        AuthChoiceOption(
            value=AuthChoice.CUSTOM_API.value,
            label="Custom API endpoint",
            hint="Any OpenAI- or Anthropic-compatible base URL",
            group=CUSTOM_GROUP,
        ),
    ]


def build_auth_choice_groups() -> dict[str, list[AuthChoiceOption]]:
    """Auth choices keyed by group id, in display order."""
    groups: dict[str, list[AuthChoiceOption]] = {group: [] for group in GROUP_TITLES}
    for option in build_auth_choice_options():
        groups[option.group].append(option)
    return groups
