"""Fixed connection presets for local model servers."""

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict

from ..exceptions import UnknownAuthChoiceError

OLLAMA_LOCAL_BASE_URL = "http://127.0.0.1:11434/v1"
OLLAMA_LOCAL_DEFAULT_MODEL = "llama3.3"
LM_STUDIO_LOCAL_BASE_URL = "http://127.0.0.1:1234/v1"
LM_STUDIO_DEFAULT_MODEL = "local-model"


class AuthChoice(str, Enum):
    """Provider choices offered during onboarding."""

    OLLAMA_LOCAL = "ollama-local"
    LM_STUDIO_LOCAL = "lm-studio-local"
    CUSTOM_API = "custom-api"


LOCAL_AUTH_CHOICES = (AuthChoice.OLLAMA_LOCAL, AuthChoice.LM_STUDIO_LOCAL)


class LocalPreset(BaseModel):
    """Connection parameters for one local model server."""

    model_config = ConfigDict(frozen=True)

    is_ollama: bool
    display_name: str
    base_url: str
    expected_model_id: str
    provider_id: str
    alias: str


def is_local_auth_choice(choice: object) -> bool:
    """Return True if ``choice`` names one of the local provider presets."""
    return choice in LOCAL_AUTH_CHOICES


def resolve_preset(choice: Union[AuthChoice, str]) -> LocalPreset:
    """
    Build the preset for a local auth choice.

    Args:
        choice: ``"ollama-local"`` or ``"lm-studio-local"`` (or the enum member)

    Returns:
        Immutable LocalPreset for the chosen server

    Raises:
        UnknownAuthChoiceError: If ``choice`` is not a local auth choice
    """
    if not is_local_auth_choice(choice):
        raise UnknownAuthChoiceError(choice)

    if AuthChoice(choice) is AuthChoice.OLLAMA_LOCAL:
        return LocalPreset(
            is_ollama=True,
            display_name="Ollama",
            base_url=OLLAMA_LOCAL_BASE_URL,
            expected_model_id=OLLAMA_LOCAL_DEFAULT_MODEL,
            provider_id="ollama",
            alias="ollama",
        )

    return LocalPreset(
        is_ollama=False,
        display_name="LM Studio",
        base_url=LM_STUDIO_LOCAL_BASE_URL,
        expected_model_id=LM_STUDIO_DEFAULT_MODEL,
        provider_id="lmstudio",
        alias="lmstudio",
    )
