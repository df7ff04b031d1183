"""
onboard-cli - Provider onboarding for a command-line assistant.

Configures the model provider used by the assistant, with a preflight check
for local servers (Ollama, LM Studio):
- Probe of the OpenAI-compatible /models listing
- Remediation notes when the server is down or the model is missing
- Retry-or-continue loop before the provider prompt
- TOML configuration persistence
"""

__version__ = "0.1.0"

from onboard_cli.onboarding.local import apply_local_auth_choice
from onboard_cli.onboarding.presets import AuthChoice, LocalPreset, resolve_preset

__all__ = [
    "AuthChoice",
    "LocalPreset",
    "apply_local_auth_choice",
    "resolve_preset",
    "__version__",
]
