"""Generator settings and their environment overrides."""

from dataclasses import dataclass
from typing import Optional
import os


@dataclass
class GeneratorConfig:
    """
    Settings for the LLM generator.

    The timeout bounds every call; when it expires the call counts as a
    transport failure. The client never retries.
    """
    api_key: Optional[str] = None
    model: str = "claude-sonnet-4-20250514"
    language: str = "Turkish"
    temperature: float = 0.7
    max_tokens: int = 200
    timeout: float = 30.0

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ
        config = cls(api_key=env.get("ANTHROPIC_API_KEY"))
        if env.get("ALCHEMY_MODEL"):
            config.model = env["ALCHEMY_MODEL"]
        if env.get("ALCHEMY_LANGUAGE"):
            config.language = env["ALCHEMY_LANGUAGE"]
        if env.get("ALCHEMY_TIMEOUT"):
            config.timeout = float(env["ALCHEMY_TIMEOUT"])
        if env.get("ALCHEMY_TEMPERATURE"):
            config.temperature = float(env["ALCHEMY_TEMPERATURE"])
        return config
