"""
Generator: LLM combination.

Uses the Claude API to invent what two elements make together.
The LLM acts as the combination oracle; the resolver in front of it
makes sure each pair is asked about only once.

The answer comes back as a forced tool call, so the payload is a JSON
object checked against a schema with two required string fields:
    name:  the new element, a noun or short phrase
    emoji: one emoji for it

Requires: ANTHROPIC_API_KEY environment variable (or GeneratorConfig.api_key)
"""

import logging

import anthropic

from ..config import GeneratorConfig
from ..core.errors import TransportFailure, ValidationFailure


_logger = logging.getLogger(__name__)

TOOL_NAME = "record_combination"

REQUIRED_FIELDS = ("name", "emoji")


def build_prompt(name_a: str, name_b: str, language: str = "Turkish") -> str:
    return f"""Combine the concepts of "{name_a}" and "{name_b}" to create a new single object, concept, or entity.
Return the result in {language}.

Examples:
Fire + Water = Steam (Buhar)
Earth + Water = Mud (Çamur)
Wind + Earth = Dust (Toz)

Be creative, funny, or logical. Avoid creating sentences, just a noun or short phrase.
Provide a matching emoji.
Answer by calling the {TOOL_NAME} tool."""


def build_tool(language: str = "Turkish") -> dict:
    return {
        "name": TOOL_NAME,
        "description": "Record the element produced by combining two elements.",
        "input_schema": {
            "type": "object",
            "properties": {
                "name": {
                    "type": "string",
                    "description": f"The resulting name in {language}",
                },
                "emoji": {
                    "type": "string",
                    "description": "A single emoji representing the result",
                },
            },
            "required": list(REQUIRED_FIELDS),
        },
    }


def extract_payload(response) -> dict:
    """Pull the tool input out of a Messages API response."""
    blocks = getattr(response, "content", None) or []
    for block in blocks:
        if getattr(block, "type", None) == "tool_use" and block.name == TOOL_NAME:
            payload = block.input
            if not isinstance(payload, dict):
                raise ValidationFailure("tool input is not an object")
            missing = [k for k in REQUIRED_FIELDS if k not in payload]
            if missing:
                raise ValidationFailure(f"tool input missing {', '.join(missing)}")
            return payload
    if not blocks:
        raise ValidationFailure("empty response")
    raise ValidationFailure("response has no structured result")


def make_llm_generate(config: GeneratorConfig = None, client=None):
    """
    Returns a generator function that consults Claude.

    Args:
        config: model, language, temperature and timeout. Default: from env.
        client: an anthropic.Anthropic (or anything with .messages.create).
                Default: built from config, with retries disabled.
    """
    config = config or GeneratorConfig.from_env()
    if client is None:
        client = anthropic.Anthropic(
            api_key=config.api_key,
            timeout=config.timeout,
            max_retries=0,
        )
    tool = build_tool(config.language)

    def llm_generate(name_a: str, name_b: str) -> dict:
        try:
            response = client.messages.create(
                model=config.model,
                max_tokens=config.max_tokens,
                temperature=config.temperature,
                tools=[tool],
                tool_choice={"type": "tool", "name": TOOL_NAME},
                messages=[{
                    "role": "user",
                    "content": build_prompt(name_a, name_b, config.language),
                }],
            )
        except anthropic.APITimeoutError as e:
            raise TransportFailure(f"timed out after {config.timeout}s") from e
        except anthropic.APIConnectionError as e:
            raise TransportFailure(f"connection failed: {e}") from e
        except anthropic.APIStatusError as e:
            raise TransportFailure(f"status {e.status_code}: {e.message}") from e
        except anthropic.APIError as e:
            raise TransportFailure(f"malformed response: {e}") from e

        payload = extract_payload(response)
        _logger.debug("%s + %s -> %r", name_a, name_b, payload)
        return payload

    return llm_generate
