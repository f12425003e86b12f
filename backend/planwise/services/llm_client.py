"""Unified LLM client — tries OpenAI first, falls back to Anthropic."""

import json
import logging

from openai import AsyncOpenAI
import anthropic

from planwise.config import settings

logger = logging.getLogger(__name__)

# Both providers require an object at the root of a structured response,
# so non-object schemas travel inside this key and are unwrapped on return.
_ENVELOPE_KEY = "items"


class LLMUnavailableError(RuntimeError):
    """No provider is configured, or every configured provider failed."""


def _wrap_schema(schema: dict) -> tuple[dict, bool]:
    if schema.get("type") == "object":
        return schema, False
    return {
        "type": "object",
        "properties": {_ENVELOPE_KEY: schema},
        "required": [_ENVELOPE_KEY],
        "additionalProperties": False,
    }, True


def _unwrap_text(text: str) -> str:
    """Pull the enveloped value back out. Text that is not the envelope is returned as-is."""
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        return text
    if isinstance(parsed, dict) and set(parsed) == {_ENVELOPE_KEY}:
        return json.dumps(parsed[_ENVELOPE_KEY])
    return text


class LLMClient:
    """Unified async LLM client with OpenAI primary + Anthropic fallback."""

    def __init__(self):
        self._openai = None
        self._anthropic = None

        if settings.openai_api_key:
            self._openai = AsyncOpenAI(api_key=settings.openai_api_key)
        if settings.anthropic_api_key:
            self._anthropic = anthropic.AsyncAnthropic(api_key=settings.anthropic_api_key)

    @property
    def configured(self) -> bool:
        return self._openai is not None or self._anthropic is not None

    async def complete(
        self,
        system: str,
        user: str,
        *,
        response_schema: dict | None = None,
        schema_name: str = "response",
        max_tokens: int = 1000,
        temperature: float = 0,
    ) -> str:
        """Get a completion from the best available LLM.

        Args:
            system: System prompt
            user: User message
            response_schema: JSON Schema the output must follow. Array or
                scalar schemas are supported; the raw JSON text of the value
                is returned either way.
            schema_name: Name given to the schema / tool on the provider side
            max_tokens: Max output tokens
            temperature: Sampling temperature

        Returns:
            Raw text response from the LLM ("" when the provider sent nothing).

        Raises:
            LLMUnavailableError if no provider is configured or all fail.
        """
        if not self.configured:
            raise LLMUnavailableError("No LLM provider configured (set OPENAI_API_KEY or ANTHROPIC_API_KEY)")

        errors = []
        wrapped_schema, enveloped = (None, False)
        if response_schema is not None:
            wrapped_schema, enveloped = _wrap_schema(response_schema)

        # Try OpenAI first
        if self._openai:
            try:
                kwargs: dict = {
                    "model": settings.openai_model,
                    "max_tokens": max_tokens,
                    "temperature": temperature,
                    "messages": [
                        {"role": "system", "content": system},
                        {"role": "user", "content": user},
                    ],
                }
                if wrapped_schema is not None:
                    kwargs["response_format"] = {
                        "type": "json_schema",
                        "json_schema": {"name": schema_name, "schema": wrapped_schema, "strict": True},
                    }
                response = await self._openai.chat.completions.create(**kwargs)
                text = (response.choices[0].message.content or "").strip()
                return _unwrap_text(text) if enveloped and text else text
            except Exception as e:
                errors.append(f"OpenAI: {e}")
                logger.warning(f"OpenAI failed, trying Anthropic: {e}")

        # Fallback to Anthropic
        if self._anthropic:
            try:
                kwargs = {
                    "model": settings.anthropic_model,
                    "max_tokens": max_tokens,
                    "temperature": temperature,
                    "system": system,
                    "messages": [{"role": "user", "content": user}],
                }
                if wrapped_schema is not None:
                    kwargs["tools"] = [{
                        "name": schema_name,
                        "description": "Return the structured result.",
                        "input_schema": wrapped_schema,
                    }]
                    kwargs["tool_choice"] = {"type": "tool", "name": schema_name}
                response = await self._anthropic.messages.create(**kwargs)
                if wrapped_schema is not None:
                    for block in response.content:
                        if block.type == "tool_use":
                            value = block.input
                            if enveloped and isinstance(value, dict) and _ENVELOPE_KEY in value:
                                value = value[_ENVELOPE_KEY]
                            return json.dumps(value)
                    return ""
                return response.content[0].text.strip() if response.content else ""
            except Exception as e:
                errors.append(f"Anthropic: {e}")
                logger.warning(f"Anthropic also failed: {e}")

        raise LLMUnavailableError(f"All LLM providers failed: {'; '.join(errors)}")


# Singleton
llm_client = LLMClient()
