import asyncio
import dataclasses
import sys
import unittest
from pathlib import Path
from types import SimpleNamespace

import httpx
import openai

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from assessor.ai.factory import get_text_generation_client  # noqa: E402
from assessor.ai.providers.openai_provider import OpenAIProvider  # noqa: E402
from assessor.ai.types import (  # noqa: E402
    TextGenerationError,
    TextGenerationRequest,
    TextGenerationTimeout,
)
from assessor.core.config import settings  # noqa: E402


class FakeCompletions:
    def __init__(self, *, delay=0.0, error=None):
        self.delay = delay
        self.error = error
        self.kwargs = None

    async def create(self, **kwargs):
        self.kwargs = kwargs
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content='{"ok": true}'))],
            usage=SimpleNamespace(prompt_tokens=12, completion_tokens=8),
            model="gpt-4o-mini-2024",
        )


def _provider(completions, call_timeout_s=5.0):
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return OpenAIProvider(model="gpt-4o-mini", api_key="", client=client, call_timeout_s=call_timeout_s)


REQUEST = TextGenerationRequest(system_prompt="system", user_prompt="user", max_tokens=200, temperature=0.1)


class OpenAIProviderTests(unittest.IsolatedAsyncioTestCase):
    async def test_response_is_mapped(self):
        completions = FakeCompletions()
        response = await _provider(completions).complete(REQUEST)

        self.assertEqual(response.text, '{"ok": true}')
        self.assertEqual(response.total_tokens, 20)
        self.assertEqual(response.model, "gpt-4o-mini-2024")
        self.assertEqual(completions.kwargs["response_format"], {"type": "json_object"})
        self.assertEqual(completions.kwargs["max_tokens"], 200)
        self.assertEqual(completions.kwargs["messages"][0], {"role": "system", "content": "system"})

    async def test_plain_text_request_omits_json_mode(self):
        completions = FakeCompletions()
        await _provider(completions).complete(dataclasses.replace(REQUEST, json_response=False))
        self.assertNotIn("response_format", completions.kwargs)

    async def test_slow_call_raises_timeout(self):
        provider = _provider(FakeCompletions(delay=1.0), call_timeout_s=0.01)
        with self.assertRaises(TextGenerationTimeout):
            await provider.complete(REQUEST)

    async def test_api_errors_are_wrapped(self):
        error = openai.APIConnectionError(request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions"))
        with self.assertRaises(TextGenerationError) as ctx:
            await _provider(FakeCompletions(error=error)).complete(REQUEST)
        self.assertEqual(ctx.exception.code, "EXTERNAL_SERVICE_ERROR")

    def test_missing_key_without_client_is_rejected(self):
        with self.assertRaises(TextGenerationError):
            OpenAIProvider(model="gpt-4o-mini", api_key="  ")


class FactoryTests(unittest.TestCase):
    def test_no_client_when_insights_not_configured(self):
        disabled = dataclasses.replace(settings, insights_enabled=False, openai_api_key="sk-real")
        self.assertIsNone(get_text_generation_client(disabled))

        placeholder = dataclasses.replace(settings, insights_enabled=True, openai_api_key="your_openai_key")
        self.assertIsNone(get_text_generation_client(placeholder))

    def test_openai_client_when_configured(self):
        configured = dataclasses.replace(settings, insights_enabled=True, openai_api_key="sk-test-123")
        client = get_text_generation_client(configured)
        self.assertIsInstance(client, OpenAIProvider)
        self.assertEqual(client.model, configured.ai_model)


if __name__ == "__main__":
    unittest.main()
