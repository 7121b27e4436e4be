"""Forward a single question to an OpenAI-compatible chat completion API."""

from typing import Optional

import httpx
import openai

from settings import Settings

NO_RESPONSE = "No response"


def make_client(
    settings: Settings, http_client: Optional[httpx.AsyncClient] = None
) -> openai.AsyncOpenAI:
    """Return a client bound to the configured endpoint and key."""
    return openai.AsyncOpenAI(
        api_key=settings.AI_CHAT_KEY,
        base_url=settings.AI_CHAT_BASE_URL,
        max_retries=0,
        http_client=http_client,
    )


async def ask(
    settings: Settings, content: str, http_client: Optional[httpx.AsyncClient] = None
) -> str:
    """Send *content* as a single user message and return the first reply.

    A caller-supplied *http_client* is left open.
    """
    client = make_client(settings, http_client)
    try:
        resp = await client.chat.completions.create(
            model=settings.AI_CHAT_MODEL,
            messages=[{"role": "user", "content": content}],
        )
    finally:
        if http_client is None:
            await client.close()
    if not resp.choices:
        return NO_RESPONSE
    message = getattr(resp.choices[0], "message", None)
    return getattr(message, "content", None) or NO_RESPONSE
