"""Shared testing utilities for the provider tests.

Exports:
    - FakeGenAI: offline stand-in for the ``google.generativeai`` module.
    - Script: per-key behavior of one scripted streaming call.
    - collect(agen) -> list: drain an async generator on a fresh event loop.

The fake records every ``configure`` call and every streaming request (with
the key that was active when it was issued) so tests can assert on rotation
without any network access.
"""
from __future__ import annotations

import asyncio
import types
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Dict, List, Optional


class FakeChunk:
    """Stream chunk exposing ``.text`` like the SDK's response chunks."""

    def __init__(self, text: str) -> None:
        self.text = text


@dataclass
class Script:
    """What one streaming call does for a given key."""

    chunks: List[str] = field(default_factory=list)
    start_error: Optional[Exception] = None
    error_after: Optional[int] = None
    midstream_error: Optional[Exception] = None
    prompt_tokens: Optional[int] = 11
    output_tokens: Optional[int] = 7


class FakeStreamResponse:
    def __init__(self, script: Script, sdk: "FakeGenAI") -> None:
        self._script = script
        self._sdk = sdk
        self.usage_metadata = types.SimpleNamespace(
            prompt_token_count=script.prompt_tokens,
            candidates_token_count=script.output_tokens,
        )

    def __aiter__(self) -> AsyncIterator[FakeChunk]:
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[FakeChunk]:
        for idx, text in enumerate(self._script.chunks):
            if self._script.error_after is not None and idx == self._script.error_after:
                raise self._script.midstream_error or RuntimeError("stream broke")
            self._sdk.events.append(("chunk", text))
            yield FakeChunk(text)


class FakeGenerativeModel:
    def __init__(self, sdk: "FakeGenAI", **kwargs: Any) -> None:
        self._sdk = sdk
        self.kwargs = kwargs

    async def generate_content_async(self, contents: Any, stream: bool = False) -> FakeStreamResponse:
        key = self._sdk.configured_key
        self._sdk.calls.append({"key": key, "contents": contents, "stream": stream, **self.kwargs})
        script = self._sdk.next_script(key)
        if script.start_error is not None:
            raise script.start_error
        self._sdk.events.append(("call", key))
        return FakeStreamResponse(script, self._sdk)


class FakeGenAI:
    """Minimal ``google.generativeai`` replacement used by the adapter."""

    def __init__(self) -> None:
        self.configured: List[str] = []
        self.calls: List[Dict[str, Any]] = []
        self.events: List[tuple] = []
        self.scripts: Dict[str, List[Script]] = {}
        self.default = Script(chunks=["Hello", ", ", "world"])

    @property
    def configured_key(self) -> Optional[str]:
        return self.configured[-1] if self.configured else None

    def configure(self, *, api_key: str) -> None:
        self.configured.append(api_key)

    def GenerativeModel(self, **kwargs: Any) -> FakeGenerativeModel:  # noqa: N802 - mirrors SDK name
        return FakeGenerativeModel(self, **kwargs)

    def script(self, key: str, *scripts: Script) -> None:
        """Queue scripts for ``key``; the last one repeats once the queue drains."""
        self.scripts[key] = list(scripts)

    def next_script(self, key: Optional[str]) -> Script:
        queue = self.scripts.get(key or "")
        if not queue:
            return self.default
        return queue.pop(0) if len(queue) > 1 else queue[0]


def collect(agen) -> list:
    """Drain an async generator on a fresh event loop."""

    async def _drain() -> list:
        return [item async for item in agen]

    return asyncio.run(_drain())


__all__ = ["FakeChunk", "FakeGenAI", "Script", "collect"]
