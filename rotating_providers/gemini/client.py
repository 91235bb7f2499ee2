"""GeminiProvider adapter with API key rotation.

Uses google-generativeai (google-generativeai>=0.8.0) ``GenerativeModel`` and
its async streaming call. Every request runs against the key rotator's current
credential; a quota or rate-limit failure rotates to the next credential and
re-issues the whole request, up to a bounded number of attempts.
"""

from __future__ import annotations

import asyncio
import time
from typing import Any, AsyncIterator, Iterable, List, Optional, Sequence, Tuple

import google.generativeai as genai

from ..base.constants import MISSING_PRIMARY_KEY_ERROR, ROTATION_EXHAUSTED_ERROR
from ..base.dto import HandlerOptions
from ..base.errors import ErrorCode, ProviderError, classify_exception, is_rotation_error
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ChatResponse, Message, ModelInfo
from ..base.resilience.retry import RetryConfig
from ..base.rotation import KeyRotator, mask_key
from ..base.streaming import (
    StreamEvent,
    StreamTextEvent,
    StreamUsageEvent,
    accumulate_events,
    build_token_usage,
)
from .helpers import convert_messages_to_gemini
from .models import resolve_model


class GeminiProvider:
    """Streaming Gemini chat provider that spreads requests over several API keys.

    The provider owns a :class:`KeyRotator` built from the primary key and the
    additional keys in its options. Usage is counted once per established
    streaming call, before any chunk is read.
    """

    def __init__(self, options: Optional[HandlerOptions] = None, **overrides: Any) -> None:
        """Initialize the provider and configure the SDK with the primary key.

        Args:
            options: Validated construction options.
            **overrides: Option fields applied on top of ``options`` (or used
                alone when ``options`` is omitted).

        Raises:
            ProviderError: ``CONFIGURATION`` when no primary key is given.
        """
        if options is None:
            options = HandlerOptions(**overrides)
        elif overrides:
            options = HandlerOptions(**{**options.model_dump(), **overrides})
        if not options.api_key:
            raise ProviderError(
                code=ErrorCode.CONFIGURATION,
                message=MISSING_PRIMARY_KEY_ERROR,
                provider=self.provider_name,
                model=options.model_id,
            )
        self._options = options
        self._logger = get_logger("providers.gemini")
        self._rotator = KeyRotator(
            options.api_key,
            options.api_keys,
            max_requests_per_key=options.max_requests_per_key,
            provider=self.provider_name,
        )
        self._active_key: Optional[str] = None
        self._connect(self._rotator.current_key())

    @property
    def provider_name(self) -> str:
        return "gemini"

    @property
    def key_rotator(self) -> KeyRotator:
        return self._rotator

    @property
    def active_key(self) -> Optional[str]:
        """Credential the SDK is currently configured with."""
        return self._active_key

    def default_model(self) -> Optional[str]:
        """Return the model id requests will use."""
        return self.get_model()[0]

    def get_model(self) -> Tuple[str, ModelInfo]:
        """Resolve the configured model id against the static registry.

        Unknown or missing ids resolve to the default model; the lookup has no
        side effects.
        """
        return resolve_model(self._options.model_id)

    def update_api_keys(self, primary_key: str, additional_keys: Optional[Iterable[str]] = None) -> None:
        """Replace the credential set (e.g. after a settings change) and reconnect."""
        if not primary_key:
            raise ProviderError(
                code=ErrorCode.CONFIGURATION,
                message=MISSING_PRIMARY_KEY_ERROR,
                provider=self.provider_name,
            )
        self._rotator.update_keys(primary_key, additional_keys)
        self._connect(self._rotator.current_key())

    # ---- Streaming ----
    async def create_message(self, system_prompt: str, messages: Sequence[Message]) -> AsyncIterator[StreamEvent]:
        """Stream one chat completion as text events followed by one usage event.

        Quota and rate-limit failures (see ``is_rotation_error``) rotate the
        key and re-issue the entire request; the caller only sees the events
        of the attempt that succeeds, plus whatever an interrupted attempt had
        already yielded. Any other error propagates unchanged.

        Raises:
            ProviderError: ``RATE_LIMIT`` once every allowed attempt hit a
                quota error; the last provider error is chained as the cause.
        """
        model_id, _info = self.get_model()
        ctx = LogContext(provider=self.provider_name, model=model_id)
        contents = convert_messages_to_gemini(messages)
        retry_cfg = self._build_retry_config(ctx)
        attempt = 0
        while True:
            try:
                async for event in self._stream_attempt(model_id, system_prompt, contents, ctx, attempt):
                    yield event
                return
            except Exception as exc:
                if not is_rotation_error(exc):
                    normalized_log_event(
                        self._logger,
                        "stream.error",
                        ctx,
                        phase="stream",
                        attempt=attempt,
                        error_code=classify_exception(exc).value,
                        error=str(exc),
                    )
                    raise
                delay = retry_cfg.delay_for(attempt)
                if retry_cfg.attempt_logger:
                    retry_cfg.attempt_logger(
                        attempt=attempt,
                        max_attempts=retry_cfg.max_attempts,
                        delay=delay,
                        error=exc,
                    )
                if delay is None:
                    raise ProviderError(
                        code=ErrorCode.RATE_LIMIT,
                        message=ROTATION_EXHAUSTED_ERROR,
                        provider=self.provider_name,
                        model=model_id,
                        retryable=True,
                        raw=exc,
                    ) from exc
                self._rotator.rotate_key()
                if delay > 0:
                    await asyncio.sleep(delay)
                attempt += 1

    async def chat(self, system_prompt: str, messages: Sequence[Message]) -> ChatResponse:
        """Run ``create_message`` to completion and accumulate the events."""
        model_id, _info = self.get_model()
        t0 = time.perf_counter()
        events: List[StreamEvent] = [event async for event in self.create_message(system_prompt, messages)]
        response = accumulate_events(events, provider=self.provider_name, model=model_id)
        response.meta.latency_ms = (time.perf_counter() - t0) * 1000.0
        return response

    # -------------------- internal helpers --------------------
    def _connect(self, api_key: str) -> None:
        """Point the SDK at ``api_key``.

        ``genai.configure`` is process-global, so this runs before every
        attempt rather than only after a rotation.
        """
        genai.configure(api_key=api_key)
        self._active_key = api_key

    async def _stream_attempt(
        self,
        model_id: str,
        system_prompt: str,
        contents: List[dict],
        ctx: LogContext,
        attempt: int,
    ) -> AsyncIterator[StreamEvent]:
        """Issue one streaming call with the current key and translate its chunks."""
        key = self._rotator.current_key()
        self._connect(key)
        gen_model = genai.GenerativeModel(
            model_name=model_id,
            system_instruction=system_prompt or None,
            generation_config={"temperature": 0},
        )
        normalized_log_event(
            self._logger,
            "stream.start",
            ctx,
            phase="start",
            attempt=attempt,
            key=mask_key(key),
        )
        t0 = time.perf_counter()
        response = await gen_model.generate_content_async(contents, stream=True)
        # Counted per established call, before any chunk is consumed.
        self._rotator.increment_request_count()

        emitted = 0
        async for chunk in response:
            emitted += 1
            yield StreamTextEvent(text=self._extract_text_from_chunk(chunk))

        input_tokens, output_tokens = self._extract_usage(response)
        normalized_log_event(
            self._logger,
            "stream.end",
            ctx,
            phase="finalize",
            attempt=attempt,
            emitted=emitted,
            tokens=build_token_usage(input_tokens, output_tokens),
            latency_ms=(time.perf_counter() - t0) * 1000.0,
        )
        yield StreamUsageEvent(input_tokens=input_tokens, output_tokens=output_tokens)

    def _extract_text_from_chunk(self, chunk: Any) -> str:
        """Translate a streaming chunk to its text delta ("" when it has none).

        ``chunk.text`` raises ``ValueError`` in the SDK when the chunk carries
        no text part (e.g. a safety or finish-only chunk); the first
        candidate's parts are consulted before giving up.
        """
        try:
            text = chunk.text
            if text:
                return text
        except (AttributeError, ValueError):
            pass
        try:
            parts = chunk.candidates[0].content.parts
            return "".join(getattr(p, "text", "") or "" for p in parts)
        except (AttributeError, IndexError, TypeError):
            return ""

    @staticmethod
    def _extract_usage(response: Any) -> Tuple[int, int]:
        """Read prompt/candidate token counts from ``usage_metadata`` (0 when absent)."""
        usage = getattr(response, "usage_metadata", None)
        prompt = getattr(usage, "prompt_token_count", None) or 0
        completion = getattr(usage, "candidates_token_count", None) or 0
        return int(prompt), int(completion)

    def _build_retry_config(self, ctx: LogContext) -> RetryConfig:
        """Construct the rotation retry bounds with attempt logging wired in."""
        max_attempts = self._options.max_rotation_attempts or len(self._rotator) + 1

        def _attempt_logger(*, attempt: int, max_attempts: int, delay: float | None, error: BaseException | None) -> None:
            normalized_log_event(
                self._logger,
                "stream.retry",
                ctx,
                phase="retry",
                attempt=attempt,
                error_code=ErrorCode.RATE_LIMIT.value,
                max_attempts=max_attempts,
                delay=delay,
                exhausted=delay is None,
                error=str(error) if error else None,
            )

        return RetryConfig(
            max_attempts=max_attempts,
            delay_initial=self._options.retry_delay,
            attempt_logger=_attempt_logger,
        )


__all__ = ["GeminiProvider"]
