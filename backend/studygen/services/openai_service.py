"""
Centralized OpenAI Service

Every chat completion goes through this wrapper, which:
- times the call and keeps a short in-memory call history
- logs failures and reports them to Sentry
- re-raises, leaving recovery to the caller

Each call is attempted once. The content generator substitutes fallback
content when a call fails.

Usage:
    from studygen.services.openai_service import openai_service

    response = openai_service.chat_completion(
        messages=[{"role": "user", "content": "Hello"}],
        model="gpt-4o"
    )
"""

import os
import logging
from typing import Optional, Dict, Any, List
from datetime import datetime

import httpx
import sentry_sdk
from openai import OpenAI

logger = logging.getLogger(__name__)

MAX_CALL_HISTORY = 1000

# 60s total request, 10s connect
DEFAULT_TIMEOUT = httpx.Timeout(60.0, connect=10.0)


class OpenAIService:
    """Singleton wrapper for all OpenAI API calls."""

    _instance: Optional['OpenAIService'] = None

    def __new__(cls) -> 'OpenAIService':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._client: Optional[OpenAI] = None
        self._call_history: List[Dict[str, Any]] = []
        self._initialized = True

        logger.info("OpenAI Service initialized")

    @property
    def client(self) -> OpenAI:
        """
        The OpenAI client, built on first use.

        The application starts (and serves fallback content) without an API key;
        only an actual generation call needs one.

        Raises:
            ValueError: If OPENAI_API_KEY is not set
        """
        if self._client is None:
            api_key = os.getenv("OPENAI_API_KEY")
            if not api_key:
                raise ValueError(
                    "OPENAI_API_KEY environment variable is not set. "
                    "Please set it before using AI features."
                )
            self._client = OpenAI(api_key=api_key, timeout=DEFAULT_TIMEOUT, max_retries=0)

        return self._client

    def reset_client(self) -> None:
        """Drop the cached client so the next call re-reads OPENAI_API_KEY."""
        self._client = None

    def chat_completion(
        self,
        messages: List[Dict[str, str]],
        model: str = "gpt-4o",
        **kwargs
    ) -> Any:
        """
        Make a single chat completion request.

        Args:
            messages: List of message dicts with 'role' and 'content'
            model: OpenAI model to use (default: gpt-4o)
            **kwargs: Additional arguments passed to OpenAI API

        Returns:
            OpenAI ChatCompletion response

        Raises:
            Exception: Whatever the client or API raised
        """
        try:
            start_time = datetime.utcnow()
            result = self.client.chat.completions.create(
                model=model,
                messages=messages,
                **kwargs
            )
            latency_ms = (datetime.utcnow() - start_time).total_seconds() * 1000

            self._record_call(model, success=True, latency_ms=latency_ms)
            logger.debug("OpenAI call succeeded in %.0fms", latency_ms)

            return result

        except Exception as e:
            self._record_call(model, success=False, error=str(e))

            sentry_sdk.capture_exception(e)

            logger.error("OpenAI call failed: %s", e)
            raise

    def _record_call(
        self,
        model: str,
        success: bool,
        latency_ms: float = 0,
        error: str = None
    ):
        """Record call for metrics tracking."""
        self._call_history.append({
            "timestamp": datetime.utcnow().isoformat(),
            "model": model,
            "success": success,
            "latency_ms": latency_ms,
            "error": error
        })

        if len(self._call_history) > MAX_CALL_HISTORY:
            self._call_history = self._call_history[-MAX_CALL_HISTORY:]

    def get_status(self) -> Dict[str, Any]:
        """
        Summarize recent call outcomes for the health endpoint.

        Returns:
            Dict with call counts, success rate and average latency
        """
        recent_calls = self._call_history[-100:]
        successful_recent = sum(1 for c in recent_calls if c.get("success"))
        avg_latency = (
            sum(c.get("latency_ms", 0) for c in recent_calls if c.get("success"))
            / max(successful_recent, 1)
        )

        return {
            "total_calls": len(recent_calls),
            "successful_calls": successful_recent,
            "failed_calls": len(recent_calls) - successful_recent,
            "success_rate": (
                f"{(successful_recent / len(recent_calls) * 100):.1f}%"
                if recent_calls else "N/A"
            ),
            "avg_latency_ms": round(avg_latency, 1)
        }


# Global singleton instance
openai_service = OpenAIService()
