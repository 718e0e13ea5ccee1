"""Ollama-backed plan generator.

:class:`OllamaClient` wraps the local Ollama HTTP API with structured,
never-raising responses. :class:`OllamaPlanGenerator` sits on top of it and
turns a system instruction plus a rendered user context into the
``{"steps": [...]}`` document the planner expects.

Typical usage::

    generator = OllamaPlanGenerator(OllamaClient(), model="qwen2.5-coder:14b")
    document = await generator.generate(system_prompt, user_prompt)
"""

from __future__ import annotations

import json
from typing import Any

import httpx
from pydantic import BaseModel, Field

from configurator.config import OllamaConfig


class OllamaResponse(BaseModel):
    """Structured response from an Ollama generation call."""

    text: str = Field(default="", description="Generated text")
    model: str = Field(default="", description="Model that produced the response")
    success: bool = Field(default=True, description="Whether the request succeeded")
    error: str | None = Field(default=None, description="Error message on failure")


class PlanGenerationError(RuntimeError):
    """Raised when the generator cannot produce a usable plan document."""


class OllamaClient:
    """Async client for the Ollama REST API."""

    def __init__(self, base_url: str = "http://localhost:11434", timeout: int = 120) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: OllamaConfig) -> "OllamaClient":
        return cls(base_url=config.url, timeout=config.timeout)

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self.timeout, connect=10.0),
        )

    async def generate(
        self,
        prompt: str,
        model: str,
        system: str = "",
        json_output: bool = False,
        temperature: float = 0.2,
    ) -> OllamaResponse:
        """Generate text from a prompt.

        Args:
            prompt: The user prompt.
            model: Ollama model tag to use.
            system: Optional system prompt.
            json_output: Ask the server to constrain output to valid JSON.
            temperature: Sampling temperature.

        Returns:
            An ``OllamaResponse`` with the generated text or an error.
        """
        payload: dict = {
            "model": model,
            "prompt": prompt,
            "stream": False,
            "options": {"temperature": temperature},
        }
        if system:
            payload["system"] = system
        if json_output:
            payload["format"] = "json"

        try:
            async with self._client() as client:
                response = await client.post("/api/generate", json=payload)
                response.raise_for_status()
                data = response.json()
                return OllamaResponse(
                    text=data.get("response", ""),
                    model=data.get("model", model),
                    success=True,
                )
        except httpx.ConnectError:
            return OllamaResponse(
                model=model,
                success=False,
                error=f"Cannot connect to Ollama at {self.base_url}. Is the server running?",
            )
        except httpx.TimeoutException:
            return OllamaResponse(
                model=model,
                success=False,
                error=f"Request to Ollama timed out after {self.timeout}s.",
            )
        except httpx.HTTPStatusError as exc:
            return OllamaResponse(
                model=model,
                success=False,
                error=f"Ollama returned HTTP {exc.response.status_code}: {exc.response.text[:500]}",
            )
        except (httpx.HTTPError, ValueError) as exc:
            return OllamaResponse(
                model=model,
                success=False,
                error=f"Unexpected error during Ollama generate: {exc}",
            )


class OllamaPlanGenerator:
    """Plan generator backed by a local Ollama model.

    Unlike the client, the generator raises :class:`PlanGenerationError` on
    any failure; the planner treats that as a signal to fall back to the
    static plan.
    """

    def __init__(self, client: OllamaClient, model: str = "qwen2.5-coder:14b") -> None:
        self.client = client
        self.model = model

    @classmethod
    def from_config(cls, config: OllamaConfig) -> "OllamaPlanGenerator":
        return cls(OllamaClient.from_config(config), model=config.model)

    async def generate(self, system_instruction: str, user_context: str) -> dict[str, Any]:
        result = await self.client.generate(
            user_context,
            model=self.model,
            system=system_instruction,
            json_output=True,
        )
        if not result.success:
            raise PlanGenerationError(result.error or "Ollama generation failed")

        try:
            document = json.loads(result.text)
        except json.JSONDecodeError as exc:
            raise PlanGenerationError(f"Generator returned invalid JSON: {exc}") from exc

        if not isinstance(document, dict):
            raise PlanGenerationError("Generator returned JSON that is not an object")
        return document
