"""React Configurator configuration.

Centralised, typed configuration for project generation and capability
injection. All settings use Pydantic v2 models so they are validated at
construction time and can be built from environment variables without
boiler-plate.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field


class OllamaConfig(BaseModel):
    """Configuration for the optional Ollama-backed plan generator."""

    url: str = Field(default="http://localhost:11434")
    model: str = Field(default="qwen2.5-coder:14b")
    timeout: int = Field(default=120, ge=10, description="Per-request timeout in seconds")


class InstallConfig(BaseModel):
    """How dependencies are installed and templates are fetched."""

    command: list[str] = Field(default_factory=lambda: ["npm", "install"], min_length=1)
    timeout: int = Field(default=600, ge=30, description="Installer timeout in seconds")
    clone_timeout: int = Field(default=300, ge=30, description="git clone timeout in seconds")


class Config(BaseModel):
    """Global configurator settings.

    Instances are created once by the CLI entry point (usually through
    :meth:`from_env`) and handed to the :class:`~configurator.orchestrator.Orchestrator`.
    """

    template: str | None = Field(
        default=None, description="Default template directory or git URL for `create`"
    )
    skip_install: bool = Field(default=False)
    use_generator: bool = Field(
        default=False, description="Ask the Ollama generator for plans before the static table"
    )
    ollama: OllamaConfig = Field(default_factory=OllamaConfig)
    install: InstallConfig = Field(default_factory=InstallConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CONFIGURATOR_TEMPLATE, CONFIGURATOR_SKIP_INSTALL,
            CONFIGURATOR_USE_GENERATOR, CONFIGURATOR_OLLAMA_URL,
            CONFIGURATOR_OLLAMA_MODEL, CONFIGURATOR_OLLAMA_TIMEOUT,
            CONFIGURATOR_INSTALL_TIMEOUT, CONFIGURATOR_CLONE_TIMEOUT.
        """
        ollama_kwargs: dict[str, Any] = {}
        if os.environ.get("CONFIGURATOR_OLLAMA_URL"):
            ollama_kwargs["url"] = os.environ["CONFIGURATOR_OLLAMA_URL"]
        if os.environ.get("CONFIGURATOR_OLLAMA_MODEL"):
            ollama_kwargs["model"] = os.environ["CONFIGURATOR_OLLAMA_MODEL"]
        if os.environ.get("CONFIGURATOR_OLLAMA_TIMEOUT"):
            ollama_kwargs["timeout"] = int(os.environ["CONFIGURATOR_OLLAMA_TIMEOUT"])

        install_kwargs: dict[str, Any] = {}
        if os.environ.get("CONFIGURATOR_INSTALL_TIMEOUT"):
            install_kwargs["timeout"] = int(os.environ["CONFIGURATOR_INSTALL_TIMEOUT"])
        if os.environ.get("CONFIGURATOR_CLONE_TIMEOUT"):
            install_kwargs["clone_timeout"] = int(os.environ["CONFIGURATOR_CLONE_TIMEOUT"])

        return cls(
            template=os.environ.get("CONFIGURATOR_TEMPLATE") or None,
            skip_install=_env_flag("CONFIGURATOR_SKIP_INSTALL"),
            use_generator=_env_flag("CONFIGURATOR_USE_GENERATOR"),
            ollama=OllamaConfig(**ollama_kwargs),
            install=InstallConfig(**install_kwargs),
        )


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in {"1", "true", "yes", "on"}
