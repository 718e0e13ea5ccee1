"""Capability id -> handler dispatch table."""

from __future__ import annotations

from collections.abc import Iterator

from configurator.executor.capabilities import (
    CapabilityHandler,
    FormsHandler,
    GenericHandler,
    ReactQueryHandler,
    ReduxHandler,
    TailwindHandler,
    ToastHandler,
)
from configurator.templates import TemplateRenderer


class HandlerRegistry:
    """Maps capability ids to handlers.

    Ids without a registered handler resolve to a :class:`GenericHandler`, so
    their plans still run through the generic step interpreter.
    """

    def __init__(self, handlers: list[CapabilityHandler] | None = None) -> None:
        self._handlers: dict[str, CapabilityHandler] = {}
        for handler in handlers or []:
            self.register(handler)

    def register(self, handler: CapabilityHandler) -> None:
        if not handler.capability:
            raise ValueError(f"{type(handler).__name__} has no capability id")
        self._handlers[handler.capability] = handler

    def has(self, capability: str) -> bool:
        return capability in self._handlers

    def get(self, capability: str) -> CapabilityHandler:
        handler = self._handlers.get(capability)
        if handler is None:
            return GenericHandler(capability)
        return handler

    def ids(self) -> list[str]:
        return list(self._handlers)

    def __iter__(self) -> Iterator[CapabilityHandler]:
        return iter(self._handlers.values())


def build_registry(renderer: TemplateRenderer | None = None) -> HandlerRegistry:
    """Return a registry with every built-in handler."""
    renderer = renderer or TemplateRenderer()
    return HandlerRegistry(
        [
            TailwindHandler(renderer),
            ReduxHandler(renderer),
            ReactQueryHandler(renderer),
            FormsHandler(renderer),
            ToastHandler(renderer),
        ]
    )
