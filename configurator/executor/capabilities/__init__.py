"""Built-in capability handlers."""

from configurator.executor.capabilities.base import CapabilityHandler, GenericHandler
from configurator.executor.capabilities.forms import FormsHandler
from configurator.executor.capabilities.react_query import ReactQueryHandler
from configurator.executor.capabilities.redux import ReduxHandler
from configurator.executor.capabilities.tailwind import TailwindHandler
from configurator.executor.capabilities.toast import ToastHandler

__all__ = [
    "CapabilityHandler",
    "GenericHandler",
    "TailwindHandler",
    "ReduxHandler",
    "ReactQueryHandler",
    "FormsHandler",
    "ToastHandler",
]
