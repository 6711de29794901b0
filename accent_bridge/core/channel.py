"""Inbound method channel between the UI shell and the resolver."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .resolver import AccentColorResolver
from ..models.color_request import ColorRequest

CHANNEL_NAME = "accent_bridge/theme"
GET_SYSTEM_COLOR = "getSystemColor"

STATUS_SUCCESS = "success"
STATUS_NOT_IMPLEMENTED = "not_implemented"


@dataclass(frozen=True)
class MethodCall:
    """A single call issued by the UI shell."""

    method: str
    arguments: Optional[Any] = None


@dataclass(frozen=True)
class MethodResponse:
    """Reply to a MethodCall."""

    status: str
    value: Optional[Any] = None

    @classmethod
    def success(cls, value: Any) -> 'MethodResponse':
        return cls(STATUS_SUCCESS, value)

    @classmethod
    def not_implemented(cls) -> 'MethodResponse':
        return cls(STATUS_NOT_IMPLEMENTED)

    @property
    def is_success(self) -> bool:
        return self.status == STATUS_SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        return {'status': self.status, 'value': self.value}


class ThemeChannel:
    """Dispatches theme method calls to their handlers."""

    def __init__(self, resolver: AccentColorResolver, name: str = CHANNEL_NAME):
        self.name = name
        self.resolver = resolver
        self._handlers: Dict[str, Callable[[Any], MethodResponse]] = {
            GET_SYSTEM_COLOR: self._get_system_color,
        }

    def handle(self, call: MethodCall) -> MethodResponse:
        """Answer a call; unknown methods get a not-implemented response."""
        handler = self._handlers.get(call.method)
        if handler is None:
            logging.debug(f"{self.name}: method not implemented: {call.method!r}")
            return MethodResponse.not_implemented()
        return handler(call.arguments)

    def invoke(self, method: str, arguments: Optional[Any] = None) -> MethodResponse:
        return self.handle(MethodCall(method, arguments))

    def _get_system_color(self, arguments: Any) -> MethodResponse:
        request = ColorRequest.from_arguments(arguments)
        return MethodResponse.success(self.resolver.resolve_request(request))
