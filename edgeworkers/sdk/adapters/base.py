"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

SDK Transport Adapter base class and data structures.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class SDKRequest:
    """Outbound SDK request representation.

    ``body`` is JSON-encoded on the wire; ``content`` is sent as raw bytes.
    At most one of the two is set.
    """
    method: str
    path: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[Any] = None
    params: Optional[Dict[str, Any]] = None
    content: Optional[bytes] = None


@dataclass
class SDKResponse:
    """Inbound SDK response representation.

    ``content`` holds the raw body. Passing ``body`` instead (JSON data, text
    or bytes) fills ``content`` from it, which keeps hand-built responses in
    tests short.
    """
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: Any = None
    elapsed_ms: float = 0.0
    content: bytes = b""

    def __post_init__(self) -> None:
        if not self.content and self.body is not None:
            if isinstance(self.body, (bytes, bytearray)):
                self.content = bytes(self.body)
            elif isinstance(self.body, str):
                self.content = self.body.encode("utf-8")
            else:
                self.content = json.dumps(self.body).encode("utf-8")

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Decode the body as JSON. Raises ``ValueError`` on malformed input."""
        return json.loads(self.content)

    def header(self, name: str, default: str = "") -> str:
        """Case-insensitive header lookup."""
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return default


class BaseAdapter(ABC):
    """Abstract base for all transport adapters."""

    @abstractmethod
    async def send(self, request: SDKRequest) -> SDKResponse:
        """Send a request and return the response."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release adapter resources."""
        ...

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Whether the adapter is in a usable state."""
        ...
