"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

API error normalization.

Any response whose status differs from the one an operation expects is turned
into a single ``APIError``, whatever the body looks like:

1. problem-detail JSON is decoded field by field;
2. HTML or XML bodies are entity-unescaped and used as the detail;
3. anything else is used as the detail verbatim.

In the fallback cases the title is ``UNMARSHAL_FAILURE_TITLE``. The status is
always the one observed on the wire.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import Optional, Union

from edgeworkers.exceptions import OperationError
from edgeworkers.logging_config import get_logger, log_api_error
from edgeworkers.sdk.adapters.base import SDKResponse
from edgeworkers.sdk.models import WireModel, wire

logger = get_logger(__name__)

UNMARSHAL_FAILURE_TITLE = (
    "Failed to unmarshal error body. EdgeWorkers API failed. "
    "Check details for more information."
)

_MARKUP_RE = re.compile(r"^\s*<(?:!doctype|\?xml|!--|[a-z][\w:.-]*)[\s>/]", re.IGNORECASE)


@dataclass
class AdditionalDetail(WireModel):
    request_id: str = wire("requestId", "", omitempty=True)


@dataclass
class ProblemDetail(WireModel):
    """Problem-detail envelope returned by the EdgeWorkers and EdgeKV APIs."""

    type: str = wire("type", "", omitempty=True)
    title: str = wire("title", "", omitempty=True)
    detail: str = wire("detail", "", omitempty=True)
    instance: str = wire("instance", "", omitempty=True)
    status: int = wire("status", 0, omitempty=True)
    error_code: str = wire("errorCode", "", omitempty=True)
    method: str = wire("method", "", omitempty=True)
    server_ip: str = wire("serverIp", "", omitempty=True)
    client_ip: str = wire("clientIp", "", omitempty=True)
    request_id: str = wire("requestId", "", omitempty=True)
    request_time: str = wire("requestTime", "", omitempty=True)
    authz_realm: str = wire("authzRealm", "", omitempty=True)
    additional_detail: Optional[AdditionalDetail] = wire("additionalDetail", omitempty=True)

    def matches(self, other: Union["ProblemDetail", "APIError"]) -> bool:
        """Same kind of error: equal status, and equal titles when both have one."""
        if isinstance(other, APIError):
            other = other.problem
        if self.status != other.status:
            return False
        if self.title and other.title:
            return self.title == other.title
        return True


class APIError(OperationError):
    """Raised when the API answers with an unexpected status code.

    Problem-detail fields are available as attributes (``err.status``,
    ``err.title``, ``err.error_code`` ...).
    """

    def __init__(self, operation: str, problem: ProblemDetail) -> None:
        self.problem = problem
        super().__init__(operation, f"API error: {_describe(problem)}")

    def __getattr__(self, name: str):
        # Only reached for attributes not set on the exception itself
        problem = self.__dict__.get("problem")
        if problem is not None and hasattr(problem, name):
            return getattr(problem, name)
        raise AttributeError(name)

    def matches(self, other: Union[ProblemDetail, "APIError"]) -> bool:
        return self.problem.matches(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (APIError, ProblemDetail)):
            return NotImplemented
        return self.matches(other)

    # Matching errors always share a status
    def __hash__(self) -> int:
        return hash(self.problem.status)


def _describe(problem: ProblemDetail) -> str:
    parts = [f"status {problem.status}"]
    if problem.error_code:
        parts.append(f"error code {problem.error_code}")
    if problem.title:
        parts.append(f"title {problem.title!r}")
    if problem.detail:
        parts.append(f"detail {problem.detail!r}")
    return ", ".join(parts)


def is_markup(text: str) -> bool:
    """Whether ``text`` looks like an HTML or XML document."""
    return bool(_MARKUP_RE.match(text))


def decode_problem(response: SDKResponse) -> ProblemDetail:
    """Decode the error body of ``response`` into a ``ProblemDetail``."""
    text = response.text
    try:
        data = response.json()
        problem = ProblemDetail.from_dict(data)
    except (ValueError, TypeError):
        if is_markup(text):
            detail = html.unescape(text)
        else:
            detail = text
        problem = ProblemDetail(title=UNMARSHAL_FAILURE_TITLE, detail=detail)

    problem.status = response.status_code
    return problem


def normalize_error(operation: str, response: SDKResponse) -> APIError:
    """Turn an unexpected ``response`` into an ``APIError`` for ``operation``."""
    problem = decode_problem(response)
    log_api_error(
        logger,
        operation=operation,
        status=problem.status,
        title=problem.title,
        error_code=problem.error_code or None,
    )
    return APIError(operation, problem)
