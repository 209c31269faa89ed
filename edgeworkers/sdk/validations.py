"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

SDK Bundle Validation Operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from edgeworkers.sdk.adapters.base import SDKRequest
from edgeworkers.sdk.models import Bundle, WireModel, wire
from edgeworkers.sdk.operations import ResourceOperations
from edgeworkers.sdk.validation import ValidationErrors, not_none

VALIDATE_BUNDLE = "validate bundle"


@dataclass
class ValidationIssue(WireModel):
    type: str = wire("type", "")
    message: str = wire("message", "")


@dataclass
class ValidateBundleResponse(WireModel):
    errors: List[ValidationIssue] = wire("errors", default_factory=list)
    warnings: List[ValidationIssue] = wire("warnings", default_factory=list)


@dataclass
class ValidateBundleRequest:
    bundle: Optional[Bundle] = None

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        errors.add("bundle", not_none(self.bundle))
        return errors


class ValidationOperations(ResourceOperations):
    async def validate_bundle(self, request: ValidateBundleRequest) -> ValidateBundleResponse:
        """Check a code bundle without creating a version.

        Returns:
            ValidateBundleResponse listing errors and warnings; both are empty
            for a valid bundle.
        """
        self._validate(VALIDATE_BUNDLE, request)
        req = SDKRequest(
            method="POST",
            path="/edgeworkers/v1/validations",
            headers={"Content-Type": "application/gzip"},
            content=request.bundle.read(),
        )
        resp = await self._execute(VALIDATE_BUNDLE, req, expected_status=200)
        return self._decode(VALIDATE_BUNDLE, resp, ValidateBundleResponse)
