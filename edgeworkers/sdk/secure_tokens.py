"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

SDK Secure Token Operations.

Secure tokens enable enhanced debug headers for EdgeWorker requests on a
hostname or property.
"""

from __future__ import annotations

from dataclasses import dataclass

from edgeworkers.sdk.activations import ActivationNetwork
from edgeworkers.sdk.adapters.base import SDKRequest
from edgeworkers.sdk.models import WireModel, wire
from edgeworkers.sdk.operations import ResourceOperations
from edgeworkers.sdk.validation import ValidationErrors, max_value, min_value, one_of

CREATE_SECURE_TOKEN = "create a secure token"

MAX_EXPIRY_MINUTES = 720

HOSTNAME_OR_PROPERTY_MESSAGE = "at least one of hostname or property_id has to be provided"
ACL_OR_URL_MESSAGE = "only one of acl or url can be provided"


@dataclass
class CreateSecureTokenRequest(WireModel):
    """Body of a secure token request.

    ``expiry`` is in minutes; zero leaves the API default in place.
    """

    acl: str = wire("acl", "", omitempty=True)
    url: str = wire("url", "", omitempty=True)
    expiry: int = wire("expiry", 0, omitempty=True)
    hostname: str = wire("hostname", "", omitempty=True)
    property_id: str = wire("propertyId", "", omitempty=True)
    network: ActivationNetwork = wire("network", "", omitempty=True)

    def validate(self) -> ValidationErrors:
        errors = ValidationErrors()
        if not self.hostname and not self.property_id:
            errors.add("hostname", HOSTNAME_OR_PROPERTY_MESSAGE)
            errors.add("property_id", HOSTNAME_OR_PROPERTY_MESSAGE)
        if self.acl and self.url:
            errors.add("acl", ACL_OR_URL_MESSAGE)
            errors.add("url", ACL_OR_URL_MESSAGE)
        if self.expiry:
            errors.first("expiry", min_value(self.expiry, 1), max_value(self.expiry, MAX_EXPIRY_MINUTES))
        errors.add("network", one_of(self.network, list(ActivationNetwork)))
        return errors


@dataclass
class CreateSecureTokenResponse(WireModel):
    akamai_ew_trace: str = wire("akamaiEwTrace", "")


class SecureTokenOperations(ResourceOperations):
    async def create_secure_token(self, request: CreateSecureTokenRequest) -> CreateSecureTokenResponse:
        """Create a token for the ``Akamai-EW-Trace`` debug header."""
        self._validate(CREATE_SECURE_TOKEN, request)
        req = SDKRequest(method="POST", path="/edgeworkers/v1/secure-token", body=request.to_dict())
        resp = await self._execute(CREATE_SECURE_TOKEN, req, expected_status=201)
        return self._decode(CREATE_SECURE_TOKEN, resp, CreateSecureTokenResponse)
