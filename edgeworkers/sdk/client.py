"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
EdgeWorkers SDK, a product of Garudex Labs

EdgeWorkers SDK Client & Builder.

Provides three entry points to initialize the SDK:
    - ``EdgeWorkersClient(credentials=...)`` with explicit EdgeGrid credentials
    - ``EdgeWorkersClient.from_edgerc()`` / ``from_config()`` for file based setup
    - ``EdgeWorkersBuilder().set_credentials(...).build()`` for advanced config
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, TypeVar

from edgeworkers.config.edgerc import EdgeGridCredentials, load_edgerc
from edgeworkers.config.settings import load_config
from edgeworkers.exceptions import SDKConfigurationError
from edgeworkers.logging_config import get_logger, setup_logging
from edgeworkers.sdk.activations import ActivationOperations
from edgeworkers.sdk.adapters.base import BaseAdapter
from edgeworkers.sdk.adapters.http import HttpAdapter
from edgeworkers.sdk.contracts import ContractOperations
from edgeworkers.sdk.deactivations import DeactivationOperations
from edgeworkers.sdk.edgekv_access_tokens import EdgeKVAccessTokenOperations
from edgeworkers.sdk.edgekv_groups import EdgeKVGroupOperations
from edgeworkers.sdk.edgekv_initialize import EdgeKVInitializeOperations
from edgeworkers.sdk.edgekv_items import EdgeKVItemOperations
from edgeworkers.sdk.edgekv_namespaces import EdgeKVNamespaceOperations
from edgeworkers.sdk.edgeworker_ids import EdgeWorkerIDOperations
from edgeworkers.sdk.edgeworker_versions import EdgeWorkerVersionOperations
from edgeworkers.sdk.hooks import HookRegistry
from edgeworkers.sdk.operations import ResourceOperations
from edgeworkers.sdk.permission_groups import PermissionGroupOperations
from edgeworkers.sdk.properties import PropertyOperations
from edgeworkers.sdk.reports import ReportOperations
from edgeworkers.sdk.resource_tiers import ResourceTierOperations
from edgeworkers.sdk.secure_tokens import SecureTokenOperations
from edgeworkers.sdk.validations import ValidationOperations

logger = get_logger(__name__)

OpsT = TypeVar("OpsT", bound=ResourceOperations)


# ---------------------------------------------------------------------------
# EdgeWorkersClient
# ---------------------------------------------------------------------------

class EdgeWorkersClient:
    """SDK client for the EdgeWorkers and EdgeKV APIs.

    Quick start::

        async with EdgeWorkersClient.from_edgerc(section="default") as client:
            ids = await client.edgeworker_ids.list_edgeworkers_id()

    Each resource group is exposed as a property returning its operations
    object; all of them share one adapter and one hook registry.

    Args:
        credentials: EdgeGrid credentials used to sign requests.
        adapter: Optional custom transport adapter (overrides ``credentials``).
        hooks: Optional hook registry; a fresh one is created when omitted.
        timeout: Request timeout in seconds for the default HTTP adapter.
        max_retries: Connection retries for the default HTTP adapter.
        user_agent: Optional ``User-Agent`` override.
    """

    def __init__(
        self,
        credentials: Optional[EdgeGridCredentials] = None,
        adapter: Optional[BaseAdapter] = None,
        hooks: Optional[HookRegistry] = None,
        timeout: float = 30.0,
        max_retries: int = 3,
        user_agent: Optional[str] = None,
    ) -> None:
        if credentials is None and adapter is None:
            raise SDKConfigurationError(
                "EdgeWorkersClient requires either credentials or a custom adapter."
            )

        self._hooks = hooks or HookRegistry()
        self._adapter = adapter or HttpAdapter.from_credentials(
            credentials,
            timeout=timeout,
            max_retries=max_retries,
            user_agent=user_agent,
        )
        self._operations: Dict[type, ResourceOperations] = {}
        logger.info(f"EdgeWorkersClient initialized ({type(self._adapter).__name__})")

    # -- Alternate constructors --------------------------------------------

    @classmethod
    def from_edgerc(
        cls,
        path: Optional[str] = None,
        section: Optional[str] = None,
        env: bool = False,
        **kwargs: Any,
    ) -> EdgeWorkersClient:
        """Build a client from an ``.edgerc`` file and/or ``AKAMAI_*`` variables."""
        return cls(credentials=load_edgerc(path, section, env), **kwargs)

    @classmethod
    def from_config(
        cls,
        config_path: Optional[str] = None,
        configure_logging: bool = True,
    ) -> EdgeWorkersClient:
        """Build a client from the YAML SDK configuration file.

        Args:
            config_path: Path to the YAML file. Defaults to
                ``~/.edgeworkers/config.yaml``; defaults apply when it is absent.
            configure_logging: Apply the ``logging`` section with ``setup_logging``.

        Returns:
            EdgeWorkersClient signed with the credentials the config points at.
        """
        config = load_config(config_path)
        if configure_logging:
            setup_logging(
                level=config.logging.level,
                log_file=config.logging.file or None,
                json_format=config.logging.format == "json",
            )
        credentials = load_edgerc(config.edgerc.path, config.edgerc.section, config.edgerc.env)
        return cls(
            credentials=credentials,
            timeout=config.http.timeout,
            max_retries=config.http.max_retries,
            user_agent=config.http.user_agent or None,
        )

    # -- Resource accessors ------------------------------------------------

    def _ops(self, ops_cls: Callable[..., OpsT]) -> OpsT:
        ops = self._operations.get(ops_cls)  # type: ignore[call-overload]
        if ops is None:
            ops = ops_cls(adapter=self._adapter, hooks=self._hooks)
            self._operations[ops_cls] = ops  # type: ignore[index]
        return ops  # type: ignore[return-value]

    @property
    def hooks(self) -> HookRegistry:
        return self._hooks

    @property
    def adapter(self) -> BaseAdapter:
        return self._adapter

    @property
    def activations(self) -> ActivationOperations:
        return self._ops(ActivationOperations)

    @property
    def contracts(self) -> ContractOperations:
        return self._ops(ContractOperations)

    @property
    def deactivations(self) -> DeactivationOperations:
        return self._ops(DeactivationOperations)

    @property
    def edgekv_access_tokens(self) -> EdgeKVAccessTokenOperations:
        return self._ops(EdgeKVAccessTokenOperations)

    @property
    def edgekv_initialize(self) -> EdgeKVInitializeOperations:
        return self._ops(EdgeKVInitializeOperations)

    @property
    def edgekv_items(self) -> EdgeKVItemOperations:
        return self._ops(EdgeKVItemOperations)

    @property
    def edgekv_namespaces(self) -> EdgeKVNamespaceOperations:
        return self._ops(EdgeKVNamespaceOperations)

    @property
    def edgekv_groups(self) -> EdgeKVGroupOperations:
        return self._ops(EdgeKVGroupOperations)

    @property
    def edgeworker_ids(self) -> EdgeWorkerIDOperations:
        return self._ops(EdgeWorkerIDOperations)

    @property
    def edgeworker_versions(self) -> EdgeWorkerVersionOperations:
        return self._ops(EdgeWorkerVersionOperations)

    @property
    def permission_groups(self) -> PermissionGroupOperations:
        return self._ops(PermissionGroupOperations)

    @property
    def properties(self) -> PropertyOperations:
        return self._ops(PropertyOperations)

    @property
    def reports(self) -> ReportOperations:
        return self._ops(ReportOperations)

    @property
    def resource_tiers(self) -> ResourceTierOperations:
        return self._ops(ResourceTierOperations)

    @property
    def secure_tokens(self) -> SecureTokenOperations:
        return self._ops(SecureTokenOperations)

    @property
    def validations(self) -> ValidationOperations:
        return self._ops(ValidationOperations)

    # -- Lifecycle ---------------------------------------------------------

    async def close(self) -> None:
        """Release the underlying transport."""
        await self._adapter.close()
        logger.info("EdgeWorkersClient closed")

    async def __aenter__(self) -> EdgeWorkersClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


# ---------------------------------------------------------------------------
# EdgeWorkersBuilder (advanced initialization)
# ---------------------------------------------------------------------------

class EdgeWorkersBuilder:
    """Fluent builder for advanced EdgeWorkersClient configuration.

    Example::

        client = (
            EdgeWorkersBuilder()
            .set_edgerc("~/.edgerc", section="ccu")
            .set_timeout(10)
            .on_before_request(add_trace_header)
            .build()
        )
    """

    def __init__(self) -> None:
        self._credentials: Optional[EdgeGridCredentials] = None
        self._adapter: Optional[BaseAdapter] = None
        self._hooks = HookRegistry()
        self._timeout: float = 30.0
        self._max_retries: int = 3
        self._user_agent: Optional[str] = None

    def set_credentials(self, credentials: EdgeGridCredentials) -> EdgeWorkersBuilder:
        self._credentials = credentials
        return self

    def set_edgerc(
        self, path: Optional[str] = None, section: Optional[str] = None, env: bool = False
    ) -> EdgeWorkersBuilder:
        """Load credentials from an ``.edgerc`` file now."""
        self._credentials = load_edgerc(path, section, env)
        return self

    def set_transport(self, adapter: BaseAdapter) -> EdgeWorkersBuilder:
        """Override the default HTTP adapter with a custom transport."""
        self._adapter = adapter
        return self

    def set_timeout(self, timeout: float) -> EdgeWorkersBuilder:
        self._timeout = timeout
        return self

    def set_max_retries(self, max_retries: int) -> EdgeWorkersBuilder:
        self._max_retries = max_retries
        return self

    def set_user_agent(self, user_agent: str) -> EdgeWorkersBuilder:
        self._user_agent = user_agent
        return self

    def on_before_request(self, callback: Callable) -> EdgeWorkersBuilder:
        self._hooks.on_before_request(callback)
        return self

    def on_after_response(self, callback: Callable) -> EdgeWorkersBuilder:
        self._hooks.on_after_response(callback)
        return self

    def on_error(self, callback: Callable) -> EdgeWorkersBuilder:
        self._hooks.on_error(callback)
        return self

    def on_initialize(self, callback: Callable) -> EdgeWorkersBuilder:
        self._hooks.on_initialize(callback)
        return self

    def build(self) -> EdgeWorkersClient:
        """Construct the EdgeWorkersClient and fire initialize hooks.

        Raises:
            SDKConfigurationError: If neither credentials nor an adapter were set.
        """
        if self._credentials is None and self._adapter is None:
            raise SDKConfigurationError(
                "EdgeWorkersBuilder.build() requires either set_credentials() or set_transport()."
            )

        client = EdgeWorkersClient(
            credentials=self._credentials,
            adapter=self._adapter,
            hooks=self._hooks,
            timeout=self._timeout,
            max_retries=self._max_retries,
            user_agent=self._user_agent,
        )
        self._hooks.fire_initialize(client=client)
        logger.info("EdgeWorkersBuilder: built client")
        return client
