"""Remote/local service selection.

The selector probes the remote backend once, remembers the verdict and hands
out the matching implementation of each capability. A failed probe is the
normal way of switching to the local substitute, not an error.

The probe runs at most once per verdict across threads and event loops: Flask
views drive each request with its own `asyncio.run`, so callers that arrive
while a probe is in flight wait on a shared future instead of probing again.

    UNCHECKED --probe--> CHECKED(remote | local) --reset()--> UNCHECKED
"""

from __future__ import annotations

import asyncio
import logging
import threading
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional, Union

from ..core.enums import Capability, ServiceBackend
from ..core.exceptions import UnknownCapabilityError

logger = logging.getLogger(__name__)

Probe = Callable[[], Awaitable[Any]]


@dataclass(frozen=True)
class SelectorStatus:
    checked: bool
    use_remote: bool

    @property
    def current_service(self) -> ServiceBackend:
        return ServiceBackend.REMOTE if self.use_remote else ServiceBackend.LOCAL

    def as_dict(self) -> Dict[str, Any]:
        return {
            "checked": self.checked,
            "useRemote": self.use_remote,
            "currentService": self.current_service.value,
        }


@dataclass(frozen=True)
class _Binding:
    local: Any
    remote: Optional[Any] = None


class ServiceSelector:
    def __init__(self, *, probe: Optional[Probe] = None):
        self._probe = probe
        self._bindings: Dict[Capability, _Binding] = {}
        self._checked = False
        self._use_remote = True
        self._probe_count = 0
        self._state_lock = threading.Lock()
        self._in_flight: Optional[Future] = None

    def register(self, capability: Union[Capability, str], *, local: Any, remote: Optional[Any] = None) -> None:
        """Bind the implementations of one capability.

        A selector with a probe serves every capability from the same verdict,
        so each registration must then supply a remote implementation.
        """
        if self._probe is not None and remote is None:
            raise ValueError(f"{capability!r} needs a remote implementation when a probe is configured")
        self._bindings[Capability(capability)] = _Binding(local=local, remote=remote)

    @property
    def probe_count(self) -> int:
        return self._probe_count

    async def _check_remote(self) -> bool:
        with self._state_lock:
            if self._checked:
                return self._use_remote
            in_flight = self._in_flight
            owner = in_flight is None
            if owner:
                in_flight = self._in_flight = Future()

        if not owner:
            # Shielded so a cancelled waiter does not cancel the shared future.
            return await asyncio.shield(asyncio.wrap_future(in_flight))

        use_remote = False
        try:
            use_remote = await self._run_probe()
        finally:
            # A cancelled probe counts as unreachable.
            with self._state_lock:
                self._use_remote = use_remote
                self._checked = True
                self._in_flight = None
            in_flight.set_result(use_remote)
        return use_remote

    async def _run_probe(self) -> bool:
        if self._probe is None:
            logger.info("No remote backend configured, using local services")
            return False

        self._probe_count += 1
        try:
            await self._probe()
        except Exception as e:
            logger.info("Remote backend unavailable (%s), falling back to local services", e)
            return False
        logger.info("Remote backend reachable, using remote services")
        return True

    async def get_service(self, capability: Union[Capability, str]) -> Any:
        try:
            binding = self._bindings[Capability(capability)]
        except (KeyError, ValueError):
            raise UnknownCapabilityError(f"No service registered for {capability!r}")

        if await self._check_remote():
            return binding.remote
        return binding.local

    def force_local(self) -> None:
        """Pin the verdict to local without probing."""
        with self._state_lock:
            self._use_remote = False
            self._checked = True

    def reset(self) -> None:
        with self._state_lock:
            self._checked = False
            self._use_remote = True

    def get_status(self) -> SelectorStatus:
        with self._state_lock:
            return SelectorStatus(checked=self._checked, use_remote=self._use_remote)
