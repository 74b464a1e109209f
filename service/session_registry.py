# service/session_registry.py
from __future__ import annotations

import logging
from collections import OrderedDict

import core.config as config
from service.app_state import AppStateController, RecordStore

log = logging.getLogger("app_state")


class ControllerRegistry:
    """
    client_id -> AppStateController. Each browser tab keeps its own screen state.

    Bounded: past `max_clients` the least recently used client is dropped and
    starts over with a fresh screen on its next request.
    """

    def __init__(self, max_clients: int = 1000) -> None:
        self._by_client: "OrderedDict[str, AppStateController]" = OrderedDict()
        self._max_clients = max(1, int(max_clients))

    def get(self, client_id: str, store: RecordStore) -> AppStateController:
        ctl = self._by_client.get(client_id)
        if ctl is not None:
            self._by_client.move_to_end(client_id)
            return ctl

        ctl = AppStateController(store)
        self._by_client[client_id] = ctl
        while len(self._by_client) > self._max_clients:
            evicted, _ = self._by_client.popitem(last=False)
            log.info("screen state evicted client_id=%s", evicted)
        return ctl

    def drop(self, client_id: str) -> bool:
        return self._by_client.pop(client_id, None) is not None

    def __contains__(self, client_id: object) -> bool:
        return client_id in self._by_client

    def __len__(self) -> int:
        return len(self._by_client)


_REGISTRY = ControllerRegistry(max_clients=config.MAX_CLIENTS)


def get_registry() -> ControllerRegistry:
    return _REGISTRY
