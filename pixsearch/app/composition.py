"""Composition root wiring adapters and use cases.

Callers (a UI layer, scripts, tests) build one ``PixsearchApp`` and pass its
members around explicitly; there is no process-wide executor instance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from pixsearch.adapters.codec import PydanticJsonCodec
from pixsearch.adapters.connectivity import SocketConnectivityCheck
from pixsearch.adapters.http_client import HttpConfig, HttpSession
from pixsearch.adapters.photo_search_rest import PixabayPhotoSearch
from pixsearch.adapters.request_executor import RequestExecutor
from pixsearch.config import AppConfig
from pixsearch.domain.ports import ConnectivityPort
from pixsearch.usecases.lookup_photo import LookupPhoto
from pixsearch.usecases.search_photos import SearchPhotos
from pixsearch.utils import logging as logging_utils


@dataclass
class PixsearchApp:
    config: AppConfig
    executor: RequestExecutor
    photo_search: PixabayPhotoSearch
    search_photos: SearchPhotos
    lookup_photo: LookupPhoto

    def close(self) -> None:
        self.executor.close()

    def __enter__(self) -> "PixsearchApp":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def build_app(
    config: Optional[AppConfig] = None,
    *,
    connectivity: Optional[ConnectivityPort] = None,
    session: Optional[HttpSession] = None,
    on_warning: Optional[Callable[[str], None]] = None,
    configure_logging: bool = True,
) -> PixsearchApp:
    """Create the executor, Pixabay adapter and use cases from ``config``.

    Args:
        config: Settings; read from the environment when omitted.
        connectivity: Override for the reachability check.
        session: Override for the HTTP transport.
        on_warning: Receives connectivity warnings raised during searches.
        configure_logging: Whether to apply ``config.log_level`` to the root
            logger.
    """
    cfg = config or AppConfig.from_env()
    if configure_logging:
        logging_utils.configure_root(cfg.log_level)
    if not cfg.api_key:
        logging.getLogger(__name__).warning(
            "No API key configured (PIXSEARCH_API_KEY); requests will likely be rejected."
        )

    executor = RequestExecutor(
        session or HttpSession(HttpConfig(request_timeout_s=cfg.request_timeout_s)),
        connectivity=connectivity
        or SocketConnectivityCheck(
            cfg.connectivity_host, cfg.connectivity_port, cfg.connectivity_timeout_s
        ),
        codec=PydanticJsonCodec(),
        max_workers=cfg.max_workers,
    )
    photo_search = PixabayPhotoSearch(executor, api_key=cfg.api_key, base_url=cfg.api_base_url)
    return PixsearchApp(
        config=cfg,
        executor=executor,
        photo_search=photo_search,
        search_photos=SearchPhotos(photo_search, on_warning=on_warning),
        lookup_photo=LookupPhoto(executor, base_url=cfg.api_base_url, api_key=cfg.api_key),
    )


__all__ = ["PixsearchApp", "build_app"]
