"""Shared client configuration for the Steam store and Web API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

import requests

STEAM_POWERED_BASE_URL = "https://store.steampowered.com"
STEAM_POWERED_WEB_BASE_URL = "https://api.steampowered.com"

_DEFAULT_SESSION = requests.Session()


@dataclass
class ApiClient:
    """An HTTP session together with the base URL requests are sent to."""

    base_url: str
    session: requests.Session = field(default_factory=lambda: _DEFAULT_SESSION)


ApiClientOption = Callable[[ApiClient], None]


def default_curator_client() -> ApiClient:
    """Client pointed at the Steam store, using the shared default session."""
    return ApiClient(base_url=STEAM_POWERED_BASE_URL)


def default_web_client() -> ApiClient:
    """Client pointed at the Steam Web API, using the shared default session."""
    return ApiClient(base_url=STEAM_POWERED_WEB_BASE_URL)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a component of the library."""
    return logging.getLogger("steam").getChild(name)


def with_http_client(session: requests.Session) -> ApiClientOption:
    """Option that replaces the HTTP session of a client."""

    def apply(client: ApiClient) -> None:
        client.session = session

    return apply


def with_base_url(base_url: str) -> ApiClientOption:
    """Option that replaces the base URL of a client."""

    def apply(client: ApiClient) -> None:
        client.base_url = base_url

    return apply