"""Calls to the Steam Web API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote_plus, urlencode

import requests


def _field(data: dict, key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if (kind is int and isinstance(value, bool)) or not isinstance(value, kind):
        raise TypeError(f"field {key!r} must be {kind.__name__}, got {type(value).__name__}")
    return value


def _object(data: Any, what: str) -> dict:
    if not isinstance(data, dict):
        raise TypeError(f"{what} must be a JSON object")
    return data


def _array(data: dict, key: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"field {key!r} must be an array")
    return value


@dataclass
class Player:
    """A player's public profile summary."""

    steam_id: str = ""
    persona_name: str = ""
    profile_url: str = ""
    avatar: str = ""
    avatar_medium: str = ""
    avatar_full: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Player:
        data = _object(data, "player")
        return cls(
            steam_id=_field(data, "steamid", str, ""),
            persona_name=_field(data, "personaname", str, ""),
            profile_url=_field(data, "profileurl", str, ""),
            avatar=_field(data, "avatar", str, ""),
            avatar_medium=_field(data, "avatarmedium", str, ""),
            avatar_full=_field(data, "avatarfull", str, ""),
        )


@dataclass
class PlayerSummariesResponse:
    """Result of GetPlayerSummaries."""

    players: list[Player] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> PlayerSummariesResponse:
        data = _object(data, "player summaries response")
        inner = data.get("response")
        if inner is None:
            return cls()
        inner = _object(inner, "response")
        return cls(players=[Player.from_dict(item) for item in _array(inner, "players")])


@dataclass
class AppInfo:
    """An owned app with its playtime."""

    app_id: str = ""
    name: str = ""
    playtime_2weeks: int = 0
    playtime_total: int = 0
    img_icon: str = ""
    img_logo_url: str = ""
    has_visible_community_stats: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> AppInfo:
        data = _object(data, "app info")
        return cls(
            app_id=_field(data, "appid", str, ""),
            name=_field(data, "name", str, ""),
            playtime_2weeks=_field(data, "playtime_2weeks", int, 0),
            playtime_total=_field(data, "playtime_forever", int, 0),
            img_icon=_field(data, "img_icon_url", str, ""),
            img_logo_url=_field(data, "img_logo_url", str, ""),
            has_visible_community_stats=_field(data, "has_community_visible_stats", bool, False),
        )


@dataclass
class OwnedGamesResponse:
    """Result of GetOwnedGames."""

    game_count: int = 0
    games: list[AppInfo] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> OwnedGamesResponse:
        data = _object(data, "owned games response")
        return cls(
            game_count=_field(data, "game_count", int, 0),
            games=[AppInfo.from_dict(item) for item in _array(data, "games")],
        )


def _get_json(session: requests.Session, endpoint: str, params: dict[str, str]) -> Any:
    url = f"{endpoint}?{urlencode(sorted(params.items()))}"
    with session.get(url) as response:
        return response.json()


def get_player_summaries(
    session: requests.Session, base_url: str, api_key: str, *steam_ids: str
) -> PlayerSummariesResponse:
    """Fetch profile summaries for the given Steam IDs."""
    params = {"key": api_key, "steamids": quote_plus(",".join(steam_ids))}
    data = _get_json(session, f"{base_url}/ISteamUser/GetPlayerSummaries/v0002/", params)
    return PlayerSummariesResponse.from_dict(data)


def get_owned_games(
    session: requests.Session, base_url: str, api_key: str, steam_id: str, include_app_info: bool
) -> OwnedGamesResponse:
    """Fetch the games owned by a Steam user."""
    params = {
        "key": api_key,
        "steamid": steam_id,
        "include_appinfo": "true" if include_app_info else "false",
    }
    data = _get_json(session, f"{base_url}/IPlayerService/GetOwnedGames/v0001/", params)
    return OwnedGamesResponse.from_dict(data)