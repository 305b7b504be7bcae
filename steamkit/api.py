"""High-level clients for Steam curator reviews and the Steam Web API."""

from __future__ import annotations

from itertools import islice
from typing import Callable, Iterable, Iterator

from steamkit import curator, webapi
from steamkit.client import (
    ApiClient,
    ApiClientOption,
    default_curator_client,
    default_web_client,
)
from steamkit.curator import Review

ReviewPredicate = Callable[[Review], bool]
ReviewStream = tuple[Iterator[Review], int]


def _configured(client: ApiClient, options: Iterable[ApiClientOption]) -> ApiClient:
    for option in options:
        option(client)
    return client


class CuratorApi:
    """Client for the reviews published by Steam curators."""

    def __init__(self, *options: ApiClientOption) -> None:
        self.client = _configured(default_curator_client(), options)

    def get_reviews(self, curator_id: str, start: int, count: int, limit: int) -> ReviewStream:
        """Stream at most ``limit`` reviews, fetched ``count`` at a time from ``start``.

        Returns the stream and the remaining count reported alongside it.
        """
        stream, total = curator.get_reviews(
            self.client.session, self.client.base_url, curator_id, start, count
        )

        def limited() -> Iterator[Review]:
            try:
                yield from islice(stream, max(limit, 0))
            finally:
                stream.close()

        return limited(), total - (start - 1) - limit

    def get_all_reviews(self, curator_id: str) -> ReviewStream:
        """Stream every review of a curator, fetched 100 at a time."""
        return curator.get_reviews(self.client.session, self.client.base_url, curator_id, 0, 100)


class WebApi:
    """Client for the Steam Web API, authenticated by an API key."""

    def __init__(self, api_key: str, *options: ApiClientOption) -> None:
        self.api_key = api_key
        self.client = _configured(default_web_client(), options)

    def get_player_summaries(self, *steam_ids: str) -> webapi.PlayerSummariesResponse:
        """Fetch profile summaries for the given Steam IDs."""
        return webapi.get_player_summaries(
            self.client.session, self.client.base_url, self.api_key, *steam_ids
        )

    def get_owned_games(self, steam_id: str, include_app_info: bool) -> webapi.OwnedGamesResponse:
        """Fetch the games owned by a Steam user."""
        return webapi.get_owned_games(
            self.client.session, self.client.base_url, self.api_key, steam_id, include_app_info
        )


def filter_reviews(*predicates: ReviewPredicate) -> Callable[[Iterable[Review], int], ReviewStream]:
    """Build a filter keeping only the reviews that satisfy every predicate.

    The filter takes a review stream and its total count, and returns the
    filtered stream with the count unchanged.
    """

    def apply(reviews: Iterable[Review], total_count: int) -> ReviewStream:
        kept = (review for review in reviews if all(p(review) for p in predicates))
        return kept, total_count

    return apply