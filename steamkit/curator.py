"""Scraping of curator reviews from the Steam store."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator

import requests
from bs4 import BeautifulSoup

from steamkit.client import get_logger

_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:136.0) Gecko/20100101 Firefox/136.0"


class Recommendation(str, Enum):
    """How a curator rated an app."""

    UNKNOWN = "unknown"
    RECOMMENDED = "0"
    NOT_RECOMMENDED = "1"
    INFORMATIVE = "2"


@dataclass
class Review:
    """One curator review as shown on the curator's page."""

    app_id: str = ""
    review_content: str = ""
    full_review_url: str = ""
    recommendation: Recommendation | None = None


def _field(data: dict, key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if (kind is int and isinstance(value, bool)) or not isinstance(value, kind):
        raise TypeError(f"field {key!r} must be {kind.__name__}, got {type(value).__name__}")
    return value


@dataclass
class GetReviewsResponse:
    """The JSON envelope returned by the curator recommendations endpoint."""

    success: int = 0
    page_size: str = ""
    total_count: int = 0
    start: str = ""
    results_html: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> GetReviewsResponse:
        if not isinstance(data, dict):
            raise TypeError("reviews response must be a JSON object")
        return cls(
            success=_field(data, "success", int, 0),
            page_size=_field(data, "pagesize", str, ""),
            total_count=_field(data, "total_count", int, 0),
            start=_field(data, "start", str, ""),
            results_html=_field(data, "results_html", str, ""),
        )


def build_reviews_request(base_url: str, curator_id: str, start: int, count: int) -> requests.Request:
    """Build the request for one page of a curator's reviews."""
    if not curator_id:
        raise ValueError("curatorId is empty")
    url = (
        f"{base_url}/curator/{curator_id}/ajaxgetfilteredrecommendations/"
        f"?query&start={start}&count={count}&dynamic_data=&tagids=&sort=recent"
        "&app_types=&curations=&reset=false"
    )
    headers = {
        "User-Agent": _USER_AGENT,
        "Accept": "text/javascript, text/html, application/xml, text/xml, */*",
        "Accept-Language": "de,en-US;q=0.7,en;q=0.3",
        "X-Requested-With": "XMLHttpRequest",
        "X-Prototype-Version": "1.7",
        "Sec-Fetch-Dest": "empty",
        "Sec-Fetch-Mode": "cors",
        "Sec-Fetch-Site": "same-origin",
        "Sec-GPC": "1",
        "Pragma": "no-cache",
        "Cache-Control": "no-cache",
        "Referer": f"{base_url}/curator/{curator_id}/",
    }
    return requests.Request("GET", url, headers=headers)


def _recommendation_of(classes: list[str]) -> Recommendation:
    if "color_recommended" in classes:
        return Recommendation.RECOMMENDED
    if "color_informational" in classes:
        return Recommendation.INFORMATIVE
    if "color_not_recommended" in classes:
        return Recommendation.NOT_RECOMMENDED
    return Recommendation.UNKNOWN


def parse_reviews_html(html: str) -> list[Review]:
    """Extract the reviews from the HTML fragment of a recommendations page."""
    log = get_logger("curator")
    soup = BeautifulSoup(html, "html.parser")
    reviews = []
    for block in soup.select("div.recommendation"):
        review = Review()
        log.debug("discovered review")

        app_link = block.select_one("a[data-ds-appid]")
        if app_link is not None:
            review.app_id = app_link.get("data-ds-appid", "")
            log.debug("extracted app id %s", review.app_id)

        description = block.select_one("div.recommendation_desc")
        if description is not None:
            review.review_content = description.get_text().strip()
            log.debug("extracted review content of size %d", len(review.review_content))

        read_more = block.select_one("div.recommendation_readmore a[target]")
        if read_more is not None:
            review.full_review_url = read_more.get("href", "")
            log.debug("extracted full review url %s", review.full_review_url)

        kind = block.select_one("div.recommendation_type_ctn > span")
        if kind is not None:
            review.recommendation = _recommendation_of(kind.get("class") or [])
            log.debug("extracted recommendation %s", review.recommendation)

        reviews.append(review)
    return reviews


def paginate_reviews(
    session: requests.Session, base_url: str, curator_id: str, start: int, count: int
) -> tuple[list[Review], int]:
    """Fetch one page of reviews; return the reviews and the total review count."""
    log = get_logger("curator")
    log.debug("requesting reviews curator_id=%s start=%d count=%d", curator_id, start, count)
    request = build_reviews_request(base_url, curator_id, start, count)
    with session.send(session.prepare_request(request)) as response:
        payload = GetReviewsResponse.from_dict(response.json())
    return parse_reviews_html(payload.results_html), payload.total_count


def get_reviews(
    session: requests.Session, base_url: str, curator_id: str, start: int, page_count: int
) -> tuple[Iterator[Review], int]:
    """Fetch the first page eagerly and return a lazy stream over all pages.

    A failure while fetching a later page is logged and ends the stream.
    """
    log = get_logger("curator")
    log.debug("initial pagination request curator_id=%s", curator_id)
    first_page, total_count = paginate_reviews(session, base_url, curator_id, start, page_count)

    def stream() -> Iterator[Review]:
        position, page, total = start, first_page, total_count
        while position < total:
            position += page_count
            yield from page
            log.debug("paginate to next reviews page start=%d", position)
            try:
                page, total = paginate_reviews(session, base_url, curator_id, position, page_count)
            except (requests.RequestException, ValueError, TypeError):
                log.exception("GetReviews pagination failed curator_id=%s", curator_id)
                return

    return stream(), total_count