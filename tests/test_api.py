import json
from urllib.parse import parse_qs, urlsplit

import pytest
import requests
import responses

from steamkit.api import CuratorApi, WebApi, filter_reviews
from steamkit.client import (
    STEAM_POWERED_BASE_URL,
    STEAM_POWERED_WEB_BASE_URL,
    with_base_url,
    with_http_client,
)
from steamkit.curator import Recommendation, Review

STORE = "https://store.example.com"
WEB = "https://api.example.com"
CURATOR_ID = "4242"
REVIEWS_URL = f"{STORE}/curator/{CURATOR_ID}/ajaxgetfilteredrecommendations/"


def _mock():
    return responses.RequestsMock(assert_all_requests_are_fired=False)


def _review_html(app_id: str, kind_class: str) -> str:
    return (
        '<div class="recommendation">'
        f'<a data-ds-appid="{app_id}" href="#">app</a>'
        f'<div class="recommendation_desc"> text {app_id} </div>'
        '<div class="recommendation_readmore">'
        f'<a target="_blank" href="https://example.com/r/{app_id}">more</a></div>'
        f'<div class="recommendation_type_ctn"><span class="{kind_class}">R</span></div>'
        "</div>"
    )


def _register_curator(rsps, total: int, seen_queries: list):
    def callback(request):
        query = parse_qs(urlsplit(request.url).query)
        seen_queries.append(query)
        start = int(query["start"][0])
        count = int(query["count"][0])
        html = "".join(
            _review_html(str(n), "color_recommended" if n % 2 == 0 else "color_not_recommended")
            for n in range(start, min(start + count, total))
        )
        body = {"success": 1, "total_count": total, "results_html": html}
        return 200, {"Content-Type": "application/json"}, json.dumps(body)

    rsps.add_callback(responses.GET, REVIEWS_URL, callback=callback)


def test_default_clients_use_steam_urls():
    assert CuratorApi().client.base_url == STEAM_POWERED_BASE_URL
    web = WebApi("placeholder")
    assert web.client.base_url == STEAM_POWERED_WEB_BASE_URL
    assert web.api_key == "placeholder"


def test_options_are_applied():
    session = requests.Session()
    api = CuratorApi(with_base_url(STORE), with_http_client(session))
    assert api.client.base_url == STORE
    assert api.client.session is session


def test_options_do_not_leak_between_clients():
    CuratorApi(with_base_url(STORE))
    assert CuratorApi().client.base_url == STEAM_POWERED_BASE_URL


def test_get_reviews_respects_limit():
    seen = []
    with _mock() as rsps:
        _register_curator(rsps, 5, seen)
        api = CuratorApi(with_base_url(STORE))
        stream, remaining = api.get_reviews(CURATOR_ID, 0, 2, 3)
        reviews = list(stream)
    assert [r.app_id for r in reviews] == ["0", "1", "2"]
    assert remaining == 5 - (0 - 1) - 3


def test_get_reviews_with_zero_limit_yields_nothing():
    seen = []
    with _mock() as rsps:
        _register_curator(rsps, 4, seen)
        api = CuratorApi(with_base_url(STORE))
        stream, _ = api.get_reviews(CURATOR_ID, 0, 2, 0)
        assert list(stream) == []


def test_get_reviews_limit_larger_than_total_returns_all():
    seen = []
    with _mock() as rsps:
        _register_curator(rsps, 3, seen)
        api = CuratorApi(with_base_url(STORE))
        stream, _ = api.get_reviews(CURATOR_ID, 0, 2, 50)
        reviews = list(stream)
    assert [r.app_id for r in reviews] == ["0", "1", "2"]
    assert reviews[0].recommendation is Recommendation.RECOMMENDED
    assert reviews[1].recommendation is Recommendation.NOT_RECOMMENDED


def test_get_reviews_rejects_empty_curator_id():
    api = CuratorApi(with_base_url(STORE))
    with pytest.raises(ValueError):
        api.get_reviews("", 0, 10, 10)


def test_get_all_reviews_pages_by_hundred():
    seen = []
    with _mock() as rsps:
        _register_curator(rsps, 3, seen)
        api = CuratorApi(with_base_url(STORE))
        stream, total = api.get_all_reviews(CURATOR_ID)
        reviews = list(stream)
    assert total == 3
    assert len(reviews) == total
    assert [q["start"][0] for q in seen] == ["0", "100"]
    assert all(q["count"][0] == "100" for q in seen)


def test_filter_applied_to_api_stream():
    seen = []
    with _mock() as rsps:
        _register_curator(rsps, 4, seen)
        api = CuratorApi(with_base_url(STORE))
        only_recommended = filter_reviews(lambda r: r.recommendation is Recommendation.RECOMMENDED)
        stream, total = only_recommended(*api.get_all_reviews(CURATOR_ID))
        app_ids = [r.app_id for r in stream]
    assert total == 4
    assert app_ids == ["0", "2"]


def test_filter_requires_every_predicate():
    reviews = [
        Review(app_id="10", recommendation=Recommendation.RECOMMENDED),
        Review(app_id="20", recommendation=Recommendation.RECOMMENDED),
        Review(app_id="30", recommendation=Recommendation.INFORMATIVE),
    ]
    keep = filter_reviews(
        lambda r: r.recommendation is Recommendation.RECOMMENDED,
        lambda r: r.app_id != "20",
    )
    stream, total = keep(iter(reviews), len(reviews))
    assert [r.app_id for r in stream] == ["10"]
    assert total == len(reviews)


def test_filter_without_predicates_keeps_everything():
    reviews = [Review(app_id="1"), Review(app_id="2")]
    stream, total = filter_reviews()(reviews, 2)
    assert list(stream) == reviews
    assert total == 2


def test_web_api_player_summaries():
    with _mock() as rsps:
        rsps.add(
            responses.GET,
            f"{WEB}/ISteamUser/GetPlayerSummaries/v0002/",
            json={"response": {"players": [{"steamid": "1", "personaname": "alice"}]}},
        )
        api = WebApi("placeholder", with_base_url(WEB))
        result = api.get_player_summaries("1", "2")
        query = parse_qs(urlsplit(rsps.calls[0].request.url).query)
    assert [p.persona_name for p in result.players] == ["alice"]
    assert query["key"] == ["placeholder"]


def test_web_api_owned_games():
    with _mock() as rsps:
        rsps.add(
            responses.GET,
            f"{WEB}/IPlayerService/GetOwnedGames/v0001/",
            json={"game_count": 1, "games": [{"appid": "7", "name": "Game", "playtime_forever": 12}]},
        )
        api = WebApi("placeholder", with_base_url(WEB))
        result = api.get_owned_games("76", True)
        query = parse_qs(urlsplit(rsps.calls[0].request.url).query)
    assert result.game_count == 1
    assert result.games[0].name == "Game"
    assert result.games[0].playtime_total == 12
    assert query["include_appinfo"] == ["true"]
    assert query["steamid"] == ["76"]