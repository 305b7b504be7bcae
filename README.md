# steamkit

steamkit is a small client library for two Steam data sources:

- **Curator reviews.** It reads the public recommendation pages of a Steam
  curator and returns them as `Review` objects. Further pages are fetched
  lazily as you iterate.
- **Steam Web API.** It looks up player summaries and owned games with an API
  key.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Curator reviews

```python
from steamkit.api import CuratorApi, filter_reviews
from steamkit.curator import Recommendation

api = CuratorApi()
reviews, total = api.get_all_reviews("1234567")
for review in reviews:
    print(review.app_id, review.recommendation, review.full_review_url)
```

The two review calls work as follows:

- **`get_all_reviews(curator_id)`** requests 100 reviews per page, starting at
  offset 0. It returns an iterator over all reviews and the total count the
  server reported.
- **`get_reviews(curator_id, start, count, limit)`** yields at most `limit`
  reviews, starting at offset `start`, with `count` reviews requested per
  page. Its second value is `total - (start - 1) - limit`.

The first page is fetched when either call is made, so an error on it raises
at once. If a later page fails, the error is logged and the iterator simply
ends.

`filter_reviews(*predicates)` takes predicate functions and returns a function.
Pass that function a review iterator and a count. It yields only the reviews
for which every predicate is true, and passes the count through unchanged:

```python
only_recommended = filter_reviews(
    lambda r: r.recommendation is Recommendation.RECOMMENDED,
)
reviews, total = only_recommended(*api.get_all_reviews("1234567"))
```

Each `steamkit.curator.Review` has these fields:

- `app_id`
- `review_content`
- `full_review_url`
- `recommendation`, which is one of:
  - `Recommendation.RECOMMENDED`
  - `Recommendation.NOT_RECOMMENDED`
  - `Recommendation.INFORMATIVE`
  - `Recommendation.UNKNOWN`
  - `None`, if the page showed no rating

`steamkit.curator` also exposes the lower-level building blocks:

- `build_reviews_request`
- `parse_reviews_html`
- `paginate_reviews`
- `get_reviews`

## Steam Web API

```python
from steamkit.api import WebApi

web = WebApi(api_key="placeholder")
summaries = web.get_player_summaries("12345", "67890")
for player in summaries.players:
    print(player.steam_id, player.persona_name)

owned = web.get_owned_games("12345", include_app_info=True)
print(owned.game_count, [game.name for game in owned.games])
```

The responses are dataclasses from `steamkit.webapi`:

- `PlayerSummariesResponse`, which holds a list of `Player`
- `OwnedGamesResponse`, which holds a list of `AppInfo`

A field in the JSON that has the wrong type raises `TypeError`.

## Configuration

Both clients accept options from `steamkit.client`:

- `with_http_client(session)` supplies your own `requests.Session`.
- `with_base_url(base_url)` points the client at another host, such as a test
  server.

```python
import requests
from steamkit.api import CuratorApi
from steamkit.client import with_base_url, with_http_client

api = CuratorApi(with_http_client(requests.Session()), with_base_url("http://localhost:8080"))
```

Without options, both clients use a shared default session. They talk to these
hosts:

- the curator client uses `https://store.steampowered.com`
- the Web API client uses `https://api.steampowered.com`

Log messages go to standard `logging` loggers named `steam.<component>`.

## What it does not do

steamkit is a library only:

- It has no command-line tool.
- It does not cache or store anything.
- It does not check HTTP status codes. A response that is not valid JSON
  raises the decoding error from `requests`.