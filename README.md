# tweetkit

Building blocks for requests to the Twitter API v2: field and expansion
lists, query-string helpers, rate-limit header parsing, structured API
errors, and the parameter and response types of the batch compliance
job endpoints.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Field lists (`tweetkit.fields`)

The enums `Exclude`, `Expansion`, `ListField`, `MediaField`,
`PlaceField`, `PollField`, `SpaceField`, `TweetField`, `UserField` and
`State` hold the names the API accepts; `str()` of a member is its wire
value. `State.is_valid(value)` tells whether a value names a state.

Each list class (`ExcludeList`, `ExpansionList`, `ListFieldList`,
`MediaFieldList`, `PlaceFieldList`, `PollFieldList`, `SpaceFieldList`,
`TweetFieldList`, `UserFieldList`) is a `list` with a `fields_name`
(such as `"tweet.fields"`) and a `values()` method.
`TweetFieldList.has_context_annotations()` reports whether
`TweetField.CONTEXT_ANNOTATIONS` is in the list.

`set_fields_params` writes every non-empty list into a parameter dict
under its name, skipping `None` and empty lists, and returns the dict:

```python
from tweetkit.fields import (
    Expansion, ExpansionList, TweetField, TweetFieldList, set_fields_params,
)

params = set_fields_params(
    {},
    TweetFieldList([TweetField.CREATED_AT, TweetField.AUTHOR_ID]),
    ExpansionList([Expansion.AUTHOR_ID]),
)
# {"tweet.fields": "created_at,author_id", "expansions": "author_id"}
```

## Query strings (`tweetkit.params`)

```python
from tweetkit.params import query_string, query_value

query_value(["a", "b"])                          # "a,b"
query_value([])                                  # ""
query_string({"k1": "v1", "k2": "v2"}, {"k1"})   # "k1=v1"
```

`query_string` keeps only the keys listed in its second argument and
encodes them sorted by key.

`Parameters` is the abstract base of request inputs: it has an
`access_token` attribute and the abstract methods `resolve_endpoint`,
`body` and `parameter_map`.

## Rate limits (`tweetkit.ratelimit`)

Headers are given as a mapping from header name to a list of values;
names are matched exactly.

```python
from tweetkit.ratelimit import get_rate_limit_information, header_values

info = get_rate_limit_information({
    "X-Rate-Limit-Limit": ["900"],
    "X-Rate-Limit-Remaining": ["899"],
    "X-Rate-Limit-Reset": ["100000000"],
})
info.limit, info.remaining   # 900, 899
info.reset_at                # timezone-aware UTC datetime

header_values("Missing", {})  # []
```

A missing or empty header gives `0` (or `None` for `reset_at`); a value
that is not a whole number raises `ValueError`.

## Errors (`tweetkit.errors`)

`GotwiError` is the exception type. `wrap_err` wraps any exception in a
`GotwiError` (keeping it as `__cause__`; a `GotwiError` is returned
unchanged, and `None` gives `None`). `wrap_with_api_err` turns a
`Non2XXError` into a `GotwiError` with `on_api=True`, copies its fields
(`api_errors`, `title`, `detail`, `type`, `status`, `status_code`,
`rate_limit_info`) onto the exception, and uses
`non2xx_error_summary` as its message.

```python
from tweetkit.errors import ErrorInformation, Non2XXError, wrap_with_api_err

err = wrap_with_api_err(Non2XXError(
    status="400 Bad Request",
    status_code=400,
    api_errors=[ErrorInformation(message="bad", code=3)],
))
err.on_api   # True
str(err)
# 'The Twitter API returned a Response with a status other than 2XX series.
#  httpStatus="400 Bad Request" httpStatusCode=400 errorCode1=3
#  errorText1="Invalid coordinates." errorDescription1="..."'
```

`ErrorInformation.text` and `.description` give the explanation of an
error code; only codes 3 and 13 are known, others give empty strings.

## Batch compliance (`tweetkit.compliance`)

```python
from tweetkit.compliance import (
    LIST_JOBS_ENDPOINT, ComplianceType, CreateJobInput, GetJobInput, ListJobsInput,
)

ListJobsInput(type=ComplianceType.TWEETS).resolve_endpoint(LIST_JOBS_ENDPOINT)
# "https://api.twitter.com/2/compliance/jobs?type=tweets"

GetJobInput(id="123").resolve_endpoint("https://api.twitter.com/2/compliance/jobs/:id")
# "https://api.twitter.com/2/compliance/jobs/123"

CreateJobInput(type=ComplianceType.USERS, name="job").body().read()
# '{"type":"users","name":"job"}'
```

`ListJobsInput` without a `type`, and `GetJobInput` without an `id`,
resolve to an empty string. `ListJobsInput.body()` and
`GetJobInput.body()` return `None`; `CreateJobInput.body()` returns a
readable text stream.

The output types (`ListJobsOutput`, `GetJobOutput`, `CreateJobOutput`)
hold `data` and `errors` and report partial errors through
`has_partial_error()`.

## What this package does not do

There is no HTTP client here: nothing sends requests, signs them,
authenticates, or reads responses from the network. The package builds
endpoints, query strings and bodies, parses rate-limit headers you pass
in, and formats errors; performing the calls is left to the code that
uses it.