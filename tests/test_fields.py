import pytest

from tweetkit.fields import (
    Exclude,
    ExcludeList,
    Expansion,
    ExpansionList,
    ListField,
    ListFieldList,
    MediaField,
    MediaFieldList,
    PlaceField,
    PlaceFieldList,
    PollField,
    PollFieldList,
    SpaceField,
    SpaceFieldList,
    State,
    TweetField,
    TweetFieldList,
    UserField,
    UserFieldList,
    set_fields_params,
)


@pytest.mark.parametrize(
    ("list_cls", "name"),
    [
        (ExcludeList, "exclude"),
        (ExpansionList, "expansions"),
        (ListFieldList, "list.fields"),
        (MediaFieldList, "media.fields"),
        (PlaceFieldList, "place.fields"),
        (PollFieldList, "poll.fields"),
        (SpaceFieldList, "space.fields"),
        (TweetFieldList, "tweet.fields"),
        (UserFieldList, "user.fields"),
    ],
)
def test_fields_name(list_cls, name):
    assert list_cls.fields_name == name


@pytest.mark.parametrize(
    ("list_cls", "enum_cls"),
    [
        (ExcludeList, Exclude),
        (ExpansionList, Expansion),
        (ListFieldList, ListField),
        (MediaFieldList, MediaField),
        (PlaceFieldList, PlaceField),
        (PollFieldList, PollField),
        (SpaceFieldList, SpaceField),
        (TweetFieldList, TweetField),
        (UserFieldList, UserField),
    ],
)
def test_values_keep_order_and_wire_names(list_cls, enum_cls):
    members = list(enum_cls)
    assert list_cls(members).values() == [member.value for member in members]


def test_values_of_empty_list():
    assert TweetFieldList().values() == []


def test_str_is_wire_value():
    expansion = Expansion("referenced_tweets.id.author_id")
    assert str(expansion) == "referenced_tweets.id.author_id"
    assert ExcludeList([Exclude("retweets")]).values() == [str(Exclude.RETWEETS)]
    assert str(Exclude.RETWEETS) == "retweets"


def test_enum_lookup_by_value():
    assert MediaField("alt_text") is MediaField.ALT_TEXT
    with pytest.raises(ValueError):
        UserField("no_such_field")


@pytest.mark.parametrize("value", ["all", "live", "scheduled", State.LIVE])
def test_state_valid(value):
    assert State.is_valid(value) is True


@pytest.mark.parametrize("value", ["", "ended", "ALL"])
def test_state_invalid(value):
    assert State.is_valid(value) is False


def test_has_context_annotations():
    assert TweetFieldList(
        [TweetField.ID, TweetField.CONTEXT_ANNOTATIONS]
    ).has_context_annotations() is True
    assert TweetFieldList([TweetField.ID, TweetField.TEXT]).has_context_annotations() is False
    assert TweetFieldList().has_context_annotations() is False


def test_set_fields_params_adds_joined_values():
    params = {"existing": "value"}
    result = set_fields_params(
        params,
        TweetFieldList([TweetField.AUTHOR_ID, TweetField.CREATED_AT]),
        ExpansionList([Expansion.AUTHOR_ID]),
    )
    assert result is params
    assert result == {
        "existing": "value",
        "tweet.fields": "author_id,created_at",
        "expansions": "author_id",
    }


def test_set_fields_params_skips_none_and_empty():
    result = set_fields_params({}, None, UserFieldList(), PollFieldList([PollField.OPTIONS]))
    assert result == {"poll.fields": "options"}


def test_set_fields_params_without_lists():
    assert set_fields_params({"a": "b"}) == {"a": "b"}