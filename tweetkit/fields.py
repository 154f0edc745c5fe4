"""Field, expansion and filter names used as query parameters."""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from tweetkit.params import query_value


class _NameEnum(str, Enum):
    """String enum whose str() is its wire value."""

    def __str__(self) -> str:
        return self.value


class Exclude(_NameEnum):
    RETWEETS = "retweets"
    REPLIES = "replies"


class Expansion(_NameEnum):
    AUTHOR_ID = "author_id"
    REFERENCED_TWEETS_ID = "referenced_tweets.id"
    EDIT_HISTORY_TWEET_IDS = "edit_history_tweet_ids"
    IN_REPLY_TO_USER_ID = "in_reply_to_user_id"
    ATTACHMENTS_MEDIA_KEYS = "attachments.media_keys"
    ATTACHMENTS_POLL_IDS = "attachments.poll_ids"
    GEO_PLACE_ID = "geo.place_id"
    ENTITIES_MENTIONS_USERNAME = "entities.mentions.username"
    REFERENCED_TWEETS_ID_AUTHOR_ID = "referenced_tweets.id.author_id"
    PINNED_TWEET_ID = "pinned_tweet_id"
    SENDER_ID = "sender_id"
    PARTICIPANT_IDS = "participant_ids"
    INVITED_USER_IDS = "invited_user_ids"
    SPEAKER_IDS = "speaker_ids"
    HOST_IDS = "host_ids"
    TOPICS_IDS = "topics_ids"
    OWNER_ID = "owner_id"


class ListField(_NameEnum):
    ID = "id"
    NAME = "name"
    CREATED_AT = "created_at"
    DESCRIPTION = "description"
    FOLLOWER_COUNT = "follower_count"
    MEMBER_COUNT = "member_count"
    PRIVATE = "private"
    OWNER_ID = "owner_id"


class MediaField(_NameEnum):
    MEDIA_KEY = "media_key"
    TYPE = "type"
    URL = "url"
    DURATION_MS = "duration_ms"
    HEIGHT = "height"
    NON_PUBLIC_METRICS = "non_public_metrics"
    ORGANIC_METRICS = "organic_metrics"
    PREVIEW_IMAGE_URL = "preview_image_url"
    PROMOTED_METRICS = "promoted_metrics"
    PUBLIC_METRICS = "public_metrics"
    WIDTH = "width"
    ALT_TEXT = "alt_text"
    VARIANTS = "variants"


class PlaceField(_NameEnum):
    FULL_NAME = "full_name"
    ID = "id"
    CONTAINED_WITHIN = "contained_within"
    COUNTRY = "country"
    COUNTRY_CODE = "country_code"
    GEO = "geo"
    NAME = "name"
    PLACE_TYPE = "place_type"


class PollField(_NameEnum):
    ID = "id"
    OPTIONS = "options"
    DURATION_MINUTES = "duration_minutes"
    END_DATETIME = "end_datetime"
    VOTING_STATUS = "voting_status"


class SpaceField(_NameEnum):
    ID = "id"
    STATE = "state"
    CREATED_AT = "created_at"
    ENDED_AT = "ended_at"
    HOST_IDS = "host_ids"
    LANG = "lang"
    IS_TICKETED = "is_ticketed"
    INVITED_USER_IDS = "invited_user_ids"
    PARTICIPANT_COUNT = "participant_count"
    SUBSCRIBER_COUNT = "subscriber_count"
    SCHEDULED_START = "scheduled_start"
    SPEAKER_IDS = "speaker_ids"
    STARTED_AT = "started_at"
    TITLE = "title"
    TOPIC_IDS = "topic_ids"
    UPDATED_AT = "updated_at"


class TweetField(_NameEnum):
    ID = "id"
    TEXT = "text"
    EDIT_HISTORY_TWEET_IDS = "edit_history_tweet_ids"
    ATTACHMENTS = "attachments"
    AUTHOR_ID = "author_id"
    CONTEXT_ANNOTATIONS = "context_annotations"
    CONVERSATION_ID = "conversation_id"
    CREATED_AT = "created_at"
    EDIT_CONTROLS = "edit_controls"
    ENTITIES = "entities"
    IN_REPLY_TO_USER_ID = "in_reply_to_user_id"
    LANG = "lang"
    NON_PUBLIC_METRICS = "non_public_metrics"
    ORGANIC_METRICS = "organic_metrics"
    POSSIBLY_SENSITIVE = "possibly_sensitive"
    PROMOTED_METRICS = "promoted_metrics"
    PUBLIC_METRICS = "public_metrics"
    REFERENCED_TWEETS = "referenced_tweets"
    REPLY_SETTINGS = "reply_settings"
    WITHHELD = "withheld"
    GEO = "geo"
    SOURCE = "source"


class UserField(_NameEnum):
    ID = "id"
    NAME = "name"
    USERNAME = "username"
    CONNECTION_STATUS = "connection_status"
    CREATED_AT = "created_at"
    DESCRIPTION = "description"
    ENTITIES = "entities"
    LOCATION = "location"
    PINNED_TWEET_ID = "pinned_tweet_id"
    PROFILE_IMAGE_URL = "profile_image_url"
    PROTECTED = "protected"
    PUBLIC_METRICS = "public_metrics"
    URL = "url"
    VERIFIED = "verified"
    VERIFIED_TYPE = "verified_type"
    WITHHELD = "withheld"


class State(_NameEnum):
    ALL = "all"
    LIVE = "live"
    SCHEDULED = "scheduled"

    @classmethod
    def is_valid(cls, value: object) -> bool:
        """Return True if ``value`` names one of the states."""
        try:
            cls(value)
        except ValueError:
            return False
        return True


class FieldList(list):
    """A list of field names sent as one comma-separated query parameter."""

    fields_name: ClassVar[str] = ""

    def values(self) -> list[str]:
        """Return the wire values of the items, in order."""
        return [str(item) for item in self]


class ExcludeList(FieldList):
    fields_name = "exclude"


class ExpansionList(FieldList):
    fields_name = "expansions"


class ListFieldList(FieldList):
    fields_name = "list.fields"


class MediaFieldList(FieldList):
    fields_name = "media.fields"


class PlaceFieldList(FieldList):
    fields_name = "place.fields"


class PollFieldList(FieldList):
    fields_name = "poll.fields"


class SpaceFieldList(FieldList):
    fields_name = "space.fields"


class TweetFieldList(FieldList):
    fields_name = "tweet.fields"

    def has_context_annotations(self) -> bool:
        """Return True if context annotations are requested."""
        return TweetField.CONTEXT_ANNOTATIONS in self


class UserFieldList(FieldList):
    fields_name = "user.fields"


def set_fields_params(params: dict[str, str], *args: FieldList | None) -> dict[str, str]:
    """Add each non-empty field list to ``params`` under its name and return ``params``."""
    for field_list in args:
        if field_list is None:
            continue
        values = field_list.values()
        if not values:
            continue
        params[field_list.fields_name] = query_value(values)
    return params