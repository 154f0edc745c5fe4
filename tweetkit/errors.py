"""Errors raised by the client, including non-2XX API responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta

from tweetkit.ratelimit import RateLimitInformation

ERROR_CLIENT_NOT_READY = "Twitter client is not ready."
ERROR_PARAMETERS_NIL = "Parameter for {} is nil."
ERROR_NON_2XX_STATUS = "Twitter API returned a status other than 200. Status: {}."
ERROR_UNDEFINED = "Undefined error."

_SUMMARY_HEAD = "The Twitter API returned a Response with a status other than 2XX series."

_ERROR_CODE_DETAILS: dict[int, tuple[str, str]] = {
    3: (
        "Invalid coordinates.",
        "Corresponds with HTTP 400. The coordinates provided as parameters "
        "were not valid for the request.",
    ),
    13: (
        "No location associated with the specified IP address.",
        "Corresponds with HTTP 404. It was not possible to derive a location "
        "for the IP address provided as a parameter on the geo search request.",
    ),
}


@dataclass
class ErrorInformation:
    """One error entry reported in an API error response."""

    message: str = ""
    code: int = 0
    label: str = ""

    @property
    def text(self) -> str:
        """Short text describing the error code."""
        return _ERROR_CODE_DETAILS.get(self.code, ("", ""))[0]

    @property
    def description(self) -> str:
        """Longer description of the error code."""
        return _ERROR_CODE_DETAILS.get(self.code, ("", ""))[1]


@dataclass
class Non2XXError:
    """Details of an API response whose status was outside the 2XX range."""

    api_errors: list[ErrorInformation] = field(default_factory=list)
    title: str = ""
    detail: str = ""
    type: str = ""
    status: str = ""
    status_code: int = 0
    rate_limit_info: RateLimitInformation | None = None


class GotwiError(Exception):
    """Error raised by the client; ``on_api`` is True when the API reported it."""

    def __init__(
        self,
        message: str | None = None,
        *,
        on_api: bool = False,
        api_error: Non2XXError | None = None,
    ) -> None:
        super().__init__(*([] if message is None else [message]))
        self.message = message
        self.on_api = on_api
        info = api_error if api_error is not None else Non2XXError()
        self.api_errors = list(info.api_errors)
        self.title = info.title
        self.detail = info.detail
        self.type = info.type
        self.status = info.status
        self.status_code = info.status_code
        self.rate_limit_info = info.rate_limit_info

    def __str__(self) -> str:
        if self.message is None:
            return ERROR_UNDEFINED
        return self.message


def wrap_err(err: BaseException | None) -> GotwiError | None:
    """Wrap ``err`` in a GotwiError, keeping it as the cause; GotwiErrors pass through."""
    if err is None:
        return None
    if isinstance(err, GotwiError):
        return err
    wrapped = GotwiError(str(err))
    wrapped.__cause__ = err
    return wrapped


def wrap_with_api_err(error: Non2XXError | None) -> GotwiError | None:
    """Build a GotwiError describing a non-2XX API response."""
    if error is None:
        return None
    return GotwiError(non2xx_error_summary(error), on_api=True, api_error=error)


def _format_time(moment: datetime) -> str:
    text = moment.strftime("%Y-%m-%d %H:%M:%S")
    if moment.microsecond:
        text += f".{moment.microsecond:06d}".rstrip("0")
    offset = moment.utcoffset() or timedelta(0)
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    zone = moment.tzname() or "UTC"
    return f"{text} {sign}{minutes // 60:02d}{minutes % 60:02d} {zone}"


def non2xx_error_summary(error: Non2XXError | None) -> str:
    """Return a one-line summary of a non-2XX API response."""
    if error is None:
        return ""

    summary = [_SUMMARY_HEAD]
    if error.status:
        summary.append(f'httpStatus="{error.status}"')
    if error.status_code > 0:
        summary.append(f"httpStatusCode={error.status_code}")
    if error.title:
        summary.append(f'title="{error.title}"')
    if error.detail:
        summary.append(f'detail="{error.detail}"')

    reported = (e for e in error.api_errors if e.message and e.code > 0)
    for number, info in enumerate(reported, start=1):
        summary.append(
            f"errorCode{number}={info.code} "
            f'errorText{number}="{info.text}" '
            f'errorDescription{number}="{info.description}"'
        )

    rate = error.rate_limit_info
    if rate is not None:
        reset = "" if rate.reset_at is None else _format_time(rate.reset_at)
        summary.append(
            f"rateLimit={rate.limit} rateLimitRemaining={rate.remaining} "
            f'rateLimitReset="{reset}"'
        )

    return " ".join(summary)