"""Parameters, field lists, rate-limit parsing, errors and compliance job types for the Twitter API v2."""

__version__ = "0.1.0"

__all__ = ["compliance", "errors", "fields", "params", "ratelimit"]