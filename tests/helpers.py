"""Shared outcome builders for tests."""

from repofetch.models import FetchOutcome


def ok(value):
    return FetchOutcome[int].success(value)


def failed(message="boom"):
    return FetchOutcome[int].failure(RuntimeError(message))
