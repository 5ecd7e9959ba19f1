"""Skill exceptions and error formatting."""

import traceback
from typing import Any


class SkillError(Exception):
    """Base class for skill errors."""


class InvalidApplicationIdError(SkillError):
    """Incoming event targets a different skill."""

    def __init__(self, application_id: str | None = None):
        self.application_id = application_id
        super().__init__("Invalid Application ID")


class ResponseAlreadyFinalizedError(SkillError):
    """finalize() was called more than once on the same turn."""


class GitHubServiceError(SkillError):
    """GitHub API call failed."""

    def __init__(self, message: str, status: int | None = None):
        self.status = status
        super().__init__(message)


class SkillInvocationError(SkillError):
    """Raised from the Lambda entry point when an invocation fails."""


def format_error(err: Any) -> str:
    """Render an error for a failed invocation.

    Exceptions produce their message followed by the stack trace when one is
    available. Anything else is marked as a non-object error.
    """
    if not isinstance(err, BaseException):
        return f"{err} - This error is not object"

    msg = ""
    if str(err):
        msg = f": Message : {err}"
    if err.__traceback__ is not None:
        stack = "".join(traceback.format_exception(type(err), err, err.__traceback__))
        msg += "\nStacktrace:\n====================\n" + stack
    return msg
