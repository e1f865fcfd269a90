"""Status codes, exceptions and error reporting for the simulation."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO


class Status(IntEnum):
    """Outcome codes; each doubles as the process exit status."""

    SUCCESS = 0
    ERROR_ALLOCATION = 1
    ERROR_SYSTEM = 2
    ERROR_ARGUMENTS = 3
    THREAD_CREATION_ERROR = 4
    THREAD_JOIN_ERROR = 5


_MESSAGES = {
    Status.ERROR_ALLOCATION: "Error: Memory allocation failed",
    Status.ERROR_SYSTEM: "Error: System call failed",
    Status.ERROR_ARGUMENTS: "Error: Invalid arguments",
}
_UNKNOWN_MESSAGE = "Error: Unknown error"


def error_message(status: Status | int) -> str:
    """Return the user-facing message for a status code."""
    try:
        status = Status(status)
    except ValueError:
        return _UNKNOWN_MESSAGE
    return _MESSAGES.get(status, _UNKNOWN_MESSAGE)


class PhiloError(Exception):
    """Base class of every failure the simulation reports."""

    status: Status = Status.ERROR_SYSTEM

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or error_message(self.status))


class ArgumentsError(PhiloError):
    """The command-line arguments are missing or out of range."""

    status = Status.ERROR_ARGUMENTS


class SystemCallError(PhiloError):
    """A call into the operating system failed."""

    status = Status.ERROR_SYSTEM


class ThreadCreationError(PhiloError):
    """A philosopher thread could not be started."""

    status = Status.THREAD_CREATION_ERROR


class ThreadJoinError(PhiloError):
    """A philosopher thread could not be joined."""

    status = Status.THREAD_JOIN_ERROR


def _status_of(error: PhiloError | BaseException | Status | int) -> Status | int:
    if isinstance(error, PhiloError):
        return error.status
    if isinstance(error, MemoryError):
        return Status.ERROR_ALLOCATION
    if isinstance(error, BaseException):
        return Status.ERROR_SYSTEM
    return error


def report_error(
    error: PhiloError | BaseException | Status | int,
    stream: TextIO | None = None,
) -> int:
    """Write the message for ``error`` to ``stream`` and return its exit code."""
    status = _status_of(error)
    out = sys.stderr if stream is None else stream
    out.write(error_message(status) + "\n")
    out.flush()
    return int(status)