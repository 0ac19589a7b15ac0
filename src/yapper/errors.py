# src/yapper/errors.py

"""
Error types raised by the registry, the task codec and the handlers.

Every error carries an ErrorKind tag so callers can either catch by class
or `match err.kind`. All of them are user-recoverable; the message is meant
to be printed back to the user as is.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    UNKNOWN_COMMAND = "unknown_command"
    PROTECTED_NAME = "protected_name"
    ALIAS_IN_USE = "alias_in_use"
    NOT_USER_ALIAS = "not_user_alias"

    MALFORMED_RECORD = "malformed_record"
    UNRECOGNIZED_TYPE = "unrecognized_type"
    UNRECOGNIZED_STATUS = "unrecognized_status"
    INVALID_RANGE = "invalid_range"
    INVALID_FIELD = "invalid_field"

    STORAGE = "storage"
    USAGE = "usage"


class YapperError(Exception):
    kind: ErrorKind = ErrorKind.USAGE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


# ---- command registry ----


class CommandError(YapperError):
    """Base for failures of bind/unbind/resolve."""


class UnknownCommandError(CommandError):
    kind = ErrorKind.UNKNOWN_COMMAND


class ProtectedNameError(CommandError):
    kind = ErrorKind.PROTECTED_NAME


class AliasInUseError(CommandError):
    kind = ErrorKind.ALIAS_IN_USE


class NotUserAliasError(CommandError):
    kind = ErrorKind.NOT_USER_ALIAS


# ---- stored line format ----


class RecordFormatError(YapperError):
    """A stored line (or a task about to be stored) violates the line format."""


class MalformedRecordError(RecordFormatError):
    kind = ErrorKind.MALFORMED_RECORD


class UnrecognizedTypeError(RecordFormatError):
    kind = ErrorKind.UNRECOGNIZED_TYPE


class UnrecognizedStatusError(RecordFormatError):
    kind = ErrorKind.UNRECOGNIZED_STATUS


class InvalidRangeError(RecordFormatError):
    kind = ErrorKind.INVALID_RANGE


class InvalidFieldError(RecordFormatError):
    kind = ErrorKind.INVALID_FIELD


# ---- everything else ----


class TaskStorageError(YapperError):
    kind = ErrorKind.STORAGE


class UsageError(YapperError):
    kind = ErrorKind.USAGE
