# src/taskmate/core/errors.py

"""
Error taxonomy.

Every failure the core can report maps to exactly one ErrorKind. The exception
message is user-facing: connectors print it as-is.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    MISSING_DESCRIPTION = "missing_description"
    MISSING_DATETIME = "missing_datetime"
    INVALID_FORMAT = "invalid_format"
    DATE_PARSE = "date_parse"
    INVALID_INDEX = "invalid_index"
    STORAGE_IO = "storage_io"


class TaskmateError(Exception):
    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingDescriptionError(TaskmateError):
    kind = ErrorKind.MISSING_DESCRIPTION


class MissingDateTimeError(TaskmateError):
    kind = ErrorKind.MISSING_DATETIME


class InvalidFormatError(TaskmateError):
    kind = ErrorKind.INVALID_FORMAT


class DateParseError(TaskmateError):
    kind = ErrorKind.DATE_PARSE


class InvalidIndexError(TaskmateError, IndexError):
    kind = ErrorKind.INVALID_INDEX


class StorageError(TaskmateError):
    kind = ErrorKind.STORAGE_IO
