"""Status codes reported by index operations."""

from __future__ import annotations

from enum import IntEnum


class Status(IntEnum):
    """Outcome of an index operation."""

    SUCCESS = 0
    INVALID_ARGS = 1
    INVALID_PARAM_IN_JSON = 2
    OUT_OF_RANGE_IN_JSON = 3
    TYPE_CONFLICT_IN_JSON = 4
    INVALID_METRIC_TYPE = 5
    EMPTY_INDEX = 6
    NOT_IMPLEMENTED = 7
    INDEX_NOT_TRAINED = 8
    INDEX_ALREADY_TRAINED = 9
    FAISS_INNER_ERROR = 10
    ANNOY_INNER_ERROR = 11
    HNSW_INNER_ERROR = 12
    MALLOC_ERROR = 13
    DISKANN_INNER_ERROR = 14
    DISKANN_FILE_ERROR = 15
    INVALID_VALUE_IN_JSON = 16
    ARITHMETIC_OVERFLOW = 17


class StatusError(Exception):
    """Raised when an operation fails with a non-success status."""

    def __init__(self, status: Status, message: str | None = None) -> None:
        status = Status(status)
        if status is Status.SUCCESS:
            raise ValueError("StatusError cannot carry a success status")
        self.status = status
        text = status.name.lower()
        if message:
            text = f"{text}: {message}"
        super().__init__(text)