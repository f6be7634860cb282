from enum import Enum


class Status(Enum):
    """Outcome of an editor operation.

    Editor calls never raise for bad input or missing targets; they log and
    report one of these instead. Only `OK` is truthy.
    """

    OK = "ok"
    ALREADY_EXISTS = "already-exists"
    NOT_FOUND = "not-found"
    INVALID_INPUT = "invalid-input"
    NOT_LOADED = "not-loaded"
    NO_BUILD_PHASE = "no-build-phase"
    IO_FAILURE = "io-failure"
    ENCODE_FAILURE = "encode-failure"

    def __bool__(self) -> bool:
        return self is Status.OK


class ProjectLoadError(Exception):
    pass


class InvalidInputError(ProjectLoadError, ValueError):
    """The project path is empty, missing, not a file, or not readable text."""


class IncompleteDataError(ProjectLoadError, RuntimeError):
    """The document parsed but lacks the root object or the main group."""
