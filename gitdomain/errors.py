"""Exception hierarchy for Git domain operations."""

from __future__ import annotations


class GitDomainError(Exception):
    """Base class for every error raised by the Git domain."""

    prefix = "Git domain error"

    def __init__(self, detail: object) -> None:
        self.detail = str(detail)
        super().__init__(f"{self.prefix}: {self.detail}")


class RepositoryNotFound(GitDomainError):
    """A repository could not be found."""

    prefix = "Repository not found"


class InvalidCommitHash(GitDomainError):
    """A commit hash is malformed."""

    prefix = "Invalid commit hash"


class GitOperationFailed(GitDomainError):
    """A Git operation did not succeed."""

    prefix = "Git operation failed"


class GraphExtractionFailed(GitDomainError):
    """A graph could not be extracted from a repository."""

    prefix = "Graph extraction failed"


class ValidationError(GitDomainError):
    """Input failed a validation or security check."""

    prefix = "Validation error"


class InfrastructureError(GitDomainError):
    """An underlying infrastructure failure, optionally wrapping its cause."""

    prefix = "Infrastructure error"

    def __init__(self, source: object) -> None:
        super().__init__(source)
        if isinstance(source, BaseException):
            self.__cause__ = source