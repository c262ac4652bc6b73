import pytest

from gitdomain.errors import (
    GitDomainError,
    GitOperationFailed,
    GraphExtractionFailed,
    InfrastructureError,
    InvalidCommitHash,
    RepositoryNotFound,
    ValidationError,
)


@pytest.mark.parametrize(
    ("cls", "prefix"),
    [
        (RepositoryNotFound, "Repository not found"),
        (InvalidCommitHash, "Invalid commit hash"),
        (GitOperationFailed, "Git operation failed"),
        (GraphExtractionFailed, "Graph extraction failed"),
        (ValidationError, "Validation error"),
        (InfrastructureError, "Infrastructure error"),
    ],
)
def test_message_format(cls, prefix):
    err = cls("details here")
    assert str(err) == f"{prefix}: details here"
    assert err.detail == "details here"


@pytest.mark.parametrize(
    "cls",
    [
        RepositoryNotFound,
        InvalidCommitHash,
        GitOperationFailed,
        GraphExtractionFailed,
        ValidationError,
        InfrastructureError,
    ],
)
def test_caught_as_base(cls):
    err = cls("boom")
    assert isinstance(err, GitDomainError)
    assert err.detail == "boom"
    assert str(err).endswith(": boom")


def test_infrastructure_wraps_cause():
    cause = OSError("disk gone")
    err = InfrastructureError(cause)
    assert err.__cause__ is cause
    assert str(err) == "Infrastructure error: disk gone"


def test_infrastructure_from_string_has_no_cause():
    err = InfrastructureError("plain")
    assert err.__cause__ is None
    assert err.detail == "plain"


def test_invalid_commit_hash_keeps_input():
    err = InvalidCommitHash("not-hex")
    assert err.detail == "not-hex"
    assert str(err) == "Invalid commit hash: not-hex"