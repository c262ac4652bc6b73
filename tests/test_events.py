import dataclasses
import uuid
from datetime import datetime, timezone

import pytest

from gitdomain.events import (
    BranchCreated,
    CommitAnalyzed,
    FileChangeInfo,
    FileChangeType,
    RepositoryAnalyzed,
    RepositoryCloned,
    new_repository_id,
)
from gitdomain.value_objects import AuthorInfo, BranchName, CommitHash, FilePath, RemoteUrl

WHEN = datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_new_repository_ids_are_unique_uuids():
    ids = {new_repository_id() for _ in range(50)}
    assert len(ids) == 50
    assert all(isinstance(i, uuid.UUID) for i in ids)


def test_file_change_type_lookup_by_value():
    assert FileChangeType("Renamed") is FileChangeType.RENAMED
    assert FileChangeType("Added") is FileChangeType.ADDED
    with pytest.raises(ValueError):
        FileChangeType("Copied")


def test_commit_analyzed_stores_sequences_as_tuples():
    info = FileChangeInfo(FilePath("src/main.rs"), 10, 5, FileChangeType.MODIFIED)
    parent = CommitHash("abc123def")
    event = CommitAnalyzed(
        repository_id=new_repository_id(),
        commit_hash=CommitHash("abc123def456789"),
        parents=[parent],
        author=AuthorInfo("Test Author", "test@example.com"),
        message="Test commit",
        files_changed=[info],
        commit_timestamp=WHEN,
    )
    assert event.parents == (parent,)
    assert event.files_changed == (info,)


def test_default_timestamp_is_utc_and_recent():
    before = datetime.now(timezone.utc)
    event = RepositoryAnalyzed(new_repository_id(), "/tmp/test-repo", "test-repo", 2, 10)
    after = datetime.now(timezone.utc)
    assert event.timestamp.tzinfo is not None
    assert before <= event.timestamp <= after


def test_branch_created_defaults_source_branch_to_none():
    event = BranchCreated(new_repository_id(), BranchName("main"), CommitHash("abc123def"))
    assert event.source_branch is None
    assert event.branch_name.is_default()


def test_events_are_immutable():
    event = RepositoryCloned(
        new_repository_id(), RemoteUrl("https://github.com/user/repo.git"), "/tmp/repo", WHEN
    )
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.local_path = "/elsewhere"  # type: ignore[misc]
    assert event.local_path == "/tmp/repo"


def test_equal_events_compare_equal():
    repo_id = new_repository_id()
    a = RepositoryAnalyzed(repo_id, "/tmp/r", "r", 1, 1, WHEN)
    b = RepositoryAnalyzed(repo_id, "/tmp/r", "r", 1, 1, WHEN)
    assert a == b