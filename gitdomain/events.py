"""Domain events emitted while analysing Git repositories."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Tuple, Union

from .value_objects import AuthorInfo, BranchName, CommitHash, FilePath, RemoteUrl

RepositoryId = uuid.UUID


def new_repository_id() -> uuid.UUID:
    """Return a fresh, random repository identifier."""
    return uuid.uuid4()


def _now() -> datetime:
    return datetime.now(timezone.utc)


class FileChangeType(Enum):
    """How a file was changed by a commit."""

    ADDED = "Added"
    DELETED = "Deleted"
    MODIFIED = "Modified"
    RENAMED = "Renamed"


@dataclass(frozen=True)
class FileChangeInfo:
    """A single file touched by a commit."""

    path: FilePath
    additions: int
    deletions: int
    change_type: FileChangeType


@dataclass(frozen=True)
class RepositoryCloned:
    """A repository was cloned from a remote to a local path."""

    repository_id: RepositoryId
    remote_url: RemoteUrl
    local_path: str
    timestamp: datetime = field(default_factory=_now)


@dataclass(frozen=True)
class RepositoryAnalyzed:
    """A repository on disk was analysed."""

    repository_id: RepositoryId
    path: str
    name: str
    branch_count: int
    commit_count: int
    timestamp: datetime = field(default_factory=_now)


@dataclass(frozen=True)
class BranchCreated:
    """A branch was found or created in a repository."""

    repository_id: RepositoryId
    branch_name: BranchName
    commit_hash: CommitHash
    source_branch: Optional[BranchName] = None
    timestamp: datetime = field(default_factory=_now)


@dataclass(frozen=True)
class CommitAnalyzed:
    """A commit was analysed, with its parents and changed files."""

    repository_id: RepositoryId
    commit_hash: CommitHash
    parents: Tuple[CommitHash, ...]
    author: AuthorInfo
    message: str
    files_changed: Tuple[FileChangeInfo, ...]
    commit_timestamp: datetime
    timestamp: datetime = field(default_factory=_now)

    def __post_init__(self) -> None:
        object.__setattr__(self, "parents", tuple(self.parents))
        object.__setattr__(self, "files_changed", tuple(self.files_changed))


GitDomainEvent = Union[RepositoryCloned, RepositoryAnalyzed, BranchCreated, CommitAnalyzed]