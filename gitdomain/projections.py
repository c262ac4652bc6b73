"""Read-model projections built from the Git domain event stream."""

from __future__ import annotations

import dataclasses
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from .events import (
    BranchCreated,
    CommitAnalyzed,
    FileChangeType,
    GitDomainEvent,
    RepositoryAnalyzed,
    RepositoryCloned,
    RepositoryId,
)
from .value_objects import AuthorInfo, BranchName, CommitHash, FilePath, RemoteUrl


class ProjectionError(Exception):
    """A projection could not be read or updated."""

    def __init__(self, detail: object) -> None:
        self.detail = str(detail)
        super().__init__(f"Projection error: {self.detail}")


@dataclass
class RepositorySummary:
    """Summary of a repository for list views."""

    id: RepositoryId
    name: str
    remote_url: Optional[RemoteUrl]
    local_path: Optional[str]
    branch_count: int
    commit_count: int
    last_updated: datetime


class RepositoryListProjection:
    """Maintains a summary of every known repository."""

    def __init__(self) -> None:
        self._repositories: Dict[RepositoryId, RepositorySummary] = {}
        self._lock = threading.Lock()

    def handle_event(self, event: GitDomainEvent) -> None:
        """Update the summaries from ``event``."""
        with self._lock:
            repos = self._repositories
            match event:
                case RepositoryCloned():
                    summary = repos.get(event.repository_id)
                    if summary is None:
                        summary = RepositorySummary(
                            id=event.repository_id,
                            name=event.local_path.rsplit("/", 1)[-1],
                            remote_url=None,
                            local_path=None,
                            branch_count=0,
                            commit_count=0,
                            last_updated=event.timestamp,
                        )
                        repos[event.repository_id] = summary
                    summary.remote_url = event.remote_url
                    summary.local_path = event.local_path
                    summary.last_updated = event.timestamp
                case RepositoryAnalyzed():
                    summary = repos.get(event.repository_id)
                    if summary is None:
                        summary = RepositorySummary(
                            id=event.repository_id,
                            name=event.name,
                            remote_url=None,
                            local_path=event.path,
                            branch_count=0,
                            commit_count=0,
                            last_updated=event.timestamp,
                        )
                        repos[event.repository_id] = summary
                    summary.name = event.name
                    summary.local_path = event.path
                    summary.branch_count = event.branch_count
                    summary.commit_count = event.commit_count
                    summary.last_updated = event.timestamp
                case BranchCreated():
                    summary = repos.get(event.repository_id)
                    if summary is not None:
                        summary.branch_count += 1
                        summary.last_updated = event.timestamp
                case CommitAnalyzed():
                    summary = repos.get(event.repository_id)
                    if summary is not None:
                        summary.commit_count += 1
                        summary.last_updated = event.timestamp

    def get_all(self) -> List[RepositorySummary]:
        """Return copies of every repository summary."""
        with self._lock:
            return [dataclasses.replace(s) for s in self._repositories.values()]

    def get_by_id(self, repository_id: RepositoryId) -> Optional[RepositorySummary]:
        """Return a copy of one repository's summary, if known."""
        with self._lock:
            summary = self._repositories.get(repository_id)
            return dataclasses.replace(summary) if summary is not None else None

    def find_by_remote_url(self, pattern: str) -> List[RepositorySummary]:
        """Return repositories whose remote URL contains ``pattern``."""
        with self._lock:
            return [
                dataclasses.replace(s)
                for s in self._repositories.values()
                if s.remote_url is not None and pattern in str(s.remote_url)
            ]


@dataclass(frozen=True)
class CommitHistoryEntry:
    """One commit in a repository's history."""

    hash: CommitHash
    parents: Tuple[CommitHash, ...]
    author_name: str
    author_email: str
    message: str
    timestamp: datetime
    files_changed: int


class CommitHistoryProjection:
    """Maintains per-repository commit history, newest first."""

    def __init__(self) -> None:
        self._commits: Dict[RepositoryId, List[CommitHistoryEntry]] = {}
        self._lock = threading.Lock()

    def handle_event(self, event: GitDomainEvent) -> None:
        """Record analysed commits."""
        if not isinstance(event, CommitAnalyzed):
            return
        with self._lock:
            history = self._commits.setdefault(event.repository_id, [])
            history.append(
                CommitHistoryEntry(
                    hash=event.commit_hash,
                    parents=event.parents,
                    author_name=event.author.name,
                    author_email=event.author.email,
                    message=event.message,
                    timestamp=event.commit_timestamp,
                    files_changed=len(event.files_changed),
                )
            )
            history.sort(key=lambda entry: entry.timestamp, reverse=True)

    def get_history(
        self, repository_id: RepositoryId, limit: Optional[int] = None
    ) -> List[CommitHistoryEntry]:
        """Return the newest commits of a repository, at most ``limit`` of them."""
        with self._lock:
            history = self._commits.get(repository_id, [])
            return list(history if limit is None else history[:limit])

    def get_commit(
        self, repository_id: RepositoryId, commit_hash: CommitHash
    ) -> Optional[CommitHistoryEntry]:
        """Return the entry for ``commit_hash`` in a repository, if recorded."""
        with self._lock:
            history = self._commits.get(repository_id, [])
            return next((c for c in history if c.hash == commit_hash), None)


@dataclass(frozen=True)
class BranchInfo:
    """Current state of one branch."""

    name: BranchName
    head: CommitHash
    is_default: bool
    last_updated: datetime


class BranchStatusProjection:
    """Maintains the branches of each repository."""

    def __init__(self) -> None:
        self._branches: Dict[RepositoryId, Dict[BranchName, BranchInfo]] = {}
        self._lock = threading.Lock()

    def handle_event(self, event: GitDomainEvent) -> None:
        """Record created branches."""
        if not isinstance(event, BranchCreated):
            return
        with self._lock:
            repo_branches = self._branches.setdefault(event.repository_id, {})
            repo_branches[event.branch_name] = BranchInfo(
                name=event.branch_name,
                head=event.commit_hash,
                is_default=event.branch_name.is_default(),
                last_updated=event.timestamp,
            )

    def get_branches(self, repository_id: RepositoryId) -> List[BranchInfo]:
        """Return every branch recorded for a repository."""
        with self._lock:
            return list(self._branches.get(repository_id, {}).values())

    def get_branch(self, repository_id: RepositoryId, name: BranchName) -> Optional[BranchInfo]:
        """Return one branch of a repository, if recorded."""
        with self._lock:
            return self._branches.get(repository_id, {}).get(name)


@dataclass(frozen=True)
class FileChange:
    """A change made to one file by one commit."""

    path: FilePath
    commit_hash: CommitHash
    change_type: FileChangeType
    additions: int
    deletions: int
    author: AuthorInfo
    timestamp: datetime


@dataclass(frozen=True)
class RenameInfo:
    """A rename of a file recorded in a commit."""

    old_path: FilePath
    new_path: FilePath
    commit_hash: CommitHash
    timestamp: datetime


@dataclass(frozen=True)
class FileStatistics:
    """Aggregated change statistics for one file."""

    path: FilePath
    total_additions: int
    total_deletions: int
    change_count: int
    unique_authors: int
    first_commit: Optional[CommitHash]
    last_commit: Optional[CommitHash]


class FileChangeProjection:
    """Tracks file changes by path and by commit, plus renames."""

    def __init__(self) -> None:
        self._file_changes: Dict[FilePath, List[FileChange]] = {}
        self._commit_changes: Dict[CommitHash, List[FileChange]] = {}
        self._rename_history: Dict[FilePath, List[RenameInfo]] = {}
        self._lock = threading.Lock()

    async def handle_event(self, event: GitDomainEvent) -> None:
        """Record the file changes of analysed commits."""
        if not isinstance(event, CommitAnalyzed):
            return
        with self._lock:
            changes_for_commit: List[FileChange] = []
            for info in event.files_changed:
                change = FileChange(
                    path=info.path,
                    commit_hash=event.commit_hash,
                    change_type=info.change_type,
                    additions=info.additions,
                    deletions=info.deletions,
                    author=event.author,
                    timestamp=event.commit_timestamp,
                )
                self._file_changes.setdefault(info.path, []).append(change)
                if info.change_type is FileChangeType.RENAMED:
                    # The event carries only the new path, so both ends record it.
                    self._rename_history.setdefault(info.path, []).append(
                        RenameInfo(
                            old_path=info.path,
                            new_path=info.path,
                            commit_hash=event.commit_hash,
                            timestamp=event.commit_timestamp,
                        )
                    )
                changes_for_commit.append(change)
            self._commit_changes[event.commit_hash] = changes_for_commit

    def get_file_history(self, path: FilePath) -> List[FileChange]:
        """Return every recorded change to ``path``, oldest first."""
        with self._lock:
            return list(self._file_changes.get(path, []))

    def get_commit_changes(self, commit_hash: CommitHash) -> List[FileChange]:
        """Return the file changes made by one commit."""
        with self._lock:
            return list(self._commit_changes.get(commit_hash, []))

    def get_changes_between(
        self, from_commit: CommitHash, to_commit: CommitHash
    ) -> List[FileChange]:
        """Return the changes of ``to_commit``; the graph between is not walked."""
        with self._lock:
            return list(self._commit_changes.get(to_commit, []))

    def get_rename_history(self, path: FilePath) -> List[RenameInfo]:
        """Return the renames recorded for ``path``."""
        with self._lock:
            return list(self._rename_history.get(path, []))

    def get_file_statistics(self, path: FilePath) -> FileStatistics:
        """Summarise every recorded change to ``path``."""
        changes = self.get_file_history(path)
        return FileStatistics(
            path=path,
            total_additions=sum(c.additions for c in changes),
            total_deletions=sum(c.deletions for c in changes),
            change_count=len(changes),
            unique_authors=len({c.author.name for c in changes}),
            first_commit=changes[0].commit_hash if changes else None,
            last_commit=changes[-1].commit_hash if changes else None,
        )