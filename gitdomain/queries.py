"""Queries over the Git read models and the handler that answers them."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .events import RepositoryId
from .projections import (
    BranchInfo,
    BranchStatusProjection,
    CommitHistoryEntry,
    CommitHistoryProjection,
    ProjectionError,
    RepositoryListProjection,
    RepositorySummary,
)
from .value_objects import BranchName

_RECENT_COMMIT_LIMIT = 10


class QueryError(Exception):
    """A query could not be answered."""

    prefix = "Query error"

    def __init__(self, detail: object) -> None:
        self.detail = str(detail)
        super().__init__(f"{self.prefix}: {self.detail}")


@contextmanager
def _projection_errors() -> Iterator[None]:
    try:
        yield
    except ProjectionError as exc:
        raise QueryError(exc) from exc


@dataclass(frozen=True)
class GetRepositoryDetails:
    """Ask for the summary, recent commits and branches of one repository."""

    repository_id: RepositoryId


@dataclass(frozen=True)
class RepositoryDetailsResult:
    """Details of one repository."""

    summary: Optional[RepositorySummary]
    recent_commits: List[CommitHistoryEntry] = field(default_factory=list)
    branches: List[BranchInfo] = field(default_factory=list)


@dataclass(frozen=True)
class GetCommitHistory:
    """Ask for a repository's commit history, optionally limited."""

    repository_id: RepositoryId
    limit: Optional[int] = None


@dataclass(frozen=True)
class CommitHistoryResult:
    """Commit history together with the count before any limit was applied."""

    commits: List[CommitHistoryEntry]
    total_count: int


@dataclass(frozen=True)
class GetBranchList:
    """Ask for the branches of one repository."""

    repository_id: RepositoryId


@dataclass(frozen=True)
class BranchListResult:
    """The branches of a repository and its default branch, if any."""

    branches: List[BranchInfo]
    default_branch: Optional[BranchName]


@dataclass(frozen=True)
class ListRepositories:
    """Ask for all repositories, optionally filtered by a remote URL substring."""

    remote_url_pattern: Optional[str] = None


@dataclass(frozen=True)
class ListRepositoriesResult:
    """Summaries of the matching repositories."""

    repositories: List[RepositorySummary]


class GitQueryHandler:
    """Answers Git domain queries from the read-model projections."""

    def __init__(
        self,
        repository_projection: RepositoryListProjection,
        commit_projection: CommitHistoryProjection,
        branch_projection: BranchStatusProjection,
    ) -> None:
        self._repositories = repository_projection
        self._commits = commit_projection
        self._branches = branch_projection

    async def handle_get_repository_details(
        self, query: GetRepositoryDetails
    ) -> RepositoryDetailsResult:
        """Return a repository's summary, ten newest commits and branches."""
        with _projection_errors():
            summary = self._repositories.get_by_id(query.repository_id)
            recent = self._commits.get_history(query.repository_id, _RECENT_COMMIT_LIMIT)
            branches = self._branches.get_branches(query.repository_id)
        return RepositoryDetailsResult(
            summary=summary, recent_commits=recent, branches=branches
        )

    async def handle_get_commit_history(self, query: GetCommitHistory) -> CommitHistoryResult:
        """Return the commit history, newest first, with the full count."""
        with _projection_errors():
            all_commits = self._commits.get_history(query.repository_id)
            if query.limit is None:
                commits = all_commits
            else:
                commits = self._commits.get_history(query.repository_id, query.limit)
        return CommitHistoryResult(commits=commits, total_count=len(all_commits))

    async def handle_get_branch_list(self, query: GetBranchList) -> BranchListResult:
        """Return the branches and the first default branch among them."""
        with _projection_errors():
            branches = self._branches.get_branches(query.repository_id)
        default = next((b.name for b in branches if b.is_default), None)
        return BranchListResult(branches=branches, default_branch=default)

    async def handle_list_repositories(self, query: ListRepositories) -> ListRepositoriesResult:
        """Return all repositories, or those whose remote URL contains the pattern."""
        with _projection_errors():
            if query.remote_url_pattern is not None:
                repositories = self._repositories.find_by_remote_url(query.remote_url_pattern)
            else:
                repositories = self._repositories.get_all()
        return ListRepositoriesResult(repositories=repositories)