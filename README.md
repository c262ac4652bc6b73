# gitdomain

A small, dependency-free domain model for describing Git repositories in an
event-sourced application. It provides validated value objects, domain event
types, in-memory read-model projections fed by those events, and a query
handler that answers questions from the projections.

## Installation

```
pip install gitdomain
```

To run the tests:

```
pip install "gitdomain[test]"
pytest
```

## Modules

- `gitdomain.errors` – the exception hierarchy rooted at `GitDomainError`:
  `RepositoryNotFound`, `InvalidCommitHash`, `GitOperationFailed`,
  `GraphExtractionFailed`, `ValidationError` and `InfrastructureError`.
  Each message is a fixed prefix followed by the detail, for example
  `"Invalid commit hash: not-hex"`; the detail is kept on `.detail`.
  `InfrastructureError` given an exception records it as its `__cause__`.
- `gitdomain.security` – input checks that raise `ValidationError`:
  - `validate_path(path)` rejects null bytes, `..` and `~`, and returns a
    `pathlib.PurePath`.
  - `validate_remote_url(url)` rejects null bytes and shell metacharacters
    (`` $ ` | ; & < > ( ) { } ``, newline, carriage return) and requires one
    of `https://`, `http://`, `git://`, `ssh://` or `git@`.
  - `validate_branch_name(name)` rejects null bytes, the same metacharacters
    plus spaces, a leading `-`, a trailing `.lock`, and `..` or `//`.
  - `sanitize_for_display(text)` drops control characters other than
    whitespace and keeps at most 100 characters.
- `gitdomain.value_objects` – frozen dataclasses that validate on
  construction:
  - `CommitHash` – hexadecimal, at least 7 characters, stored lower case;
    `short()` gives the first 7 characters.
  - `BranchName` – non-empty, passes `validate_branch_name`, must not end in
    `.` or `/`; `is_default()` is true for `main` and `master`.
  - `RemoteUrl` – non-empty, passes `validate_remote_url`;
    `repository_name()` and `is_github()`.
  - `AuthorInfo(name, email)` – shown as `Name <email>`.
  - `TagName` – non-empty; `is_semver()` is true for `v` followed by a digit.
  - `FilePath` – non-empty, passes `validate_path`, backslashes become `/`;
    `file_name()`, `directory()` and `extension()`.
- `gitdomain.events` – the event dataclasses `RepositoryCloned`,
  `RepositoryAnalyzed`, `BranchCreated` and `CommitAnalyzed`, together with
  `FileChangeInfo`, the `FileChangeType` enum, the `GitDomainEvent` union,
  the `RepositoryId` alias (a `uuid.UUID`) and `new_repository_id()`.
  Timestamps default to the current UTC time.
- `gitdomain.projections` – thread-safe, in-memory read models:
  - `RepositoryListProjection` – `RepositorySummary` per repository;
    `get_all()`, `get_by_id()`, `find_by_remote_url(pattern)`.
  - `CommitHistoryProjection` – `CommitHistoryEntry` list per repository,
    newest first; `get_history(repository_id, limit=None)`, `get_commit()`.
  - `BranchStatusProjection` – `BranchInfo` per branch; `get_branches()`,
    `get_branch()`.
  - `FileChangeProjection` – `FileChange` records by path and by commit plus
    `RenameInfo` records; `get_file_history()`, `get_commit_changes()`,
    `get_changes_between()`, `get_rename_history()` and
    `get_file_statistics()` returning `FileStatistics`.
- `gitdomain.queries` – `GitQueryHandler` with the coroutines
  `handle_get_repository_details`, `handle_get_commit_history`,
  `handle_get_branch_list` and `handle_list_repositories`, the query types
  `GetRepositoryDetails`, `GetCommitHistory`, `GetBranchList`,
  `ListRepositories`, their result types, and `QueryError`.

## Value objects

```python
from gitdomain.errors import InvalidCommitHash
from gitdomain.value_objects import AuthorInfo, BranchName, CommitHash, FilePath, RemoteUrl

h = CommitHash("ABC123DEF")
h.short()                        # "abc123d"

BranchName("main").is_default()  # True

url = RemoteUrl("https://github.com/user/repo.git")
url.repository_name()            # "repo"
url.is_github()                  # True

p = FilePath("src\\main\\App.java")
str(p)                           # "src/main/App.java"
p.directory()                    # "src/main"
p.extension()                    # "java"

str(AuthorInfo("Jane Doe", "jane@example.com"))  # "Jane Doe <jane@example.com>"

try:
    CommitHash("not-hex")
except InvalidCommitHash as exc:
    print(exc)                   # Invalid commit hash: not-hex
```

## Projections and queries

Projections are fed events with `handle_event`. `FileChangeProjection.handle_event`
is a coroutine; the other projections handle events synchronously. Every
query handler method is a coroutine.

```python
import asyncio
from datetime import datetime, timezone

from gitdomain.events import BranchCreated, RepositoryAnalyzed, new_repository_id
from gitdomain.projections import (
    BranchStatusProjection,
    CommitHistoryProjection,
    RepositoryListProjection,
)
from gitdomain.queries import GetBranchList, GitQueryHandler, ListRepositories
from gitdomain.value_objects import BranchName, CommitHash

repos = RepositoryListProjection()
branches = BranchStatusProjection()
handler = GitQueryHandler(repos, CommitHistoryProjection(), branches)

repo_id = new_repository_id()
repos.handle_event(
    RepositoryAnalyzed(
        repository_id=repo_id,
        path="/tmp/test-repo",
        name="test-repo",
        branch_count=1,
        commit_count=10,
        timestamp=datetime.now(timezone.utc),
    )
)
branches.handle_event(
    BranchCreated(
        repository_id=repo_id,
        branch_name=BranchName("main"),
        commit_hash=CommitHash("abc123def"),
    )
)

listing = asyncio.run(handler.handle_list_repositories(ListRepositories()))
print([r.name for r in listing.repositories])   # ['test-repo']

branch_list = asyncio.run(handler.handle_get_branch_list(GetBranchList(repo_id)))
print(branch_list.default_branch)               # main
```

## What this package does not do

- It does not open, read, clone or fetch Git repositories. Events are built
  by the caller; nothing here walks commits, branches or trees on disk.
- It has no command handlers and does not extract commit or dependency
  graphs.
- Projections live in memory only; nothing is persisted.
- `FileChangeProjection.get_changes_between` returns the changes of the
  second commit only, and rename records carry the new path at both ends,
  because `FileChangeInfo` holds no old path.
- There is no command-line program or server.