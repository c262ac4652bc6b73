"""Immutable value objects describing Git concepts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import GitOperationFailed, InvalidCommitHash
from .security import validate_branch_name, validate_path, validate_remote_url

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_MIN_HASH_LENGTH = 7
_SHORT_HASH_LENGTH = 7
_DEFAULT_BRANCHES = frozenset({"main", "master"})


@dataclass(frozen=True)
class CommitHash:
    """A hexadecimal commit hash of at least seven characters, stored lower case."""

    value: str

    def __post_init__(self) -> None:
        if not all(ch in _HEX_DIGITS for ch in self.value):
            raise InvalidCommitHash(self.value)
        if len(self.value) < _MIN_HASH_LENGTH:
            raise InvalidCommitHash("Commit hash too short")
        object.__setattr__(self, "value", self.value.lower())

    def short(self) -> str:
        """Return the first seven characters of the hash."""
        return self.value[:_SHORT_HASH_LENGTH]

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BranchName:
    """A Git branch name that passes the naming and security rules."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise GitOperationFailed("Branch name cannot be empty")
        validate_branch_name(self.value)
        if self.value.endswith((".", "/")):
            raise GitOperationFailed(f"Invalid branch name: {self.value}")

    def is_default(self) -> bool:
        """Whether this is the ``main`` or ``master`` branch."""
        return self.value in _DEFAULT_BRANCHES

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RemoteUrl:
    """A Git remote URL using one of the accepted protocols."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise GitOperationFailed("Remote URL cannot be empty")
        validate_remote_url(self.value)

    def repository_name(self) -> str:
        """Return the last path component with any ``.git`` suffixes removed."""
        name = self.value.rsplit("/", 1)[-1]
        while name.endswith(".git"):
            name = name[: -len(".git")]
        return name

    def is_github(self) -> bool:
        """Whether the URL points at GitHub."""
        return "github.com" in self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AuthorInfo:
    """The author or committer of a commit."""

    name: str
    email: str

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


@dataclass(frozen=True)
class TagName:
    """A non-empty Git tag name."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise GitOperationFailed("Tag name cannot be empty")

    def is_semver(self) -> bool:
        """Whether the tag looks like ``v`` followed by a digit."""
        return self.value.startswith("v") and self.value[1:2].isnumeric()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FilePath:
    """A repository-relative file path, normalised to forward slashes."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise GitOperationFailed("File path cannot be empty")
        validate_path(self.value)
        object.__setattr__(self, "value", self.value.replace("\\", "/"))

    def file_name(self) -> str:
        """Return the last path component."""
        return self.value.rsplit("/", 1)[-1]

    def directory(self) -> Optional[str]:
        """Return everything before the last slash, or None at the root."""
        head, sep, _ = self.value.rpartition("/")
        return head if sep else None

    def extension(self) -> Optional[str]:
        """Return the text after the last dot in the file name, if any."""
        _, sep, ext = self.file_name().rpartition(".")
        return ext if sep else None

    def __str__(self) -> str:
        return self.value