from pathlib import PurePath

import pytest

from gitdomain.errors import GitDomainError, ValidationError
from gitdomain.security import (
    sanitize_for_display,
    validate_branch_name,
    validate_path,
    validate_remote_url,
)


@pytest.mark.parametrize("path", ["src/main.rs", "project/src/lib.rs", "/home/user/project"])
def test_validate_path_accepts(path):
    assert validate_path(path) == PurePath(path)


@pytest.mark.parametrize("path", ["../../../etc/passwd", "~/sensitive", "path\0with\0nulls"])
def test_validate_path_rejects(path):
    with pytest.raises(ValidationError):
        validate_path(path)


def test_validate_path_messages():
    with pytest.raises(ValidationError, match="null bytes"):
        validate_path("a\0b")
    with pytest.raises(ValidationError, match="directory traversal"):
        validate_path("a/../b")


@pytest.mark.parametrize(
    "url",
    [
        "https://github.com/user/repo.git",
        "git@example.com:user/repo.git",
        "ssh://git@example.com/user/repo.git",
        "git://github.com/user/repo.git",
        "http://example.com/repo.git",
    ],
)
def test_validate_remote_url_accepts(url):
    assert validate_remote_url(url) is None


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/repo.git; rm -rf /",
        "https://example.com/repo.git`whoami`",
        "file:///etc/passwd",
    ],
)
def test_validate_remote_url_rejects(url):
    with pytest.raises(ValidationError):
        validate_remote_url(url)


def test_validate_remote_url_messages():
    with pytest.raises(ValidationError, match="dangerous character: ;"):
        validate_remote_url("https://example.com/repo.git; rm -rf /")
    with pytest.raises(ValidationError, match="valid Git protocol"):
        validate_remote_url("file:///etc/passwd")
    with pytest.raises(ValidationError, match="null bytes"):
        validate_remote_url("https://example.com/\0")


@pytest.mark.parametrize("name", ["main", "feature/new-feature", "release-1.0"])
def test_validate_branch_name_accepts(name):
    assert validate_branch_name(name) is None


@pytest.mark.parametrize(
    "name",
    ["-feature", "feature.lock", "feature; rm -rf /", "feature with spaces", "a..b", "a//b"],
)
def test_validate_branch_name_rejects(name):
    with pytest.raises(ValidationError):
        validate_branch_name(name)


def test_validate_branch_name_messages():
    with pytest.raises(ValidationError, match="cannot start with hyphen"):
        validate_branch_name("-feature")
    with pytest.raises(ValidationError, match=r"cannot end with \.lock"):
        validate_branch_name("feature.lock")
    with pytest.raises(ValidationError, match="invalid patterns"):
        validate_branch_name("a..b")


def test_validation_error_is_domain_error():
    with pytest.raises(GitDomainError):
        validate_branch_name("feature with spaces")


def test_sanitize_for_display():
    assert sanitize_for_display("normal text") == "normal text"
    assert sanitize_for_display("text\0with\0nulls") == "textwithnulls"
    assert sanitize_for_display("text\nwith\nnewlines") == "text\nwith\nnewlines"
    assert len(sanitize_for_display("a" * 200)) == 100


def test_sanitize_keeps_tabs_drops_other_controls():
    assert sanitize_for_display("a\tb\x07c\x1bd") == "a\tbcd"


def test_sanitize_limit_applies_after_filtering():
    text = "\0" * 50 + "b" * 150
    result = sanitize_for_display(text)
    assert result == "b" * 100