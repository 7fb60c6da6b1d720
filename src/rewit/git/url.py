"""Remote address normalization."""

import re

from rewit.core.exceptions import InvalidTargetError

DEFAULT_SSH_HOST = "github.com"

_SSH_RE = re.compile(r"^[\w.-]+@[^:/]+:(?P<path>.+)$")
_URL_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://[^/]+/(?P<path>.+)$")


def to_ssh_address(canonical_name: str, host: str = DEFAULT_SSH_HOST) -> str:
    """Convert a repository name or URL to an SSH remote address.

    Handles:
    - acme/widgets -> git@github.com:acme/widgets
    - acme/widgets.git -> git@github.com:acme/widgets
    - https://github.com/acme/widgets.git -> git@github.com:acme/widgets
    - git@github.com:acme/widgets -> git@github.com:acme/widgets
    """
    path = canonical_name.strip()
    match = _SSH_RE.match(path) or _URL_RE.match(path)
    if match:
        path = match.group("path")
    path = path.strip("/")
    # Strip exactly one .git suffix
    path = re.sub(r"\.git$", "", path)
    return f"git@{host}:{path}"


def repo_dir_name(address: str) -> str:
    """Return the local directory stem for a remote address.

    The stem is the last "/"-delimited segment with one trailing ".git"
    removed; the bare clone lives in ``<stem>.git``.
    """
    name = re.sub(r"\.git$", "", address.strip().split("/")[-1])
    if not name:
        raise InvalidTargetError(
            f"Invalid repository URL: {address}",
            details={"target": address},
        )
    return name
