import re

_GITHUB_PREFIX = re.compile(r"^https?://github\.com/")


def normalize_repo_reference(reference: str) -> str:
    """
    Best-effort conversion of a repo reference into the `owner/name` path
    used by the GitHub API:
    - strips http(s)://github.com/
    - strips a trailing '.git', then a trailing '/'
    - drops '/tree/<branch>/...' suffixes

    Anything that doesn't look like a GitHub reference is returned as-is;
    the API call will fail on it and surface as a fetch error.
    """
    path = reference
    if "github.com/" in path:
        path = _GITHUB_PREFIX.sub("", path)

    if path.endswith(".git"):
        path = path[:-4]
    if path.endswith("/"):
        path = path[:-1]

    if "/tree/" in path:
        path = path.split("/tree/", 1)[0]

    return path
