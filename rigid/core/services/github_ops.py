"""
GitHub operations — personal access token and repository creation.

Talks to the REST API directly with ``requests``; the only thing the
rest of the generator needs back is the clone URL and full name.

Service convention: return ``{"ok": True, ...}`` or ``{"error": "..."}``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import requests

from rigid.core.models.bootstrap import RemoteRepository

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
_TIMEOUT = 30


def read_token(token_file: Path) -> dict:
    """Read a personal access token: a single line in ``token_file``.

    Returns:
        {"ok": True, "token": "..."} or {"error": "..."}
    """
    path = token_file.expanduser()
    try:
        token = path.read_text(encoding="utf-8").strip()
    except OSError as e:
        return {"error": f"Failed to read token from {path}: {e}"}

    if not token:
        return {
            "error": f"Failed to read token. Expected single line with token at ({path})."
        }
    return {"ok": True, "token": token}


def create_repository(
    name: str,
    token: str,
    *,
    private: bool = False,
    description: str = "",
    api_url: str = DEFAULT_API_URL,
    session: requests.Session | None = None,
) -> dict:
    """Create a repository owned by the token's user.

    The repository is created empty (no README, license or .gitignore)
    so the first local push is a fast-forward.

    Returns:
        {"ok": True, "repo": RemoteRepository} or {"error": "..."}
    """
    if not name.strip():
        return {"error": "Repository name is required"}

    payload: dict = {"name": name.strip(), "private": private, "auto_init": False}
    if description.strip():
        payload["description"] = description.strip()

    headers = {
        "Authorization": f"token {token}",
        "Accept": "application/vnd.github+json",
    }
    url = f"{api_url.rstrip('/')}/user/repos"
    http = session or requests

    logger.debug("POST %s name=%s private=%s", url, name, private)
    try:
        response = http.post(url, headers=headers, json=payload, timeout=_TIMEOUT)
    except requests.RequestException as e:
        return {"error": f"Failed to create GitHub Repository: {e}"}

    if response.status_code != 201:
        return {"error": f"Failed to create GitHub Repository: {_describe_error(response)}"}

    try:
        data = response.json()
        repo = RemoteRepository(
            clone_url=data["ssh_url"],
            full_name=data["full_name"],
            html_url=data.get("html_url", ""),
        )
    except (ValueError, KeyError, TypeError) as e:
        return {"error": f"Unexpected response from GitHub: {e}"}

    logger.info("Created GitHub repository %s", repo.full_name)
    return {"ok": True, "repo": repo}


def _describe_error(response: requests.Response) -> str:
    """HTTP status plus GitHub's message (and first validation error)."""
    detail = ""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        detail = body.get("message", "")
        errors = body.get("errors") or []
        if errors and isinstance(errors[0], dict) and errors[0].get("message"):
            detail = f"{detail} ({errors[0]['message']})"

    return f"HTTP {response.status_code}" + (f": {detail}" if detail else "")
