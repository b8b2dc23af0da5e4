"""Get the outline of a file hosted on GitHub."""

import os
from typing import Optional
from urllib.parse import urlparse

import httpx

from ..config import OutlineConfig
from ..parser import fetch_symbols, language_for_path


def parse_github_url(url: str) -> tuple[str, str]:
    """Extract owner/repo from GitHub URL or owner/repo string.

    Supports:
    - https://github.com/owner/repo
    - https://github.com/owner/repo.git
    - owner/repo
    """
    # Remove .git suffix
    url = url.removesuffix(".git")

    # If it contains a / but not ://, treat as owner/repo
    if "/" in url and "://" not in url:
        parts = url.split("/")
        return parts[0], parts[1]

    # Parse URL
    parsed = urlparse(url)
    path = parsed.path.strip("/")

    # Extract owner/repo from path
    parts = path.split("/")
    if len(parts) >= 2:
        return parts[0], parts[1]

    raise ValueError(f"Could not parse GitHub URL: {url}")


async def fetch_file_content(
    owner: str,
    repo: str,
    path: str,
    token: Optional[str] = None,
    ref: Optional[str] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Fetch raw file content from GitHub."""
    url = f"https://api.github.com/repos/{owner}/{repo}/contents/{path.lstrip('/')}"
    headers = {"Accept": "application/vnd.github.v3.raw"}
    params = {"ref": ref} if ref else None

    if token:
        headers["Authorization"] = f"token {token}"

    if client is not None:
        response = await client.get(url, headers=headers, params=params)
        response.raise_for_status()
        return response.text

    async with httpx.AsyncClient() as client:
        response = await client.get(url, headers=headers, params=params)
        response.raise_for_status()
        return response.text


async def get_github_file_outline(
    repo: str,
    file_path: str,
    ref: Optional[str] = None,
    github_token: Optional[str] = None,
    config: Optional[OutlineConfig] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> dict:
    """Fetch a file from a GitHub repository and outline it.

    Args:
        repo: GitHub repository URL or owner/repo string
        file_path: Path to the file within the repository
        ref: Branch, tag or commit (default branch when omitted)
        github_token: GitHub API token (optional, for private repos/higher rate limits)
        config: Outline settings (default: read from the environment)
        client: HTTP client to reuse

    Returns:
        Dict with the outline, or an "error" key
    """
    try:
        owner, name = parse_github_url(repo)
    except ValueError as e:
        return {"error": str(e)}

    language = language_for_path(file_path)
    if not language:
        return {"error": f"Unsupported file type: {file_path}"}

    # Get GitHub token from env if not provided
    if not github_token:
        github_token = os.environ.get("GITHUB_TOKEN")

    try:
        content = await fetch_file_content(owner, name, file_path, github_token, ref, client)
    except httpx.HTTPStatusError as e:
        if e.response.status_code == 404:
            return {"error": f"File not found: {owner}/{name}/{file_path}"}
        elif e.response.status_code == 403:
            return {"error": "GitHub API rate limit exceeded. Set GITHUB_TOKEN."}
        return {"error": f"GitHub request failed: {e.response.status_code}"}
    except httpx.HTTPError as e:
        return {"error": f"GitHub request failed: {e}"}

    result = fetch_symbols(content, language, config or OutlineConfig.from_env())

    return {
        "repo": f"{owner}/{name}",
        "file": file_path,
        **result.to_dict(),
    }
