"""
Scaffold models — the answers a user gives and the files they produce.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class ScaffoldAnswers(BaseModel):
    """Answers collected by the ``new`` prompts (or their CLI options)."""

    project_name: str
    create_github_repo: bool = False
    github_repo_name: str = ""
    token_file: str = ""
    author: str = ""
    year: int = Field(default_factory=lambda: datetime.now().year)


class GeneratedFile(BaseModel):
    """A file produced by the scaffold generator.

    Attributes:
        path:      Relative path from the working directory.
        content:   Full file content.
        overwrite: Whether to overwrite if already exists.
        reason:    Why this file was generated.
    """

    path: str
    content: str
    overwrite: bool = False
    reason: str = ""
