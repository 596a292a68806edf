"""
Scaffold writer — materialize generated files in the working directory.

Service convention: return ``{"ok": True, ...}`` or ``{"error": "..."}``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rigid.core.models.template import GeneratedFile

logger = logging.getLogger(__name__)


def write_generated_file(workdir: Path, file: GeneratedFile, *, force: bool = False) -> dict:
    """Write one GeneratedFile to disk.

    Returns:
        {"ok": True, "path": "...", "written": True|False} or {"error": "..."}
    """
    if not file.path:
        return {"error": "Missing path"}

    target = workdir / file.path
    if target.exists() and not (file.overwrite or force):
        logger.info("Skipping existing file: %s", file.path)
        return {"ok": True, "path": file.path, "written": False}

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(file.content, encoding="utf-8")
    except OSError as e:
        return {"error": f"Cannot write {file.path}: {e}", "path": file.path}

    logger.info("Wrote %s", target)
    return {"ok": True, "path": file.path, "written": True}


def write_scaffold(
    workdir: Path,
    directories: tuple[str, ...] | list[str],
    files: list[GeneratedFile],
    *,
    force: bool = False,
) -> dict:
    """Create ``directories`` then write ``files`` under ``workdir``.

    Stops at the first write error; the scaffold is useless half-written
    and the bootstrap that follows would commit the gap.

    Returns:
        {"ok": True, "written": [...], "skipped": [...]} or
        {"error": "...", "written": [...]}
    """
    written: list[str] = []
    skipped: list[str] = []

    for rel in directories:
        try:
            (workdir / rel).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return {"error": f"Cannot create directory {rel}: {e}", "written": written}

    for f in files:
        res = write_generated_file(workdir, f, force=force)
        if "error" in res:
            return {"error": res["error"], "written": written}
        (written if res["written"] else skipped).append(f.path)

    return {"ok": True, "written": written, "skipped": skipped}
