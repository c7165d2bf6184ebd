"""Output path synthesis and artifact writing.

Each run writes two artifacts: the JSON report and a Markdown
summary next to it with the same stem.
"""

from __future__ import annotations

import pathlib
from datetime import date

from mediascope.models import media
from mediascope.reporting import markdown
from mediascope.utils import logger, url as url_mod

log = logger.create_logger("Output")


def default_output_path(url: str, today: date, root: pathlib.Path = pathlib.Path("analysis")) -> pathlib.Path:
    """``<root>/media-queries/<YYYY-MM-DD>/<host-slug>-media-queries.json``."""
    return root / "media-queries" / today.isoformat() / f"{url_mod.slugify_host(url)}-media-queries.json"


def write_report(report: media.MediaQueryReport, path: pathlib.Path) -> tuple[pathlib.Path, pathlib.Path]:
    """Write the JSON report to *path* and its Markdown twin beside it.

    Returns:
        ``(json_path, markdown_path)``.

    Raises:
        OSError: If either file cannot be written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(report.to_json() + "\n", encoding="utf-8")

    md_path = path.with_suffix(".md") if path.suffix != ".md" else path.with_name(f"{path.stem}.report.md")
    md_path.write_text(markdown.render_markdown(report), encoding="utf-8")

    log.success("Results saved", {"json": str(path), "markdown": str(md_path)})
    return path, md_path
