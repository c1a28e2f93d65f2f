"""Jinja2 template rendering for files nestforge writes itself.

The schematics collection generates the project; nestforge only renders the
few files the collection cannot ship, such as the default ``.gitignore``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class TemplateRenderer:
    """Renders Jinja2 templates from the package ``templates/`` directory."""

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"gitignore.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    async def render_to_new_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path | None:
        """Render a template into *output_path* unless that file already exists.

        The write uses exclusive-create mode, so a file that appears between
        the existence check and the write is left untouched as well.

        Returns:
            The written path, or ``None`` when the file was already present.
        """
        out = Path(output_path)
        if out.exists():
            return None
        content = self.render(template_path, context)
        written = await asyncio.to_thread(_write_new_file, out, content)
        return out if written else None


def _write_new_file(path: Path, content: str) -> bool:
    """Synchronous helper: create *path* exclusively; ``False`` if it exists."""
    try:
        with path.open("x", encoding="utf-8") as handle:
            handle.write(content)
    except FileExistsError:
        return False
    return True
