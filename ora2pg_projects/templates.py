"""Jinja2 rendering of ``ora2pg.conf`` files.

Provides the TemplateRenderer class which loads the ora2pg configuration
template from the resource directory and renders it with a configuration
object bound under the single name ``config``, either returning the text or
writing it straight to an output file.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

import jinja2
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .errors import TemplateError, WriteError

DEFAULT_TEMPLATE_NAME = "ora2pg-config-file.j2"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders a configuration object into ``ora2pg.conf`` text.

    Templates are looked up in *template_dir*.  The loader re-reads a
    template whenever its modification time changes, so an edited resource is
    picked up without restarting the process.
    """

    def __init__(
        self,
        template_dir: str | Path,
        template_name: str = DEFAULT_TEMPLATE_NAME,
    ) -> None:
        self.template_dir = Path(template_dir)
        self.template_name = template_name
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["conf_value"] = conf_value
        self.env.filters["conf_options"] = conf_options

    # -- Rendering ---------------------------------------------------------

    def render(self, config_object: Mapping[str, Any], template_name: str | None = None) -> str:
        """Render the template with *config_object* bound as ``config``.

        Raises:
            TemplateError: If the template is missing, malformed, or refers to
                undefined values.
        """
        name = template_name or self.template_name
        try:
            template = self.env.get_template(name)
            return template.render(config=config_object)
        except jinja2.TemplateNotFound as exc:
            raise TemplateError(
                f"Template not found: {name}", self.template_dir / name
            ) from exc
        except jinja2.TemplateError as exc:
            raise TemplateError(
                f"Failed to render template {name}: {exc}", self.template_dir / name
            ) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise TemplateError(
                f"Cannot load template {name}: {exc}", self.template_dir / name
            ) from exc

    async def render_to_file(
        self,
        config_object: Mapping[str, Any],
        output_path: str | Path,
    ) -> Path:
        """Render the template and overwrite *output_path* with the result.

        The parent directory must already exist.

        Raises:
            TemplateError: On any template failure.
            WriteError: If the output file cannot be written.
        """
        content = await asyncio.to_thread(self.render, config_object)
        out = Path(output_path)
        try:
            data = content.encode("utf-8")
        except UnicodeError as exc:
            raise WriteError(f"Cannot encode {out}: {exc}", out) from exc
        try:
            await asyncio.to_thread(out.write_bytes, data)
        except OSError as exc:
            raise WriteError(f"Cannot write {out}: {exc.strerror or exc}", out) from exc
        return out


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------


def conf_value(value: Any) -> str:
    """Format a JSON value as an ora2pg directive value.

    Booleans become ``1``/``0``, lists are space separated, and mappings
    become ``key:value`` pairs.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (list, tuple)):
        return " ".join(conf_value(item) for item in value)
    if isinstance(value, Mapping):
        return " ".join(f"{key}:{conf_value(item)}" for key, item in value.items())
    return str(value)


def conf_options(section: Any) -> Iterator[tuple[str, Any]]:
    """Yield ``(directive, value)`` pairs from a configuration section.

    A section is either a ``{DIRECTIVE: value}`` mapping or a list of
    ``{"name": ..., "value": ..., "include": ...}`` records; records with
    ``include`` set to false are skipped.
    """
    if isinstance(section, Mapping):
        yield from section.items()
        return
    if isinstance(section, (list, tuple)):
        for record in section:
            if not isinstance(record, Mapping) or "name" not in record:
                continue
            if record.get("include", True) is False:
                continue
            yield record["name"], record.get("value")
