"""Eager loading of page template sets."""

from collections.abc import Sequence
from pathlib import Path

from jinja2 import DictLoader, Environment, StrictUndefined, TemplateSyntaxError

from pagekit.exceptions import ErrorCode, TemplateLoadError
from pagekit.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


def resolve_template_path(path: str | Path, template_dir: Path | None = None) -> Path:
    """Resolve a template path against the configured template directory."""
    path = Path(path)
    if template_dir is not None and not path.is_absolute():
        return template_dir / path
    return path


def load_templates(paths: Sequence[str | Path], template_dir: Path | None = None) -> Environment:
    """Read and compile a set of template files.

    Each file is registered under its stem, so ``tmpl/base.html`` is the
    template ``"base"``; templates reference each other by these names
    (``{% include "content" %}``). A later file with the same stem replaces
    an earlier one.

    Args:
        paths: Ordered template file paths
        template_dir: Directory relative paths are resolved against

    Returns:
        Jinja2 environment holding the compiled templates

    Raises:
        TemplateLoadError: If no paths are given, a file cannot be read,
            or a template fails to parse
    """
    if not paths:
        raise TemplateLoadError("No template files given", code=ErrorCode.TEMPLATE_MISSING)

    sources: dict[str, str] = {}
    files: dict[str, Path] = {}
    for raw_path in paths:
        path = resolve_template_path(raw_path, template_dir)
        try:
            sources[path.stem] = path.read_text(encoding="utf-8")
        except OSError as e:
            raise TemplateLoadError(
                f"Cannot read template {path}: {e}",
                code=ErrorCode.TEMPLATE_MISSING,
                details={"path": str(path)},
            ) from e
        except UnicodeDecodeError as e:
            raise TemplateLoadError(
                f"Template {path} is not valid UTF-8: {e.reason} at byte {e.start}",
                code=ErrorCode.TEMPLATE_ENCODING,
                details={"path": str(path), "position": e.start},
            ) from e
        files[path.stem] = path

    environment = Environment(
        loader=DictLoader(sources),
        autoescape=True,
        undefined=StrictUndefined,
    )

    # Compile everything now so syntax errors surface at startup
    for name, path in files.items():
        try:
            environment.get_template(name)
        except TemplateSyntaxError as e:
            raise TemplateLoadError(
                f"Cannot parse template {path}: {e.message} (line {e.lineno})",
                code=ErrorCode.TEMPLATE_SYNTAX,
                details={"path": str(path), "lineno": e.lineno},
            ) from e

    log_with_context(
        logger,
        "debug",
        "Templates loaded",
        templates=sorted(files),
        event_type="templates_loaded",
    )
    return environment
