from pathlib import Path
from typing import Any

from jinja2 import Environment, StrictUndefined


def _environment() -> Environment:
    # Missing keys must fail instead of rendering as empty strings
    return Environment(undefined=StrictUndefined, keep_trailing_newline=True)


def render_template(template: str, values: dict[str, Any]) -> str:
    """
    Render a Jinja2 template with every stored document as a top-level variable.

    Example:
        render_template("{{ app.db.port }}", {"app": {"db": {"port": 5432}}}) -> "5432"
    """
    tpl = _environment().from_string(template)
    return tpl.render(**values)


def render_file(path: Path, values: dict[str, Any]) -> str:
    return render_template(Path(path).read_text(), values)
