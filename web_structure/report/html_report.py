# File: web_structure/report/html_report.py
"""web_structure.report.html_report: Генерация HTML-отчёта с помощью Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from web_structure.scraper.models import PageResult

_TEMPLATE_NAME = "report.html.j2"
_BUILTIN_TEMPLATES = Path(__file__).parent / "templates"


def render_html(
    result: PageResult,
    output_path: Union[Path, str],
    template_dir: Optional[Union[Path, str]] = None,
) -> Path:
    """Рендерит дерево страниц в HTML и сохраняет его по указанному пути.

    Args:
        result: корневой PageResult.
        output_path: путь к итоговому HTML-файлу.
        template_dir: директория с ``report.html.j2``; по умолчанию встроенный шаблон.

    Returns:
        Path до сохранённого HTML-файла.
    """
    template_dir = Path(template_dir) if template_dir is not None else _BUILTIN_TEMPLATES
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template(_TEMPLATE_NAME)

    pages = list(result.iter_tree())
    html_content = template.render(
        root=result.to_dict(),
        page_count=len(pages),
        revisits=sum(1 for p in pages if p.is_revisit),
    )
    output_path.write_text(html_content, encoding="utf-8")

    return output_path
