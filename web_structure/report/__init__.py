# File: web_structure/report/__init__.py
"""web_structure.report: сохранение дерева результатов в JSON и HTML."""

from web_structure.report.html_report import render_html
from web_structure.report.json_report import render_json

__all__ = ["render_json", "render_html"]
