# web_structure/report/json_report.py

"""
Генерация JSON-отчёта для web_structure.

Сериализация дерева PageResult в файл.
"""
import json
from pathlib import Path

from web_structure.scraper.models import PageResult


def render_json(result: PageResult, output_path: Path | str, pretty: bool = True) -> Path:
    """
    Сохраняет result в формате JSON по указанному пути.

    :param result: корневой PageResult
    :param output_path: путь к JSON-файлу
    :param pretty: отступ 2 пробела
    :return: Path сохранённого файла

    Пример:
    ```python
    from web_structure.report.json_report import render_json
    report_path = render_json(result, 'reports/result.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(result.to_dict(), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
