# === FILE: web_structure/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска web_structure через командную строку.

Команды:
  scrape URL  Обойти страницу (и дочерние до --max-depth) и вывести/сохранить результат
  config      Показать итоговую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования

Пример:
  web-structure scrape https://example.com --max-depth 1 -s title=h1 -s body=p --json out.json --pretty
"""
import asyncio
import json
import re
import sys
from pathlib import Path
from typing import Dict, List, Tuple

import click

from web_structure import __version__
from web_structure.config import ScrapeConfig, load_config, merge_config
from web_structure.errors import ConfigurationError
from web_structure.logger import configure
from web_structure.report.html_report import render_html
from web_structure.report.json_report import render_json
from web_structure.session import scrape

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def parse_selectors(values: Tuple[str, ...]) -> Dict[str, List[str]]:
    """Разбирает повторяющиеся FIELD=CSS; одно и то же поле собирается в список."""
    selectors: Dict[str, List[str]] = {}
    for raw in values:
        field, sep, selector = raw.partition('=')
        if not sep or not field.strip() or not selector.strip():
            raise click.BadParameter(f'ожидается FIELD=CSS, получено {raw!r}', param_hint='--selector')
        selectors.setdefault(field.strip(), []).append(selector.strip())
    return selectors


def _follow_predicate(pattern: str):
    try:
        compiled = re.compile(pattern)
    except re.error as exc:
        raise click.BadParameter(f'неверное регулярное выражение: {exc}', param_hint='--follow')
    return lambda url: compiled.search(url) is not None


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='web-structure, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд web-structure."""
    configure(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except (ConfigurationError, OSError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('scrape', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option('--max-depth', '-d', 'max_depth', type=int, default=None, help='Глубина рекурсивного обхода (0-10)')
@click.option(
    '--selector', '-s', 'selectors',
    multiple=True, metavar='FIELD=CSS',
    help='Селектор поля; можно повторять, в том числе для одного поля'
)
@click.option('--follow', 'follow', default=None, metavar='REGEX', help='Обходить только ссылки, совпавшие с REGEX')
@click.option('--break-when-failed', is_flag=True, help='Прерывать обход при первой ошибке')
@click.option('--quiet', '-q', is_flag=True, help='Не выводить лог скрапинга')
@click.option('--retry-count', 'retry_count', type=int, default=None, help='Число попыток на поле')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с шаблоном report.html.j2'
)
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
@click.option('--scrape-timeout', 'scrape_timeout', type=float, default=None, help='Таймаут всего обхода (секунд)')
@click.pass_context
def scrape_command(ctx, url, max_depth, selectors, follow, break_when_failed, quiet, retry_count,
                   json_output, html_output, template_dir, pretty, scrape_timeout):
    """Обойти URL и вывести дерево результатов."""
    overrides = {
        'max_depth': max_depth,
        'retry_count': retry_count,
        'selectors': parse_selectors(selectors) if selectors else None,
        'exclude_child_page': _follow_predicate(follow) if follow else None,
        'break_when_failed': True if break_when_failed else None,
        'with_console': False if quiet else None,
    }
    try:
        cfg = merge_config(ctx.obj['config'], overrides)
    except ConfigurationError as e:
        print_error(f'Ошибка конфигурации: {e}')

    try:
        if scrape_timeout:
            result = asyncio.run(asyncio.wait_for(scrape(url, cfg), timeout=scrape_timeout))
        else:
            result = asyncio.run(scrape(url, cfg))
    except asyncio.TimeoutError:
        print_error(f'Скрапинг не завершён за {scrape_timeout} секунд')
    except Exception as e:
        print_error(f'Ошибка при скрапинге: {e}')

    if not json_output and not html_output:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2 if pretty else None))
        return

    if json_output:
        try:
            saved_json = render_json(result, json_output, pretty=pretty)
            click.echo(f'JSON: {saved_json}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(result, html_output, template_dir)
            click.echo(f'HTML report: {saved_html}')
        except OSError as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg: ScrapeConfig = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2, exclude={'exclude_child_page'}))


if __name__ == "__main__":
    cli()
