"""blueprint-lint - TON Blueprint 项目结构与命名检查工具

递归扫描目录中的 Blueprint 项目，校验项目初始化是否完整，并检查
contracts/wrappers/scripts/tests 中的文件命名。

Examples:
    基础使用::

        $ python -m apps.cli.blueprint_linter ./my-workspace

    JSON 输出::

        $ python -m apps.cli.blueprint_linter ./my-workspace --json

    只检查部分目录的命名::

        $ python -m apps.cli.blueprint_linter --dirs contracts,wrappers

退出码:
    0 没有发现问题; 1 发现问题; 2 运行失败
"""

from pathlib import Path
from typing import Optional

import typer
import yaml
from loguru import logger
from rich.console import Console

from packages.blueprint_lint import (
    LinterSettings,
    __version__,
    parse_dir_list,
    render_json,
    render_text,
    run_lint,
)
from packages.common.logger import setup_logger

EXIT_FAILURE = 2

app = typer.Typer(
    name="blueprint-lint",
    help="TON Blueprint 项目 lint: 递归检查项目初始化和文件命名规范",
    add_completion=False,
)
err_console = Console(stderr=True)


def load_settings(config_path: Optional[Path] = None) -> LinterSettings:
    """加载配置

    未指定配置文件时只读取环境变量和 .env。

    Args:
        config_path: 配置文件路径（可选，支持 .yaml/.yml/.json）

    Returns:
        配置对象

    Raises:
        ValueError: 配置文件或环境变量格式错误
    """
    try:
        if config_path is None:
            return LinterSettings()
        return LinterSettings.from_file(config_path)
    except (OSError, yaml.YAMLError, ValueError) as e:
        raise ValueError(f"配置加载失败: {e}") from e


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"blueprint-lint v{__version__}")
        raise typer.Exit()


@app.command()
def lint(
    scan_path: Optional[Path] = typer.Argument(
        None,
        help="递归扫描的路径，默认为当前目录",
        exists=True,
        file_okay=False,
    ),
    json_output: bool = typer.Option(False, "--json", help="以 JSON 格式输出诊断"),
    dirs: Optional[str] = typer.Option(
        None,
        "--dirs",
        "-d",
        help="命名检查的子目录，逗号分隔（如 contracts,wrappers,tests）",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="配置文件路径",
        exists=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="输出调试日志"),
    version: bool = typer.Option(
        False,
        "--version",
        help="显示版本信息",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """检查扫描路径下的所有 Blueprint 项目

    Args:
        scan_path: 扫描路径
        json_output: 是否输出 JSON
        dirs: 命名检查子目录覆盖
        config_path: 配置文件路径（可选）
        verbose: 是否输出调试日志
        version: 显示版本并退出
    """
    try:
        settings = load_settings(config_path)
    except ValueError as e:
        err_console.print(str(e), style="red", markup=False, highlight=False)
        raise typer.Exit(code=EXIT_FAILURE) from e

    setup_logger("blueprint-lint", level="DEBUG" if verbose else settings.log_level)

    scan_root = (scan_path or Path.cwd()).resolve()
    naming_dirs = parse_dir_list(dirs) if dirs is not None else settings.target_dirs
    logger.debug(f"命名检查目录: {naming_dirs}")

    try:
        report = run_lint(scan_root, naming_dirs, settings.build_rules())
    except Exception as e:
        logger.exception("lint 运行失败")
        err_console.print(f"发生意外错误: {e}", style="red", markup=False, highlight=False)
        raise typer.Exit(code=EXIT_FAILURE) from e

    if report.diagnostics:
        if json_output:
            typer.echo(render_json(report.diagnostics))
        else:
            err_console.print(
                render_text(report.diagnostics),
                style="red",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )

    raise typer.Exit(code=report.exit_code)


if __name__ == "__main__":
    app()
