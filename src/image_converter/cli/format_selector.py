"""目标格式选择：交互式菜单与命令行参数两种入口。"""

from __future__ import annotations

from typing import Callable, Optional

import typer

from image_converter.core.formats import SUPPORTED_FORMATS, display_name, format_at

MENU_TITLE = "Please choose a format to convert to:"
PROMPT_TEXT = "Enter the number of the desired format"
INVALID_CHOICE = "Invalid choice, please run the script again."

LineReader = Callable[[str], str]


def _prompt_line(text: str) -> str:
    """读取一行输入；输入流结束时视为空输入。"""

    try:
        return typer.prompt(text, default="", show_default=False)
    except typer.Abort:
        return ""


def render_menu() -> str:
    lines = [MENU_TITLE]
    lines.extend(f"{index}. {display_name(fmt)}" for index, fmt in enumerate(SUPPORTED_FORMATS, start=1))
    return "\n".join(lines)


def choose_format(reader: Optional[LineReader] = None) -> Optional[str]:
    """展示编号菜单并读取一次选择。

    输入不是整数或超出范围时提示无效并返回 None，不会重复询问。
    """

    typer.echo(render_menu())
    answer = (reader or _prompt_line)(PROMPT_TEXT)

    try:
        position = int(answer.strip())
    except ValueError:
        position = 0

    chosen = format_at(position)
    if chosen is None:
        typer.echo(INVALID_CHOICE)
    return chosen


def parse_format_name(value: str) -> Optional[str]:
    """解析命令行传入的格式名，如 png、.PNG。"""

    candidate = value.strip().lower()
    if candidate and not candidate.startswith("."):
        candidate = f".{candidate}"
    if candidate in SUPPORTED_FORMATS:
        return candidate
    return None
