import importlib
import sys

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import constants as cs
from . import exceptions as ex
from . import logs as ls
from .cache import describe
from .config import settings
from .descriptor import PropertyDescriptor, TypeDescriptor
from .utils.type_utils import type_name

app = typer.Typer(
    name=cs.CLI_APP_NAME,
    help=cs.CLI_APP_HELP,
    no_args_is_help=True,
    add_completion=False,
)

console = Console(width=None)


def style(
    text: str, color: cs.Color, modifier: cs.StyleModifier = cs.StyleModifier.BOLD
) -> str:
    if modifier == cs.StyleModifier.NONE:
        return f"[{color}]{text}[/{color}]"
    return f"[{modifier} {color}]{text}[/{modifier} {color}]"


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, format=cs.LOG_FORMAT, level=level.upper())


def load_target(target: str) -> type:
    module_name, sep, attr_path = target.partition(cs.SEPARATOR_COLON)
    if not sep or not module_name or not attr_path:
        raise ValueError(ex.BAD_TARGET.format(target=target))
    obj: object = importlib.import_module(module_name)
    for part in attr_path.split(cs.SEPARATOR_DOT):
        obj = getattr(obj, part)
    if not isinstance(obj, type):
        raise TypeError(ex.TARGET_NOT_CLASS.format(target=target))
    return obj


def _flags(prop: PropertyDescriptor) -> str:
    flags = []
    if prop.ignore_get:
        flags.append(cs.FLAG_IGNORE_GET)
    if prop.ignore_set:
        flags.append(cs.FLAG_IGNORE_SET)
    if prop.is_transient:
        flags.append(cs.FLAG_TRANSIENT)
    if prop.member is None:
        flags.append(cs.FLAG_ACCESSOR_ONLY)
    return cs.FLAG_SEPARATOR.join(flags) or cs.TABLE_EMPTY_CELL


def build_table(descriptor: TypeDescriptor, ignore_case: bool = False) -> Table:
    table = Table(title=style(cs.TABLE_TITLE.format(name=descriptor.name), cs.Color.GREEN))
    table.add_column(cs.TABLE_COL_PROPERTY, style=cs.Color.CYAN)
    table.add_column(cs.TABLE_COL_TYPE, style=cs.Color.MAGENTA)
    table.add_column(cs.TABLE_COL_GETTER)
    table.add_column(cs.TABLE_COL_SETTER)
    table.add_column(cs.TABLE_COL_FLAGS, style=cs.Color.YELLOW)

    for name, prop in descriptor.prop_map(ignore_case).items():
        table.add_row(
            name.lower() if ignore_case else name,
            escape(type_name(prop.value_type)),
            prop.getter.name if prop.getter else cs.TABLE_EMPTY_CELL,
            prop.setter.name if prop.setter else cs.TABLE_EMPTY_CELL,
            _flags(prop),
        )
    return table


@app.callback()
def main(
    log_level: str = typer.Option(
        settings.LOG_LEVEL, "--log-level", help=cs.CLI_HELP_LOG_LEVEL
    ),
) -> None:
    configure_logging(log_level)


@app.command(name="describe", help=cs.CLI_HELP_DESCRIBE)
def describe_command(
    target: str = typer.Argument(..., help=cs.CLI_HELP_TARGET),
    ignore_case: bool = typer.Option(
        False, "--ignore-case", help=cs.CLI_HELP_IGNORE_CASE
    ),
) -> None:
    logger.debug(ls.CLI_DESCRIBING.format(target=target))
    try:
        descriptor = describe(load_target(target))
    except Exception as e:
        message = cs.CLI_ERR_DESCRIBE.format(target=target, error=escape(str(e)))
        console.print(style(message, cs.Color.RED))
        raise typer.Exit(1) from e

    if len(descriptor) == 0:
        console.print(
            style(cs.CLI_MSG_NO_PROPERTIES.format(name=descriptor.name), cs.Color.YELLOW)
        )
        return
    console.print(build_table(descriptor, ignore_case))


if __name__ == "__main__":
    app()
