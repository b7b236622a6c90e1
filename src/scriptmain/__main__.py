## scriptmain — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# scriptmain — Run scripts with long commandline options and debug directives.
#

import sys
import importlib.util
from pathlib import Path
from dataclasses import dataclass
from types import ModuleType

import click

from .formatting import write_without_ansi, format_item, format_option

from . import api


@dataclass(frozen=True)
class RuntimeConfig:
    plain: bool


def load_script(path: Path) -> ModuleType:
    name = path.stem if path.stem.isidentifier() else '__script__'
    spec = importlib.util.spec_from_file_location(name, path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    spec.loader.exec_module(module)
    return module


_PASSTHROUGH = {'ignore_unknown_options': True, 'allow_extra_args': True, 'help_option_names': []}


class RawArgsCommand(click.Command):
    """Command that keeps its arguments as typed in `ctx.meta['raw_args']`, since click drops `--`."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta['raw_args'] = list(args)
        return super().parse_args(ctx, args)


@click.group()
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes from the output.')
@click.pass_context
def cli(ctx: click.Context, plain: bool) -> None:
    ctx.ensure_object(dict)
    ctx.obj['config'] = RuntimeConfig(plain=plain)

    if plain:
        sys.stdout.write = write_without_ansi(sys.stdout.write)
        sys.stderr.write = write_without_ansi(sys.stderr.write)


@cli.command('options', cls=RawArgsCommand, context_settings=_PASSTHROUGH)
@click.pass_context
def show_options(ctx: click.Context) -> None:
    """Show how ARGS are split into options and remaining arguments."""
    rest, options = api.argv_options(ctx.meta['raw_args'])
    for option in options:
        print(format_option(option))
    print(f"\033[90mrest:\033[0m {format_item(rest)}")


@cli.command('run', context_settings={**_PASSTHROUGH, 'allow_interspersed_args': False})
@click.argument('script', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('script_args', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def run_script(ctx: click.Context, script: Path, script_args: tuple[str, ...]) -> None:
    """Load SCRIPT and call its main(argv) with SCRIPT_ARGS."""
    module = load_script(script)
    entry = getattr(module, 'main', None)
    if not callable(entry):
        raise click.UsageError(f"Script `{script}` does not define a `main(argv)` function.")

    api.spy_points.default_module = module.__name__
    api.main(entry, list(script_args), namespace=vars(module))
    ctx.exit(0)


def main(argv: list[str] | None = None) -> None:
    cli.main(args=list(sys.argv[1:] if argv is None else argv), prog_name='scriptmain')


if __name__ == "__main__":
    main()
