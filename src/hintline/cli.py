"""CLI entry point for hintline. Uses Click for argument parsing."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from hintline.buffer import InputBuffer
from hintline.settings import ShellSettings, load_settings
from hintline.state import ShellContext


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _load_settings(config: str | None) -> ShellSettings:
    """Load settings and apply their log level unless --log-level was given."""
    settings = load_settings(Path(config) if config else None)
    ctx = click.get_current_context()
    level = ctx.find_root().params.get("log_level") or settings.log_level
    logging.getLogger().setLevel(getattr(logging, str(level).upper(), logging.WARNING))
    return settings


def _make_buffer(config: str | None, cwd: str | None) -> InputBuffer:
    settings = _load_settings(config)
    context = ShellContext.from_settings(settings, Path(cwd) if cwd else None)
    return InputBuffer(context)


_config_option = click.option(
    "--config", type=click.Path(dir_okay=False), default=None, help="Settings file to use"
)
_cwd_option = click.option(
    "--cwd", type=click.Path(file_okay=False), default=None, help="Directory to resolve paths against"
)


@click.group(invoke_without_command=True)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default=None,
    help="Logging verbosity (default: logLevel from settings)",
)
@click.pass_context
def main(ctx, log_level):
    """Inspect how hintline splits and completes a command line."""
    logging.basicConfig(format=LOG_FORMAT)
    if log_level:
        logging.getLogger().setLevel(getattr(logging, log_level.upper()))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@click.argument("line")
@click.option("--cursor", type=int, default=None, help="Caret position (default: end of line)")
@_config_option
@_cwd_option
def inspect(line, cursor, config, cwd):
    """Show the arguments of LINE with their kinds and closest matches."""
    buf = _make_buffer(config, cwd)
    buf.insert_str(line)
    if cursor is not None:
        buf.set_main_position(cursor)
    buf.update()

    grammar = buf.grammar
    click.echo(f"grammar: {grammar.name if grammar else '-'}")
    for i, ((start, stop), (kind, hint)) in enumerate(zip(buf.arg_locs_iter(), buf.argument_hints)):
        marker = "*" if i == buf.current_arg else " "
        token = buf.get_range(start, stop)
        match = hint.last_closest_match or "-"
        click.echo(f"{marker}{i:>3} {start:>4}-{stop:<4} {kind:<10} {token!r:<24} {match}")


@main.command()
@click.argument("line")
@_config_option
@_cwd_option
def expand(line, config, cwd):
    """Show the command lines LINE would run, with aliases substituted."""
    buf = _make_buffer(config, cwd)
    buf.insert_str(line)
    buf.update()

    invocation = buf.invocation()
    for hook in invocation.before:
        click.echo(f"before: {hook}")
    click.echo(invocation.command)
    for hook in invocation.after:
        click.echo(f"after: {hook}")


@main.command()
@_config_option
def grammars(config):
    """List the command grammars that loaded successfully."""
    settings = _load_settings(config)
    context = ShellContext.from_settings(settings)
    if not context.grammars:
        click.echo("No command grammars configured.")
        return
    for grammar in context.grammars:
        flags = ", ".join(f.flag_name for f in grammar.flags) or "-"
        pairs = ", ".join(p.flag_name for p in grammar.arg_flags) or "-"
        args = " ".join(f"<{a.arg_hint or a.arg_type}>" for a in grammar.args)
        click.echo(f"{grammar.name} -> {grammar.target} {args}".rstrip())
        click.echo(f"  flags: {flags}  flag pairs: {pairs}")


if __name__ == "__main__":
    main()
