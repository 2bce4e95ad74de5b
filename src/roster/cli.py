"""Click CLI for Roster."""

import os
from dataclasses import asdict
from typing import Optional

import click
from trogon import tui

from roster import __version__
from roster.config import RosterConfig
from roster.log_setup import setup_logging
from roster.models import Project
from roster.scanner import scan_projects
from roster.sorting import COLUMN_NAMES, SessionState


class DefaultCommandGroup(click.Group):
    """Group that treats an unknown first argument as input to a default command.

    ``roster ~/code`` is the same as ``roster dashboard ~/code``, and
    ``roster -v ~/code`` the same as ``roster dashboard -v ~/code``. Only a
    leading option that the group itself does not define is routed; after
    a group option such as ``--debug``, name the command explicitly.
    """

    default_command = "dashboard"

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        if args and args[0].startswith("-"):
            own = {opt for param in self.get_params(ctx) for opt in (*param.opts, *param.secondary_opts)}
            if args[0].split("=", 1)[0] not in own:
                args = [self.default_command, *args]
        return super().parse_args(ctx, args)

    def resolve_command(self, ctx: click.Context, args: list[str]):
        if args and args[0] not in self.commands:
            return super().resolve_command(ctx, [self.default_command, *args])
        return super().resolve_command(ctx, args)


PATH_ARGUMENT = click.argument(
    "path",
    required=False,
    type=click.Path(exists=True, file_okay=False),
)


def resolve_root(path: Optional[str]) -> str:
    """Turn the optional PATH argument into an absolute directory."""
    return os.path.abspath(path or os.getcwd())


def run_scan(root: str, config: RosterConfig, verbose: bool) -> list[Project]:
    """Scan ``root``, echoing each project as it is found when verbose."""
    click.echo(f"Scanning {root}...")

    def report(project: Project) -> None:
        click.echo(f"  found {project.name} ({project.marker}) at {project.path}")

    return scan_projects(
        root,
        timeout=config.git_timeout,
        on_project=report if verbose else None,
    )


@tui()
@click.group(cls=DefaultCommandGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="roster")
@click.option("--debug", is_flag=True, help="Log debug output to stderr")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write a full debug log to FILE")
@click.pass_context
def cli(ctx: click.Context, debug: bool, log_file: Optional[str]) -> None:
    """Roster - find and summarize the projects under a directory.

    Detects project roots by their manifests (go.mod, package.json,
    pyproject.toml, Cargo.toml, .git, ...) and reports their type, size,
    file count and git status.

    Quick start:
        roster                    Scan the current directory
        roster ~/code             Scan ~/code in the interactive table
        roster list ~/code        Print the table and exit
        roster tui                Launch command explorer (Trogon)
    """
    setup_logging(debug=debug, log_file=log_file)
    if ctx.invoked_subcommand is None:
        ctx.invoke(dashboard)


@cli.command()
@PATH_ARGUMENT
@click.option("--verbose", "-v", is_flag=True, help="Print each project as it is found")
def dashboard(path: Optional[str] = None, verbose: bool = False) -> None:
    """Scan PATH and browse its projects in an interactive table.

    PATH defaults to the current directory.

    Keyboard shortcuts:
        ←/→ or h/l - Change sort column
        s          - Toggle sort order
        Enter      - Open project in file manager
        q/Esc      - Quit
    """
    root = resolve_root(path)
    config = RosterConfig.load()
    projects = run_scan(root, config, verbose)

    if not projects:
        click.echo("No projects found.")
        return

    from roster.tui import RosterApp

    try:
        app = RosterApp(projects, root=root, config=config)
        app.run()
    except Exception as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        raise SystemExit(1)

    if app.return_code:
        raise SystemExit(app.return_code)


@cli.command("list")
@PATH_ARGUMENT
@click.option(
    "--sort",
    "sort_by",
    type=click.Choice(COLUMN_NAMES),
    default="name",
    show_default=True,
    help="Column to sort by",
)
@click.option("--desc", is_flag=True, help="Sort in descending order")
@click.option("--verbose", "-v", is_flag=True, help="Show project paths")
def list_projects(path: Optional[str], sort_by: str, desc: bool, verbose: bool) -> None:
    """Scan PATH and print its projects as a table."""
    root = resolve_root(path)
    config = RosterConfig.load()
    projects = run_scan(root, config, verbose=False)

    if not projects:
        click.echo("No projects found.")
        return

    session = SessionState.create(projects, COLUMN_NAMES.index(sort_by), not desc)
    columns = session.columns()

    click.echo()
    click.echo("  ".join(f"{title:<{width}}" for title, width in columns).rstrip())
    click.echo("=" * (sum(width for _, width in columns) + 2 * (len(columns) - 1)))
    for project, row in zip(session.projects, session.rows()):
        click.echo("  ".join(f"{cell:<{width}}" for cell, (_, width) in zip(row, columns)).rstrip())
        if verbose:
            click.echo(f"    {project.path}")

    suffix = "project" if len(projects) == 1 else "projects"
    click.echo(f"\nTotal: {len(projects)} {suffix}")


# =============================================================================
# Config Commands - Inspect stored preferences
# =============================================================================


@cli.group()
def config() -> None:
    """Inspect or reset stored preferences."""
    pass


@config.command("show")
def config_show() -> None:
    """Show the current configuration."""
    cfg = RosterConfig.load()
    click.echo(f"Config file: {RosterConfig.get_config_path()}")
    for key, value in asdict(cfg).items():
        click.echo(f"  {key}: {value}")


@config.command("reset")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
def config_reset(yes: bool) -> None:
    """Reset all preferences to their defaults."""
    if not yes and not click.confirm("Reset configuration to defaults?"):
        click.echo("Cancelled.")
        return

    cfg = RosterConfig.load()
    cfg.reset()
    cfg.save()
    click.echo(click.style("✓ Configuration reset", fg="green"))


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
