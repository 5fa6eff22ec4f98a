"""Click entry point for the nezu project generator."""

import sys

import click

from nezu.create.create_command import CreateCommand
from nezu.create.create_opts import CreateOpts
from nezu.create.errors import ScaffoldError
from nezu.create.installer import PACKAGE_MANAGERS, DependencyInstaller
from nezu.create.selection import SelectionPrompter


def _print_missing_directory(prog_name):
    print("Please specify the project directory", file=sys.stderr)
    print("", file=sys.stderr)
    print("Example:", file=sys.stderr)
    print(f"    {prog_name} my-app", file=sys.stderr)


def _verbose_logger(verbose):
    if not verbose:
        return None

    def log(message):
        print(f"[verbose] {message}", file=sys.stderr)

    return log


@click.command("nezu", epilog="PROJECT_DIRECTORY is required.")
@click.version_option(package_name="nezu")
@click.argument("project_directory", required=False)
@click.option("--verbose", is_flag=True, help="Print verbose logs.")
@click.option(
    "--package-manager",
    type=click.Choice(sorted(PACKAGE_MANAGERS)),
    default="npm",
    show_default=True,
    envvar="NEZU_PACKAGE_MANAGER",
    help="Package manager used to install dependencies.",
)
@click.pass_context
def main(ctx, project_directory, verbose, package_manager):
    """Create a new library or React SPA project in PROJECT_DIRECTORY."""
    if not project_directory:
        _print_missing_directory(ctx.info_name or "nezu")
        sys.exit(1)

    opts = CreateOpts(
        name=project_directory, verbose=verbose, package_manager=package_manager,
    )
    installer = DependencyInstaller(package_manager, log=_verbose_logger(verbose))
    command = CreateCommand(opts, SelectionPrompter(), installer)
    try:
        command.execute()
    except ScaffoldError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
