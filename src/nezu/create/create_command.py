"""CreateCommand encapsulates the project creation workflow.

Stages run in order and each one only starts if the previous one
succeeded: resolve location, guard the target, ask for the archetype,
resolve its template, materialize it, install dependencies.
"""

import shlex
import sys
from enum import Enum

import click

from nezu.create.create_opts import CreateOpts, ScaffoldPlan
from nezu.create.directory_guard import ensure_target_absent
from nezu.create.errors import InstallFailure, TemplateUnavailableError
from nezu.create.location import resolve_location
from nezu.create.materializer import materialize, renames_for
from nezu.create.selection import ProjectType
from nezu.create.template_resolver import resolve_template
from nezu.templates.template_renderer import render_template

_RUN_PREFIXES = {"npm": "npm run", "yarn": "yarn", "pnpm": "pnpm"}


class CreateResult(Enum):
    DONE = "done"
    ABORTED = "aborted"


class CreateCommand:
    """Creates one project from a template.

    Collaborators are injected: prompter.prompt() returns an
    ArchetypeSelection or None, installer.install(root) returns an
    InstallOutcome.
    """

    def __init__(self, opts: CreateOpts, prompter, installer, cwd=None, templates_dir=None):
        self.opts = opts
        self.prompter = prompter
        self.installer = installer
        self.cwd = cwd
        self.templates_dir = templates_dir

    def execute(self) -> CreateResult:
        """Run the workflow.

        Returns ABORTED when the user cancels a question, DONE after a
        successful install.

        Raises:
            ScaffoldError: On any stage failure.
        """
        location = resolve_location(self.opts.name, cwd=self.cwd)
        self._verbose(f"Target directory: {location.root}")
        self._verbose(f"Project id: {location.project_id}")

        ensure_target_absent(location.root)

        selection = self.prompter.prompt()
        if selection is None:
            self._verbose("Selection cancelled, nothing created")
            return CreateResult.ABORTED
        self._verbose(f"Selected: {selection.describe()}")

        plan = ScaffoldPlan(opts=self.opts, location=location, selection=selection)
        self._materialize(plan)

        self._install(plan)
        click.echo(self._render("success.j2", plan, kind=_kind(plan)))
        return CreateResult.DONE

    def _materialize(self, plan: ScaffoldPlan):
        template_path = self._resolve_template(plan)
        click.echo(f"Creating a new {plan.selection.describe()} project in {plan.root}.")
        materialize(
            template_path, plan.root,
            renames=renames_for(plan.selection.type),
            log=self._verbose,
        )

    def _resolve_template(self, plan: ScaffoldPlan):
        template_path = resolve_template(plan.selection, templates_dir=self.templates_dir)
        if template_path is None:
            raise TemplateUnavailableError(plan.selection)
        if not template_path.is_dir():
            raise TemplateUnavailableError(
                plan.selection, reason=f"is missing from this installation ({template_path})",
            )
        self._verbose(f"Using template: {template_path}")
        return template_path

    def _install(self, plan: ScaffoldPlan):
        click.echo(f"Installing dependencies with `{self.installer.command}`...")
        outcome = self.installer.install(plan.root)
        if outcome.succeeded:
            return
        click.echo(
            self._render(
                "install_failed.j2", plan,
                exit_code=outcome.exit_code, command=outcome.command,
            ),
            err=True,
        )
        raise InstallFailure(outcome.command, outcome.exit_code, root=plan.root)

    def _render(self, template_name, plan: ScaffoldPlan, **kwargs):
        return render_template(
            template_name,
            package=__package__,
            project_id=plan.project_id,
            root=plan.root,
            cd_target=shlex.quote(self.opts.name),
            run_prefix=_RUN_PREFIXES.get(self.opts.package_manager, "npm run"),
            **kwargs,
        )

    def _verbose(self, message):
        if self.opts.verbose:
            print(f"[verbose] {message}", file=sys.stderr)


def _kind(plan: ScaffoldPlan):
    return "library" if plan.selection.type is ProjectType.LIBRARY else "app"
