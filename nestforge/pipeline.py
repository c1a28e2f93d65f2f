"""Project creation pipeline.

Turns the contexts of a ``new`` invocation into a project on disk:

Step 1: COMPLETE  -- prompt for a missing project name / package manager.
Step 2: VALIDATE  -- resolve the collection and package manager.
Step 3: GENERATE  -- run the collection's ``application`` schematic.
Step 4: INSTALL   -- install dependencies (``skip-install``; notice in dry-run).
Step 5: GIT       -- ``git init`` (``skip-git``; never in dry-run).
Step 6: GITIGNORE -- write a default ``.gitignore`` when git was attempted.
Step 7: NOTIFY    -- completion notice, or the dry-run notice.

Steps 1-3 are fatal: a failure ends the run and later steps never start.
Steps 4-6 only report their failure and the run carries on.  Nothing that was
already written is rolled back.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from nestforge.completion import InputCompleter
from nestforge.config import Config
from nestforge.context import CommandContext, MissingRequiredInputError, overlay
from nestforge.package_managers import (
    AbstractPackageManager,
    InstallError,
    package_manager_factory,
)
from nestforge.questions import PromptError
from nestforge.runners import GitRunner, Runner, VcsError, runner_factory
from nestforge.schematics import (
    AbstractCollection,
    GenerationError,
    collection_factory,
    map_schematic_options,
)
from nestforge.strategies import UnsupportedStrategyError
from nestforge.templates import TemplateRenderer
from nestforge.ui import EMOJIS, MESSAGES
from nestforge.utils import (
    console,
    normalize_to_kebab_or_snake_case,
    print_error,
    print_info,
    print_warning,
)

APPLICATION_SCHEMATIC = "application"
GITIGNORE_TEMPLATE = "gitignore.j2"


class PipelineError(Exception):
    """Raised when a step runs without the state an earlier step provides."""

    def __init__(self, step: str, message: str):
        self.step = step
        super().__init__(f"Step '{step}': {message}")


def _required_text(context: CommandContext, name: str) -> str:
    """Return the value of *name*; a blank string counts as missing."""
    value = str(context.get(name, required=True).value)
    if not value.strip():
        raise MissingRequiredInputError(name)
    return value


class StepPolicy(str, Enum):
    """What a failed step does to the rest of the run."""

    FATAL = "fatal"
    CONTINUE = "continue"


@dataclass
class StepResult:
    """Outcome of one pipeline step."""

    name: str
    attempted: bool = False
    succeeded: bool = False
    error: Exception | None = None
    detail: str = ""

    @property
    def failed(self) -> bool:
        return self.attempted and not self.succeeded

    @classmethod
    def skipped(cls, name: str, detail: str) -> "StepResult":
        return cls(name=name, detail=detail)

    @classmethod
    def ok(cls, name: str, detail: str = "") -> "StepResult":
        return cls(name=name, attempted=True, succeeded=True, detail=detail)

    @classmethod
    def failure(cls, name: str, error: Exception) -> "StepResult":
        return cls(name=name, attempted=True, succeeded=False, error=error, detail=str(error))


@dataclass
class PipelineReport:
    """Every step result of one run, in execution order."""

    steps: list[StepResult] = field(default_factory=list)
    aborted: bool = False

    @property
    def exit_code(self) -> int:
        return 1 if self.aborted else 0

    def step(self, name: str) -> StepResult | None:
        for result in self.steps:
            if result.name == name:
                return result
        return None

    def names(self) -> list[str]:
        return [result.name for result in self.steps]


class CreationPipeline:
    """Runs the creation steps for one ``new`` invocation.

    Attributes:
        inputs: Positional inputs (``name``).
        options: Flag values (``directory``, ``dry-run``, ``skip-git`` ...).
        report: Results accumulated by the current run.
    """

    def __init__(
        self,
        inputs: CommandContext,
        options: CommandContext,
        config: Config | None = None,
        completer: InputCompleter | None = None,
        renderer: TemplateRenderer | None = None,
        cwd: str | Path | None = None,
    ) -> None:
        self.inputs = inputs
        self.options = options
        self.config = config or Config()
        self.completer = completer or InputCompleter(config=self.config)
        self.renderer = renderer or TemplateRenderer()
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()

        self.runners = runner_factory(self.config)

        self.report = PipelineReport()
        self.collection: AbstractCollection | None = None
        self.package_manager: AbstractPackageManager | None = None
        self._dry_run_reported = False

    # ------------------------------------------------------------------
    # Context reads
    # ------------------------------------------------------------------

    @property
    def dry_run(self) -> bool:
        return bool(self.options.value("dry-run", False))

    @property
    def skip_install(self) -> bool:
        return bool(self.options.value("skip-install", False))

    @property
    def skip_git(self) -> bool:
        return bool(self.options.value("skip-git", False))

    @property
    def package_manager_name(self) -> str:
        return _required_text(self.options, "packageManager")

    @property
    def project_directory(self) -> Path:
        """``--directory`` if given, else the normalised project name."""
        name = _required_text(self.inputs, "name")
        directory = self.options.value("directory") or normalize_to_kebab_or_snake_case(name)
        return self.cwd / directory

    # ------------------------------------------------------------------
    # Step dispatch
    # ------------------------------------------------------------------

    def steps(self) -> list[tuple[str, StepPolicy, Callable[[], Awaitable[StepResult]]]]:
        return [
            ("complete", StepPolicy.FATAL, self.complete_inputs),
            ("validate", StepPolicy.FATAL, self.resolve_strategies),
            ("generate", StepPolicy.FATAL, self.generate_application_files),
            ("install", StepPolicy.CONTINUE, self.install_packages),
            ("git", StepPolicy.CONTINUE, self.initialize_git_repository),
            ("gitignore", StepPolicy.CONTINUE, self.create_gitignore_file),
            ("notify", StepPolicy.CONTINUE, self.notify),
        ]

    async def run(self) -> PipelineReport:
        """Execute the steps in order and return the report.

        A failed ``FATAL`` step marks the report aborted and stops the run.
        """
        self.report = PipelineReport()
        for _, policy, step in self.steps():
            result = await step()
            self.report.steps.append(result)
            if result.failed and policy is StepPolicy.FATAL:
                self.report.aborted = True
                break
        return self.report

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    async def complete_inputs(self) -> StepResult:
        try:
            await self.completer.complete(self.inputs, self.options)
        except PromptError as exc:
            print_error(str(exc))
            return StepResult.failure("complete", exc)
        return StepResult.ok("complete")

    async def resolve_strategies(self) -> StepResult:
        """Resolve every strategy before anything touches the disk."""
        try:
            _required_text(self.inputs, "name")
            self.collection = collection_factory(self.config).create(
                self.options.value("collection")
            )
            self.package_manager = package_manager_factory(self.config).create(
                self.package_manager_name
            )
        except UnsupportedStrategyError as exc:
            print_error(
                f"Invalid {exc.kind}: {exc.identifier}. "
                f"Available options: {', '.join(exc.allowed)}"
            )
            return StepResult.failure("validate", exc)
        except MissingRequiredInputError as exc:
            print_error(str(exc))
            return StepResult.failure("validate", exc)
        return StepResult.ok("validate")

    async def generate_application_files(self) -> StepResult:
        if self.collection is None:
            raise PipelineError("generate", "collection not resolved, run validate first")
        # Options are applied over inputs: a flag wins over a positional.
        storage = overlay(self.inputs, self.options)
        try:
            await self.collection.execute(
                APPLICATION_SCHEMATIC, map_schematic_options(storage)
            )
        except GenerationError as exc:
            print_error(f"{MESSAGES.GENERATION_FAILED}: {exc}")
            return StepResult.failure("generate", exc)
        print_info()
        return StepResult.ok("generate")

    async def install_packages(self) -> StepResult:
        if self.skip_install:
            return StepResult.skipped("install", "skip-install")
        if self.dry_run:
            self._report_dry_run()
            return StepResult.skipped("install", "dry-run")

        if self.package_manager is None:
            raise PipelineError("install", "package manager not resolved, run validate first")
        try:
            await self.package_manager.install(
                self.project_directory, self.package_manager_name
            )
        except InstallError as exc:
            print_error(str(exc))
            return StepResult.failure("install", exc)
        return StepResult.ok("install")

    async def initialize_git_repository(self) -> StepResult:
        if self.dry_run:
            return StepResult.skipped("git", "dry-run")
        if self.skip_git:
            return StepResult.skipped("git", "skip-git")

        runner = self.runners.create(Runner.GIT)
        if not isinstance(runner, GitRunner):
            raise PipelineError("git", f"expected a git runner, got {type(runner).__name__}")
        try:
            await runner.init(self.project_directory)
        except VcsError as exc:
            print_warning(MESSAGES.GIT_INITIALIZATION_ERROR)
            return StepResult.failure("git", exc)
        return StepResult.ok("git")

    async def create_gitignore_file(self) -> StepResult:
        """Write ``.gitignore`` into the project unless one already exists."""
        git = self.report.step("git")
        if git is not None and not git.attempted:
            return StepResult.skipped("gitignore", git.detail)

        target = self.project_directory / ".gitignore"
        try:
            written = await self.renderer.render_to_new_file(
                GITIGNORE_TEMPLATE,
                target,
                {"package_manager": self.options.value("packageManager")},
            )
        except OSError as exc:
            print_error(f"Could not write {target}: {exc}")
            return StepResult.failure("gitignore", exc)
        if written is None:
            return StepResult.ok("gitignore", "exists")
        return StepResult.ok("gitignore", "written")

    async def notify(self) -> StepResult:
        if self.dry_run:
            self._report_dry_run()
            return StepResult.skipped("notify", "dry-run")
        print_completion_notice()
        return StepResult.ok("notify")

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def _report_dry_run(self) -> None:
        if self._dry_run_reported:
            return
        self._dry_run_reported = True
        print_info()
        console.print(f"[green]{MESSAGES.DRY_RUN_MODE}[/green]")
        print_info()


def print_completion_notice() -> None:
    """Print the centred thank-you banner shown after a successful run."""
    lines: list[tuple[str, Any]] = [
        ("", None),
        (MESSAGES.COMPLETION_THANKS, "yellow"),
        (MESSAGES.COMPLETION_DONATE_LINE_1, "dim"),
        (MESSAGES.COMPLETION_DONATE_LINE_2, "dim"),
        ("", None),
        (
            f"[bold]{EMOJIS.WINE}  Donate:[/bold] [underline]{MESSAGES.DONATE_URL}[/underline]",
            None,
        ),
        ("", None),
    ]
    for text, style in lines:
        console.print(text, style=style, justify="center")
