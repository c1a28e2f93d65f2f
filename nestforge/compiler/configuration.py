"""Project build configuration read from ``nest-cli.json``.

Only the keys the build command uses are modelled; anything else in the file
is ignored.  A missing default file means "all defaults".
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CONFIG_FILES: tuple[str, ...] = ("nest-cli.json", ".nestcli.json")
DEFAULT_TSCONFIG = "tsconfig.build.json"
DEFAULT_WEBPACK_CONFIG = "webpack.config.js"


class CompilerOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    builder: str | None = None
    webpack: bool = False
    ts_config_path: str | None = Field(default=None, alias="tsConfigPath")
    webpack_config_path: str | None = Field(default=None, alias="webpackConfigPath")
    type_check: bool = Field(default=False, alias="typeCheck")
    watch_assets: bool = Field(default=False, alias="watchAssets")


class ProjectEntry(BaseModel):
    """One application or library of a monorepo."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: str = "application"
    root: str = ""
    source_root: str | None = Field(default=None, alias="sourceRoot")
    compiler_options: CompilerOptions = Field(
        default_factory=CompilerOptions, alias="compilerOptions"
    )


class ProjectConfiguration(BaseModel):
    """Top level of ``nest-cli.json``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    source_root: str = Field(default="src", alias="sourceRoot")
    monorepo: bool = False
    compiler_options: CompilerOptions = Field(
        default_factory=CompilerOptions, alias="compilerOptions"
    )
    projects: dict[str, ProjectEntry] = Field(default_factory=dict)

    @classmethod
    def load(
        cls, path: str | Path | None = None, cwd: str | Path | None = None
    ) -> "ProjectConfiguration":
        """Read the configuration file.

        Args:
            path: Explicit file (``--config``); must exist.
            cwd: Directory searched for the default file names.

        Raises:
            FileNotFoundError: If an explicit *path* does not exist.
            pydantic.ValidationError: If the file is not valid configuration.
        """
        base = Path(cwd) if cwd is not None else Path.cwd()
        if path:
            target = base / path
            if not target.is_file():
                raise FileNotFoundError(f"Configuration file not found: {target}")
            return cls.model_validate_json(target.read_text(encoding="utf-8"))

        for name in DEFAULT_CONFIG_FILES:
            candidate = base / name
            if candidate.is_file():
                return cls.model_validate_json(candidate.read_text(encoding="utf-8"))
        return cls()

    def resolve_app(self, app: str | None) -> tuple[str, CompilerOptions]:
        """Return ``(source_root, compiler_options)`` for *app*.

        Project-level compiler options override the top-level ones key by key.

        Raises:
            KeyError: If *app* is named but not listed under ``projects``.
        """
        if not app:
            return self.source_root, self.compiler_options
        if app not in self.projects:
            raise KeyError(app)

        project = self.projects[app]
        merged = self.compiler_options.model_dump(by_alias=False)
        merged.update(project.compiler_options.model_dump(by_alias=False, exclude_unset=True))
        source_root = project.source_root or (
            f"{project.root}/src" if project.root else self.source_root
        )
        return source_root, CompilerOptions.model_validate(merged)
