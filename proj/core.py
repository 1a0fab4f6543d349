"""
ProjCore - business logic for the proj CLI.

Handlers take validated argument models and return a CommandResult.
They never print and never change the working directory; the CLI layer
acts on what they return.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, ValidationError

from proj.channel import DirectoryChannel
from proj.constants import DEFAULT_EXECUTABLE_NAME, MSG_MISSING_PROJECT_NAME, MSG_NO_PROJECTS
from proj.exceptions import (
    DuplicateProjectError,
    FeatureNotImplementedError,
    InvalidArgumentError,
    MissingArgumentError,
    ProjError,
    ProjectNotFoundError,
)
from proj.managers.config_manager import load_run_control
from proj.managers.project_manager import ProjectRegistry
from proj.managers.storage_manager import RegistryStorage
from proj.models.command import CommandKind, GoArgs, HelpArgs, StartArgs, StubArgs
from proj.models.config import RunControlConfig
from proj.models.record import ProjectRecord
from proj.models.results import ChangeDirectory, CommandResult, Output
from proj.paths import expand_path, slugify
from proj.printer import Printer
from proj.usage import command_usage, top_level_help, top_level_usage

logger = logging.getLogger(__name__)


class ProjContext:
    """
    Everything a handler needs, built once per invocation.

    Attributes:
        config: Run-control settings, loaded before any command runs.
        registry: Project registry backed by the config directory.
        printer: Colored output.
        channel: Directory-change channel to the calling shell.
        exe: Executable name used in usage text.
    """

    def __init__(
        self,
        config: RunControlConfig,
        registry: ProjectRegistry,
        printer: Printer,
        channel: DirectoryChannel,
        exe: str = DEFAULT_EXECUTABLE_NAME,
    ) -> None:
        self.config = config
        self.registry = registry
        self.printer = printer
        self.channel = channel
        self.exe = exe

    @classmethod
    def create(
        cls,
        exe: str = DEFAULT_EXECUTABLE_NAME,
        color: Optional[bool] = None,
        run_control: Optional[Path] = None,
        config_dir: Optional[Path] = None,
    ) -> "ProjContext":
        """
        Load the run-control file and wire up the managers.

        The registry file is not touched here.

        Raises:
            ConfigParseError: If the run-control file has an unknown key.
        """
        config = load_run_control(run_control)
        printer = Printer(color=color)
        return cls(
            config=config,
            registry=ProjectRegistry(RegistryStorage(config_dir)),
            printer=printer,
            channel=DirectoryChannel(printer),
            exe=exe,
        )


class ProjCore:
    """
    Command handlers.

    Usage:
        core = ProjCore(ProjContext.create())
        result = core.run(CommandKind.GO, GoArgs(name="blog"))
    """

    def __init__(self, context: ProjContext) -> None:
        self.context = context
        self.registry = context.registry
        self._handlers: Dict[CommandKind, Callable[..., CommandResult]] = {
            CommandKind.HELP: self.help,
            CommandKind.GO: self.go,
            CommandKind.LIST: self.list_projects,
            CommandKind.START: self.start,
            CommandKind.ARCHIVE: self.stub,
            CommandKind.COPY: self.stub,
            CommandKind.DUMP: self.stub,
            CommandKind.RESTORE: self.stub,
            CommandKind.TODO: self.stub,
        }

    @property
    def exe(self) -> str:
        return self.context.exe

    def run(self, kind: CommandKind, args: Optional[BaseModel] = None) -> CommandResult:
        """Dispatch a command kind to its handler."""
        logger.debug("Running %s with %r", kind.value, args)
        return self._handlers[kind](args)

    # =========================================================================
    # Implemented commands
    # =========================================================================

    def help(self, args: HelpArgs) -> Output:
        if args.topic is None:
            return Output(lines=[top_level_help(self.exe)])
        return Output(lines=[command_usage(args.topic, self.exe)])

    def go(self, args: GoArgs) -> ChangeDirectory:
        """
        Resolve a project name to its directory.

        Raises:
            ProjectNotFoundError: If no project has that name.
            PathExpansionError: If the directory no longer exists or is not accessible.
        """
        record = self.registry.find_by_name(self.registry.load(), args.name)
        if record is None:
            raise ProjectNotFoundError(f'no project named "{args.name}"')
        return ChangeDirectory(path=expand_path(record.directory).unwrap())

    def list_projects(self, args: Optional[BaseModel] = None) -> Output:
        records = self.registry.load()
        if not records:
            return Output(
                lines=[MSG_NO_PROJECTS, f'run "{self.exe} start <name>" to create one']
            )

        lines: List[str] = []
        for record in records:
            lines.append(f'"{record.name}" at {record.directory}:')
            lines.append("")
        return Output(lines=lines)

    def start(self, args: StartArgs) -> CommandResult:
        """
        Create a project directory and register it.

        Steps:
        1. Validate the name and reject duplicates
        2. Refuse options that are still in development (--with, --then)
        3. Work out the directory: --at, or <default_project_dir>/<slug>
        4. Create the directory and its parents
        5. Append the record with the invocation as metadata
        6. Request a directory change if --cd was given

        Raises:
            MissingArgumentError: If the name is empty.
            InvalidArgumentError: If the name cannot be stored or yields an empty slug.
            DuplicateProjectError: If the name is already registered.
            FeatureNotImplementedError: For --with and --then.
        """
        if not args.name:
            raise MissingArgumentError(MSG_MISSING_PROJECT_NAME, usage_for=CommandKind.START.value)

        existing = self.registry.find_by_name(self.registry.load(), args.name)
        if existing:
            raise DuplicateProjectError(
                f'project already exists: "{existing.name}" at {existing.directory}'
            )

        if args.with_initializers is not None:
            raise FeatureNotImplementedError(
                "initializers (--with) are in development", usage_for=CommandKind.START.value
            )
        if args.then_script is not None:
            raise FeatureNotImplementedError(
                "post-creation scripts (--then) are in development",
                usage_for=CommandKind.START.value,
            )

        directory = args.at
        if directory is None:
            slug = slugify(args.name)
            if not slug:
                raise InvalidArgumentError(
                    f'cannot derive a directory name from "{args.name}"; use --at',
                    usage_for=CommandKind.START.value,
                )
            directory = f"{self.context.config.default_project_dir.rstrip('/')}/{slug}"

        path = expand_path(directory, must_exist=False).unwrap()
        if not directory.startswith(("~", "$", "/")):
            # Relative paths are stored resolved
            directory = str(path)

        try:
            record = ProjectRecord(
                name=args.name,
                directory=directory,
                metadata=[f"cmd: {args.command_text}"] if args.command_text else [],
            )
        except ValidationError as e:
            raise InvalidArgumentError(
                f'invalid project "{args.name}": {e.errors()[0]["msg"]}',
                usage_for=CommandKind.START.value,
            )

        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ProjError(f"cannot create {path}: {e.strerror or e}")

        self.registry.append(record)

        message = f'created "{record.name}" at {record.directory}'
        if args.cd:
            return ChangeDirectory(path=path, message=message)
        return Output(lines=[message])

    def whereami(self, cwd: Optional[Path] = None) -> Output:
        """Show the project containing ``cwd``, or the top-level usage."""
        record = self.registry.find_containing(self.registry.load(), cwd or Path.cwd())
        if record is None:
            return Output(lines=[top_level_usage(self.exe)])
        return Output(lines=[f'"{record.name}" at {record.directory}'])

    # =========================================================================
    # Placeholders
    # =========================================================================

    def stub(self, args: StubArgs) -> CommandResult:
        """Announce that a command is not available yet."""
        raise FeatureNotImplementedError(
            f"{args.kind.long_name} is in development", usage_for=args.kind.long_name
        )
