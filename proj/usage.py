"""
Static usage text for the proj CLI.

Every block is parameterized only by the executable name.
"""

from typing import Dict

from proj.models.command import CommandKind

TOP_LEVEL_USAGE = """\
Usage: {exe} [OPTIONS] <command> [ARGS]...
       {exe}                  show the project you are currently in

Run "{exe} help" for the full list of commands.
"""

TOP_LEVEL_HELP = """\
{exe} - keep track of your projects and jump between them

Usage:
  {exe} [OPTIONS] <command> [ARGS]...
  {exe}                         show the project containing the current directory

Commands:
  archive, ar <project>         archive a project into a tarball
  copy, cp <existing> [<new>]   copy a project's files into a new project
  dump, d                       dump the registry and project metadata
  go, g <project>               change directory to a project
  help, h [<command>]           show this help, or help for one command
  list, ls                      list known projects
  restore, r [<file>]           restore an archived project
  start, s <name> [OPTIONS]     create and register a new project
  todo, t [-x N] [<task>]       keep a todo list for the current project

Options:
  -v, --verbose                 log debug information to standard error
  --color / --no-color          force or disable colored output

Examples:
  {exe} start "My Cool App"       creates ~/projects/my_cool_app
  {exe} s blog --at ~/src/blog --cd
  {exe} go blog
  {exe} ls

Files:
  ~/.prc                        run-control file ($PRC overrides)
  <config dir>/projects         project registry ($P_CONFIG_DIR overrides)

Directory changes need the shell wrapper; add this to your shell rc file:
  eval "$(command {exe} shell-init)"
"""

COMMAND_USAGE: Dict[CommandKind, str] = {
    CommandKind.ARCHIVE: """\
Usage: {exe} archive|ar <project>

  Pack a project's directory into a tarball and remove it from the list.
""",
    CommandKind.COPY: """\
Usage: {exe} copy|cp <existing> [<new>]

  Copy an existing project's files into a new project. Without <new>,
  the copy is named "<existing>_copy".
""",
    CommandKind.DUMP: """\
Usage: {exe} dump|d

  Print the registry and every project's metadata.
""",
    CommandKind.GO: """\
Usage: {exe} go|g <project>

  Change the current directory to the named project.
""",
    CommandKind.HELP: """\
Usage: {exe} help|h [<command>]

  Show general help, or the usage of one command (long or short name).
""",
    CommandKind.LIST: """\
Usage: {exe} list|ls

  List every known project and its directory.
""",
    CommandKind.RESTORE: """\
Usage: {exe} restore|r [<file>]

  Restore an archived project from a tarball made by "{exe} archive".
""",
    CommandKind.START: """\
Usage: {exe} start|s <name> [OPTIONS]

  Create a project directory and register it under <name>. The directory
  defaults to <default_project_dir>/<slug>, where the slug is the name
  lowercased with spaces turned into underscores.

Options:
  -w, --with <list>   run initializers after creating, e.g. git,npm,gh
  -a, --at <dir>      create the project at <dir> instead
  --cd                change into the project once it is created
  --then <file>       run a script inside the new project
""",
    CommandKind.TODO: """\
Usage: {exe} todo|t [-x N] [<task>]

  Without arguments, show the current project's todo list. With <task>,
  add it. With -x N, mark item N as done.
""",
}


def top_level_usage(exe: str) -> str:
    """Short usage shown after errors and for a bare invocation."""
    return TOP_LEVEL_USAGE.format(exe=exe)


def top_level_help(exe: str) -> str:
    """Long-form help for ``help`` with no argument."""
    return TOP_LEVEL_HELP.format(exe=exe)


def command_usage(kind: CommandKind, exe: str) -> str:
    return COMMAND_USAGE[kind].format(exe=exe)


def usage_for(name: str, exe: str) -> str:
    """Usage block for a command's long name, or top-level usage for ``""``."""
    if not name:
        return top_level_usage(exe)
    return command_usage(CommandKind(name), exe)
