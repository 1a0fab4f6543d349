"""
Directory-change channel between the proj process and its calling shell.

A child process cannot change its parent's working directory. The shell
wrapper installed by ``p shell-init`` points $P_CD_FILE at a temporary file,
runs the real executable, then ``cd``s into whatever path was written there.
"""

import logging
from pathlib import Path
from typing import Optional

from proj.constants import ENV_CD_FILE, get_cd_file
from proj.exceptions import StorageError
from proj.printer import Printer

logger = logging.getLogger(__name__)

SHELL_WRAPPER = """\
{exe}() {{
    local __p_cd_file __p_status
    __p_cd_file="$(mktemp "${{TMPDIR:-/tmp}}/p-cd.XXXXXX")" || return 1
    {env}="$__p_cd_file" command {exe} "$@"
    __p_status=$?
    if [ -s "$__p_cd_file" ]; then
        cd -- "$(cat -- "$__p_cd_file")" || __p_status=$?
    fi
    rm -f -- "$__p_cd_file"
    return $__p_status
}}
"""


def shell_wrapper(exe: str) -> str:
    """Shell function that wraps ``exe`` and acts on directory-change requests."""
    return SHELL_WRAPPER.format(exe=exe, env=ENV_CD_FILE)


class DirectoryChannel:
    """Delivers a requested directory change to the calling shell."""

    def __init__(self, printer: Printer, cd_file: Optional[Path] = None) -> None:
        self.printer = printer
        self.cd_file = cd_file if cd_file is not None else get_cd_file()

    @property
    def connected(self) -> bool:
        return self.cd_file is not None

    def request(self, path: Path) -> None:
        """Ask the calling shell to change into ``path``."""
        if self.cd_file is None:
            self.printer.warning(
                "shell wrapper not installed; run the printed path through cd "
                "or see `shell-init`"
            )
            self.printer.echo(str(path))
            return

        try:
            self.cd_file.write_text(f"{path}\n", encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to write to {self.cd_file}: {e.strerror or e}")
        logger.debug("Requested directory change to %s via %s", path, self.cd_file)
