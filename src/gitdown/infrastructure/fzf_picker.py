"""fzf adapter — implements the Picker port with a child process.

fzf reads candidates on stdin, draws its UI on the controlling terminal
and prints the chosen lines on stdout.  The exit status tells us how the
session ended:

* ``0``        the user confirmed a selection;
* negative     the process was killed by a signal;
* anything else  nothing was chosen (no match, ESC, ...).
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Iterable, Sequence

from gitdown.domain.entities import Chosen
from gitdown.domain.exceptions import LocalIOError, OtherError, PickerInterruptedError

logger = logging.getLogger(__name__)

DEFAULT_HEIGHT = "40%"


def fzf_options(height: str = DEFAULT_HEIGHT) -> list[str]:
    """Multi-select, keep input order, exit or auto-pick on zero/one match."""
    return [
        "-m",
        "--bind=ctrl-z:ignore",
        "--exit-0",
        f"--height={height}",
        "--inline-info",
        "--no-sort",
        "--reverse",
        "--select-1",
    ]


class FzfPicker:
    """Concrete Picker that shells out to ``fzf`` (or a compatible program)."""

    def __init__(
        self,
        command: str | Sequence[str] = "fzf",
        options: Sequence[str] | None = None,
    ) -> None:
        self._command = shlex.split(command) if isinstance(command, str) else list(command)
        self._options = list(fzf_options() if options is None else options)

    @property
    def argv(self) -> list[str]:
        return [*self._command, *self._options]

    def select(self, items: Iterable[str]) -> Chosen:
        """Feed *items* to the picker, wait for it and interpret the outcome."""
        stdin_text = "".join(f"{item}\n" for item in items)

        try:
            proc = subprocess.Popen(
                self.argv,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                text=True,
            )
        except OSError as exc:
            raise LocalIOError() from exc

        # communicate() writes, closes stdin and drains stdout concurrently.
        try:
            stdout, _ = proc.communicate(stdin_text)
        except OSError as exc:
            proc.kill()
            proc.wait()
            raise LocalIOError() from exc

        return interpret_exit(proc.returncode, stdout or "")


def interpret_exit(returncode: int, stdout: str) -> Chosen:
    """Map a finished picker run onto its three possible outcomes."""
    if returncode == 0:
        lines = stdout.rstrip().split("\n") if stdout.strip() else []
        logger.debug("Picker returned %d line(s)", len(lines))
        return Chosen(items=tuple(lines))

    if returncode < 0:
        raise PickerInterruptedError()

    raise OtherError(
        status=f"likely, a file was not chosen (exit status {returncode})"
    )
