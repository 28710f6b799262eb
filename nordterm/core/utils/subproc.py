from __future__ import annotations

import shlex
import subprocess
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class RunResult:
    command_str: str
    stdout: str
    stderr: str
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class CommandError(RuntimeError):
    """An external command could not be run or exited non-zero."""

    def __init__(self, message: str, *, result: RunResult | None = None) -> None:
        super().__init__(message)
        self.result = result


def run(args: Sequence[str], *, input_text: str | None = None) -> RunResult:
    """Run *args* and capture its output.

    Never raises for a non-zero exit; a missing executable is reported as
    exit code 127 with the OS error in stderr.
    """

    command_str = " ".join(shlex.quote(p) for p in args)

    try:
        proc = subprocess.run(
            list(args),
            input=input_text,
            check=False,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as exc:
        return RunResult(command_str=command_str, stdout="", stderr=str(exc), exit_code=127)

    return RunResult(
        command_str=command_str,
        stdout=proc.stdout,
        stderr=proc.stderr,
        exit_code=proc.returncode,
    )


def run_checked(args: Sequence[str], *, input_text: str | None = None) -> str:
    """Run *args* and return stdout, raising `CommandError` on failure."""

    result = run(args, input_text=input_text)
    if not result.ok:
        detail = result.stderr.strip() or "(no stderr)"
        raise CommandError(
            f"Command failed with exit code {result.exit_code}: {result.command_str}: {detail}",
            result=result,
        )
    return result.stdout
