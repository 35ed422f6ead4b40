"""Actions that receive the user's selection by running a command."""

from __future__ import annotations

import os
import shlex
import shutil
import subprocess
from dataclasses import dataclass, field
from typing import Callable, Iterable, Mapping, Union

from fastcopy.logger import DISCARD, Logger, LogWriter
from fastcopy.model import Selection

PLACEHOLDER_ARG = "{}"
REGEX_NAMES_ENV_KEY = "FASTCOPY_REGEX_NAME"
TARGET_PANE_ENV_KEY = "FASTCOPY_TARGET_PANE_ID"

Environ = Callable[[], Mapping[str, str]]


class ActionError(ValueError):
    """Raised when an action string cannot be turned into a command."""


def _regex_names(matchers: Iterable[str]) -> str:
    return " ".join(matchers)


def regex_names_env_entry(matchers: Iterable[str]) -> str:
    """The KEY=VALUE environment entry naming the matchers of a selection."""
    return f"{REGEX_NAMES_ENV_KEY}={_regex_names(matchers)}"


def _os_environ() -> Mapping[str, str]:
    return dict(os.environ)


def _run(
    cmd: str,
    args: list[str],
    *,
    selection: Selection,
    stdin: str | None,
    cwd: str,
    pane_id: str,
    log: Logger,
    environ: Environ,
) -> None:
    env = dict(environ())
    env[REGEX_NAMES_ENV_KEY] = _regex_names(selection.matchers)
    env[TARGET_PANE_ENV_KEY] = pane_id

    # Resolve the program against our own PATH, not the child's.
    executable = shutil.which(cmd) or cmd
    with LogWriter(log.with_name(cmd)) as logw:
        proc = subprocess.run(
            [executable, *args],
            input=stdin,
            stdin=None if stdin is not None else subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            cwd=cwd or None,
            env=env,
            encoding="utf-8",
            errors="replace",
        )
        logw.write(proc.stdout)
    proc.check_returncode()


@dataclass
class StdinAction:
    """Runs a command with the selected text on its standard input."""

    cmd: str
    args: list[str] = field(default_factory=list)
    dir: str = ""
    pane_id: str = ""
    log: Logger = field(default=DISCARD, compare=False, repr=False)
    environ: Environ = field(default=_os_environ, compare=False, repr=False)

    def run(self, selection: Selection) -> None:
        """Run the command; raise CalledProcessError if it fails."""
        _run(
            self.cmd,
            list(self.args),
            selection=selection,
            stdin=selection.text,
            cwd=self.dir,
            pane_id=self.pane_id,
            log=self.log,
            environ=self.environ,
        )


@dataclass
class ArgAction:
    """Runs a command with the selected text in place of the placeholder."""

    cmd: str
    before_args: list[str] = field(default_factory=list)
    after_args: list[str] = field(default_factory=list)
    dir: str = ""
    pane_id: str = ""
    log: Logger = field(default=DISCARD, compare=False, repr=False)
    environ: Environ = field(default=_os_environ, compare=False, repr=False)

    def run(self, selection: Selection) -> None:
        """Run the command; raise CalledProcessError if it fails."""
        _run(
            self.cmd,
            [*self.before_args, selection.text, *self.after_args],
            selection=selection,
            stdin=None,
            cwd=self.dir,
            pane_id=self.pane_id,
            log=self.log,
            environ=self.environ,
        )


Action = Union[StdinAction, ArgAction]


@dataclass(frozen=True)
class NewActionRequest:
    """What to build an action from.

    ``action`` is a shell-style command line; a ``{}`` argument stands for
    the selected text, and without one the text goes to standard input.
    An empty ``dir`` means the current working directory.
    """

    action: str
    dir: str = ""
    target_pane_id: str = ""


@dataclass
class ActionFactory:
    """Builds actions from command strings."""

    log: Logger = field(default=DISCARD)
    environ: Environ = field(default=_os_environ)
    getwd: Callable[[], str] = field(default=os.getcwd)

    def new(self, request: NewActionRequest) -> Action:
        """Build the action described by request."""
        try:
            words = shlex.split(request.action)
        except ValueError as exc:
            raise ActionError(f"invalid command line string: {exc}") from exc
        if not words:
            raise ActionError("empty action")

        cwd = request.dir
        if not cwd:
            try:
                cwd = self.getwd()
            except OSError:
                cwd = ""

        cmd, args = words[0], words[1:]
        if PLACEHOLDER_ARG in args:
            i = args.index(PLACEHOLDER_ARG)
            return ArgAction(
                cmd=cmd,
                before_args=args[:i],
                after_args=args[i + 1 :],
                dir=cwd,
                pane_id=request.target_pane_id,
                log=self.log,
                environ=self.environ,
            )

        return StdinAction(
            cmd=cmd,
            args=args,
            dir=cwd,
            pane_id=request.target_pane_id,
            log=self.log,
            environ=self.environ,
        )