import io
import subprocess

import pytest

from fastcopy.action import (
    ActionError,
    ActionFactory,
    ArgAction,
    NewActionRequest,
    StdinAction,
    regex_names_env_entry,
)
from fastcopy.logger import Logger
from fastcopy.model import Selection

CWD = "/foo/bar"


def _factory():
    return ActionFactory(getwd=lambda: CWD)


@pytest.mark.parametrize(
    "give, want",
    [
        (NewActionRequest("pbcopy"), StdinAction(cmd="pbcopy", args=[], dir=CWD)),
        (
            NewActionRequest("tmux set-buffer -- {}"),
            ArgAction(
                cmd="tmux", before_args=["set-buffer", "--"], after_args=[], dir=CWD
            ),
        ),
        (
            NewActionRequest("pbcopy", dir="/tmp"),
            StdinAction(cmd="pbcopy", args=[], dir="/tmp"),
        ),
        (
            NewActionRequest("tmux set-buffer -- {}", dir="/tmp"),
            ArgAction(
                cmd="tmux", before_args=["set-buffer", "--"], after_args=[], dir="/tmp"
            ),
        ),
        (
            NewActionRequest("pbcopy", target_pane_id="123"),
            StdinAction(cmd="pbcopy", args=[], pane_id="123", dir=CWD),
        ),
        (
            NewActionRequest("tmux set-buffer -- {}", target_pane_id="123"),
            ArgAction(
                cmd="tmux",
                before_args=["set-buffer", "--"],
                after_args=[],
                pane_id="123",
                dir=CWD,
            ),
        ),
    ],
)
def test_new_command_action(give, want):
    assert _factory().new(give) == want


@pytest.mark.parametrize(
    "action, want_err",
    [("", "empty action"), ('foo "', "invalid command line string")],
)
def test_new_command_action_errors(action, want_err):
    with pytest.raises(ActionError) as excinfo:
        _factory().new(NewActionRequest(action))
    assert want_err in str(excinfo.value)


def test_new_command_action_no_cwd():
    def getwd():
        raise OSError("great sadness")

    got = ActionFactory(getwd=getwd).new(NewActionRequest("pbcopy"))
    assert got == StdinAction(cmd="pbcopy", args=[], dir="")


def test_regex_names_env_entry():
    assert regex_names_env_entry(["x", "y"]) == "FASTCOPY_REGEX_NAME=x y"


def test_stdin_action():
    buff = io.StringIO()
    action = StdinAction(cmd="cat", log=Logger(buff), environ=lambda: {})
    action.run(Selection(text="foo", matchers=("x",)))
    assert buff.getvalue() == "[cat] foo\n"


def test_stdin_action_regexes_env():
    buff = io.StringIO()
    action = StdinAction(cmd="env", log=Logger(buff), environ=lambda: {"FOO": "bar"})
    action.run(Selection(text="foo", matchers=("x", "y")))
    out = buff.getvalue()
    assert "[env] FASTCOPY_REGEX_NAME=x y\n" in out
    assert "[env] FOO=bar\n" in out


def test_stdin_action_pane_env():
    buff = io.StringIO()
    action = StdinAction(
        cmd="env", pane_id="%3", log=Logger(buff), environ=lambda: {}
    )
    action.run(Selection(text="foo", matchers=("x",)))
    assert "[env] FASTCOPY_TARGET_PANE_ID=%3\n" in buff.getvalue()


def test_arg_action():
    buff = io.StringIO()
    action = ArgAction(
        cmd="echo",
        before_args=["1", "2"],
        after_args=["3", "4"],
        log=Logger(buff),
        environ=lambda: {},
    )
    action.run(Selection(text="foo", matchers=("x",)))
    assert buff.getvalue() == "[echo] 1 2 foo 3 4\n"


def test_arg_action_regexes_env():
    buff = io.StringIO()
    action = ArgAction(
        cmd="bash",
        before_args=["-c", "env"],
        log=Logger(buff),
        environ=lambda: {"FOO": "bar"},
    )
    action.run(Selection(text="foo", matchers=("x", "y")))
    out = buff.getvalue()
    assert "[bash] FASTCOPY_REGEX_NAME=x y\n" in out
    assert "[bash] FOO=bar\n" in out


def test_arg_action_failure_raises():
    action = ArgAction(cmd="false", log=Logger(io.StringIO()), environ=lambda: {})
    with pytest.raises(subprocess.CalledProcessError):
        action.run(Selection(text="foo", matchers=("x",)))


def test_action_runs_in_dir(tmp_path):
    buff = io.StringIO()
    action = StdinAction(
        cmd="pwd", dir=str(tmp_path), log=Logger(buff), environ=lambda: {}
    )
    action.run(Selection(text="", matchers=("x",)))
    assert buff.getvalue() == f"[pwd] {tmp_path.resolve()}\n"