"""Tests for salt_state.core.runner process execution."""

from __future__ import annotations

import subprocess
from unittest.mock import patch

import pytest

from salt_state.core.command import Flags, Invocation, build_plan
from salt_state.core.exceptions import CommandFailedError, ExecutableNotFoundError
from salt_state.core.runner import resolve_executable, run_invocation, run_plan


def _which(name: str) -> str:
    return f"/usr/bin/{name}"


class TestResolveExecutable:
    def test_returns_path(self):
        with patch("salt_state.core.runner.shutil.which", return_value="/usr/bin/salt-call"):
            assert resolve_executable("salt-call") == "/usr/bin/salt-call"

    def test_missing_binary(self):
        with patch("salt_state.core.runner.shutil.which", return_value=None):
            with pytest.raises(ExecutableNotFoundError) as exc_info:
                resolve_executable("salt-call")
        assert str(exc_info.value) == "failed to find salt-call (is salt installed?)"
        assert exc_info.value.name == "salt-call"


class TestRunInvocation:
    def test_runs_with_inherited_streams(self):
        invocation = Invocation(("salt-call", "--local", "state.highstate"))
        completed = subprocess.CompletedProcess(args=list(invocation.argv), returncode=0)

        with patch("salt_state.core.runner.shutil.which", side_effect=_which), patch(
            "salt_state.core.runner.subprocess.run", return_value=completed
        ) as mock_run:
            run_invocation(invocation)

        mock_run.assert_called_once_with(
            ["salt-call", "--local", "state.highstate"],
            executable="/usr/bin/salt-call",
            check=True,
        )
        assert "stdout" not in mock_run.call_args.kwargs
        assert "capture_output" not in mock_run.call_args.kwargs

    def test_non_zero_exit(self):
        invocation = Invocation(("salt-call", "state.highstate"))
        error = subprocess.CalledProcessError(2, list(invocation.argv))

        with patch("salt_state.core.runner.shutil.which", side_effect=_which), patch(
            "salt_state.core.runner.subprocess.run", side_effect=error
        ):
            with pytest.raises(CommandFailedError) as exc_info:
                run_invocation(invocation)

        assert str(exc_info.value) == "exit status 2"
        assert exc_info.value.invocation is invocation

    def test_labelled_failure_names_the_step(self):
        invocation = Invocation(("salt-call", "saltutil.refresh_pillar"), label="refresh pillar")

        with patch("salt_state.core.runner.shutil.which", side_effect=_which), patch(
            "salt_state.core.runner.subprocess.run",
            side_effect=subprocess.CalledProcessError(1, list(invocation.argv)),
        ):
            with pytest.raises(CommandFailedError) as exc_info:
                run_invocation(invocation)

        assert str(exc_info.value) == "failed to refresh pillar (err = exit status 1)"

    def test_os_error(self):
        invocation = Invocation(("salt-call", "state.highstate"))

        with patch("salt_state.core.runner.shutil.which", side_effect=_which), patch(
            "salt_state.core.runner.subprocess.run",
            side_effect=PermissionError(13, "Permission denied"),
        ):
            with pytest.raises(CommandFailedError) as exc_info:
                run_invocation(invocation)

        assert "Permission denied" in str(exc_info.value)

    def test_missing_binary_never_runs(self):
        with patch("salt_state.core.runner.shutil.which", return_value=None), patch(
            "salt_state.core.runner.subprocess.run"
        ) as mock_run:
            with pytest.raises(ExecutableNotFoundError):
                run_invocation(Invocation(("salt-call", "state.highstate")))

        mock_run.assert_not_called()


class TestRunPlan:
    def test_sync_runs_refresh_then_sync_all(self):
        plan = build_plan(Flags(), "sync")
        completed = subprocess.CompletedProcess(args=[], returncode=0)

        with patch("salt_state.core.runner.shutil.which", side_effect=_which), patch(
            "salt_state.core.runner.subprocess.run", return_value=completed
        ) as mock_run:
            run_plan(plan)

        assert mock_run.call_count == 2
        first, second = (call.args[0] for call in mock_run.call_args_list)
        assert first[-1] == "saltutil.refresh_pillar"
        assert second[-1] == "saltutil.sync_all"
        assert first[:-1] == second[:-1]

    def test_sync_stops_after_failed_refresh(self):
        plan = build_plan(Flags(), "sync")

        with patch("salt_state.core.runner.shutil.which", side_effect=_which), patch(
            "salt_state.core.runner.subprocess.run",
            side_effect=subprocess.CalledProcessError(1, ["salt-call"]),
        ) as mock_run:
            with pytest.raises(CommandFailedError) as exc_info:
                run_plan(plan)

        mock_run.assert_called_once()
        assert str(exc_info.value).startswith("failed to refresh pillar")

    def test_sync_reports_failed_sync_all(self):
        plan = build_plan(Flags(), "sync")
        results = [
            subprocess.CompletedProcess(args=[], returncode=0),
            subprocess.CalledProcessError(1, ["salt-call"]),
        ]

        with patch("salt_state.core.runner.shutil.which", side_effect=_which), patch(
            "salt_state.core.runner.subprocess.run", side_effect=results
        ) as mock_run:
            with pytest.raises(CommandFailedError) as exc_info:
                run_plan(plan)

        assert mock_run.call_count == 2
        assert str(exc_info.value) == "failed to sync salt (err = exit status 1)"
