"""Tests for the kubectl runner."""

import subprocess
from unittest.mock import patch

import pytest

from deploy_commander.core.kubectl import KubectlError, KubectlRunner


def _completed(stdout="", stderr="", returncode=0):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestKubectlRunner:
    def test_available(self):
        with patch("deploy_commander.core.kubectl.shutil.which", return_value="/usr/bin/kubectl"):
            assert KubectlRunner(binary="kubectl").available()
        with patch("deploy_commander.core.kubectl.shutil.which", return_value=None):
            assert not KubectlRunner(binary="kubectl").available()

    def test_run_passes_context(self):
        with patch("deploy_commander.core.kubectl.subprocess.run", return_value=_completed("ok")) as run:
            out = KubectlRunner(binary="kubectl", context="dev").run("get", "pods")

        assert out == "ok"
        assert run.call_args.args[0] == ["kubectl", "--context", "dev", "get", "pods"]

    def test_run_nonzero_exit(self):
        with patch(
            "deploy_commander.core.kubectl.subprocess.run",
            return_value=_completed(stderr="forbidden\n", returncode=1),
        ):
            with pytest.raises(KubectlError) as exc_info:
                KubectlRunner(binary="kubectl").run("get", "pods")

        assert exc_info.value.stderr == "forbidden"

    def test_run_missing_binary(self):
        with patch("deploy_commander.core.kubectl.subprocess.run", side_effect=FileNotFoundError()):
            with pytest.raises(KubectlError, match="not found"):
                KubectlRunner(binary="nokubectl").run("version")

    def test_run_timeout(self):
        with patch(
            "deploy_commander.core.kubectl.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="kubectl", timeout=1),
        ):
            with pytest.raises(KubectlError, match="timed out"):
                KubectlRunner(binary="kubectl").run("version")

    def test_client_version(self):
        payload = '{"clientVersion": {"major": "1", "minor": "29", "gitVersion": "v1.29.2"}}'
        with patch("deploy_commander.core.kubectl.subprocess.run", return_value=_completed(payload)) as run:
            assert KubectlRunner(binary="kubectl").client_version() == "v1.29.2"

        assert run.call_args.args[0] == ["kubectl", "version", "--client", "-o", "json"]

    def test_client_version_bad_output(self):
        with patch("deploy_commander.core.kubectl.subprocess.run", return_value=_completed("Client Version: v1")):
            with pytest.raises(KubectlError, match="unexpected"):
                KubectlRunner(binary="kubectl").client_version()
