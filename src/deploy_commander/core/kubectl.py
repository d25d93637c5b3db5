"""Run the local kubectl binary."""

from __future__ import annotations

import json
import logging
import shutil
import subprocess

from deploy_commander.config.settings import settings

logger = logging.getLogger(__name__)


class KubectlError(Exception):
    """kubectl could not be run or exited with a failure."""

    def __init__(self, message: str, stderr: str = ""):
        self.stderr = stderr
        super().__init__(message)


class KubectlRunner:
    """Invoke kubectl as a subprocess."""

    def __init__(self, binary: str | None = None, context: str | None = None):
        self.binary = binary or settings.kubectl_binary
        self.context = context

    def available(self) -> bool:
        return shutil.which(self.binary) is not None

    def run(self, *args: str) -> str:
        """Run kubectl with args and return its stdout."""
        cmd = [self.binary]
        if self.context:
            cmd += ["--context", self.context]
        cmd += list(args)
        logger.debug("Running %s", " ".join(cmd))
        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=settings.kubectl_timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise KubectlError(f"{self.binary} not found") from e
        except subprocess.TimeoutExpired as e:
            raise KubectlError(f"{' '.join(cmd)} timed out after {settings.kubectl_timeout}s") from e

        if proc.returncode != 0:
            stderr = (proc.stderr or "").strip()
            raise KubectlError(
                f"{' '.join(cmd)} exited with status {proc.returncode}: {stderr}",
                stderr=stderr,
            )
        return proc.stdout

    def client_version(self) -> str:
        """Return the client gitVersion, e.g. ``v1.29.2``."""
        out = self.run("version", "--client", "-o", "json")
        try:
            return json.loads(out)["clientVersion"]["gitVersion"]
        except (ValueError, KeyError, TypeError) as e:
            raise KubectlError(f"unexpected kubectl version output: {out[:200]!r}") from e
