"""
Terraform plan runner.

Runs `terraform plan` into a temporary plan file and reads it back with
`terraform show -json`, producing the JSON text the module tree is built from.
"""

import hashlib
import os
import shutil
import subprocess
import tempfile
from pathlib import Path

from tfmodtree.config import TerraformSettings, get_settings
from tfmodtree.const import PLAN_FILE_SUFFIX
from tfmodtree.utils.logging import get_logger

logger = get_logger(__name__)


class PlanError(Exception):
    """Terraform could not be run or exited with an error."""


class TerraformPlanner:
    """Produces `terraform show -json` output for a project directory."""

    def __init__(
        self,
        project_dir: Path,
        var_files: list[str] | None = None,
        variables: list[str] | None = None,
        parallelism: int | None = None,
        settings: TerraformSettings | None = None,
    ):
        """
        Initialize planner for a project.

        Args:
            project_dir: Canonical path to the root module directory
            var_files: Extra `-var-file` arguments, in order
            variables: Extra `-var 'name=value'` arguments, in order
            parallelism: Concurrent operations limit, defaults to settings
            settings: Terraform settings, defaults to the global settings
        """
        self._project_dir = Path(project_dir)
        self._settings = settings or get_settings().terraform
        self._var_files = list(var_files or [])
        self._variables = list(variables or [])
        self._parallelism = parallelism or self._settings.parallelism
        self._plan_path = self._temp_plan_path(self._project_dir)

    @property
    def project_dir(self) -> Path:
        return self._project_dir

    @property
    def plan_path(self) -> Path:
        """Temporary plan file, stable per project directory."""
        return self._plan_path

    @staticmethod
    def _temp_plan_path(project_dir: Path) -> Path:
        digest = hashlib.sha256(str(project_dir).encode("utf-8")).hexdigest()[:16]
        return Path(tempfile.gettempdir()) / f"tfmodtree-{digest}{PLAN_FILE_SUFFIX}"

    def _base_command(self) -> list[str]:
        return [self._settings.binary, f"-chdir={self._project_dir}"]

    def plan_command(self) -> list[str]:
        cmd = [
            *self._base_command(),
            "plan",
            "-input=false",
            f"-parallelism={self._parallelism}",
        ]
        for var_file in self._var_files:
            cmd.extend(["-var-file", var_file])
        for var in self._variables:
            cmd.extend(["-var", var])
        cmd.extend(["-out", str(self._plan_path)])
        return cmd

    def show_command(self) -> list[str]:
        return [*self._base_command(), "show", "-json", str(self._plan_path)]

    def run_plan(self) -> None:
        """Write the plan for the project to the temporary plan file."""
        logger.info("Running terraform plan", project_dir=str(self._project_dir))
        self._run(self.plan_command(), "plan")

    def show_json(self) -> str:
        """Return the saved plan rendered as JSON."""
        logger.info("Running terraform show", plan=str(self._plan_path))
        return self._run(self.show_command(), "show")

    def plan_json(self) -> str:
        """Plan the project and return its JSON representation.

        The temporary plan file is always removed afterwards.
        """
        try:
            self.run_plan()
            return self.show_json()
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        """Remove the temporary plan file."""
        if self._plan_path.exists():
            self._plan_path.unlink()
            logger.debug(f"Cleaned up {self._plan_path}")

    def _run(self, cmd: list[str], step: str) -> str:
        binary = self._settings.binary
        if not shutil.which(binary):
            raise PlanError(
                f"{binary} not found in PATH. Install Terraform: "
                "https://developer.hashicorp.com/terraform/install"
            )

        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                timeout=self._settings.timeout_s,
                check=False,
                env={**os.environ, "TF_IN_AUTOMATION": "1"},
            )
        except subprocess.TimeoutExpired as e:
            raise PlanError(
                f"terraform {step} timed out after {self._settings.timeout_s:g} seconds"
            ) from e
        except OSError as e:
            raise PlanError(f"failed to spawn `terraform {step}`: {e}") from e

        stdout = self._decode(result.stdout, step)
        if result.returncode != 0:
            stderr = self._decode(result.stderr, step)
            message = stderr.strip() or stdout.strip()
            logger.error(f"terraform {step} failed", returncode=result.returncode)
            raise PlanError(message or f"terraform {step} exited with {result.returncode}")

        return stdout

    @staticmethod
    def _decode(output: bytes, step: str) -> str:
        try:
            return output.decode("utf-8")
        except UnicodeDecodeError as e:
            raise PlanError(f"terraform {step} output is not UTF-8") from e

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - ensure cleanup."""
        self.cleanup()
