"""Pytest configuration and shared fixtures."""

import json

import pytest

from tfmodtree.config import reset_settings
from tfmodtree.utils.logging import setup_logging


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """Route structlog through stdlib logging so nothing is printed to stdout."""
    setup_logging()
    reset_settings()


@pytest.fixture(autouse=True)
def reset_config_settings():
    """Reset the settings singleton before and after each test.

    This ensures that environment variable changes made by monkeypatch
    are properly reflected in the settings, since pydantic-settings
    reads env vars at instantiation time.
    """
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def project_dir(tmp_path):
    """Canonical Terraform project directory with a few module directories."""
    root = (tmp_path / "proj").resolve()
    for module in ("modules/vpc", "modules/net", "modules/net/subnet"):
        (root / module).mkdir(parents=True)
    return root


def make_call(source, module_calls=None, **extra):
    """Build a module call payload as found in `terraform show -json`."""
    call = {"source": source, "module": {}}
    if module_calls is not None:
        call["module"]["module_calls"] = module_calls
    call.update(extra)
    return call


def make_document(module_calls, wrap_in_plan=False):
    """Serialize module calls as configuration (or full plan) JSON."""
    configuration = {"root_module": {"module_calls": module_calls}}
    if wrap_in_plan:
        return json.dumps(
            {
                "format_version": "1.2",
                "terraform_version": "1.9.5",
                "planned_values": {"root_module": {}},
                "configuration": configuration,
            }
        )
    return json.dumps(configuration)
