"""Terraform module tree package.

This package contains the module-call schema, path resolution, tree
construction and the terraform plan runner.
"""

from .models import (
    ModuleDocument,
    RenderError,
    SchemaError,
    TreeNode,
    load_module_document,
    parse_module_document,
)
from .module_tree_builder import ModuleTreeBuilder
from .path_resolver import ModulePathResolver
from .planner import PlanError, TerraformPlanner

__all__ = [
    "ModuleDocument",
    "ModulePathResolver",
    "ModuleTreeBuilder",
    "PlanError",
    "RenderError",
    "SchemaError",
    "TerraformPlanner",
    "TreeNode",
    "load_module_document",
    "parse_module_document",
]
