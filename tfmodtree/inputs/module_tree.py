from pathlib import Path
from typing import TextIO

from tfmodtree.config import get_settings
from tfmodtree.inputs.terraform import (
    ModuleDocument,
    ModuleTreeBuilder,
    TerraformPlanner,
    TreeNode,
    load_module_document,
    parse_module_document,
)
from tfmodtree.report.tree_printer import GlyphStyle, print_tree
from tfmodtree.types import Tree
from tfmodtree.utils.logging import get_logger

logger = get_logger(__name__)


def build_module_tree(
    document: ModuleDocument | str | bytes, project_dir: Path
) -> Tree[TreeNode]:
    """Build the module tree of a project from its plan JSON or parsed document."""
    if not isinstance(document, ModuleDocument):
        document = parse_module_document(document)
    return ModuleTreeBuilder(project_dir).build_tree(document)


def print_module_tree(
    tree: Tree[TreeNode],
    stream: TextIO | None = None,
    glyphs: GlyphStyle | None = None,
) -> None:
    """Print a module tree, one `TreeNode.format_label()` line per node."""
    print_tree(
        tree,
        render=TreeNode.format_label,
        stream=stream,
        glyphs=glyphs or get_settings().render.glyphs,
    )


def show_project_tree(
    project_dir: Path,
    var_files: list[str] | None = None,
    variables: list[str] | None = None,
    parallelism: int | None = None,
    stream: TextIO | None = None,
    glyphs: GlyphStyle | None = None,
) -> None:
    """Plan a Terraform project and print its module tree."""
    with TerraformPlanner(
        project_dir,
        var_files=var_files,
        variables=variables,
        parallelism=parallelism,
    ) as planner:
        plan_json = planner.plan_json()

    tree = build_module_tree(plan_json, planner.project_dir)
    print_module_tree(tree, stream=stream, glyphs=glyphs)


def show_plan_file_tree(
    plan_file: str | Path,
    project_dir: Path,
    stream: TextIO | None = None,
    glyphs: GlyphStyle | None = None,
) -> None:
    """Print the module tree from saved `terraform show -json` output."""
    logger.info(f"Reading plan JSON from {plan_file}")
    document = load_module_document(plan_file)

    tree = build_module_tree(document, project_dir)
    print_module_tree(tree, stream=stream, glyphs=glyphs)
