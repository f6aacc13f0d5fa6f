"""Build hierarchical module tree from Terraform plan configuration.

This module builds a tree showing every module call of a project, nested
under the module that calls it, with count/for_each instances and the
resolved source directory of each call.
"""

from pathlib import Path

from tfmodtree.types import Tree
from tfmodtree.utils.logging import get_logger

from .models import Module, ModuleDocument, TreeNode
from .path_resolver import ModulePathResolver

logger = get_logger(__name__)


class ModuleTreeBuilder:
    """Builds a module tree from a parsed module document."""

    def __init__(
        self,
        project_dir: Path,
        path_resolver: ModulePathResolver | None = None,
    ):
        self.project_dir = Path(project_dir)
        self.path_resolver = path_resolver or ModulePathResolver()

    def build_tree(self, document: ModuleDocument) -> Tree[TreeNode]:
        """Build the full tree, rooted at a synthetic node for the project."""
        logger.info(f"Building module tree for {self.project_dir}")

        tree = Tree(TreeNode.root(self.project_dir)).with_leaves(
            self.build_children(document.root_module, self.project_dir)
        )

        logger.info(f"Module tree has {len(tree) - 1} module calls")
        return tree

    def build_children(self, module: Module, caller_dir: Path) -> list[Tree[TreeNode]]:
        """Recursively build one subtree per module call of `module`.

        Each call's source is resolved against `caller_dir`, and the resolved
        directory becomes the caller directory of the nested calls.
        """
        children = []

        for name, call in module.calls():
            source = self.path_resolver.resolve(caller_dir, call.source)
            logger.debug(
                f"Module call '{name}' resolved to {source} "
                f"(project-relative: "
                f"{self.path_resolver.relative_to_project(source, self.project_dir)})"
            )

            children.append(
                Tree(TreeNode.from_call(name, call, source)).with_leaves(
                    self.build_children(call.module, source)
                )
            )

        return children
