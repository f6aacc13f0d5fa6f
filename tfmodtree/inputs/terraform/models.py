"""Terraform module-call domain models.

This module defines Pydantic models for the module-call topology found in the
`configuration` section of `terraform show -json` output, plus the node type
used when that topology is displayed as a tree. Everything else in the plan
(resources, providers, variables) is ignored.
"""

import json
import sys
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from tfmodtree.const import ROOT_NODE_NAME


class SchemaError(Exception):
    """Plan JSON is malformed or misses required module-call fields."""


class RenderError(Exception):
    """A tree node cannot be turned into displayable text."""


# ============================================================================
# Module Call Schema
# ============================================================================


class CountExpression(BaseModel):
    """`count` argument of a module call.

    `constant_value` is only present when Terraform resolved the expression
    at plan time.
    """

    model_config = ConfigDict(extra="ignore")

    constant_value: StrictInt | None = Field(default=None, ge=0)


class ForEachExpression(BaseModel):
    """`for_each` argument of a module call.

    A map constant arrives as a JSON object, a `toset()` constant as a JSON
    array of strings. Only the keys matter here.
    """

    model_config = ConfigDict(extra="ignore")

    constant_value: dict[str, Any] | list[str] | None = None

    def keys(self) -> tuple[str, ...] | None:
        """Instance keys in document order, or None when not statically known."""
        if self.constant_value is None:
            return None
        return tuple(dict.fromkeys(self.constant_value))


class Module(BaseModel):
    """A module body; only its nested module calls are modelled."""

    model_config = ConfigDict(extra="ignore")

    module_calls: dict[str, "ModuleCall"] | None = None

    def calls(self) -> list[tuple[str, "ModuleCall"]]:
        """Module calls in document order (empty for a leaf module)."""
        if not self.module_calls:
            return []
        return list(self.module_calls.items())


class ModuleCall(BaseModel):
    """One named `module "..." {}` block."""

    model_config = ConfigDict(extra="ignore")

    source: str
    module: Module = Field(default_factory=Module)
    count_expression: CountExpression | None = None
    for_each_expression: ForEachExpression | None = None

    @property
    def count(self) -> int | None:
        if self.count_expression is None:
            return None
        return self.count_expression.constant_value

    @property
    def for_each(self) -> tuple[str, ...] | None:
        if self.for_each_expression is None:
            return None
        return self.for_each_expression.keys()


Module.model_rebuild()


class ModuleDocument(BaseModel):
    """The `configuration` object: exactly one root module."""

    model_config = ConfigDict(extra="ignore")

    root_module: Module


class PlanDocument(BaseModel):
    """Full `terraform show -json` payload; only `configuration` is read."""

    model_config = ConfigDict(extra="ignore")

    configuration: ModuleDocument


def _describe_validation_error(error: ValidationError) -> str:
    problems = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        problems.append(f"{location}: {detail['msg']}")
    return "; ".join(problems)


def parse_module_document(text: str | bytes) -> ModuleDocument:
    """Parse plan JSON into a ModuleDocument.

    Accepts either the full `terraform show -json` payload or its bare
    `configuration` object.

    Raises:
        SchemaError: If the text is not JSON or does not match the schema.
    """
    try:
        payload = json.loads(text)
    except ValueError as e:
        raise SchemaError(f"Plan output is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise SchemaError(
            f"Plan output must be a JSON object, got {type(payload).__name__}"
        )

    try:
        if "configuration" in payload:
            return PlanDocument.model_validate(payload).configuration
        return ModuleDocument.model_validate(payload)
    except ValidationError as e:
        raise SchemaError(
            f"Plan output does not match the module schema: "
            f"{_describe_validation_error(e)}"
        ) from e


def load_module_document(path: str | Path) -> ModuleDocument:
    """Read and parse a `terraform show -json` file; "-" reads stdin."""
    if str(path) == "-":
        return parse_module_document(sys.stdin.buffer.read())
    return parse_module_document(Path(path).read_bytes())


# ============================================================================
# Tree Node (for visual tree display)
# ============================================================================


class TreeNode(BaseModel):
    """A module call as shown in the rendered tree.

    Attributes:
        name: Module call name, or "*" for the synthetic project root
        count: Resolved `count` value, if any
        for_each: Resolved `for_each` keys, if any (values are dropped)
        source: Canonical module directory, or the joined path when it
            could not be canonicalized
    """

    model_config = ConfigDict(frozen=True)

    name: str
    count: int | None = None
    for_each: tuple[str, ...] | None = None
    source: Path

    @classmethod
    def root(cls, project_dir: Path) -> "TreeNode":
        """Synthetic root node for a project directory."""
        return cls(name=ROOT_NODE_NAME, source=project_dir)

    @classmethod
    def from_call(cls, name: str, call: ModuleCall, source: Path) -> "TreeNode":
        return cls(name=name, count=call.count, for_each=call.for_each, source=source)

    def instance_suffix(self) -> str:
        """`[count]`, `{key ...}` or nothing; count takes precedence."""
        if self.count is not None:
            return f"[{self.count}]"
        if self.for_each is not None:
            return "{" + " ".join(self.for_each) + "}"
        return ""

    def display_path(self) -> str:
        """Source path as text.

        Raises:
            RenderError: If the path holds bytes that are not valid UTF-8.
        """
        text = str(self.source)
        try:
            text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise RenderError(
                f"Module path for '{self.name}' is not valid UTF-8: {text!r}"
            ) from e
        return text

    def format_label(self) -> str:
        """Format this node as a single tree line label."""
        return f"{self.name}{self.instance_suffix()} ({self.display_path()})"

    def __str__(self) -> str:
        return self.format_label()
