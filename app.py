#!/usr/bin/env python3

from pathlib import Path

import click
from dotenv import load_dotenv

from tfmodtree.error_details import get_error_human_message
from tfmodtree.inputs.module_tree import show_plan_file_tree, show_project_tree
from tfmodtree.inputs.terraform import PlanError, RenderError, SchemaError
from tfmodtree.utils.logging import setup_logging

FATAL_ERRORS = (SchemaError, RenderError, PlanError, OSError)


def glyphs_for(ascii_only: bool) -> str | None:
    """Explicit --ascii wins, otherwise fall back to TREE_GLYPHS."""
    return "ascii" if ascii_only else None


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx) -> None:
    """tfmodtree - Print the module structure of a Terraform project"""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.option(
    "--path",
    "project_dir",
    type=click.Path(
        exists=True, file_okay=False, dir_okay=True, resolve_path=True, path_type=Path
    ),
    default=".",
    help="The path to the Terraform project",
)
@click.option(
    "--var-file",
    "var_files",
    multiple=True,
    help=(
        "Load variable values from the given file, in addition to the default "
        "files terraform.tfvars and *.auto.tfvars. Repeat to include more files."
    ),
)
@click.option(
    "--var",
    "variables",
    multiple=True,
    help=(
        "'foo=bar'. Set a value for one of the input variables in the root "
        "module of the configuration. Repeat to set more variables."
    ),
)
@click.option(
    "--parallelism",
    type=click.IntRange(min=1),
    default=None,
    help="Limit the number of concurrent operations (default: TERRAFORM_PARALLELISM or 10)",
)
@click.option(
    "--ascii",
    "ascii_only",
    is_flag=True,
    default=False,
    help="Draw the tree with ASCII characters only",
)
def tree(project_dir, var_files, variables, parallelism, ascii_only) -> None:
    """Run terraform plan and print the module tree of the project"""
    try:
        show_project_tree(
            project_dir,
            var_files=list(var_files),
            variables=list(variables),
            parallelism=parallelism,
            glyphs=glyphs_for(ascii_only),
        )
    except FATAL_ERRORS as e:
        raise click.ClickException(get_error_human_message(e)) from e


@cli.command()
@click.argument(
    "plan_json",
    type=click.Path(exists=True, dir_okay=False, allow_dash=True),
)
@click.option(
    "--path",
    "project_dir",
    type=click.Path(
        exists=True, file_okay=False, dir_okay=True, resolve_path=True, path_type=Path
    ),
    default=".",
    help="The path to the Terraform project the plan was made for",
)
@click.option(
    "--ascii",
    "ascii_only",
    is_flag=True,
    default=False,
    help="Draw the tree with ASCII characters only",
)
def render(plan_json, project_dir, ascii_only) -> None:
    """Print the module tree from saved `terraform show -json` output.

    PLAN_JSON is a file path, or - to read from standard input.
    """
    try:
        show_plan_file_tree(plan_json, project_dir, glyphs=glyphs_for(ascii_only))
    except FATAL_ERRORS as e:
        raise click.ClickException(get_error_human_message(e)) from e


def main() -> None:
    load_dotenv()
    setup_logging()
    cli()


if __name__ == "__main__":
    main()
