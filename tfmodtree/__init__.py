"""Print the module structure of a Terraform project as a tree."""

__version__ = "0.1.0"
