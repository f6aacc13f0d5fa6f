"""Constants used throughout the application."""

# Name shown for the synthetic root of every module tree
ROOT_NODE_NAME = "*"

# Suffix of the temporary plan file written by `terraform plan -out`
PLAN_FILE_SUFFIX = ".plan"

# Glyph sets for drawing the tree: (branch, last branch, pipe, blank)
TREE_GLYPHS = {
    "unicode": ("├── ", "└── ", "│   ", "    "),
    "ascii": ("|-- ", "`-- ", "|   ", "    "),
}
