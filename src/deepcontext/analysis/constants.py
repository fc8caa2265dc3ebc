"""Constants shared across the analysis components."""

# Probe order: typed sources win over their untyped counterparts.
SOURCE_EXTENSIONS = (".tsx", ".ts", ".jsx", ".js")

# Directory names never descended into during discovery.
EXCLUDED_DIRECTORIES = frozenset({"node_modules", ".git", "dist"})
