"""Generate a Markdown guide from a tree of annotated source files."""
