"""Command-line entry points for template_tooling."""
