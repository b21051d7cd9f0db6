"""Tooling for the vite-react-ts template (bootstrap a new project from the template)."""

__version__ = "0.1.0"
