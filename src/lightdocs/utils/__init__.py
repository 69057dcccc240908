"""Utility functions for lightdocs."""

from lightdocs.utils.frontmatter import FrontmatterError, parse_frontmatter

__all__ = ["FrontmatterError", "parse_frontmatter"]
