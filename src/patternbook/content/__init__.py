"""Bundled blog posts (Markdown with YAML front matter)."""
