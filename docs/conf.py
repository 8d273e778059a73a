"""Sphinx configuration for chars documentation."""

import chars

project = "chars"
copyright = "2026, chars contributors"
author = "chars contributors"
release = chars.__version__
version = ".".join(release.split(".")[:2])

# index.rst documents the public API with autodoc directives and shows
# console examples; nothing else is generated.
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx_copybutton",
]

exclude_patterns = ["_build"]

html_theme = "furo"
html_title = f"chars {release}"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

autodoc_typehints = "description"
copybutton_prompt_text = "$ "
