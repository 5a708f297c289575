# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os
import sys

sys.path.insert(0, os.path.abspath(".."))


# -- Project information -----------------------------------------------------

project = "taxonstats"
copyright = "2026, Ben Armstrong"
author = "Ben Armstrong"
programming_language = "py"


# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.intersphinx",
    "sphinx.ext.viewcode",
    "sphinxcontrib_trio",
]

intersphinx_mapping = {"redbot": ("https://docs.discord.red/en/stable", None)}

exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]


# -- Options for HTML output -------------------------------------------------

html_theme = "sphinx_material"
html_theme_options = {
    "repo_url": "https://github.com/dronefly-garden/taxonstats/",
    "repo_name": "taxonstats",
    "nav_title": "taxonstats",
    "localtoc_label_text": "Contents",
    "globaltoc_depth": 2,
}
html_sidebars = {
    "**": ["logo-text.html", "globaltoc.html", "localtoc.html", "searchbox.html"]
}

master_doc = "index"
