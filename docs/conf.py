# SPDX-FileCopyrightText: 2025 rationals contributors
# SPDX-License-Identifier: Apache-2.0

# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Project information -----------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#project-information

from rationals.version import version as release

project = 'rationals'
copyright = '2025, rationals contributors'
author = 'rationals contributors'

# -- General configuration ---------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#general-configuration

extensions = [
    'sphinx_rtd_theme',
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.inheritance_diagram',
]

templates_path = ['_templates']
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store', 'conf.py']

autodoc_default_options = {
    'member-order': 'bysource',
    'special-members': '__iadd__, __isub__, __imul__, __itruediv__',
}

napoleon_use_ivar = False
autodoc_inherit_docstrings = False

# Make inheritance graphs go from top to bottom instead of left to right:
inheritance_graph_attrs = dict(rankdir="TB", size='""')

# -- Options for HTML output -------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#options-for-html-output

html_theme = 'sphinx_rtd_theme'
html_static_path = []
