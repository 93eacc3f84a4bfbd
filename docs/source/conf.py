#!/usr/bin/env python3

# Copyright (C) 2022 The ecarith developers
#
# This file is part of ecarith. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecarith including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Configuration file for the Sphinx documentation builder.

For the full list of built-in configuration values, see the
documentation: https://www.sphinx-
doc.org/en/master/usage/configuration.html
"""

# -- Project information -----------------------------------------------------

project = "ecarith"
project_copyright = "2022 The ecarith developers"
author = "The ecarith developers"
release = "2022.6.1"

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.doctest",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
]

templates_path = ["_templates"]

exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

# -- Options for HTML output -------------------------------------------------

html_theme = "sphinx_rtd_theme"
