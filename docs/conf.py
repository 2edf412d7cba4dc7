# -*- coding: utf-8 -*-
#
# smtpfeed documentation build configuration file
#
# This file is execfile()d with the current directory set to its containing dir.

import os
import sys


def get_release_info():
    release_info = {}
    with open(os.path.join('..', 'smtpfeed', 'release.py'), 'r') as release_fp:
        exec(release_fp.read(), release_info)
    return release_info
release_info = get_release_info()

# Make the smtpfeed package available for autodoc
source_dir = os.path.abspath('..')
sys.path.insert(0, source_dir)

# -- General configuration -----------------------------------------------------

extensions = ['sphinx.ext.autodoc', 'sphinx.ext.todo']
templates_path = ['templates']
source_suffix = '.txt'
master_doc = 'index'

project = release_info['name']
copyright = release_info['copyright']
version = release_info['version']
release = version + ''

exclude_trees = []
add_function_parentheses = True
pygments_style = 'sphinx'

# -- Options for HTML output ---------------------------------------------------

html_theme = 'default'
html_static_path = []
htmlhelp_basename = 'smtpfeeddoc'

# -- Options for LaTeX output --------------------------------------------------

latex_documents = [
  ('index', 'smtpfeed.tex', 'smtpfeed Documentation',
   release_info['author'], 'manual'),
]
