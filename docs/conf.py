import os
import sys
sys.path.insert(0, os.path.abspath('..'))
# Sphinx configuration, see
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import pdfchecker

project = 'pdfchecker'
author = 'pdfchecker contributors'
release = pdfchecker.__version__

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.viewcode',
]

autodoc_member_order = 'bysource'

templates_path = ['_templates']
exclude_patterns = [
    '_build',
    'Thumbs.db',
    '.DS_Store',
    'examples',
    'tests',
]

html_theme = 'sphinx_rtd_theme'
