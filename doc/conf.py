# -*- coding: utf-8 -*-
#
# xmlarray documentation build configuration file
#
# This file is execfile()d with the current directory set to its containing dir.

import os
import sys

# make the package importable without installing it
sys.path.insert(0, os.path.abspath(os.path.join('..', 'src')))

import xmlarray

# -- General configuration -----------------------------------------------------

extensions = ['sphinx.ext.autodoc']

exclude_patterns = ['build']

source_suffix = '.rst'

master_doc = 'index'

project = 'xmlarray'
copyright = '2010, Emory University Libraries'

version = '%d.%d' % xmlarray.__version_info__[:2]
release = xmlarray.__version__

modindex_common_prefix = ['xmlarray.']

pygments_style = 'sphinx'

# -- Options for HTML output ---------------------------------------------------

htmlhelp_basename = 'xmlarraydoc'

# -- Options for LaTeX output --------------------------------------------------

latex_documents = [
  ('index', 'xmlarray.tex', 'xmlarray Documentation',
   'Emory University Libraries', 'manual'),
]
