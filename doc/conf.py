import sys
import os.path

import divecalc

sys.path.append(os.path.abspath('.'))
sys.path.append(os.path.abspath('doc'))

extensions = [
    'sphinx.ext.autodoc', 'sphinx.ext.autosummary', 'sphinx.ext.doctest',
    'sphinx.ext.viewcode',
]
project = 'divecalc'
source_suffix = '.rst'
master_doc = 'index'

version = release = divecalc.__version__
copyright = 'DiveCalc Team'

epub_basename = 'divecalc - {}'.format(version)
epub_author = 'DiveCalc Team'

html_theme = 'sphinx_rtd_theme'


# vim: sw=4:et:ai
