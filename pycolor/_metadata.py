__version__ = '1.0.0'
__author__ = 'Antonio Strippoli'

version = __version__
