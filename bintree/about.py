__title__ = "bintree"
__version__ = "0.1.0"
__summary__ = "Bintree - a traversal-oriented binary tree foundation"
__uri__ = "https://github.com/bintree/bintree"
__author__ = "Bintree Contributors"
__email__ = "bintree@users.noreply.github.com"
__license__ = "MIT"
