# meta data, align with setup.py

from .version import __version__

__author__ = "Liming Xie"
__author_email__ = "liming.xie@gmail.com"

__description__ = "A CLI tool to scrape course assignment pages and their images into Markdown"
__url__ = "https://github.com/floatinghotpot/susy2md"
__license__ = "MIT"
