"""Yet Another Web Scraping Tool.

An interactive wizard that fetches a web page, extracts data with CSS
selector queries and writes it to a file as plain text or a delimited table.
"""

__version__ = "1.0.0"
__author__ = "Adrian Rosicki"

__all__ = ["__author__", "__version__"]
