"""repofetch — GitHub repository stats beside ASCII art.

Fetches stars, forks, issues, pull requests and labeled-issue counts for
a GitHub repository concurrently and prints them as a neofetch-style panel.
"""

__version__ = "0.1.0"
