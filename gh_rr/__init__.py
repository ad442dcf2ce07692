"""gh-rr: request pull request reviews from configured reviewer groups."""

__version__ = "0.1.0"
