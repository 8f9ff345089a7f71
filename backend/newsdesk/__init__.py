"""
Newsdesk: news item publishing with an admin back office.
"""

__version__ = "0.1.0"
