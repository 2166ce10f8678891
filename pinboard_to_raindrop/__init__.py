"""
Pinboard to Raindrop.io converter.

Fetches every bookmark from the Pinboard API and writes a CSV file that
Raindrop.io can import.
"""

__version__ = "1.0.0"
