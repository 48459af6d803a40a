"""
Shared helpers: parsing, formatting, charts.
"""
