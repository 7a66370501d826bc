"""
Unistore CLI

Commands:
- unistore resolve PATH - Validate and resolve content payloads from a JSON file
- unistore tabs - Fetch the tab mapping into a store and render the active tab
- unistore text - Fetch the text document into a store
- unistore version - Show version information
"""

__version__ = "0.1.0"
