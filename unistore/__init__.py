"""
Unistore

Unidirectional state container with deferred (asynchronous) dispatch and a
shape-based content dispatcher for polymorphic view payloads.
"""

__version__ = "0.1.0"
