"""
Test suite for unistore.

Focus areas:
- Immutable state values and reducer composition
- Store dispatch cycle (re-entrancy, snapshot notification, queued dispatch)
- Middleware chain and deferred effects
- Content validation and variant resolution
"""
