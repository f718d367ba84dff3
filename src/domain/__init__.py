"""
Domain layer for mail sending.

This layer contains:
- Data models (credential pair, callback options, send result)
- Exception classes (configuration and secret lookup failures)
"""
