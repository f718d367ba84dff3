"""
Utility functions for Lambda handler operations.

This package contains reusable service functions for credential loading
and logging setup.
"""

__all__ = ['credentials', 'logging_config']
