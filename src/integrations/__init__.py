"""
Third-party API integrations used by Lambda handlers.
"""
