"""
Core infrastructure shared by every request: settings, logging,
the error hierarchy, the admin gate and the document store adapter.
"""
