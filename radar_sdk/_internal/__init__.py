"""Internal modules for Radar SDK.

WARNING: This package contains system-level modules used by RadarClient.
These are not intended for direct use in application code.

Modules:
    dispatch - Request dispatcher (one request, one classified outcome)
    http - Shared HTTP client configuration
"""
