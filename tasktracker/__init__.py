"""
In-memory task tracking HTTP service.
"""
