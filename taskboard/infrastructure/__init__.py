"""Infrastructure layer for Taskboard.

I/O implementations of the capabilities the application layer is given.
"""
