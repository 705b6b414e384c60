"""Domain layer for Taskboard.

Pure code only: no I/O, no logging, no global state.

Subpackages:
    shared - Result type used for explicit error handling
    board  - stage catalog, board models, factory, transitions and validation
"""
