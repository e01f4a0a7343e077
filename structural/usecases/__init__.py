"""Use-case layer for orchestrating checker workflows.

Each module coordinates domain functions and ports without performing file
I/O directly, preserving MVVM + Hexagonal boundaries.
"""
