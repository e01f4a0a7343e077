"""Application composition layer for the command line.

``main`` wires adapters, use cases, and view models into runnable checker
workflows without placing rule logic in the CLI.
"""
