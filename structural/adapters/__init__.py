"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (YAML rules file,
    XML baseline file, and the ``ast``-based source scanner) used by use cases.

Dependencies:
    Individual submodules depend on ``PyYAML``, ``pydantic``, filesystem APIs,
    and domain protocol definitions.

Call context:
    Imported by app composition modules (for runtime wiring) and by tests (for
    file-level behavior verification).
"""
