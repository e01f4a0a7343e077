"""ViewModel package for report state and formatting.

Call context:
    ``structural/app/main.py`` imports concrete viewmodels from this package to
    turn use-case results into console output.

Dependencies:
    Modules in this package depend on domain types and use-case result DTOs
    only. File I/O and printing remain outside.
"""
