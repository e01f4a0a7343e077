"""Sample application with a Repository <-> UseCase/ViewModel reference cycle.

``data`` imports ``domain`` and ``ui`` while both import ``data`` back; the
bundled ``structural.yml`` flags the data-layer imports as violations.
"""
