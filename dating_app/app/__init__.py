"""
Application package initializer.

The project is organised into small pieces instead of a single module.
Records live in ``schemas``, business logic in ``services`` (one
service per domain, composed by ``DatingService``) and ambient setup
such as settings and logging in ``core``.  ``main`` wires everything
together for the command‑line demo.
"""

from .services.dating_service import DatingService  # noqa: F401
