"""
Service layer abstraction.

Each service encapsulates business logic for a domain and keeps its
records in plain in‑memory lists.  ``DatingService`` composes the
per‑domain services into the single façade used by the demo.
"""
