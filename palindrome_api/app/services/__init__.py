"""
Service layer abstraction.

Services encapsulate business logic and depend on a storage backend
injected at construction time, so the in‑memory store and the MongoDB
store can be swapped without changing API handlers.
"""
