"""
Core utilities shared across the Marquee package.

This package hosts configuration helpers (env vars, storage paths) and the
logging setup. Repositories, services and routers depend on these primitives
instead of reading the environment themselves.
"""
