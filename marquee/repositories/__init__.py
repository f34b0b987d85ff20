"""
Persistence adapters.

These modules encapsulate how sign state is stored on disk (one JSON document
per concern). Services depend on PlaylistStorage through SharedStorage rather
than touching the files themselves.
"""
