"""Base layer: errors, logging, timeouts, cancellation and HTTP plumbing.

Nothing in this package knows about configuration or catalogs; higher layers
(``catalog``, ``config``, ``streaming``) depend on it, never the reverse.
"""
