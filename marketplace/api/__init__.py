"""
HTTP surface: shared dependencies, exception handlers, middleware and the v1 router.
"""
