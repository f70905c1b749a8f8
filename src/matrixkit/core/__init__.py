"""
Core domain models, numerical primitives, and contracts.

This module contains the matrix value object and everything it needs,
independent of any application that consumes it.
"""
