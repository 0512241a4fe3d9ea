"""
Core domain models, money primitives, and contracts.

This module contains the foundational building blocks that are independent
of the command line and file I/O.
"""
