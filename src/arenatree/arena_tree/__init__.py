"""Arena tree representation with chainable construction and branch matching.

This module provides classes for building arena-backed trees, in which every node
is stored in one list and refers to its parent and children by index.
"""
