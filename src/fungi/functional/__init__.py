"""Functional primitives for fungi.

This package provides the sequence combinators that make up fungi. They are
stateless and side-effect-free apart from whatever the caller's callbacks do,
so they can be composed freely into larger processing code.
"""
