"""Kernel – shared primitives with no logging dependencies."""
