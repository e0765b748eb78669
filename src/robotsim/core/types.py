"""Core type definitions for robotsim."""

type Copy[T] = T
"""Type alias indicating a value is a copy that won't auto-persist.

When you see `Copy[T]` in a return type, the returned value is a deep copy.
Mutations to this copy do NOT affect simulation state. Robots only change
through World commands.
"""
