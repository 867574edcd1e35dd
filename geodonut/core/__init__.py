"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants (earth radius, empty path marker, defaults)
- exceptions: Custom exception hierarchy
"""
