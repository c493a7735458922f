"""
Utility modules organized by domain.

Submodules:
- logging: Logging configuration
- ui: Buffers, header-line overlay, host display and theme
"""
