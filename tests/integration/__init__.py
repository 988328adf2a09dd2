"""
Integration tests for cex-api-kit.
"""
