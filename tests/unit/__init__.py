"""
Unit tests for cex-api-kit.
"""
