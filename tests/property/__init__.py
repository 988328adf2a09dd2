"""
Property tests for cex-api-kit.
"""
