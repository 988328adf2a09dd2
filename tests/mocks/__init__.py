"""
Mock utilities package for cex-api-kit tests.
"""

from .api_mocks import ScriptedTransactionSource, SimulatedHistorySource

__all__ = ["ScriptedTransactionSource", "SimulatedHistorySource"]
