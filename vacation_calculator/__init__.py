"""
Vacation calculator: German public holidays, working days and vacation balances.
"""

__version__ = "0.1.0"
