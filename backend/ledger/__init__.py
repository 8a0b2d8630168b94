"""Personal finance ledger: transactions, monthly budgets and statistics."""

__version__ = "0.1.0"
