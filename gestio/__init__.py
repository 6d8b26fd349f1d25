"""
Gestio - Business Management Dashboard Core

Repositories and aggregation for budgets, transactions and logistics
processes backed by a hosted record store.
"""

__version__ = "0.1.0"
