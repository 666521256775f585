"""Household budget dashboard: monthly ledgers, carry-over and balances."""
