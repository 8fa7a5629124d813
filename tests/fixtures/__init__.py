"""
Test Fixtures and Utilities

This module provides:
- Synthetic labels and YNAB transactions for safe testing
- An in-memory YNAB client that records memo updates

All test data is synthetic and does not contain real financial information.
"""
