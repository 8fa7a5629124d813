"""
Test Suite for the YNAB Labeler

Test Structure:
- fixtures/: Shared test data, the fake YNAB client and utilities
- unit/: Unit tests mirroring src/labeler package structure
- integration/: CLI workflow tests (fetch, match, sync, undo)

Test Data:
All test data uses synthetic financial information to protect privacy.
Real financial data is never included in tests.
"""
