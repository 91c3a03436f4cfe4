"""
Test Suite for Subscription Tracker

Test Structure:
- fixtures/: Synthetic Gmail API message builders
- unit/: Unit tests mirroring src/ package structure
- integration/: End-to-end command line workflows

Test Categories:
- Core utilities (currency, money, dates, config)
- Mail decoding, provider detection and parsing
- Subscription records and statistics

Test Data:
All mail bodies and subscriptions are synthetic; no real mailbox data is
included in tests.
"""
