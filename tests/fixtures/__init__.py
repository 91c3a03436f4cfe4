"""
Test Fixtures and Utilities

Builders for synthetic Gmail API messages. All senders, subjects and amounts
are made up.
"""
