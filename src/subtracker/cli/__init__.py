"""
Command Line Interface Package

Command-line access to extraction and statistics for local JSON files.

Command Structure:
- subtracker: Main entry point with utility commands (version, config)
- subtracker extract: Extract subscriptions from a Gmail API message dump
- subtracker stats: Show spend statistics for a subscription list
- subtracker samples: Write the sample subscription list
"""
