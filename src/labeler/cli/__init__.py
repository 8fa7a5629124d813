"""
Command Line Interface Package

Command Structure:
- labeler: Main entry point with utility commands (version, config)
- labeler ynab: Budget/account discovery and transaction cache refresh
- labeler match / sync / undo: The labeling workflow
"""
