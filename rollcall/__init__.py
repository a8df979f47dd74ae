"""
Rollcall - Discord bot that links members to their in-game characters.

Members run "!iam <server> <firstname> <lastname>"; the bot renames them to the
character name and assigns the configured default role.
"""

__version__ = "0.1.0"
