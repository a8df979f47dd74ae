"""
Discord Bot Layer.

Handles Discord message events, prefix command dispatch, and the member
updates behind account linking for the Rollcall bot.
"""

from rollcall.bot.client import RollcallBot

__all__ = ["RollcallBot"]
