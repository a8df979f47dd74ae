"""
Prefix command parsing.

Decides whether a message is a command and splits it into a command name and
positional arguments. No Discord types are involved here, so the rules can be
exercised without a gateway connection:

- a command is any message longer than one character that starts with the
  prefix (plain string prefix, no word boundary required)
- tokens are separated by single spaces; runs of spaces yield empty arguments
- the command name is the first token with the prefix removed, lowercased
- arguments are passed through untouched
"""

from pydantic import BaseModel, ConfigDict, Field


class CommandInvocation(BaseModel):
    """A parsed command: lowercased name plus raw positional arguments."""

    name: str = Field(description="Command name, prefix stripped and lowercased")
    args: list[str] = Field(default_factory=list, description="Positional arguments, unmodified")

    model_config = ConfigDict(frozen=True)


def is_command(content: str, prefix: str) -> bool:
    """Return True if the message text should be treated as a command."""
    return len(content) > 1 and content.startswith(prefix)


def parse_command(content: str, prefix: str) -> CommandInvocation | None:
    """
    Split a message into a CommandInvocation.

    Returns None when the content is not a command.

    Examples:
        "!IAM server john smith" -> name="iam", args=["server", "john", "smith"]
        "!iam  a b"              -> name="iam", args=["", "a", "b"]
    """
    if not is_command(content, prefix):
        return None

    head, *args = content.split(" ")
    return CommandInvocation(name=head.removeprefix(prefix).lower(), args=args)


def should_dispatch(author_id: int, self_id: int, content: str, prefix: str) -> bool:
    """Return True if a message from author_id should reach a command handler."""
    if author_id == self_id:
        return False
    return is_command(content, prefix)
