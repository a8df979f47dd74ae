"""
Rollcall CLI entry point.

Provides command-line interface for running the bot and inspecting its configuration.
"""

import argparse
import sys
from pathlib import Path

import discord

from rollcall import __version__
from rollcall.config.logging import get_logger, setup_logging
from rollcall.config.settings import Settings, load_settings


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="rollcall",
        description="Discord bot that links members to their in-game characters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Rollcall {__version__}",
    )

    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to .env file (default: .env in current directory)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override logging level from config",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Run command
    run_parser = subparsers.add_parser(
        "run",
        help="Connect to Discord and handle commands until interrupted",
    )
    run_parser.add_argument(
        "-t",
        "--token",
        default=None,
        help="Discord bot token (overrides BOT__TOKEN from the environment)",
    )

    # Config command
    subparsers.add_parser(
        "config",
        help="Show current configuration",
    )

    return parser


def cmd_config(settings: Settings) -> int:
    """Show current configuration."""
    logger = get_logger(__name__)

    logger.info("\n=== Rollcall Configuration ===\n")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Log Level: {settings.log_level}")
    logger.info(f"Log File: {settings.log_file or 'None (console only)'}")
    logger.info(f"\nBot Name: {settings.bot.name}")
    logger.info(f"Command Prefix: {settings.bot.command_prefix}")
    logger.info(f"Default Role: {settings.bot.default_role}")
    logger.info(f"Bot Token: {'Set' if settings.bot.token else 'Not set'}")

    return 0


def cmd_run(settings: Settings) -> int:
    """
    Start the Discord bot and block until it is shut down.

    discord.py installs the SIGINT/SIGTERM handling; an interrupt closes the
    connection and returns normally.

    Returns:
        Exit code (0 after a normal shutdown, 1 if the session could not be established)
    """
    logger = get_logger(__name__)

    if not settings.bot.token:
        logger.error(
            "Discord bot token not set. Pass -t <token> or add BOT__TOKEN=<your-token> to your .env file."
        )
        return 1

    from rollcall.bot import RollcallBot

    bot = RollcallBot(settings)
    logger.info(f"Starting {settings.bot.name}...")
    try:
        # log_handler=None: disable discord.py's default logging setup and use ours
        bot.run(settings.bot.token, log_handler=None)
    except discord.LoginFailure as e:
        logger.error(f"Error creating Discord session (bad token?): {e}")
        return 1
    except discord.PrivilegedIntentsRequired as e:
        logger.error(
            f"Error connecting to Discord: {e}. Enable the Message Content "
            "intent for this bot in the Developer Portal."
        )
        return 1
    except (discord.GatewayNotFound, discord.ConnectionClosed, discord.HTTPException) as e:
        logger.error(f"Error connecting to Discord websocket: {e}")
        return 1

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Load settings
    try:
        settings = load_settings(env_file=args.env_file)
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    # Override log level if specified
    if args.log_level:
        settings.log_level = args.log_level

    # Setup logging
    setup_logging(settings)

    # Execute command
    if args.command == "config":
        return cmd_config(settings)
    elif args.command == "run":
        if args.token:
            settings = settings.with_token(args.token)
        return cmd_run(settings)
    else:
        # Default: show help
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
