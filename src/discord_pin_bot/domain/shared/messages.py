"""Centralized message constants for error messages, log templates, and user feedback."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Voting Validation Errors
    INVALID_THRESHOLD = "Threshold must be at least 1"
    INVALID_MAX_AGE = "max_age must be non-negative"

    # Time/Date Validation Errors
    TIMEZONE_REQUIRED_NOW = "now must be timezone-aware"
    TIMEZONE_REQUIRED_PINNED_AT = "pinned_at must be timezone-aware"
    INVALID_COOLDOWN_SECONDS = "cooldown_seconds must be non-negative"

    # Settings Validation Errors
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"

    # Startup Errors
    DISCORD_TOKEN_REQUIRED = "TOKEN environment variable is required"
    INVALID_SETTINGS = "Invalid configuration: %s"
    BOT_NOT_INITIALIZED = "Bot not initialized. Call set_bot() first."
    CONTAINER_NOT_FOUND = "Container not found on bot instance"


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    for proper log formatting and structured logging support.
    """

    # Voting Sessions
    SESSION_CREATED = "Opened vote for message %s in channel %s (threshold=%s)"
    SESSION_ALREADY_ACTIVE = "Vote already running for message %s"
    SESSION_REMOVED = "Closed vote for message %s"
    SESSION_NOT_FOUND = "No vote running for message %s"
    VOTE_ADDED = "Vote added by %s for message %s. Count: %s (%s more needed)"
    VOTE_REMOVED = "Vote removed by %s for message %s. Count: %s"
    VOTE_DUPLICATE = "User %s already voted for message %s"
    VOTE_THRESHOLD_REACHED = "Vote threshold reached for message %s (%s/%s)"

    # Sweep Job
    SWEEP_STARTED = "Session sweep job started (interval=%ss, max_age=%ss)"
    SWEEP_STOPPED = "Session sweep job stopped"
    SWEEP_ALREADY_RUNNING = "Session sweep job is already running"
    SWEEP_CYCLE_RUNNING = "Running session sweep cycle"
    SWEEP_COMPLETED = "Cleaned up %d expired voting sessions"
    SWEEP_FAILED = "Session sweep cycle failed"

    # Pinning
    PIN_SUCCEEDED = "Successfully pinned message %s in channel %s"
    PIN_FAILED = "Failed to pin message %s: %s"
    PIN_RATE_LIMITED = "Pin rate limited for channel %s"
    PIN_INSTANT = "Confirm cap is 0, pinning message %s immediately"

    # Ballot Decoration
    REACTION_ADD_FAILED = "Failed to add reaction %s: %s"
    REPLY_FAILED = "Failed to reply to message %s: %s"

    # Application Lifecycle
    BOT_STARTING = "Starting bot with confirm_cap: %s"
    BOT_SETUP = "Setting up bot..."
    BOT_CONTAINER_INITIALIZED = "Container initialized successfully"
    BOT_CONTAINER_INIT_FAILED = "Failed to initialize container: %s"
    BOT_SETUP_COMPLETE = "Bot setup complete"
    BOT_STARTING_RUN = "Starting bot..."
    BOT_STOPPED = "Bot stopped successfully"
    BOT_KEYBOARD_INTERRUPT = "Received keyboard interrupt, shutting down..."
    BOT_FATAL_ERROR = "Fatal error: %s"
    BOT_SHUTTING_DOWN = "Shutting down bot..."
    BOT_SHUTDOWN_TIMEOUT = "Graceful shutdown timed out after %ss"
    BOT_CONTAINER_SHUTDOWN = "Container shutdown complete"
    BOT_CONTAINER_SHUTDOWN_ERROR = "Error during container shutdown: %s"
    BOT_SHUTDOWN_COMPLETE = "Bot shutdown complete"
    BOT_READY = "Bot %s is ready! (%s)"
    BOT_CONNECTED_GUILDS = "Connected to %s guilds"
    BOT_SWEEP_START_FAILED = "Failed to start session sweep job: %s"
    BOT_SWEEP_STOP_ERROR = "Error stopping session sweep job: %s"

    # Gateway and Guild Events
    WS_CONNECTED = "WebSocket connected"
    WS_DISCONNECTED = "WebSocket disconnected"
    WS_RESUMED = "WebSocket session resumed with %s pin votes open"
    GUILD_JOINED = "Joined guild: %s (%s)"
    GUILD_LEFT = "Left guild: %s (%s)"
    GUILD_MISSING_PERMISSIONS = "Missing permissions in guild %s (%s): %s; pin votes will fail"
    COMMAND_ERROR = "Unhandled command error in '%s'"

    # Bot Cog Management
    BOT_COG_LOADED = "Loaded cog: %s"
    BOT_COG_LOAD_FAILED = "Failed to load cog %s: %s"
    BOT_COGS_LOADED_SUMMARY = "Cogs loaded: %s success, %s failed"


class DiscordUIMessages:
    """User-facing Discord messages.

    These strings are shown directly to users in the channel.
    """

    VOTE_ALREADY_RUNNING = "A pin vote is already running for that message."
