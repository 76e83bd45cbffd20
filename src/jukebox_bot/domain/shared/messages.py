"""Centralized message constants for errors, log lines, and user-facing replies."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    INVALID_COMMAND_PREFIX = "Command prefix cannot contain whitespace"
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"

    NO_URL_IN_INFO_DICT = "No URL found in info dict"
    NO_AUDIO_STREAM = "No audio-only stream found for {url}"
    EMPTY_SEARCH_RESULT = "Search returned no results"

    DISCORD_TOKEN_REQUIRED = "DISCORD__TOKEN environment variable is required"
    BOT_NOT_INITIALIZED = "Bot not initialized. Call set_bot() first."
    CONTAINER_NOT_FOUND = "Container not found on bot instance"


class LogTemplates:
    """``%``-style log templates; pass values as logger arguments."""

    # Process lifecycle
    LOGGING_CONFIG_FALLBACK = "Could not load %s, falling back to basic config"
    BOT_STARTING = "Starting bot (environment=%s)"
    BOT_STOPPED = "Bot stopped"
    BOT_KEYBOARD_INTERRUPT = "Interrupted by user"
    BOT_FATAL_ERROR = "Bot crashed: %s"
    BOT_SETUP = "Running bot setup hook"
    BOT_SETUP_COMPLETE = "Bot setup complete"
    BOT_COG_LOADED = "Loaded cog %s"
    BOT_COG_LOAD_FAILED = "Failed to load cog %s: %s"
    BOT_COGS_LOADED_SUMMARY = "Cogs loaded: %d ok, %d failed"
    BOT_READY = "Logged in as %s (%s)"
    BOT_CONNECTED_GUILDS = "Connected to %d guild(s)"
    BOT_SHUTTING_DOWN = "Shutting down bot"
    BOT_SHUTDOWN_COMPLETE = "Shutdown complete"
    BOT_SHUTDOWN_TIMEOUT = "Graceful shutdown exceeded %.1fs"
    BOT_CONTAINER_SHUTDOWN_ERROR = "Error shutting down container: %r"
    BOT_COMMAND_ERROR = "Command %s failed: %r"
    BOT_ERROR_MESSAGE_SEND_FAILED = "Could not send error message to channel"

    # Gateway events
    GATEWAY_CONNECTED = "WebSocket connected"
    GATEWAY_DISCONNECTED = "WebSocket disconnected"
    GATEWAY_RESUMED = "WebSocket session resumed"
    GUILD_JOINED = "Joined guild: %s (%s)"
    GUILD_LEFT = "Left guild: %s (%s)"

    # Voice
    VOICE_CONNECTED = "Connected to voice channel %s in guild %s"
    VOICE_MOVED = "Moved to voice channel %s in guild %s"
    VOICE_DISCONNECTED = "Disconnected from voice in guild %s"
    VOICE_CONNECTION_TIMEOUT = "Timeout connecting to channel %s"
    VOICE_NO_PERMISSION = "No permission to connect to channel %s"
    VOICE_CLIENT_ERROR = "Client error connecting: %r"
    VOICE_DISCONNECT_FAILED = "Failed to disconnect from voice in guild %s: %r"
    VOICE_STALE_CLIENT = "Found stale voice client in guild %s, reconnecting"

    # Session manager
    SESSION_JOINED = "Guild %s joined voice; session ready"
    SESSION_REJOINED = "Guild %s re-joined voice; previous handle replaced"
    SESSION_LEFT = "Guild %s left voice; %d queued track(s) dropped"
    TRACK_QUEUED = "Queued '%s' in guild %s at position %d"
    TRACK_STARTING = "Starting '%s' in guild %s (%d left in queue)"
    TRACK_FINISHED = "Stream finished in guild %s (error=%r)"
    TRACK_STREAM_FAILED = "Could not open stream for '%s' in guild %s: %r"
    STALE_STREAM_CALLBACK = "Ignoring completion of a replaced stream in guild %s"
    QUEUE_EXHAUSTED = "Queue exhausted in guild %s"
    ANNOUNCE_FAILED = "Could not announce in guild %s: %r"
    SHUTDOWN_DISCONNECT = "Disconnecting %d guild session(s)"

    # Playback
    PLAYBACK_STARTED = "Started stream for '%s' in guild %s"
    PLAYBACK_PAUSED = "Paused playback in guild %s"
    PLAYBACK_RESUMED = "Resumed playback in guild %s"
    PLAYBACK_SKIPPED = "Skipped current track in guild %s"
    PLAYBACK_ERROR = "Playback error in guild %s: %s"
    PLAYBACK_CALLBACK_ERROR = "Track-end callback raised in guild %s: %r"

    # yt-dlp
    YTDLP_RESOLVING = "Resolving '%s'"
    YTDLP_FAILED_EXTRACT_INFO = "Failed to extract info for %s"
    YTDLP_FAILED_SEARCH = "Failed to search for '%s'"
    YTDLP_RESOLUTION_FAILED = "Could not resolve '%s': %s"
    CACHE_HIT_URL = "Cache hit for URL: %s"
    CACHE_EXPIRED_CLEANED = "Cleaned %d expired cache entries"

    # Keyword replies
    KEYWORD_MATCHED = "Keyword rule '%s' matched in guild %s"
    KEYWORD_REPLY_FAILED = "OnMessageError while replying in guild %s: %r"


class DiscordUIMessages:
    """Strings shown directly to users in chat."""

    # Playback announcements
    NOW_PLAYING = "🎶 Playing: {title}"
    TRACK_QUEUED = "🎵 Added to queue: {title}"
    QUEUE_EMPTY_AFTER_PLAYBACK = "♫♪ No music, please add music 😆"
    QUEUE_ENTRY = "[{position}] {title}"
    QUEUE_EMPTY = "No songs in the queue 😣"
    STREAM_FAILED = "⚠️ Couldn't stream {title}, skipping"

    # Control acknowledgements
    ACTION_JOINED = "👋 Joined {channel}"
    ACTION_PAUSED = "⏸ Paused"
    ACTION_RESUMED = "▶️ Resumed"
    ACTION_SKIPPED = "⏩ Skipped 👍"
    ACTION_LEFT = "👋 Bye"

    # Errors
    ERROR_GENERIC = "❌ Something went wrong."
    ERROR_JOIN_CHANNEL_FIRST = "Please join the channel first 😉"
    ERROR_LISTEN_WITHOUT_JOINING = "How do you listen if you don't join 😥"
    ERROR_USE_JOIN_FIRST = "Please use `{prefix}join` to add me to the channel 😘"
    ERROR_USE_JOIN_TO_REJOIN = "Please use `{prefix}join` to rejoin the channel 😘"
    ERROR_NOT_JOINED = "I haven't joined any channels 😶"
    ERROR_COULD_NOT_JOIN_VOICE = "I couldn't join your voice channel 😢"
    ERROR_TRACK_NOT_FOUND = "Couldn't find a track for: {query}"
    ERROR_MISSING_QUERY = "Usage: `{prefix}p <YouTube URL>`"
    ERROR_COMMAND_FAILED = "❌ Command failed. See logs."
