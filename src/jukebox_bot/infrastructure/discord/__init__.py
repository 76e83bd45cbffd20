"""Discord integration: bot, voice adapter, guards and cogs."""
