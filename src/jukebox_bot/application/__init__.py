"""
Application Layer

Orchestrates domain objects and infrastructure to fulfil chat commands.

Structure:
- interfaces/: port interfaces implemented by infrastructure adapters
- services/: the playback session manager
"""
