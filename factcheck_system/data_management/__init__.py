"""Data management package for the fact-check system.

Provides the in-memory conversation store and the shared schemas:
- ConversationMemoryStore: per-user chat turns and per-channel rolling context
- Schemas: chat turns, sources, verdicts and decisions
"""

from factcheck_system.data_management.conversation_memory import ConversationMemoryStore

__all__ = [
    "ConversationMemoryStore",
]
