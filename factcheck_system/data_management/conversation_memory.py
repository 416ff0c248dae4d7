"""Bounded conversational memory per user and per channel.

Two independent maps:
- user_id -> FIFO of ChatTurn (capped, no expiry)
- channel_id -> ChannelContext (capped FIFO of ChannelMessage + last_activity,
  expired as a whole after a period of inactivity)

Concurrency model:
- Every operation is synchronous and short; none of them suspends.
- Each key is guarded by a striped lock (hash(key) % stripes), so unrelated
  users and channels rarely contend and writes to one key are linearized.
- A map lock guards only dictionary structure (insert, pop, snapshot).
  Lock order is always stripe lock -> map lock.
- The expiry sweep works on a snapshot and re-checks each candidate under its
  stripe lock before removal.

Usage:
    from factcheck_system.data_management.conversation_memory import ConversationMemoryStore

    store = ConversationMemoryStore()
    store.add_user_message("u1", "ana", "O dólar subiu hoje?")
    history = store.get_user_memory("u1")
    await store.start_sweeper()
"""

import asyncio
import threading
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Deque, Dict, Iterable, List, Optional, Tuple

from factcheck_system.config.logging import get_logger
from factcheck_system.config.settings import settings
from factcheck_system.data_management.schemas import ChatRole, ChatTurn

CONTEXT_HEADER = "\n\n[Contexto recente do canal]\n"
CONTEXT_FOOTER = "\n[Fim do contexto]"

DEFAULT_LOCK_STRIPES = 64


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ChannelMessage:
    """A message seen in a channel, kept for rolling context."""

    user_id: str
    user_name: str
    content: str
    timestamp: datetime


@dataclass
class ChannelContext:
    """Rolling context of one channel.

    Attributes:
        channel_id: Owning channel
        messages: Most recent messages, oldest first (bounded deque)
        last_activity: Time of the latest message; drives expiry
    """

    channel_id: str
    messages: Deque[ChannelMessage]
    last_activity: datetime


@dataclass
class MemoryStats:
    user_count: int = 0
    channel_count: int = 0
    total_messages: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {
            "user_count": self.user_count,
            "channel_count": self.channel_count,
            "total_messages": self.total_messages,
        }


def find_expired_channels(
    snapshot: Iterable[Tuple[str, datetime]],
    now: datetime,
    ttl: timedelta,
) -> List[str]:
    """
    Select channels whose last activity is older than the TTL.

    Args:
        snapshot: (channel_id, last_activity) pairs
        now: Reference time
        ttl: Allowed inactivity

    Returns:
        Channel ids to expire, in snapshot order
    """
    return [channel_id for channel_id, last_activity in snapshot if now - last_activity > ttl]


class ConversationMemoryStore:
    """
    In-memory conversation history for users and channels.

    User memory is a FIFO of ChatTurn capped at ``max_user_messages``.
    Channel context is a FIFO of ChannelMessage capped at
    ``max_channel_messages``, removed entirely by :meth:`sweep_expired` once
    it has been idle longer than ``context_ttl``. User memory is bounded by
    length only and is never swept.

    Attributes:
        max_user_messages: Per-user cap (default 15)
        max_channel_messages: Per-channel cap (default 20)
        context_window: Channel messages rendered by get_channel_context (default 10)
        context_ttl: Channel inactivity before expiry (default 30 minutes)
        sweep_interval_seconds: Period of the background sweeper
    """

    def __init__(
        self,
        max_user_messages: Optional[int] = None,
        max_channel_messages: Optional[int] = None,
        context_window: Optional[int] = None,
        context_ttl: Optional[timedelta] = None,
        sweep_interval_seconds: Optional[float] = None,
        lock_stripes: int = DEFAULT_LOCK_STRIPES,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize the store. Unset limits fall back to application settings.

        Args:
            max_user_messages: Per-user FIFO cap
            max_channel_messages: Per-channel FIFO cap
            context_window: Messages included in the formatted channel context
            context_ttl: Inactivity after which a channel context is swept
            sweep_interval_seconds: Seconds between background sweeps
            lock_stripes: Number of per-key lock stripes for each map
            clock: Returns the current aware UTC time (injectable for tests)
        """
        if lock_stripes < 1:
            raise ValueError("lock_stripes must be at least 1")

        self.max_user_messages = (
            max_user_messages if max_user_messages is not None else settings.user_memory_limit
        )
        self.max_channel_messages = (
            max_channel_messages
            if max_channel_messages is not None
            else settings.channel_memory_limit
        )
        self.context_window = (
            context_window if context_window is not None else settings.channel_context_window
        )
        self.context_ttl = (
            context_ttl
            if context_ttl is not None
            else timedelta(minutes=settings.channel_context_ttl_minutes)
        )
        self.sweep_interval_seconds = (
            sweep_interval_seconds
            if sweep_interval_seconds is not None
            else settings.memory_sweep_interval_seconds
        )

        self._user_memories: Dict[str, Deque[ChatTurn]] = {}
        self._channel_contexts: Dict[str, ChannelContext] = {}
        self._map_lock = threading.Lock()
        self._user_locks = [threading.Lock() for _ in range(lock_stripes)]
        self._channel_locks = [threading.Lock() for _ in range(lock_stripes)]
        self._clock = clock
        self._sweep_task: Optional[asyncio.Task] = None
        self.logger = get_logger("ConversationMemoryStore")

    # ── User memory ──────────────────────────────────────────────────────

    def add_user_message(self, user_id: str, user_name: str, content: str) -> None:
        """Append a user turn to the user's memory, evicting the oldest when full."""
        size = self._append_user_turn(user_id, ChatTurn(role=ChatRole.USER, content=content))
        self.logger.debug("User memory updated", user_name=user_name, size=size)

    def add_bot_response(self, user_id: str, content: str) -> None:
        """Append an assistant turn to the user's memory, evicting the oldest when full."""
        size = self._append_user_turn(user_id, ChatTurn(role=ChatRole.ASSISTANT, content=content))
        self.logger.debug("Bot response stored", user_id=user_id, size=size)

    def get_user_memory(self, user_id: str) -> List[ChatTurn]:
        """
        Get a snapshot of a user's memory.

        Args:
            user_id: User identifier

        Returns:
            Turns oldest first; empty list for unknown users
        """
        with self._user_lock(user_id):
            memories = self._user_memories.get(user_id)
            return list(memories) if memories else []

    def clear_user_memory(self, user_id: str) -> None:
        """Forget everything remembered for a user."""
        with self._user_lock(user_id):
            with self._map_lock:
                self._user_memories.pop(user_id, None)
        self.logger.debug("User memory cleared", user_id=user_id)

    def _append_user_turn(self, user_id: str, turn: ChatTurn) -> int:
        with self._user_lock(user_id):
            with self._map_lock:
                memories = self._user_memories.get(user_id)
                if memories is None:
                    memories = deque(maxlen=self.max_user_messages)
                    self._user_memories[user_id] = memories
            memories.append(turn)
            return len(memories)

    # ── Channel context ──────────────────────────────────────────────────

    def add_channel_message(
        self,
        channel_id: str,
        user_id: str,
        user_name: str,
        content: str,
    ) -> None:
        """
        Append a message to a channel's rolling context and refresh its activity.

        Args:
            channel_id: Channel identifier
            user_id: Author identifier
            user_name: Author display name (rendered as ``@name``)
            content: Message text
        """
        with self._channel_lock(channel_id):
            # Read under the stripe lock so timestamps stay ordered per channel
            now = self._clock()
            with self._map_lock:
                context = self._channel_contexts.get(channel_id)
                if context is None:
                    context = ChannelContext(
                        channel_id=channel_id,
                        messages=deque(maxlen=self.max_channel_messages),
                        last_activity=now,
                    )
                    self._channel_contexts[channel_id] = context
            context.messages.append(
                ChannelMessage(
                    user_id=user_id,
                    user_name=user_name,
                    content=content,
                    timestamp=now,
                )
            )
            context.last_activity = now
            size = len(context.messages)

        self.logger.debug("Channel context updated", channel_id=channel_id, size=size)

    def get_channel_context(self, channel_id: str) -> str:
        """
        Render the channel's most recent messages for the chat model.

        Args:
            channel_id: Channel identifier

        Returns:
            Header, ``@name: content`` lines and footer; ``""`` when the
            channel has no messages (callers treat that as "no context")
        """
        with self._channel_lock(channel_id):
            context = self._channel_contexts.get(channel_id)
            if context is None or not context.messages or self.context_window <= 0:
                return ""
            recent = list(context.messages)[-self.context_window:]

        formatted = "\n".join(f"@{m.user_name}: {m.content}" for m in recent)
        return f"{CONTEXT_HEADER}{formatted}{CONTEXT_FOOTER}"

    def get_channel_last_activity(self, channel_id: str) -> Optional[datetime]:
        """Last activity time of a channel, or None if it has no context."""
        with self._channel_lock(channel_id):
            context = self._channel_contexts.get(channel_id)
            return context.last_activity if context else None

    def clear_channel_context(self, channel_id: str) -> None:
        """Drop a channel's rolling context."""
        with self._channel_lock(channel_id):
            with self._map_lock:
                self._channel_contexts.pop(channel_id, None)
        self.logger.debug("Channel context cleared", channel_id=channel_id)

    # ── Expiry ───────────────────────────────────────────────────────────

    def sweep_expired(self) -> int:
        """
        Remove channel contexts idle for longer than the TTL.

        Idempotent. User memories are never touched.

        Returns:
            Number of channel contexts removed
        """
        now = self._clock()
        with self._map_lock:
            snapshot = [
                (channel_id, context.last_activity)
                for channel_id, context in self._channel_contexts.items()
            ]

        removed = 0
        for channel_id in find_expired_channels(snapshot, now, self.context_ttl):
            with self._channel_lock(channel_id):
                with self._map_lock:
                    context = self._channel_contexts.get(channel_id)
                    # Touched since the snapshot: keep it
                    if context is None or now - context.last_activity <= self.context_ttl:
                        continue
                    del self._channel_contexts[channel_id]
                    removed += 1

        if removed > 0:
            self.logger.info(f"Swept {removed} inactive channel contexts", removed=removed)

        return removed

    async def start_sweeper(self, interval_seconds: Optional[float] = None) -> None:
        """
        Start the background task that periodically sweeps expired channels.

        Args:
            interval_seconds: Override for the sweep period
        """
        if self._sweep_task and not self._sweep_task.done():
            self.logger.warning("Memory sweeper already running")
            return

        interval = (
            interval_seconds if interval_seconds is not None else self.sweep_interval_seconds
        )

        async def sweep_loop():
            """Background task to periodically expire idle channels."""
            while True:
                try:
                    await asyncio.sleep(interval)
                    self.sweep_expired()
                except asyncio.CancelledError:
                    break
                except Exception as e:
                    self.logger.opt(exception=e).error("Memory sweep error")

        self._sweep_task = asyncio.create_task(sweep_loop())
        self.logger.info("Memory sweeper started", interval_seconds=interval)

    async def stop_sweeper(self) -> None:
        """Stop the background sweep task."""
        if self._sweep_task and not self._sweep_task.done():
            self._sweep_task.cancel()
            try:
                await self._sweep_task
            except asyncio.CancelledError:
                pass
            self.logger.info("Memory sweeper stopped")
        self._sweep_task = None

    @property
    def sweeper_running(self) -> bool:
        return self._sweep_task is not None and not self._sweep_task.done()

    # ── Stats ────────────────────────────────────────────────────────────

    def get_stats(self) -> Dict[str, Any]:
        """
        Get memory statistics.

        Returns:
            Dict with user_count, channel_count and total_messages (user turns
            plus channel messages)
        """
        with self._map_lock:
            stats = MemoryStats(
                user_count=len(self._user_memories),
                channel_count=len(self._channel_contexts),
                total_messages=sum(len(m) for m in self._user_memories.values())
                + sum(len(c.messages) for c in self._channel_contexts.values()),
            )
        return stats.as_dict()

    # ── Locks ────────────────────────────────────────────────────────────

    def _user_lock(self, user_id: str) -> threading.Lock:
        return self._user_locks[hash(user_id) % len(self._user_locks)]

    def _channel_lock(self, channel_id: str) -> threading.Lock:
        return self._channel_locks[hash(channel_id) % len(self._channel_locks)]


__all__ = [
    "ConversationMemoryStore",
    "ChannelContext",
    "ChannelMessage",
    "find_expired_channels",
]
