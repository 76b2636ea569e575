"""A packet radio receive queue with the framing and limits of a simple 2.4 GHz link."""

from __future__ import annotations

import enum
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable

PACKET_OVERHEAD = 1 + 1 + 4
"""Bytes stored with each queued packet besides its payload: length, RSSI and timestamp."""

DEFAULT_MAX_PAYLOAD = 32
DEFAULT_QUEUE_LEN = 3
DEFAULT_CHANNEL = 7
DEFAULT_POWER_DBM = 0
DEFAULT_BASE0 = 0x75626974  # "uBit"
DEFAULT_PREFIX0 = 0
MAX_CHANNEL = 83
POWER_LEVELS_DBM = (-30, -20, -16, -12, -8, -4, 0, 4)

_U32 = 0xFFFFFFFF


class DataRate(enum.IntEnum):
    RATE_1MBIT = 0
    RATE_2MBIT = 1
    RATE_250KBIT = 2


@dataclass(frozen=True)
class RadioConfig:
    """Settings of the radio; the values are checked on construction."""

    max_payload: int = DEFAULT_MAX_PAYLOAD
    queue_len: int = DEFAULT_QUEUE_LEN
    channel: int = DEFAULT_CHANNEL
    power_dbm: int = DEFAULT_POWER_DBM
    base0: int = DEFAULT_BASE0
    prefix0: int = DEFAULT_PREFIX0
    data_rate: DataRate = DataRate.RATE_1MBIT

    def __post_init__(self) -> None:
        if not 1 <= self.max_payload <= 251:
            raise ValueError("max_payload must be between 1 and 251")
        if not 1 <= self.queue_len <= 254:
            raise ValueError("queue_len must be between 1 and 254")
        if not 0 <= self.channel <= MAX_CHANNEL:
            raise ValueError(f"channel must be between 0 and {MAX_CHANNEL}")
        if self.power_dbm not in POWER_LEVELS_DBM:
            raise ValueError(f"power_dbm must be one of {POWER_LEVELS_DBM}")
        if not 0 <= self.base0 <= _U32:
            raise ValueError("base0 must fit in 32 bits")
        if not 0 <= self.prefix0 <= 0xFF:
            raise ValueError("prefix0 must fit in 8 bits")
        object.__setattr__(self, "data_rate", DataRate(self.data_rate))


@dataclass(frozen=True)
class Packet:
    """A received packet: its payload, signal strength in dBm and arrival time in microseconds."""

    payload: bytes
    rssi: int
    timestamp_us: int

    def __len__(self) -> int:
        return PACKET_OVERHEAD + len(self.payload)

    def to_bytes(self) -> bytes:
        """Queue layout: length byte, payload, RSSI byte (negated dBm), 4-byte LE timestamp."""
        return (
            bytes([len(self.payload)])
            + self.payload
            + bytes([(-self.rssi) & 0xFF])
            + (self.timestamp_us & _U32).to_bytes(4, "little")
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> Packet:
        if not data:
            raise ValueError("empty packet")
        length = data[0]
        if len(data) != PACKET_OVERHEAD + length:
            raise ValueError("packet length does not match its length byte")
        payload = bytes(data[1 : 1 + length])
        rssi = -data[1 + length]
        timestamp = int.from_bytes(data[2 + length : 6 + length], "little")
        return cls(payload, rssi, timestamp)


def _monotonic_us() -> int:
    return time.monotonic_ns() // 1000


class RadioQueue:
    """Holds received packets in a fixed amount of space and frames packets to send.

    The space is enough for queue_len packets of max_payload bytes; smaller
    packets let more fit. Packets that do not fit are dropped.
    """

    def __init__(
        self, config: RadioConfig | None = None, clock: Callable[[], int] | None = None
    ) -> None:
        self._clock = clock or _monotonic_us
        self._packets: deque[Packet] = deque()
        self._used = 0
        self._config = config or RadioConfig()

    @property
    def config(self) -> RadioConfig:
        return self._config

    @property
    def capacity(self) -> int:
        """Bytes available for queued packets, overhead included."""
        return (self._config.max_payload + PACKET_OVERHEAD) * self._config.queue_len

    def __len__(self) -> int:
        return len(self._packets)

    def update_config(self, config: RadioConfig) -> None:
        """Apply new settings; a change of packet or queue size empties the queue."""
        old = self._config
        self._config = config
        if (config.max_payload, config.queue_len) != (old.max_payload, old.queue_len):
            self._packets.clear()
            self._used = 0

    def receive(self, payload: bytes, rssi: int, crc_ok: bool = True) -> bool:
        """Take in a packet from the air; rssi is the sampled strength as a positive magnitude.

        The payload is cut to max_payload. Returns whether the packet was queued.
        """
        payload = bytes(payload)[: self._config.max_payload]
        size = PACKET_OVERHEAD + len(payload)
        if not crc_ok or self._used + size > self.capacity:
            return False
        packet = Packet(payload, -(rssi & 0xFF), self._clock() & _U32)
        self._packets.append(packet)
        self._used += size
        return True

    def send(self, data: bytes, extra: bytes = b"") -> bytes:
        """Frame data followed by extra for sending, cut to max_payload; return the frame."""
        max_len = self._config.max_payload
        data = bytes(data)
        extra = bytes(extra)
        if len(data) + len(extra) > max_len:
            if len(data) > max_len:
                data = data[:max_len]
                extra = b""
            else:
                extra = extra[: max_len - len(data)]
        body = data + extra
        return bytes([len(body)]) + body

    def peek(self) -> Packet | None:
        """The oldest waiting packet, or None."""
        return self._packets[0] if self._packets else None

    def pop(self) -> None:
        """Drop the oldest waiting packet, if any."""
        if self._packets:
            self._used -= len(self._packets.popleft())