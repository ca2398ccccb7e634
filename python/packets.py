"""
Distress-signal packet ordering (2022 day 13).

A packet is an integer or a list of packets. Ordering rules:
- Two integers compare numerically
- Two lists compare element by element; if one runs out first it sorts first
- An integer compared with a list is promoted to a one-element list
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Union

Packet = Union[int, list["Packet"]]

DIVIDER_PACKETS: tuple[Packet, Packet] = ([[2]], [[6]])


class PacketParseError(ValueError):
    """Raised when a line is not a well-formed packet."""


def _split_top_level(body: str) -> list[str]:
    parts: list[str] = []
    depth = 0
    start = 0
    for i, char in enumerate(body):
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth < 0:
                raise PacketParseError(f"Unbalanced ']' at offset {i} in '{body}'")
        elif char == "," and depth == 0:
            parts.append(body[start:i])
            start = i + 1
    if depth != 0:
        raise PacketParseError(f"Unbalanced '[' in '{body}'")
    parts.append(body[start:])
    return parts


def parse_packet(text: str) -> Packet:
    """Parse one packet, e.g. ``[1,[2,3],[]]``."""
    text = text.strip()
    if text.startswith("[") and text.endswith("]"):
        body = text[1:-1]
        if not body.strip():
            return []
        return [parse_packet(part) for part in _split_top_level(body)]
    if not text.isdecimal():
        raise PacketParseError(
            f"Invalid packet element '{text}'\n"
            f"  Expected a non-negative integer or a bracketed list"
        )
    return int(text)


def compare(left: Packet, right: Packet) -> int:
    """Negative if ``left`` sorts before ``right``, positive if after, 0 if equal."""
    if isinstance(left, int) and isinstance(right, int):
        return (left > right) - (left < right)
    if isinstance(left, int):
        return compare([left], right)
    if isinstance(right, int):
        return compare(left, [right])

    for left_item, right_item in zip(left, right):
        result = compare(left_item, right_item)
        if result != 0:
            return result
    return (len(left) > len(right)) - (len(left) < len(right))


def _parse_packets(text: str) -> list[Packet]:
    return [parse_packet(line) for line in text.splitlines() if line.strip()]


def ordered_pair_index_sum(text: str) -> int:
    """Sum of the 1-based indices of pairs that are already in order."""
    packets = _parse_packets(text)
    if len(packets) % 2:
        raise PacketParseError(f"Expected packets in pairs, got {len(packets)} packets")
    return sum(
        pair_index + 1
        for pair_index in range(len(packets) // 2)
        if compare(packets[2 * pair_index], packets[2 * pair_index + 1]) < 0
    )


def decoder_key(text: str) -> int:
    """Product of the 1-based positions of the divider packets after sorting."""
    packets = _parse_packets(text) + list(DIVIDER_PACKETS)
    packets.sort(key=cmp_to_key(compare))
    first = packets.index(DIVIDER_PACKETS[0]) + 1
    second = packets.index(DIVIDER_PACKETS[1]) + 1
    return first * second
