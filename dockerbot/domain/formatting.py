"""Reply formatting for container lists and logs.

Pure Python, no framework dependencies.
"""

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from dockerbot.domain.models import ContainerState, ContainerSummary

# Engine log streams prefix each line with an 8-byte frame header:
# stream type (1 byte), padding (3 bytes), big-endian payload size (4 bytes).
FRAME_HEADER_SIZE = 8

MAX_REPLY_LENGTH = 4000
TRUNCATION_SUFFIX = "\n...\n```\n\n⚠️ *Log output truncated due to length limit*"

NO_CONTAINERS_TEXT = "📦 No containers found"
LIST_HEADER = "📦 *Docker Containers:*\n\n"
UNKNOWN_STATUS = "❓ Unknown"

STATE_GLYPHS: Dict[ContainerState, Optional[str]] = {
    ContainerState.RUNNING: "✅",
    ContainerState.EXITED: "⛔",
    ContainerState.REMOVING: "⛏️",
    ContainerState.DEAD: "💀",
    ContainerState.CREATED: "📄",
    ContainerState.RESTARTING: "♻️",
    ContainerState.PAUSED: "⏸️",
    ContainerState.UNKNOWN: None,
}

_missing = set(ContainerState) - set(STATE_GLYPHS)
if _missing:
    raise RuntimeError(f"STATE_GLYPHS has no entry for {sorted(s.value for s in _missing)}")


def format_status(container: ContainerSummary) -> str:
    """Glyph followed by the engine's status text, e.g. '✅ Up 3 hours'."""
    glyph = STATE_GLYPHS[container.state]
    if glyph is None:
        return UNKNOWN_STATUS
    return f"{glyph} {container.status}"


def format_container_list(containers: Sequence[ContainerSummary], detailed: bool = False) -> str:
    if not containers:
        return NO_CONTAINERS_TEXT

    parts = [LIST_HEADER]
    for container in containers:
        parts.append(f"*{container.name}* {format_status(container)}\n")
        if detailed:
            parts.append(f"{container.image} (ID: {container.short_id})\n\n")
    return "".join(parts)


def _iter_raw_lines(raw: bytes) -> Iterator[bytes]:
    """Yield framed lines, each still carrying its 8-byte header.

    Frames are walked by their declared size so header bytes that happen
    to equal a newline never split a line. A frame holding several lines
    lends its header to each of them. Anything from the first malformed
    header onwards is split on newlines as is.
    """
    offset = 0
    while offset < len(raw):
        header = raw[offset:offset + FRAME_HEADER_SIZE]
        if len(header) < FRAME_HEADER_SIZE or header[0] > 2 or header[1:4] != b"\x00\x00\x00":
            break
        size = int.from_bytes(header[4:], "big")
        payload = raw[offset + FRAME_HEADER_SIZE:offset + FRAME_HEADER_SIZE + size]
        offset += FRAME_HEADER_SIZE + size
        for line in _split_lines(payload):
            yield header + line

    if offset < len(raw):
        yield from _split_lines(raw[offset:])


def _split_lines(data: bytes) -> List[bytes]:
    lines = data.split(b"\n")
    if lines[-1] == b"":
        lines.pop()
    return lines


def collect_log_lines(raw: bytes, limit: int) -> Tuple[List[str], int]:
    """Strip frame headers from up to `limit` log lines.

    Returns the surviving text lines and the number of lines consumed.
    Lines no longer than the header are dropped but still counted.
    """
    collected: List[str] = []
    count = 0
    for line in _iter_raw_lines(raw):
        if count >= limit:
            break
        line = line.rstrip(b"\r")
        if len(line) > FRAME_HEADER_SIZE:
            collected.append(line[FRAME_HEADER_SIZE:].decode("utf-8", errors="replace"))
        count += 1
    return collected, count


def truncate_reply(text: str, limit: int = MAX_REPLY_LENGTH) -> str:
    """Cut text to `limit` characters plus the truncation notice."""
    if len(text) <= limit:
        return text
    return text[:limit] + TRUNCATION_SUFFIX


def format_logs(name: str, lines: Sequence[str], count: int) -> str:
    if not lines:
        return f"📋 No logs found for container `{name}`"
    body = "".join(line + "\n" for line in lines)
    reply = f"📋 *Logs for container `{name}`* (last {count} lines):\n\n```\n{body}```"
    return truncate_reply(reply)
