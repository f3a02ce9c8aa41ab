"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
An empty string means no key arrived before the timeout; unrecognized
escape sequences are consumed whole and reported as ``UNKNOWN``.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
MAX_SEQUENCE_BYTES = 16
UNKNOWN_KEY = "UNKNOWN"
_PENDING_BYTES: list[bytes] = []

_CSI_FINAL_KEYS = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}
_CSI_TILDE_KEYS = {
    b"1": "HOME",
    b"7": "HOME",
    b"4": "END",
    b"8": "END",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Block up to ``timeout_ms`` for one key and return its token."""
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    if ch == b"\x03":
        return "CTRL_C"
    if ch in {b"\r", b"\n"}:
        return "ENTER"

    if ch != b"\x1b":
        return ch.decode("utf-8", errors="replace")

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return "ESC"

    # Consume the whole sequence so its tail never arrives as separate keys.
    params: list[bytes] = []
    while True:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return UNKNOWN_KEY
        if 0x40 <= part[0] <= 0x7E:
            final = part
            break
        params.append(part)
        if len(params) > MAX_SEQUENCE_BYTES:
            return UNKNOWN_KEY

    raw_params = b"".join(params)
    if not raw_params and final in _CSI_FINAL_KEYS:
        return _CSI_FINAL_KEYS[final]
    if seq == b"[" and final == b"~" and raw_params in _CSI_TILDE_KEYS:
        return _CSI_TILDE_KEYS[raw_params]
    return UNKNOWN_KEY


__all__ = ["ESC_SEQUENCE_TIMEOUT_MS", "UNKNOWN_KEY", "read_key"]
