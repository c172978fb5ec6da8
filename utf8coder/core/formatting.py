"""Render byte sequences for display."""

from dataclasses import dataclass
from typing import Literal

ByteStyle = Literal["buffer", "hex", "list"]


@dataclass
class ByteFormatter:
    """Format bytes the way the chosen style prints them."""

    style: ByteStyle = "buffer"

    def format(self, data: bytes) -> str:
        if self.style == "hex":
            return data.hex()
        if self.style == "list":
            return "[" + ", ".join(f"0x{b:02X}" for b in data) + "]"
        if self.style == "buffer":
            body = " ".join(f"{b:02x}" for b in data)
            return f"<Buffer {body}>" if body else "<Buffer >"
        raise ValueError(f"Unknown byte style: {self.style}")
