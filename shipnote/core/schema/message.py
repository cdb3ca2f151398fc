from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True, slots=True)
class AttachmentField:
    title: str
    value: str
    short: bool

    def to_payload(self) -> Dict[str, Any]:
        return {"title": self.title, "value": self.value, "short": self.short}


@dataclass(frozen=True, slots=True)
class Attachment:
    color: str
    fields: Tuple[AttachmentField, ...]
    footer_icon: str
    footer: str
    ts: int

    def to_payload(self) -> Dict[str, Any]:
        return {
            "color": self.color,
            "fields": [field.to_payload() for field in self.fields],
            "footer_icon": self.footer_icon,
            "footer": self.footer,
            "ts": self.ts,
        }
