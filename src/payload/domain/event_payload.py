from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass(frozen=True)
class EventPayload:
    """
    An outgoing interaction: the action name plus the extras the platform hands back
    when the user triggers it (or when a scheduled delivery fires).
    """
    action: Optional[str]
    extras: Dict[str, str] = field(default_factory=dict)
