from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class SessionContext:
    user_id: UUID
    session_id: UUID  # jti
