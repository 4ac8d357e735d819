"""Record types exchanged with the admin API.

Wire payloads use camelCase keys (``projectTitle``, ``assignedMembers``).
``from_dict`` constructors are tolerant: missing or null fields degrade to
empty strings / empty tuples so a partially filled record never breaks the
table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

PENDING = "pending"
IN_PROGRESS = "in-progress"
COMPLETED = "completed"
CANCELLED = "cancelled"

STATUSES: Tuple[str, ...] = (PENDING, IN_PROGRESS, COMPLETED, CANCELLED)


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _strings(values: Any) -> Tuple[str, ...]:
    if not values:
        return ()
    if isinstance(values, str):
        return tuple(v.strip() for v in values.split(",") if v.strip())
    return tuple(_text(v) for v in values if v is not None)


@dataclass(frozen=True)
class Member:
    name: str = ""

    @classmethod
    def from_value(cls, raw: Any) -> "Member":
        if isinstance(raw, Mapping):
            return cls(name=_text(raw.get("name")))
        return cls(name=_text(raw))

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name}


def _members(values: Any) -> Tuple[Member, ...]:
    if not values:
        return ()
    if isinstance(values, (str, Mapping)):
        values = [values]
    return tuple(Member.from_value(v) for v in values if v is not None)


@dataclass(frozen=True)
class TaskRecord:
    """A single support task as rendered by the task table.

    ``status`` is kept verbatim even when it is not one of :data:`STATUSES`;
    the badge helpers render unknown values with a neutral style.
    """

    id: Any
    projectTitle: str = ""
    description: str = ""
    customerName: str = ""
    keywords: Tuple[str, ...] = ()
    status: str = PENDING
    assignedMembers: Tuple[Member, ...] = ()

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "TaskRecord":
        task_id = raw.get("id")
        if task_id is None:
            task_id = raw.get("_id", raw.get("taskId"))
        return cls(
            id=task_id,
            projectTitle=_text(raw.get("projectTitle")),
            description=_text(raw.get("description")),
            customerName=_text(raw.get("customerName")),
            keywords=_strings(raw.get("keywords")),
            status=_text(raw.get("status")),
            assignedMembers=_members(raw.get("assignedMembers")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "projectTitle": self.projectTitle,
            "description": self.description,
            "customerName": self.customerName,
            "keywords": list(self.keywords),
            "status": self.status,
            "assignedMembers": [m.to_dict() for m in self.assignedMembers],
        }

    def get(self, name: str, default: Any = None) -> Any:
        return getattr(self, name, default)

    @property
    def member_names(self) -> Tuple[str, ...]:
        return tuple(m.name for m in self.assignedMembers)


def tasks_from_payload(payload: Optional[Iterable[Mapping[str, Any]]]) -> list:
    return [TaskRecord.from_dict(item) for item in payload or [] if isinstance(item, Mapping)]


@dataclass(frozen=True)
class Representative:
    id: Any = None
    name: str = ""
    email: str = ""
    skillset: str = "Customer Support"
    status: str = "Active"

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Representative":
        rep_id = raw.get("id")
        if rep_id is None:
            rep_id = raw.get("_id")
        return cls(
            id=rep_id,
            name=_text(raw.get("name")),
            email=_text(raw.get("email")),
            skillset=_text(raw.get("skillset")) or "Customer Support",
            status=_text(raw.get("status")) or "Active",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "skillset": self.skillset,
            "status": self.status,
        }

    def get(self, name: str, default: Any = None) -> Any:
        return getattr(self, name, default)


@dataclass(frozen=True)
class Customer:
    """One row of the uploaded customers CSV; columns are not fixed."""

    id: Any = None
    fields: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Customer":
        data = dict(raw)
        return cls(id=data.get("id", data.get("_id")), fields=data)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.fields)
