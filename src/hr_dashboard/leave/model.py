from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class LeaveRecord:
    """Domain entity: a leave request. ``days`` is fixed at creation."""

    id: str
    emp_id: str
    name: str
    leave_type: str
    department: str
    start_date: str
    end_date: str
    days: int
    reason: str
    status: LeaveStatus = LeaveStatus.PENDING

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "empId": self.emp_id,
            "name": self.name,
            "leaveType": self.leave_type,
            "department": self.department,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "days": self.days,
            "reason": self.reason,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LeaveRecord":
        return cls(
            id=str(data["id"]),
            emp_id=str(data["empId"]),
            name=str(data.get("name") or ""),
            leave_type=str(data["leaveType"]),
            department=str(data.get("department") or ""),
            start_date=str(data["startDate"]),
            end_date=str(data["endDate"]),
            days=int(data["days"]),
            reason=str(data.get("reason") or ""),
            status=LeaveStatus(data["status"]),
        )
