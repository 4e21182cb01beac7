"""Split each employee's monthly salary across clients by share of activity.

An activity is one task assignment or one meeting attendance linked to a
client. Shares are computed per employee, so someone who spends all their
client time on one account puts their whole salary there.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

KIND_TASK = "task"
KIND_MEETING = "meeting"
HIGH_WORKLOAD = 30
MEDIUM_WORKLOAD = 15


@dataclass(frozen=True)
class StaffCost:
    user_id: int
    name: str
    monthly_salary: Decimal


@dataclass(frozen=True)
class ClientRef:
    client_id: int
    name: str
    company: str = ""


@dataclass(frozen=True)
class Activity:
    user_id: int
    client_id: int
    kind: str


def workload_band(percentage: float) -> str:
    if percentage >= HIGH_WORKLOAD:
        return "high"
    if percentage >= MEDIUM_WORKLOAD:
        return "medium"
    return "normal"


def allocate_resource_costs(
    employees: Iterable[StaffCost],
    clients: Iterable[ClientRef],
    activities: Iterable[Activity],
) -> dict:
    staff = {e.user_id: e for e in employees}
    totals: dict[int, int] = dict.fromkeys(staff, 0)
    per_client: dict[tuple[int, int], dict[str, int]] = {}
    for act in activities:
        if act.user_id not in staff or not act.client_id:
            continue
        totals[act.user_id] += 1
        counts = per_client.setdefault(
            (act.user_id, act.client_id), {KIND_TASK: 0, KIND_MEETING: 0}
        )
        counts[act.kind] = counts.get(act.kind, 0) + 1

    company_total = sum(totals.values())
    rows = []
    for client in clients:
        breakdown = []
        client_activities = 0
        cost = Decimal("0")
        kinds = {KIND_TASK: 0, KIND_MEETING: 0}
        for user_id, employee in staff.items():
            counts = per_client.get((user_id, client.client_id))
            if not counts:
                continue
            count = sum(counts.values())
            share = count / totals[user_id] * 100 if totals[user_id] else 0.0
            employee_cost = employee.monthly_salary * Decimal(str(share)) / 100
            client_activities += count
            cost += employee_cost
            for kind, value in counts.items():
                kinds[kind] = kinds.get(kind, 0) + value
            breakdown.append(
                {
                    "user_id": user_id,
                    "name": employee.name,
                    "total_activities": totals[user_id],
                    "activities_for_client": count,
                    "percentage_for_client": round(share, 2),
                    "monthly_salary": employee.monthly_salary,
                    "estimated_cost": employee_cost.quantize(Decimal("0.01")),
                }
            )
        if client_activities == 0:
            continue
        workload = client_activities / company_total * 100 if company_total else 0.0
        rows.append(
            {
                "client_id": client.client_id,
                "name": client.name,
                "company": client.company,
                "total_activities": client_activities,
                "task_count": kinds[KIND_TASK],
                "meeting_count": kinds[KIND_MEETING],
                "workload_percentage": round(workload, 2),
                "workload_band": workload_band(workload),
                "estimated_cost": cost.quantize(Decimal("0.01")),
                "employees": breakdown,
            }
        )
    rows.sort(key=lambda r: r["estimated_cost"], reverse=True)
    return {
        "clients": rows,
        "total_activities": sum(r["total_activities"] for r in rows),
        "total_cost": sum((r["estimated_cost"] for r in rows), Decimal("0")),
        "company_activities": company_total,
    }
