from dataclasses import asdict, dataclass
from typing import Any

import dacite


@dataclass
class Employee:
    name: str
    role: str
    id: int | None = None


def employee_to_dict(employee: Employee) -> dict[str, Any]:
    return asdict(employee)


def employee_from_dict(data: dict[str, Any]) -> Employee:
    fields = {key: data.get(key) for key in ('id', 'name', 'role')}
    return dacite.from_dict(data_class=Employee, data=fields, config=dacite.Config(strict=True))
