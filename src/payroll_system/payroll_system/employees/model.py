from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Optional

from ..common.validators import require_non_negative

ZERO = Decimal("0")


@dataclass(frozen=True)
class SalaryStructure:
    """Fixed monthly compensation of one employee.

    Frozen: a record that embeds a structure keeps exactly the values it was
    generated with, whatever happens to the employee master afterwards.
    """

    basic: Decimal = ZERO
    hra: Decimal = ZERO
    conveyance: Decimal = ZERO
    medical: Decimal = ZERO
    special_allowance: Decimal = ZERO
    pf: Decimal = ZERO
    professional_tax: Decimal = ZERO

    def __post_init__(self):
        for f in fields(self):
            object.__setattr__(self, f.name, require_non_negative(getattr(self, f.name), f.name))

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "SalaryStructure":
        data = data or {}
        return cls(
            basic=data.get("basic"),
            hra=data.get("hra"),
            conveyance=data.get("conveyance"),
            medical=data.get("medical"),
            special_allowance=data.get("specialAllowance", data.get("special_allowance")),
            pf=data.get("pf"),
            professional_tax=data.get("professionalTax", data.get("professional_tax")),
        )

    def to_dict(self) -> dict:
        return {
            "basic": self.basic,
            "hra": self.hra,
            "conveyance": self.conveyance,
            "medical": self.medical,
            "specialAllowance": self.special_allowance,
            "pf": self.pf,
            "professionalTax": self.professional_tax,
        }


@dataclass(frozen=True)
class Employee:
    """Thực thể miền (domain): Nhân viên, only the fields payroll reads."""

    employee_id: int
    employee_code: str
    full_name: str
    salary_structure: SalaryStructure
    is_active: bool = True
