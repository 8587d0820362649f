"""Pydantic schemas for PTO Plan settings.

All schemas use extra='forbid' to reject unknown fields, so a typo in
profile.yaml is reported instead of silently ignored.

Field names are snake_case. camelCase names are accepted as aliases, so
a settings blob exported in camelCase loads unchanged.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .dates import parse_local_date


PayPeriod = Literal["weekly", "biweekly", "semimonthly", "monthly"]


def _check_date_string(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    try:
        parse_local_date(value)
    except ValueError:
        raise ValueError(f"must be a YYYY-MM-DD date, got '{value}'")
    return value


class VacationEntry(BaseModel):
    """A planned or taken vacation."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    id: str = Field(..., min_length=1, description="Unique vacation identifier")
    start_date: str = Field(..., alias="startDate", description="First day (YYYY-MM-DD)")
    end_date: str = Field(..., alias="endDate", description="Last day (YYYY-MM-DD)")
    total_hours: float = Field(
        ..., ge=0, alias="totalHours",
        description="PTO hours for the whole range (8 per counted day)",
    )
    include_weekends: bool = Field(
        default=False, alias="includeWeekends",
        description="Whether Saturdays and Sundays in the range count as PTO days",
    )
    description: Optional[str] = Field(default=None, description="Optional title")
    created_at: str = Field(default="", alias="createdAt", description="ISO timestamp")
    updated_at: str = Field(default="", alias="updatedAt", description="ISO timestamp")

    @field_validator("start_date", "end_date")
    @classmethod
    def check_dates(cls, v: str) -> str:
        return _check_date_string(v)

    @model_validator(mode="after")
    def check_range(self) -> "VacationEntry":
        if parse_local_date(self.start_date) > parse_local_date(self.end_date):
            raise ValueError(
                f"start_date ({self.start_date}) is after end_date ({self.end_date})"
            )
        return self


class UserSettings(BaseModel):
    """Snapshot of a user's PTO configuration and planned vacations.

    The engine only reads these values; updates go through the settings
    store as partial dicts or via model_copy(update=...).
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    current_pto: float = Field(
        default=96, ge=0, alias="currentPTO",
        description="Last known PTO balance in hours",
    )
    accrual_rate: float = Field(
        default=13.36, ge=0, alias="accrualRate",
        description="Hours earned per pay period",
    )
    pay_period: PayPeriod = Field(default="monthly", alias="payPeriod")
    payday_of_week: Optional[int] = Field(
        default=None, ge=0, le=6, alias="paydayOfWeek",
        description="0=Sunday..6=Saturday; weekly/biweekly only (default Friday)",
    )
    annual_allowance: float = Field(
        default=200, ge=0, alias="annualAllowance",
        description="Informational yearly allowance in hours, not enforced",
    )
    start_date: Optional[str] = Field(default=None, alias="startDate")
    company_name: str = Field(default="", alias="companyName")
    employee_id: str = Field(default="", alias="employeeId")
    vacations: List[VacationEntry] = Field(default_factory=list)
    last_accrual_update_date: Optional[str] = Field(
        default=None, alias="lastAccrualUpdateDate",
    )
    last_known_pto_balance: Optional[float] = Field(
        default=None, ge=0, alias="lastKnownPTOBalance",
    )

    @field_validator("start_date", "last_accrual_update_date")
    @classmethod
    def check_optional_dates(cls, v: Optional[str]) -> Optional[str]:
        return _check_date_string(v)

    @model_validator(mode="after")
    def check_unique_vacation_ids(self) -> "UserSettings":
        seen = set()
        for vacation in self.vacations:
            if vacation.id in seen:
                raise ValueError(f"duplicate vacation id: {vacation.id}")
            seen.add(vacation.id)
        return self

    def to_storage(self) -> dict:
        """Serialize for the settings store (snake_case, no None values)."""
        return self.model_dump(exclude_none=True)


class VacationRequest(BaseModel):
    """Form data for a vacation that has not been saved yet."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    start_date: str = Field(..., alias="startDate")
    end_date: str = Field(..., alias="endDate")
    include_weekends: bool = Field(default=False, alias="includeWeekends")
    description: Optional[str] = None
