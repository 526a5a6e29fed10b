"""
Holiday settings - the per-display configuration the resolver runs against.
Accepts both snake_case and the settings store's camelCase keys.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from holidaytheme.utils.timezone import DEFAULT_TIMEZONE


class HolidayResolutionConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    timezone: str = DEFAULT_TIMEZONE
    enable_holiday_themes: bool = Field(default=True, alias="enableHolidayThemes")
    disabled_holidays: list[str] = Field(default_factory=list, alias="disabledHolidays")
    preview_holiday: Optional[str] = Field(
        default=None, alias="previewHoliday",
        description="Force this holiday id regardless of the date (admin preview)",
    )
    preview_day: int = Field(default=1, ge=1, alias="previewDay")

    @field_validator("disabled_holidays", mode="before")
    @classmethod
    def split_disabled(cls, v):
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v

    @field_validator("preview_holiday", mode="before")
    @classmethod
    def blank_preview_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class HolidaySettingsUpdate(BaseModel):
    """Partial update for PUT /holidays/settings; omitted fields keep their value."""
    model_config = ConfigDict(populate_by_name=True)

    timezone: Optional[str] = None
    enable_holiday_themes: Optional[bool] = Field(default=None, alias="enableHolidayThemes")
    disabled_holidays: Optional[list[str]] = Field(default=None, alias="disabledHolidays")
    preview_holiday: Optional[str] = Field(default=None, alias="previewHoliday")
    preview_day: Optional[int] = Field(default=None, ge=1, alias="previewDay")

    def apply_to(self, config: HolidayResolutionConfig) -> HolidayResolutionConfig:
        changes = self.model_dump(exclude_unset=True)
        return HolidayResolutionConfig.model_validate({**config.model_dump(), **changes})
