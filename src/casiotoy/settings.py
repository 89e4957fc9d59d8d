from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

class Settings(BaseModel):
    '''
    Persisted watch preferences.  
    `alarm_time` may be set while `alarm_enabled` is false in a loaded file; 
    that is tolerated, the engine just never matches it.
    '''
    time_format_24h: bool = False
    date_format_us: bool = True     # MM/DD if True, else DD/MM
    auto_light_duration: int = Field(default=1, ge=0)  # seconds
    alarm_enabled: bool = False
    alarm_time: str | None = None   # HH:MM

    model_config = ConfigDict(
        extra='ignore',
        strict=True,
        validate_assignment=True,
    )
