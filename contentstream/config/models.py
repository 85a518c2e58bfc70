from pydantic import BaseModel, Field, field_validator
from typing import Literal


class ConvertersConfig(BaseModel):
    builtins: bool = True
    escape_quotes: bool = True
    load_plugins: bool = False
    disabled_plugins: list[str] = Field(default_factory=list)


class ContentStreamConfig(BaseModel):
    default_output_type: str = "text/html"
    converters: ConvertersConfig = Field(default_factory=ConvertersConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"

    @field_validator("default_output_type")
    @classmethod
    def _non_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("default_output_type must not be blank")
        return v
