from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from anystore.binding import BindMode

# Config models map the YAML sections to typed structures.


class StoreSection(BaseModel):
    # Store behaviour: bind comparison and optional lock wrapper.
    model_config = ConfigDict(extra="forbid")
    bind_mode: BindMode = BindMode.KIND
    synchronized: bool = False


class LoggingSection(BaseModel):
    # Only one sink is active at a time.
    model_config = ConfigDict(extra="forbid")
    sink: Literal["none", "stdout", "jsonl"] = "none"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LoggingSection:
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when sink is 'jsonl'")
        return self


class StoreConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    store: StoreSection = Field(default_factory=StoreSection)
    logging: LoggingSection = Field(default_factory=LoggingSection)
