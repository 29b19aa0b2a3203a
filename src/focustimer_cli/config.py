"""Configuration for focustimer.

The timer takes no settings beyond the task label and the duration, so these
models only hold the program's layout and scheduling constants.
"""

from datetime import timedelta
from functools import lru_cache

from pydantic import BaseModel, Field


class LayoutConfig(BaseModel):
    """Screen layout, in 1-based terminal cells."""

    margin: int = Field(default=4, description="Inset of labels and bar from the edges")
    header_row: int = Field(default=2)
    remaining_offset: int = Field(default=3, description="Rows above the bottom edge")
    bar_offset: int = Field(default=1, description="Rows above the bottom edge")
    end_label_width: int = Field(default=9)


class PollConfig(BaseModel):
    """Redraw cadence."""

    long_interval: float = Field(default=10.0)
    short_interval: float = Field(default=1.0)
    long_threshold: int = Field(
        default=120, description="Seconds remaining above which the long interval applies"
    )


class TerminalConfig(BaseModel):
    """Geometry used when the terminal size cannot be queried."""

    fallback_width: int = Field(default=80)
    fallback_height: int = Field(default=24)


class Config(BaseModel):
    """Main configuration."""

    default_duration: timedelta = Field(default=timedelta(minutes=25))
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    poll: PollConfig = Field(default_factory=PollConfig)
    terminal: TerminalConfig = Field(default_factory=TerminalConfig)


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Get the shared configuration."""
    return Config()
