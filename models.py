"""
Pydantic models for the stream creation demo.

DemoSettings carries every parameter the demonstration uses, with defaults
matching the classic example data; DemoSection records what one demonstration
printed.
"""

import os
import re
from typing import Dict, List, Mapping, Optional

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "STREAM_DEMO_"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_FRUITS = [
    "Apple", "Banana", "Orange", "Mango", "Pear", "Pomegranate", "Grape",
    "Guava", "Pineapple", "Strawberry", "Watermelon", "Avocado", "Kiwi",
    "Melons", "Papaya",
]


class DemoSettings(BaseModel):
    """Parameters for the stream creation demonstration"""
    values: List[str] = Field(
        default_factory=lambda: ["Dv", "Vn", "Vj"],
        description="Literal values for the values, collection and builder demos"
    )
    array: List[str] = Field(
        default_factory=lambda: ["Dv", "Vj", "vn"],
        description="Array for the array demos"
    )
    iterate_seed: int = Field(
        4,
        description="Seed of the squaring recurrence"
    )
    iterate_limit: int = Field(
        5,
        description="Number of elements taken from the recurrence",
        ge=0
    )
    generate_limit: int = Field(
        5,
        description="Number of random values generated",
        ge=0
    )
    pattern: str = Field(
        "^P",
        description="Regular expression used to filter the fruits"
    )
    fruits: List[str] = Field(
        default_factory=lambda: list(DEFAULT_FRUITS),
        description="Sample data for the pattern, iterator and iterable demos"
    )
    random_seed: Optional[int] = Field(
        None,
        description="Seed for the random supplier; unseeded when omitted"
    )
    log_level: str = Field(
        "WARNING",
        description="Level of the stream_creation logger"
    )

    @field_validator('pattern')
    @classmethod
    def validate_pattern(cls, v):
        """Pattern must be a valid regular expression"""
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid regular expression {v!r}: {e}")
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Valid levels: {LOG_LEVELS}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DemoSettings":
        """Build settings from STREAM_DEMO_<FIELD> variables over the defaults.

        List fields are comma-separated; blank items are dropped.
        """
        environ = os.environ if environ is None else environ
        overrides: Dict[str, object] = {}

        for name, field in cls.model_fields.items():
            raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is None or not raw.strip():
                continue
            if field.annotation == List[str]:
                overrides[name] = [item.strip() for item in raw.split(",") if item.strip()]
            else:
                overrides[name] = raw

        return cls(**overrides)


class DemoSection(BaseModel):
    """Output of one demonstration"""
    title: str = Field(..., description="Section title, printed as the header")
    lines: List[str] = Field(default_factory=list, description="Printed lines, in order")

    @property
    def header(self) -> str:
        return f"---- {self.title} ----"
