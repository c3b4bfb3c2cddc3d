from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class StorageOptions(BaseModel):
    strict: bool = Field(default=True)

    model_config = ConfigDict(validate_assignment=True)

class PropertyDescriptor(BaseModel):
    value: Optional[str] = Field(default=None)
    configurable: bool = Field(default=True)
    enumerable: bool = Field(default=True)
    writable: bool = Field(default=True)

    model_config = ConfigDict(frozen=True)
