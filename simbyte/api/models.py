from typing import Any, Dict, Literal, Optional
from pydantic import BaseModel, Field

from .. import __version__


class PayloadRequest(BaseModel):
    config: Dict[str, Any] = Field(default_factory=dict, description="Generator configuration")
    size: int = Field(default=4096, ge=0, le=16 * 1024 * 1024, description="Bytes per payload")
    count: int = Field(default=1, ge=1, le=10_000, description="Number of payloads from one generator instance")
    seed: Optional[int] = Field(default=None, description="Overrides config.seed when set")
    backend: Literal["python", "numpy"] = Field(default="python", description="Random source backend")


class GeneratorInfo(BaseModel):
    name: str
    description: Optional[str] = None
    config_schema: Dict[str, Any]


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str = __version__
    generators_available: int = 0
