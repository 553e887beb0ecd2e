import math
from typing import List, Literal, Optional, Union
from pydantic import BaseModel, field_validator

# Epoch seconds of 0001-01-01 and 10000-01-01 UTC.
MIN_TIMESTAMP = -62135596800
MAX_TIMESTAMP = 253402300800

# Upstream schema. Unknown fields are ignored; wrong types fail validation.


class RawPricing(BaseModel):
    prompt: Optional[Union[str, float]] = None
    completion: Optional[Union[str, float]] = None


class RawArchitecture(BaseModel):
    modality: Optional[str] = None
    input_modalities: Optional[List[str]] = None
    output_modalities: Optional[List[str]] = None


class RawTopProvider(BaseModel):
    max_completion_tokens: Optional[int] = None


class RawModel(BaseModel):
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    context_length: Optional[int] = None
    pricing: Optional[RawPricing] = None
    architecture: Optional[RawArchitecture] = None
    top_provider: Optional[RawTopProvider] = None
    created: Optional[float] = None

    @field_validator("created")
    @classmethod
    def created_must_be_a_real_date(cls, v: Optional[float]) -> Optional[float]:
        if v is None:
            return None
        if not math.isfinite(v) or not MIN_TIMESTAMP <= v < MAX_TIMESTAMP:
            raise ValueError("created must be a finite epoch timestamp")
        return v


class ModelsResponse(BaseModel):
    data: List[RawModel]


# Request schemas

SortField = Literal[
    "name", "provider", "contextLength", "maxOutput", "inputPrice", "outputPrice"
]


class ModelsQuery(BaseModel):
    ids: Optional[List[str]] = None
    exclude: Optional[List[str]] = None
    q: Optional[str] = None
    sort: Optional[SortField] = None
    order: Literal["asc", "desc"] = "asc"
    limit: Optional[int] = None

    @field_validator("ids", "exclude", mode="before")
    @classmethod
    def split_ids(cls, v):
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        return v

    @field_validator("q")
    @classmethod
    def strip_query(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None

    @field_validator("limit")
    @classmethod
    def limit_must_be_positive(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 1:
            raise ValueError("limit must be a positive integer")
        return v


class DefaultModelsRequest(BaseModel):
    defaultModels: List[str]

    @field_validator("defaultModels")
    @classmethod
    def ids_must_not_be_empty(cls, v: List[str]) -> List[str]:
        cleaned = [model_id.strip() for model_id in v]
        if any(not model_id for model_id in cleaned):
            raise ValueError("Model ids must not be empty")
        return cleaned
