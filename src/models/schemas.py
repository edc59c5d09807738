import enum
from typing import List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, Field, field_validator


class Confidence(str, enum.Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class MaterialStatus(str, enum.Enum):
    RECYCLABLE = "recyclable"
    NOT_RECYCLABLE = "not_recyclable"
    UNKNOWN = "unknown"


class OverallStatus(str, enum.Enum):
    RECYCLABLE = "recyclable"
    NOT_RECYCLABLE = "not_recyclable"
    CHECK_LOCALLY = "check_locally"


class SearchResult(BaseModel):
    title: str = ""
    url: str = Field(default="", validation_alias=AliasChoices("url", "link"))
    snippet: str = ""

    model_config = {"frozen": True}

    @field_validator("title", "url", "snippet", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value


class MaterialEntry(BaseModel):
    material: str
    notes: Optional[str] = None
    confidence: Confidence
    source_count: int = Field(default=0, ge=0)


class Source(BaseModel):
    title: str
    url: str


class RulesMeta(BaseModel):
    sources_analyzed: int = 0
    materials_found: int = 0


class RecyclingRules(BaseModel):
    location: str = ""
    accepted: List[MaterialEntry] = Field(default_factory=list)
    not_accepted: List[MaterialEntry] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)
    sources: List[Source] = Field(default_factory=list)
    meta: RulesMeta = Field(default_factory=RulesMeta)
    error: Optional[str] = None


class DetectedItem(BaseModel):
    """An item reported by the vision service. Free text, not trusted."""
    name: str = ""
    materials: List[str] = Field(default_factory=list)
    confidence: Optional[str] = None
    preparation: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _name_none_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("materials", mode="before")
    @classmethod
    def _materials_none_as_empty(cls, value):
        return [] if value is None else value


class MaterialComparison(BaseModel):
    material: str
    status: MaterialStatus
    recyclable: Union[bool, Literal["unknown"]]
    notes: Optional[str] = None
    reason: Optional[str] = None


class ItemComparison(BaseModel):
    name: str
    confidence: Optional[str] = None
    preparation: Optional[str] = None
    overall_status: OverallStatus
    materials: List[MaterialComparison] = Field(default_factory=list)


class ComparisonSummary(BaseModel):
    recyclable: int = 0
    not_recyclable: int = 0
    unknown: int = 0
    total: int = 0


class Comparison(BaseModel):
    items: List[ItemComparison] = Field(default_factory=list)
    location: str = "Unknown"
    summary: ComparisonSummary = Field(default_factory=ComparisonSummary)
    tips: List[str] = Field(default_factory=list)
    can_recycle: bool = False


class SupportedMaterials(BaseModel):
    accepted: List[str]
    not_accepted: List[str]
    total: int
