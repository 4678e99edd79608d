from __future__ import annotations

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class PossessiveOptions(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    style: Optional[str] = Field(default="standard", examples=["standard", "alternative"])
    enable_french_rules: bool = Field(default=True, alias="enableFrenchRules")
    enable_german_rules: bool = Field(default=True, alias="enableGermanRules")
    enable_nordic_rules: bool = Field(default=True, alias="enableNordicRules")


class PossessiveRequest(BaseModel):
    noun: str
    options: Optional[PossessiveOptions] = None
    exceptions: Dict[str, str] = Field(default_factory=dict)


class PossessiveResponse(BaseModel):
    noun: str
    possessive: str
    style: str


class BatchResult(BaseModel):
    row: int
    noun: str
    possessive: str


class ReportItem(BaseModel):
    row: Optional[int] = None
    column: Optional[str] = None
    issue: str
    value: Optional[str] = None
    action: str


class EncodingReport(BaseModel):
    detected: Optional[str] = None
    decode_used: str
    decode_fallback: bool = False


class BatchSummary(BaseModel):
    rows: int = 0
    results: int = 0
    warnings: int = 0
    errors: int = 0


class BatchReport(BaseModel):
    summary: BatchSummary
    encoding: EncodingReport
    warnings: List[ReportItem] = Field(default_factory=list)
    errors: List[ReportItem] = Field(default_factory=list)


class BatchResponse(BaseModel):
    results: List[BatchResult] = Field(default_factory=list)
    report: BatchReport


class HealthResponse(BaseModel):
    ok: bool = True
