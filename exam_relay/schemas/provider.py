"""
Gemini generateContent wire shapes

Only the fields we read are modelled. Every level is optional so a partial or
odd response parses instead of raising; extraction decides what is usable.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Part(BaseModel):
    model_config = ConfigDict(extra="ignore")

    text: Optional[str] = None


class Content(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role: Optional[str] = None
    parts: List[Part] = Field(default_factory=list)


class Candidate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: Optional[Content] = None
    finish_reason: Optional[str] = Field(default=None, alias="finishReason")


class GenerateContentResponse(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    candidates: List[Candidate] = Field(default_factory=list)


class GenerateContentRequest(BaseModel):
    contents: List[Content]

    @classmethod
    def from_prompt(cls, prompt: str, role: str = "user") -> "GenerateContentRequest":
        return cls(contents=[Content(role=role, parts=[Part(text=prompt)])])
