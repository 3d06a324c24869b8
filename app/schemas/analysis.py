from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Tuple

NGram = Tuple[str, int]

class AnalyzeRequest(BaseModel):
    url: Optional[str] = None

class PageMeta(BaseModel):
    title: str
    description: str
    url: str

class Headings(BaseModel):
    h1: List[str] = []
    h2: List[str] = []
    h3: List[str] = []

class ContentStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    word_count: int = Field(..., alias="wordCount")
    character_count: int = Field(..., alias="characterCount")
    raw_text: str = Field(..., alias="rawText")

class NGramAnalysis(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    one_grams: List[NGram] = Field(..., alias="oneGrams")
    two_grams: List[NGram] = Field(..., alias="twoGrams")
    three_grams: List[NGram] = Field(..., alias="threeGrams")

class AnalysisResponse(BaseModel):
    meta: PageMeta
    headings: Headings
    content: ContentStats
    analysis: NGramAnalysis
