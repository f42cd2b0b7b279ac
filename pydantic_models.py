from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class Language(str, Enum):
    EN = "EN"
    HI = "HI"
    MR = "MR"


class TipCategory(str, Enum):
    WELLNESS = "Wellness"
    YOGA = "Yoga"
    DIET = "Diet"


# --- display records returned by Gemini ---

class MedicineInfo(BaseModel):
    name: str
    usage: str
    dosage: str
    warning: str


class FirstAidStep(BaseModel):
    step: str = ""
    description: str = ""


class SymptomAdvice(BaseModel):
    firstAid: List[FirstAidStep]
    otcSuggestions: List[str]
    disclaimer: str


class MapsReference(BaseModel):
    uri: str = ""
    title: str = ""


class GroundingChunk(BaseModel):
    maps: Optional[MapsReference] = None


class NearbyPlaces(BaseModel):
    text: str = ""
    chunks: List[GroundingChunk] = []


class DailyTip(BaseModel):
    title: str
    content: str
    category: TipCategory


# --- request bodies accepted by the Flask backend ---

class MedicineRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    lang: Language = Language.EN


class SymptomRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    symptoms: str = Field(min_length=1)
    lang: Language = Language.EN


class NearbyRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)
    lang: Language = Language.EN
    query: str = Field(default="Hospitals and Pharmacies", min_length=1)
