"""
Gemini service for the Aapla Doctor app.

Provides:
- get_medicine_info: medicine name -> MedicineInfo in the chosen language
- get_symptom_advice: symptoms / emergency text -> SymptomAdvice
- find_nearby_places: coordinates -> NearbyPlaces (text + Google Maps grounding chunks)
- get_daily_wellness: language -> three DailyTip entries (Wellness, Yoga, Diet)
- parse_json_response: JSON extraction + pydantic validation of model output

Every call appends the raw model output to RAW_LOG. Without a GEMINI_API_KEY the
calls are answered from mock payloads that satisfy the same schemas.
"""

import json
import logging
import re
from types import SimpleNamespace
from typing import List, Union

from google import genai
from google.genai import types
from pydantic import ValidationError

import config
from pydantic_models import (
    DailyTip,
    GroundingChunk,
    Language,
    MapsReference,
    MedicineInfo,
    NearbyPlaces,
    SymptomAdvice,
)

logger = logging.getLogger(__name__)

LANG_NAMES = {
    Language.EN: "English",
    Language.HI: "Hindi",
    Language.MR: "Marathi",
}

DEFAULT_NEARBY_QUERY = "Hospitals and Pharmacies"
SEASON = "current season in India"


class GeminiServiceError(Exception):
    """The Gemini request could not be completed."""


class ResponseParseError(GeminiServiceError):
    """The model answered, but not with JSON matching the declared schema."""


_client = None


def get_client():
    """Lazily create the Gemini client. Returns None when no API key is configured."""
    global _client
    if not config.GEMINI_API_KEY:
        return None
    if _client is None:
        _client = genai.Client(api_key=config.GEMINI_API_KEY)
    return _client


def lang_name(lang: Union[Language, str]) -> str:
    return LANG_NAMES[Language(lang)]


def _append_raw_log(header: str, text: str):
    try:
        with open(config.RAW_LOG, "a", encoding="utf-8") as f:
            f.write(header + "\n")
            f.write(text + "\n")
    except OSError as e:
        logger.warning("could not write raw log %s: %s", config.RAW_LOG, e)


# ---------- response schemas ----------

def medicine_schema() -> types.Schema:
    return types.Schema(
        type=types.Type.OBJECT,
        properties={
            "name": types.Schema(type=types.Type.STRING),
            "usage": types.Schema(
                type=types.Type.STRING,
                description="What ailment it is for, translated into the target language",
            ),
            "dosage": types.Schema(
                type=types.Type.STRING,
                description="Standard dosage instructions, translated into the target language",
            ),
            "warning": types.Schema(
                type=types.Type.STRING,
                description="Mandatory warning to consult a doctor, translated into the target language",
            ),
        },
        required=["name", "usage", "dosage", "warning"],
    )


def symptom_schema() -> types.Schema:
    return types.Schema(
        type=types.Type.OBJECT,
        properties={
            "firstAid": types.Schema(
                type=types.Type.ARRAY,
                items=types.Schema(
                    type=types.Type.OBJECT,
                    properties={
                        "step": types.Schema(
                            type=types.Type.STRING,
                            description="Title of the step in the target language",
                        ),
                        "description": types.Schema(
                            type=types.Type.STRING,
                            description="Detailed instruction in the target language",
                        ),
                    },
                ),
            ),
            "otcSuggestions": types.Schema(
                type=types.Type.ARRAY,
                items=types.Schema(
                    type=types.Type.STRING,
                    description="Common OTC medication name and brief purpose in the target language",
                ),
            ),
            "disclaimer": types.Schema(
                type=types.Type.STRING,
                description="A warning that this is AI advice, in the target language",
            ),
        },
        required=["firstAid", "otcSuggestions", "disclaimer"],
    )


def wellness_schema() -> types.Schema:
    return types.Schema(
        type=types.Type.ARRAY,
        items=types.Schema(
            type=types.Type.OBJECT,
            properties={
                "title": types.Schema(type=types.Type.STRING, description="Catchy title in target language"),
                "content": types.Schema(type=types.Type.STRING, description="Detailed advice in target language"),
                "category": types.Schema(type=types.Type.STRING, enum=["Wellness", "Yoga", "Diet"]),
            },
            required=["title", "content", "category"],
        ),
    )


# ---------- prompts ----------

def medicine_prompt(medicine_name: str, lang: Union[Language, str]) -> str:
    name = lang_name(lang)
    return (
        f"Find information for the medicine: {medicine_name}.\n"
        f"CRITICAL: You must provide all descriptions, warnings, and instructions exclusively in {name}.\n"
        f"Ensure the terminology is medically accurate but easy to understand for a layperson in {name}."
    )


def symptom_prompt(symptoms: str, lang: Union[Language, str]) -> str:
    name = lang_name(lang)
    return (
        f'Assess these symptoms or medical emergency: "{symptoms}".\n'
        f"CRITICAL: Provide the entire response, including every step and every medication name "
        f"or description, exclusively in {name}.\n"
        f"Include common cultural context if applicable to the first aid steps in {name}."
    )


def nearby_prompt(query: str, lang: Union[Language, str]) -> str:
    return (
        f"Find the 3 nearest {query} to my location.\n"
        f"Explain why they are good options in {lang_name(lang)}."
    )


def wellness_prompt(lang: Union[Language, str]) -> str:
    return (
        f"Provide 3 daily health tips for: Wellness, Yoga, and Diet, relevant to the {SEASON}.\n"
        f"CRITICAL: Every word of the response must be in {lang_name(lang)}."
    )


# ---------- mock payloads (no API key) ----------

def mock_medicine_info(medicine_name: str) -> str:
    out = {
        "name": medicine_name,
        "usage": "Offline mode: usage details are unavailable without a Gemini API key.",
        "dosage": "Follow the dosage printed on the pack or prescribed by your doctor.",
        "warning": "Always consult a doctor or pharmacist before taking any medicine.",
    }
    return json.dumps(out, ensure_ascii=False)


def mock_symptom_advice(symptoms: str) -> str:
    out = {
        "firstAid": [
            {"step": "Stay calm", "description": "Rest and keep monitoring the symptoms."},
            {"step": "Seek help", "description": "Call 108 or visit the nearest hospital if symptoms are severe."},
        ],
        "otcSuggestions": [],
        "disclaimer": "Offline mode. This is not medical advice; consult a doctor.",
    }
    return json.dumps(out, ensure_ascii=False)


def mock_daily_wellness() -> str:
    out = [
        {"title": "Drink water", "content": "Keep a bottle nearby and sip through the day.", "category": "Wellness"},
        {"title": "Stretch", "content": "Ten minutes of gentle stretching after waking up.", "category": "Yoga"},
        {"title": "Seasonal fruit", "content": "Add one local seasonal fruit to your meals.", "category": "Diet"},
    ]
    return json.dumps(out, ensure_ascii=False)


def _mock_response(text: str):
    return SimpleNamespace(text=text, candidates=[])


# ---------- calls ----------

def _generate(model: str, contents: str, gen_config: types.GenerateContentConfig, mock_text):
    """Send one request to Gemini, or return the mock payload when no client is configured."""
    client = get_client()
    if client is None:
        text = mock_text()
        logger.info("GEMINI_API_KEY not set, answering %s from mock payload", model)
        _append_raw_log("----MOCK CALL----", text)
        return _mock_response(text)

    try:
        response = client.models.generate_content(model=model, contents=contents, config=gen_config)
    except Exception as e:
        _append_raw_log("----ERROR----", str(e))
        logger.error("Gemini request to %s failed: %s", model, e)
        raise GeminiServiceError(f"Gemini request failed: {e}") from e

    _append_raw_log("----CALL----", response.text or "")
    return response


def _json_config(schema: types.Schema) -> types.GenerateContentConfig:
    return types.GenerateContentConfig(
        response_mime_type="application/json",
        response_schema=schema,
    )


def parse_json_response(raw_text: str):
    """
    Load the JSON document in raw_text.
    Strips ``` fences and trailing commas before giving up with ResponseParseError.
    """
    if raw_text is None:
        raise ResponseParseError("Empty model response")
    raw = raw_text.strip()
    if raw.startswith("```") and raw.endswith("```"):
        raw = "\n".join([l for l in raw.splitlines() if not l.strip().startswith("```")]).strip()

    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        cleaned = re.sub(r",\s*([}\]])", r"\1", raw)  # remove trailing commas
        try:
            return json.loads(cleaned)
        except json.JSONDecodeError as e:
            raise ResponseParseError(f"Model output is not valid JSON: {e}") from e


def get_medicine_info(medicine_name: str, lang: Union[Language, str]) -> MedicineInfo:
    response = _generate(
        config.GEMINI_MODEL,
        medicine_prompt(medicine_name, lang),
        _json_config(medicine_schema()),
        lambda: mock_medicine_info(medicine_name),
    )
    parsed = parse_json_response(response.text)
    try:
        return MedicineInfo.model_validate(parsed)
    except ValidationError as e:
        raise ResponseParseError(f"Unexpected medicine info shape: {e}") from e


def get_symptom_advice(symptoms: str, lang: Union[Language, str]) -> SymptomAdvice:
    response = _generate(
        config.GEMINI_MODEL,
        symptom_prompt(symptoms, lang),
        _json_config(symptom_schema()),
        lambda: mock_symptom_advice(symptoms),
    )
    parsed = parse_json_response(response.text)
    try:
        return SymptomAdvice.model_validate(parsed)
    except ValidationError as e:
        raise ResponseParseError(f"Unexpected symptom advice shape: {e}") from e


def _grounding_chunks(response) -> List[GroundingChunk]:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    raw_chunks = getattr(metadata, "grounding_chunks", None) or []

    chunks = []
    for raw in raw_chunks:
        maps = getattr(raw, "maps", None)
        if maps is None:
            chunks.append(GroundingChunk())
            continue
        chunks.append(GroundingChunk(maps=MapsReference(uri=maps.uri or "", title=maps.title or "")))
    return chunks


def find_nearby_places(lat: float, lng: float, lang: Union[Language, str],
                       query: str = DEFAULT_NEARBY_QUERY) -> NearbyPlaces:
    """
    Ask Gemini (with the Google Maps tool, anchored at lat/lng) for the nearest places.
    Returns the model's explanation plus the grounding chunks of the first candidate.
    """
    gen_config = types.GenerateContentConfig(
        tools=[types.Tool(google_maps=types.GoogleMaps())],
        tool_config=types.ToolConfig(
            retrieval_config=types.RetrievalConfig(
                lat_lng=types.LatLng(latitude=lat, longitude=lng),
            ),
        ),
    )
    response = _generate(
        config.GEMINI_MAPS_MODEL,
        nearby_prompt(query, lang),
        gen_config,
        lambda: f"Offline mode: set GEMINI_API_KEY to search for {query} near {lat:.4f}, {lng:.4f}.",
    )
    return NearbyPlaces(text=response.text or "", chunks=_grounding_chunks(response))


def get_daily_wellness(lang: Union[Language, str]) -> List[DailyTip]:
    response = _generate(
        config.GEMINI_MODEL,
        wellness_prompt(lang),
        _json_config(wellness_schema()),
        mock_daily_wellness,
    )
    parsed = parse_json_response(response.text)
    if not isinstance(parsed, list):
        raise ResponseParseError("Expected a JSON array of wellness tips")
    try:
        return [DailyTip.model_validate(tip) for tip in parsed]
    except ValidationError as e:
        raise ResponseParseError(f"Unexpected wellness tip shape: {e}") from e
