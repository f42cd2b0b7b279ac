"""HTTP calls from the Streamlit UI to the Flask backend."""

import requests
from pydantic import ValidationError

import config
from pydantic_models import DailyTip, MedicineInfo, NearbyPlaces, SymptomAdvice


class BackendError(Exception):
    pass


def _url(path: str) -> str:
    return config.BACKEND_URL.rstrip("/") + path


def _check(resp: requests.Response):
    if resp.status_code != 200:
        try:
            body = resp.json()
        except ValueError:
            body = None
        message = body.get("error", resp.text) if isinstance(body, dict) else resp.text
        raise BackendError(f"{resp.status_code}: {message}")
    try:
        return resp.json()
    except ValueError as e:
        raise BackendError(f"Backend did not return JSON: {e}") from e


def _post(path: str, payload: dict):
    try:
        resp = requests.post(_url(path), json=payload, timeout=config.BACKEND_TIMEOUT)
    except requests.RequestException as e:
        raise BackendError(str(e)) from e
    return _check(resp)


def _get(path: str, params: dict):
    try:
        resp = requests.get(_url(path), params=params, timeout=config.BACKEND_TIMEOUT)
    except requests.RequestException as e:
        raise BackendError(str(e)) from e
    return _check(resp)


def _validate(model, data):
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise BackendError(f"Unexpected response shape: {e}") from e


def fetch_medicine_info(name: str, lang: str) -> MedicineInfo:
    return _validate(MedicineInfo, _post("/api/medicine", {"name": name, "lang": lang}))


def fetch_symptom_advice(symptoms: str, lang: str) -> SymptomAdvice:
    return _validate(SymptomAdvice, _post("/api/symptoms", {"symptoms": symptoms, "lang": lang}))


def fetch_nearby_places(lat: float, lng: float, lang: str) -> NearbyPlaces:
    return _validate(NearbyPlaces, _post("/api/nearby", {"lat": lat, "lng": lng, "lang": lang}))


def fetch_daily_wellness(lang: str):
    data = _get("/api/wellness", {"lang": lang})
    if not isinstance(data, list):
        raise BackendError("Expected a list of wellness tips")
    return [_validate(DailyTip, t) for t in data]
