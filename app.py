# app.py: Flask backend
import logging
import sqlite3

from flask import Flask, request, jsonify
from flask_cors import CORS
from pydantic import ValidationError

import config
import gemini_service
import history_db
from gemini_service import GeminiServiceError
from pydantic_models import Language, MedicineRequest, NearbyRequest, SymptomRequest

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.json.ensure_ascii = False  # Hindi / Marathi text stays readable
CORS(app)


def _bad_request(message, details=None):
    body = {"error": message}
    if details:
        body["details"] = details
    return jsonify(body), 400


@app.errorhandler(ValidationError)
def handle_validation_error(e):
    details = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
    return _bad_request("Invalid request.", details)


@app.errorhandler(GeminiServiceError)
def handle_service_error(e):
    logger.error("service call failed: %s", e)
    return jsonify({"error": "The AI service could not answer this request."}), 502


def _json_body():
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        return None
    return data


def _record(query_text, operation, lang, outcome, notes=""):
    """Write one query-log row; a failing log never changes the response."""
    try:
        history_db.log_query(query_text, operation, lang.value, outcome, notes)
    except sqlite3.Error as e:
        logger.warning("could not write query log %s: %s", config.DB_PATH, e)


def _logged_call(operation, query_text, lang, call):
    """Run one service call and record its outcome in the query log."""
    try:
        result = call()
    except GeminiServiceError as e:
        _record(query_text, operation, lang, "error", type(e).__name__)
        raise
    _record(query_text, operation, lang, "ok")
    return result


@app.route("/", methods=["GET"])
def index():
    return ("Aapla Doctor API. POST /api/medicine, /api/symptoms, /api/nearby; "
            "GET /api/wellness?lang=EN")


@app.route("/api/medicine", methods=["POST"])
def medicine():
    data = _json_body()
    if data is None:
        return _bad_request("Please POST JSON with 'name' and 'lang' fields.")
    req = MedicineRequest(**data)
    info = _logged_call("medicine", req.name, req.lang,
                        lambda: gemini_service.get_medicine_info(req.name, req.lang))
    return jsonify(info.model_dump(mode="json"))


@app.route("/api/symptoms", methods=["POST"])
def symptoms():
    data = _json_body()
    if data is None:
        return _bad_request("Please POST JSON with 'symptoms' and 'lang' fields.")
    req = SymptomRequest(**data)
    advice = _logged_call("symptoms", req.symptoms, req.lang,
                          lambda: gemini_service.get_symptom_advice(req.symptoms, req.lang))
    return jsonify(advice.model_dump(mode="json"))


@app.route("/api/nearby", methods=["POST"])
def nearby():
    data = _json_body()
    if data is None:
        return _bad_request("Please POST JSON with 'lat', 'lng' and 'lang' fields.")
    req = NearbyRequest(**data)
    # only rounded coordinates reach the query log
    query_text = f"{req.query}@{req.lat:.2f},{req.lng:.2f}"
    places = _logged_call("nearby", query_text, req.lang,
                          lambda: gemini_service.find_nearby_places(req.lat, req.lng, req.lang, req.query))
    return jsonify(places.model_dump(mode="json"))


@app.route("/api/wellness", methods=["GET"])
def wellness():
    try:
        lang = Language(request.args.get("lang", "EN").upper())
    except ValueError:
        return _bad_request("Unsupported language. Use one of: " + ", ".join(l.value for l in Language))
    tips = _logged_call("wellness", "", lang, lambda: gemini_service.get_daily_wellness(lang))
    return jsonify([tip.model_dump(mode="json") for tip in tips])


if __name__ == "__main__":
    config.setup_logging()
    app.run(host="0.0.0.0", port=5000)
