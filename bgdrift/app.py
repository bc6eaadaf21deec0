# app.py: Slim Flask API around the background-drift engine
# deps: pip install flask numpy pillow requests
# run:  python -m bgdrift.app

from __future__ import annotations
import asyncio
import math
import logging
import sys
from typing import List

from flask import Flask, request, jsonify

from .config import HOST, PORT, DEBUG
from .effect import StyledElement, drift_all
from .emitter import AnimationEmitter, StyleSheet
from .errors import ConfigurationError
from .geometry import direction_vector
from .probe import make_probe

logger = logging.getLogger(__name__)

app = Flask(__name__)

# ======= CORS =======
@app.after_request
def _cors(resp):
    resp.headers["Access-Control-Allow-Origin"]  = "*"
    resp.headers["Access-Control-Allow-Headers"] = "*"
    resp.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
    return resp

# ======= info / preview endpoints =======
@app.route("/", methods=["GET"])
def root():
    return {"ok": True, "plan": "/drift/plan (POST JSON)", "direction": "/drift/direction?angle=<deg>"}

@app.route("/drift/direction", methods=["GET"])
def drift_direction():
    try:
        angle = float(request.args["angle"])
    except (KeyError, ValueError):
        return jsonify({"error": "angle (degrees) required"}), 400
    if not math.isfinite(angle):
        return jsonify({"error": "angle must be finite"}), 400

    d = direction_vector(angle)
    return jsonify({"angle": angle, "x": d.x, "y": d.y, "iterations": d.iterations})

# ======= plan API =======
@app.route("/drift/plan", methods=["POST"])
def drift_plan():
    """
    JSON body:
    {
      "direction": 45,                 // degrees, optional (default 0)
      "duration": "10s",               // optional (default "10s")
      "base_url": "https://host/css/", // optional, for relative url(...) sources
      "elements": [
        {
          "id": "hero",
          "width": 800, "height": 400,
          "style": {"background-image": "url(a.png), url(b.png)",
                    "background-size": "auto, 50%",
                    "background-position": "0px 0px, center"},
          "attributes": {"data-bgdrift-direction": "90"}
        }
      ]
    }
    """
    data = request.get_json(force=True, silent=True) or {}
    items = data.get("elements") or []
    if not isinstance(items, list) or not items:
        return jsonify({"error": "elements must be a non-empty list"}), 400

    elements: List[StyledElement] = []
    for i, item in enumerate(items):
        try:
            width = float(item["width"]); height = float(item["height"])
        except (KeyError, TypeError, ValueError):
            return jsonify({"error": f"elements[{i}] needs numeric width and height"}), 400
        if not (math.isfinite(width) and math.isfinite(height)) or width < 0 or height < 0:
            return jsonify({"error": f"elements[{i}] width and height must be finite and >= 0"}), 400

        style = item.get("style") or {}
        if not isinstance(style, dict) or not all(isinstance(v, str) for v in style.values()):
            return jsonify({"error": f"elements[{i}].style must map property names to strings"}), 400
        attributes = item.get("attributes") or {}
        if not isinstance(attributes, dict):
            return jsonify({"error": f"elements[{i}].attributes must be an object"}), 400

        elements.append(StyledElement(
            width=width,
            height=height,
            style=dict(style),
            attributes=dict(attributes),
            id=item.get("id"),
        ))

    configuration = {"direction": data.get("direction"), "duration": data.get("duration")}
    base_url = data.get("base_url")
    if base_url is not None and not isinstance(base_url, str):
        return jsonify({"error": "base_url must be a string"}), 400
    # request-supplied sources never read the server's own files
    probe = app.config.get("BGDRIFT_PROBE") or make_probe(base_url, allow_local=False)
    emitter = AnimationEmitter(
        StyleSheet(app.config.get("BGDRIFT_PREFIXES")),
        counter=app.config.get("BGDRIFT_COUNTER"),
    )

    try:
        plans = asyncio.run(drift_all(elements, configuration, probe=probe, emitter=emitter))
    except ConfigurationError as e:
        return jsonify({"error": str(e)}), 400

    resp = {
        "rules": list(emitter.stylesheet.rules),
        "css": emitter.stylesheet.css_text,
        "elements": [
            {
                "id": el.id,
                "class": el.classes[-1] if plan is not None and el.classes else None,
                "plan": plan.to_dict() if plan is not None else None,
            }
            for el, plan in zip(elements, plans)
        ],
    }
    return jsonify(resp)


def setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)


if __name__ == "__main__":
    setup_logging(DEBUG)
    logger.info("Starting bgdrift API on %s:%d", HOST, PORT)
    app.run(host=HOST, port=PORT, threaded=True)
