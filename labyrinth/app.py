# app.py - Flask API around the walked-route maze engine
# deps: pip install flask numpy pillow

from __future__ import annotations
from typing import Any, Dict, Tuple
import logging
from flask import Flask, request, jsonify, make_response

from labyrinth.config import DEFAULT_RESOLUTION_M, HOST, MAX_GRID_CELLS, PNG_SCALE, PORT
from labyrinth.errors import GridTooLarge, MazeError, UnreachableTarget
from labyrinth.models import MazeSession
from labyrinth.render import to_glyphs, to_png
from labyrinth.route_export import session_positions
from labyrinth.session import generate_maze

logger = logging.getLogger(__name__)

STATUS = {
    GridTooLarge: 413,
    UnreachableTarget: 422,
}


class BadRequest(ValueError):
    pass


# region Request Parsing
def _opt(data: Dict[str, Any], key: str, cast, default=None):
    v = data.get(key, default)
    return default if v in (None, "", "null") else cast(v)


def _maze_from_request() -> MazeSession:
    """
    JSON body:
    {
      "positions": [{"lat":..,"lon":..}, ...],   // >= 2 recorded fixes
      "entry": {"lat":..,"lon":..},
      "exit":  {"lat":..,"lon":..},
      "resolution_m": 1.0,
      "seed": null
    }
    """
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise BadRequest("JSON object body required")
    pts = data.get("positions") or []
    if not isinstance(pts, list):
        raise BadRequest("positions must be a list")
    for key in ("entry", "exit"):
        if data.get(key) is None:
            raise BadRequest(f"{key} point required")
    try:
        resolution = _opt(data, "resolution_m", float, DEFAULT_RESOLUTION_M)
        seed = _opt(data, "seed", int)
        return generate_maze(
            pts, data["entry"], data["exit"],
            resolution_m=resolution, seed=seed, max_cells=MAX_GRID_CELLS,
        )
    except MazeError:
        raise
    except (TypeError, ValueError, KeyError) as e:
        raise BadRequest(str(e)) from e


def _error(e: Exception) -> Tuple[Any, int]:
    status = 400 if isinstance(e, BadRequest) else STATUS.get(type(e), 400)
    kind = "BadRequest" if isinstance(e, BadRequest) else type(e).__name__
    logger.info("maze request rejected (%s): %s", kind, e)
    return jsonify({"error": str(e), "kind": kind}), status
# endregion


def create_app() -> Flask:
    app = Flask(__name__)

    # ======= CORS =======
    @app.after_request
    def _cors(resp):
        resp.headers["Access-Control-Allow-Origin"]  = "*"
        resp.headers["Access-Control-Allow-Headers"] = "*"
        resp.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
        return resp

    app.register_error_handler(MazeError, _error)
    app.register_error_handler(BadRequest, _error)

    @app.route("/", methods=["GET"])
    def root():
        return {
            "ok": True,
            "maze": "/maze/generate (POST JSON)",
            "png": "/maze/render.png (POST JSON)",
            "text": "/maze/render.txt (POST JSON)",
            "default_resolution_m": DEFAULT_RESOLUTION_M,
        }

    # ======= maze endpoints =======
    @app.route("/maze/generate", methods=["POST"])
    def maze_generate():
        s = _maze_from_request()
        b = s.bbox
        return jsonify({
            "rows": s.spec.rows,
            "cols": s.spec.cols,
            "resolution_m": s.spec.resolution_m,
            "bbox": {"min_lat": b.min_lat, "max_lat": b.max_lat,
                     "min_lon": b.min_lon, "max_lon": b.max_lon},
            "entry_cell": list(s.entry_cell),
            "exit_cell": list(s.exit_cell),
            "grid": s.grid.tolist(),
            "path": session_positions(s),
            "length": s.length,
        })

    @app.route("/maze/render.png", methods=["POST"])
    def maze_png():
        s = _maze_from_request()
        try:
            scale = int(request.args.get("scale", PNG_SCALE))
        except ValueError:
            raise BadRequest("scale must be an integer")
        if scale < 1:
            raise BadRequest("scale must be >= 1")
        resp = make_response(to_png(s.grid, scale))
        resp.headers["Content-Type"] = "image/png"
        return resp

    @app.route("/maze/render.txt", methods=["POST"])
    def maze_text():
        s = _maze_from_request()
        resp = make_response(to_glyphs(s.grid) + "\n")
        resp.headers["Content-Type"] = "text/plain; charset=utf-8"
        return resp

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    create_app().run(host=HOST, port=PORT, threaded=True)
