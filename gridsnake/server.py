"""
Battlesnake HTTP API (v1) on Flask.

Run locally:
  pip install -e .
  PORT=8000 gridsnake
"""
import logging

from flask import Flask, request, jsonify

from gridsnake import logic
from gridsnake.config import FALLBACK_MOVE, HOST, LOG_LEVEL, PORT

logger = logging.getLogger(__name__)

app = Flask(__name__)

@app.get("/")
def index():
    return jsonify(logic.info())

@app.post("/move")
def move():
    data = request.get_json()

    # the game server needs an answer every turn, whatever went wrong
    try:
        move_dir = logic.decide(data)
    except Exception:
        logger.exception("move failed, answering %s", FALLBACK_MOVE.value)
        move_dir = FALLBACK_MOVE

    return jsonify({"move": move_dir.value})

@app.post("/start")
def start():
    logic.start(request.get_json(silent=True) or {})
    return ("", 200)

@app.post("/end")
def end():
    logic.end(request.get_json(silent=True) or {})
    return ("", 200)


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("listening on %s:%d", HOST, PORT)
    app.run(host=HOST, port=PORT, debug=False)


if __name__ == "__main__":
    main()
