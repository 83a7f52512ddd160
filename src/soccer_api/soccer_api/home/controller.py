from __future__ import annotations

import time

from flask import Blueprint, jsonify


def register(bp: Blueprint, *, started_at: float) -> None:
    @bp.route("/", methods=["GET"], endpoint="home")
    def home():
        return jsonify({"message": "Hello To Soccer API!"})

    @bp.route("/healthcheck", methods=["GET"], endpoint="healthcheck")
    def healthcheck():
        return jsonify({"status": "ok", "uptime": round(time.monotonic() - started_at, 3)})
