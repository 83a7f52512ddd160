from __future__ import annotations

from flask import Blueprint, jsonify

from ..common.validators import validated_body
from ..container import Container
from .requests import SIGN_IN, SIGN_UP


def register(bp: Blueprint, container: Container) -> None:
    @bp.route("/auth/signup", methods=["POST"], endpoint="signup")
    @validated_body(SIGN_UP)
    def signup(payload: dict):
        user = container.auth_service.sign_up(payload["username"], payload["password"])
        return jsonify({"message": "User registered", **user.to_dict()})

    @bp.route("/auth/signin", methods=["POST"], endpoint="signin")
    @validated_body(SIGN_IN)
    def signin(payload: dict):
        token = container.auth_service.sign_in(payload["username"], payload["password"])
        return jsonify({"token": token})
