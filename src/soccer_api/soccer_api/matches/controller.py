from __future__ import annotations

from flask import Blueprint, jsonify, request

from ..common.http import page_params, parse_id
from ..common.validators import validated_body
from ..container import Container
from ..core.enums import Entity
from .requests import CREATE_MATCH, UPDATE_MATCH

ENTITY = Entity.MATCH.value


def register(bp: Blueprint, container: Container) -> None:
    service = container.match_service
    require_token = container.auth_gate.require_token

    @bp.route("/matches", methods=["GET"], endpoint="list_matches")
    def list_matches():
        offset, limit = page_params(request.args)
        return jsonify([m.to_dict() for m in service.list_page(offset=offset, limit=limit)])

    @bp.route("/matches/<match_id>", methods=["GET"], endpoint="get_match")
    def get_match(match_id: str):
        return jsonify(service.get(parse_id(match_id, ENTITY)).to_dict())

    @bp.route("/matches/<match_id>/teams", methods=["GET"], endpoint="match_teams")
    def match_teams(match_id: str):
        return jsonify(service.teams(parse_id(match_id, ENTITY)))

    @bp.route("/matches", methods=["POST"], endpoint="create_match")
    @validated_body(CREATE_MATCH)
    @require_token
    def create_match(payload: dict):
        return jsonify(service.create(payload).to_dict())

    @bp.route("/matches/<match_id>", methods=["PUT"], endpoint="update_match")
    @validated_body(UPDATE_MATCH)
    @require_token
    def update_match(match_id: str, payload: dict):
        mid = parse_id(match_id, ENTITY)
        service.update(mid, payload)
        return jsonify({"message": f"{ENTITY} {mid} updated"})

    @bp.route("/matches/<match_id>", methods=["DELETE"], endpoint="delete_match")
    @require_token
    def delete_match(match_id: str):
        mid = parse_id(match_id, ENTITY)
        service.delete(mid)
        return jsonify({"message": f"{ENTITY} {mid} deleted"})
