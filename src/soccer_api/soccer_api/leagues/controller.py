from __future__ import annotations

from flask import Blueprint, jsonify, request

from ..common.http import page_params, parse_id
from ..common.validators import validated_body
from ..container import Container
from ..core.enums import Entity
from .requests import CREATE_LEAGUE, UPDATE_LEAGUE

ENTITY = Entity.LEAGUE.value


def register(bp: Blueprint, container: Container) -> None:
    service = container.league_service
    require_token = container.auth_gate.require_token

    @bp.route("/leagues", methods=["GET"], endpoint="list_leagues")
    def list_leagues():
        offset, limit = page_params(request.args)
        return jsonify([league.to_dict() for league in service.list_page(offset=offset, limit=limit)])

    @bp.route("/leagues/<league_id>", methods=["GET"], endpoint="get_league")
    def get_league(league_id: str):
        return jsonify(service.get(parse_id(league_id, ENTITY)).to_dict())

    @bp.route("/leagues", methods=["POST"], endpoint="create_league")
    @validated_body(CREATE_LEAGUE)
    @require_token
    def create_league(payload: dict):
        return jsonify(service.create(payload).to_dict())

    @bp.route("/leagues/<league_id>", methods=["PUT"], endpoint="update_league")
    @validated_body(UPDATE_LEAGUE)
    @require_token
    def update_league(league_id: str, payload: dict):
        lid = parse_id(league_id, ENTITY)
        service.update(lid, payload)
        return jsonify({"message": f"{ENTITY} {lid} updated"})

    @bp.route("/leagues/<league_id>", methods=["DELETE"], endpoint="delete_league")
    @require_token
    def delete_league(league_id: str):
        lid = parse_id(league_id, ENTITY)
        service.delete(lid)
        return jsonify({"message": f"{ENTITY} {lid} deleted"})
