from __future__ import annotations

from flask import Blueprint, jsonify, request

from ..common.http import page_params, parse_id
from ..common.validators import validated_body
from ..container import Container
from ..core.enums import Entity
from .requests import CREATE_TEAM, UPDATE_TEAM

ENTITY = Entity.TEAM.value


def register(bp: Blueprint, container: Container) -> None:
    service = container.team_service
    require_token = container.auth_gate.require_token

    @bp.route("/teams", methods=["GET"], endpoint="list_teams")
    def list_teams():
        offset, limit = page_params(request.args)
        return jsonify([team.to_dict() for team in service.list_page(offset=offset, limit=limit)])

    @bp.route("/teams/<team_id>", methods=["GET"], endpoint="get_team")
    def get_team(team_id: str):
        return jsonify(service.get(parse_id(team_id, ENTITY)).to_dict())

    @bp.route("/teams/<team_id>/players", methods=["GET"], endpoint="team_players")
    def team_players(team_id: str):
        players = service.players(parse_id(team_id, ENTITY))
        return jsonify([p.to_dict() for p in players])

    @bp.route("/teams", methods=["POST"], endpoint="create_team")
    @validated_body(CREATE_TEAM)
    @require_token
    def create_team(payload: dict):
        return jsonify(service.create(payload).to_dict())

    @bp.route("/teams/<team_id>", methods=["PUT"], endpoint="update_team")
    @validated_body(UPDATE_TEAM)
    @require_token
    def update_team(team_id: str, payload: dict):
        tid = parse_id(team_id, ENTITY)
        service.update(tid, payload)
        return jsonify({"message": f"{ENTITY} {tid} updated"})

    @bp.route("/teams/<team_id>", methods=["DELETE"], endpoint="delete_team")
    @require_token
    def delete_team(team_id: str):
        tid = parse_id(team_id, ENTITY)
        service.delete(tid)
        return jsonify({"message": f"{ENTITY} {tid} deleted"})
