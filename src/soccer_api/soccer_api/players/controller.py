from __future__ import annotations

from flask import Blueprint, jsonify, request

from ..common.http import page_params, parse_id
from ..common.validators import validated_body
from ..container import Container
from ..core.enums import Entity
from .requests import CREATE_PLAYER, UPDATE_PLAYER

ENTITY = Entity.PLAYER.value


def register(bp: Blueprint, container: Container) -> None:
    service = container.player_service
    require_token = container.auth_gate.require_token

    @bp.route("/players", methods=["GET"], endpoint="list_players")
    def list_players():
        offset, limit = page_params(request.args)
        return jsonify([p.to_dict() for p in service.list_page(offset=offset, limit=limit)])

    @bp.route("/players/<player_id>", methods=["GET"], endpoint="get_player")
    def get_player(player_id: str):
        return jsonify(service.get(parse_id(player_id, ENTITY)).to_dict())

    @bp.route("/players/<player_id>/stats", methods=["GET"], endpoint="player_stats")
    def player_stats(player_id: str):
        stats = service.stats(parse_id(player_id, ENTITY))
        return jsonify([s.to_dict() for s in stats])

    @bp.route("/players/<player_id>/match/<match_id>/stats", methods=["GET"], endpoint="player_match_stats")
    def player_match_stats(player_id: str, match_id: str):
        pid = parse_id(player_id, ENTITY)
        mid = parse_id(match_id, Entity.MATCH.value)
        return jsonify(service.match_stats(pid, mid).to_dict())

    @bp.route("/players", methods=["POST"], endpoint="create_player")
    @validated_body(CREATE_PLAYER)
    @require_token
    def create_player(payload: dict):
        return jsonify(service.create(payload).to_dict())

    @bp.route("/players/<player_id>", methods=["PUT"], endpoint="update_player")
    @validated_body(UPDATE_PLAYER)
    @require_token
    def update_player(player_id: str, payload: dict):
        pid = parse_id(player_id, ENTITY)
        service.update(pid, payload)
        return jsonify({"message": f"{ENTITY} {pid} updated"})

    @bp.route("/players/<player_id>", methods=["DELETE"], endpoint="delete_player")
    @require_token
    def delete_player(player_id: str):
        pid = parse_id(player_id, ENTITY)
        service.delete(pid)
        return jsonify({"message": f"{ENTITY} {pid} deleted"})
