from __future__ import annotations

from flask import Blueprint, jsonify, request

from ..common.http import page_params, parse_id
from ..common.validators import validated_body
from ..container import Container
from ..core.enums import Entity
from .requests import CREATE_STAT, UPDATE_STAT

ENTITY = Entity.STAT.value


def register(bp: Blueprint, container: Container) -> None:
    service = container.stat_service
    require_token = container.auth_gate.require_token

    @bp.route("/stats", methods=["GET"], endpoint="list_stats")
    def list_stats():
        offset, limit = page_params(request.args)
        return jsonify([s.to_dict() for s in service.list_page(offset=offset, limit=limit)])

    @bp.route("/stats/<stat_id>", methods=["GET"], endpoint="get_stat")
    def get_stat(stat_id: str):
        return jsonify(service.get(parse_id(stat_id, ENTITY)).to_dict())

    @bp.route("/stats", methods=["POST"], endpoint="create_stat")
    @validated_body(CREATE_STAT)
    @require_token
    def create_stat(payload: dict):
        return jsonify(service.create(payload).to_dict())

    @bp.route("/stats/<stat_id>", methods=["PUT"], endpoint="update_stat")
    @validated_body(UPDATE_STAT)
    @require_token
    def update_stat(stat_id: str, payload: dict):
        sid = parse_id(stat_id, ENTITY)
        service.update(sid, payload)
        return jsonify({"message": f"{ENTITY} {sid} updated"})

    @bp.route("/stats/<stat_id>", methods=["DELETE"], endpoint="delete_stat")
    @require_token
    def delete_stat(stat_id: str):
        sid = parse_id(stat_id, ENTITY)
        service.delete(sid)
        return jsonify({"message": f"{ENTITY} {sid} deleted"})
