from __future__ import annotations

from flask import Flask

from ..common.http import error_response, ok, ok_list, person_to_dict, read_payload
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/people", methods=["GET"], endpoint="people_list")
    def people_list():
        try:
            people = container.roster_service.list()
        except DomainError as e:
            return error_response(e)
        return ok_list(person_to_dict(p) for p in people)

    @app.route("/api/people", methods=["POST"], endpoint="people_add")
    def people_add():
        payload = read_payload()
        try:
            person = container.roster_service.add(
                name=payload.get("name"),
                contact=payload.get("contact"),
                external_id=payload.get("external_id"),
            )
        except DomainError as e:
            return error_response(e)
        return ok(person_to_dict(person), status=201, message="Person added successfully")

    @app.route("/api/people/<external_id>", methods=["GET"], endpoint="people_get")
    def people_get(external_id: str):
        try:
            person = container.roster_service.find_by_external_id(external_id)
        except DomainError as e:
            return error_response(e)
        return ok(person_to_dict(person))
