from http import HTTPStatus

from django.test import RequestFactory

from stockroom.core.api import error_response, success_response
from stockroom.core.views import not_found, server_error


def test_success_response_with_data():
    response = success_response("Fetched", {"id": 1})

    assert response.status_code == HTTPStatus.OK
    assert response.data == {"success": True, "message": "Fetched", "data": {"id": 1}}


def test_success_response_keeps_falsy_data():
    response = success_response("Listed", [], status_code=HTTPStatus.CREATED)

    assert response.status_code == HTTPStatus.CREATED
    assert response.data["data"] == []


def test_success_response_without_data():
    assert success_response("Deleted").data == {"success": True, "message": "Deleted"}


def test_error_response():
    response = error_response("Nope", HTTPStatus.NOT_FOUND)

    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.data == {"error": "Nope"}


def test_json_error_pages():
    request = RequestFactory().get("/missing")

    assert not_found(request).status_code == HTTPStatus.NOT_FOUND
    assert server_error(request).status_code == HTTPStatus.INTERNAL_SERVER_ERROR
