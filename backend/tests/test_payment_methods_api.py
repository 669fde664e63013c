"""Tests for the payment methods API endpoints."""

from unittest.mock import patch
from uuid import uuid4

from sqlalchemy.exc import OperationalError

from dlsolutions.models.payment_method import PaymentMethod
from dlsolutions.repositories.payment_method_repository import PaymentMethodRepository
from tests.conftest import auth_headers


def _add(client, token="tok_visa4242", user_id="u1"):
    response = client.post(
        "/payment-methods", json={"token": token}, headers=auth_headers(user_id)
    )
    assert response.status_code == 200, response.text
    return response.json()


class TestAuthentication:
    def test_missing_header(self, client):
        response = client.get("/payment-methods")
        assert response.status_code == 401
        assert response.json()["detail"] == "Missing authentication token"

    def test_wrong_scheme(self, client):
        response = client.get("/payment-methods", headers={"Authorization": "Basic abc"})
        assert response.status_code == 401

    def test_empty_bearer(self, client):
        response = client.get("/payment-methods", headers={"Authorization": "Bearer "})
        assert response.status_code == 401

    def test_unresolvable_token(self, client):
        response = client.get("/payment-methods", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401
        assert response.json() == {"detail": "Invalid token"}

    def test_every_route_requires_auth(self, client):
        pm_id = uuid4()
        assert client.post("/payment-methods", json={"token": "tok"}).status_code == 401
        assert client.delete(f"/payment-methods/{pm_id}").status_code == 401
        assert client.put(f"/payment-methods/{pm_id}/default").status_code == 401


class TestListPaymentMethods:
    def test_list_empty(self, client):
        response = client.get("/payment-methods", headers=auth_headers())
        assert response.status_code == 200
        assert response.json() == []

    def test_list_newest_first(self, client):
        first = _add(client, "tok_visa1111")
        second = _add(client, "tok_visa2222")

        response = client.get("/payment-methods", headers=auth_headers())
        data = response.json()
        assert [pm["id"] for pm in data] == [second["id"], first["id"]]
        assert data[1]["is_default"] is True

    def test_list_is_owner_scoped(self, client):
        _add(client, "tok_visa1111", user_id="u1")
        _add(client, "tok_visa2222", user_id="u2")

        data = client.get("/payment-methods", headers=auth_headers("u2")).json()
        assert len(data) == 1
        assert data[0]["user_id"] == "u2"
        assert data[0]["card_number"] == "2222"

    def test_list_store_failure(self, client):
        with patch.object(
            PaymentMethodRepository,
            "get_all_for_user",
            side_effect=OperationalError("SELECT", {}, Exception("down")),
        ):
            response = client.get("/payment-methods", headers=auth_headers())
        assert response.status_code == 500
        assert response.json() == {"detail": "Database error"}


class TestAddPaymentMethod:
    def test_add_first_card(self, client):
        data = _add(client, "tok_visa4242")
        assert data["is_default"] is True
        assert data["card_number"] == "4242"
        assert data["expiry"] == "8/31"
        assert data["holder_name"] == "Jane Doe"
        assert data["stripe_card_id"].startswith("card_")

    def test_add_second_card_not_default(self, client):
        _add(client, "tok_visa1111")
        data = _add(client, "tok_visa2222")
        assert data["is_default"] is False

    def test_missing_token(self, client):
        response = client.post("/payment-methods", json={}, headers=auth_headers())
        assert response.status_code == 400

    def test_blank_token(self, client):
        response = client.post("/payment-methods", json={"token": "  "}, headers=auth_headers())
        assert response.status_code == 400

    def test_processor_failure(self, client, processor, db_session):
        processor.fail_attach = True
        response = client.post(
            "/payment-methods", json={"token": "tok_visa4242"}, headers=auth_headers()
        )
        assert response.status_code == 500
        assert response.json() == {"detail": "Payment processor error"}
        assert db_session.query(PaymentMethod).count() == 0


class TestDeletePaymentMethod:
    def test_delete(self, client):
        pm = _add(client)
        response = client.delete(f"/payment-methods/{pm['id']}", headers=auth_headers())
        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert client.get("/payment-methods", headers=auth_headers()).json() == []

    def test_delete_default_promotes(self, client):
        first = _add(client, "tok_visa1111")
        _add(client, "tok_visa2222")
        third = _add(client, "tok_visa3333")

        client.delete(f"/payment-methods/{first['id']}", headers=auth_headers())

        data = client.get("/payment-methods", headers=auth_headers()).json()
        defaults = [pm["id"] for pm in data if pm["is_default"]]
        assert defaults == [third["id"]]

    def test_delete_not_found(self, client):
        response = client.delete(f"/payment-methods/{uuid4()}", headers=auth_headers())
        assert response.status_code == 404
        assert response.json()["detail"] == "Payment method not found"

    def test_delete_other_owner(self, client):
        theirs = _add(client, user_id="u2")
        response = client.delete(f"/payment-methods/{theirs['id']}", headers=auth_headers("u1"))
        assert response.status_code == 404
        assert len(client.get("/payment-methods", headers=auth_headers("u2")).json()) == 1

    def test_delete_invalid_id(self, client):
        response = client.delete("/payment-methods/not-a-uuid", headers=auth_headers())
        assert response.status_code == 404
        assert response.json()["detail"] == "Payment method not found"


class TestSetDefaultPaymentMethod:
    def test_set_default(self, client):
        first = _add(client, "tok_visa1111")
        second = _add(client, "tok_visa2222")

        response = client.put(
            f"/payment-methods/{second['id']}/default", headers=auth_headers()
        )
        assert response.status_code == 200
        assert response.json() == {"success": True}

        data = {pm["id"]: pm["is_default"] for pm in client.get(
            "/payment-methods", headers=auth_headers()
        ).json()}
        assert data == {first["id"]: False, second["id"]: True}

    def test_set_default_not_found(self, client):
        response = client.put(f"/payment-methods/{uuid4()}/default", headers=auth_headers())
        assert response.status_code == 404

    def test_set_default_invalid_id(self, client):
        _add(client, "tok_visa1111")
        response = client.put("/payment-methods/abc/default", headers=auth_headers())
        assert response.status_code == 404
        assert response.json()["detail"] == "Payment method not found"

    def test_set_default_other_owner(self, client):
        theirs = _add(client, "tok_visa1111", user_id="u2")
        _add(client, "tok_visa2222", user_id="u2")
        _add(client, "tok_visa3333", user_id="u1")

        response = client.put(
            f"/payment-methods/{theirs['id']}/default", headers=auth_headers("u1")
        )
        assert response.status_code == 404
        data = client.get("/payment-methods", headers=auth_headers("u2")).json()
        assert [pm["is_default"] for pm in data] == [False, True]


class TestScenario:
    def test_full_lifecycle(self, client):
        a = _add(client, "tok_visa1111")
        assert a["is_default"] is True
        b = _add(client, "tok_visa2222")
        assert b["is_default"] is False

        listed = client.get("/payment-methods", headers=auth_headers()).json()
        assert [(pm["id"], pm["is_default"]) for pm in listed] == [
            (b["id"], False),
            (a["id"], True),
        ]

        client.put(f"/payment-methods/{b['id']}/default", headers=auth_headers())
        listed = client.get("/payment-methods", headers=auth_headers()).json()
        assert [(pm["id"], pm["is_default"]) for pm in listed] == [
            (b["id"], True),
            (a["id"], False),
        ]

        client.delete(f"/payment-methods/{b['id']}", headers=auth_headers())
        listed = client.get("/payment-methods", headers=auth_headers()).json()
        assert [(pm["id"], pm["is_default"]) for pm in listed] == [(a["id"], True)]
