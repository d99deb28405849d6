import pytest
from fastapi.testclient import TestClient

from garage_api.app.core.store import MemoryStore
from garage_api.app.main import create_app


class TestCreateCustomer:
    """POST /customers"""

    def test_create_customer_success(self, client, customer_payload):
        """A valid customer is created and returned with id and createdAt"""
        response = client.post("/customers", json=customer_payload)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Customer created successfully"
        customer = body["customer"]
        assert customer["name"] == "Jane Doe"
        assert customer["contact"] == "1234567890"
        assert customer["email"] == "jane@example.com"
        assert customer["id"]
        assert customer["createdAt"]

    def test_created_customer_is_listed(self, client, customer_payload):
        """The returned identifier is retrievable via the list endpoint"""
        created = client.post("/customers", json=customer_payload).json()["customer"]

        response = client.get("/customers")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Customers retrieved successfully"
        assert [c["id"] for c in body["customers"]] == [created["id"]]

    def test_get_customer_by_id(self, client, customer_payload):
        created = client.post("/customers", json=customer_payload).json()["customer"]

        response = client.get(f"/customers/{created['id']}")

        assert response.status_code == 200
        assert response.json()["customer"] == created

    def test_get_unknown_customer_returns_404(self, client):
        response = client.get("/customers/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"error": "Customer not found"}

    def test_duplicate_email_rejected(self, client, customer_payload):
        """A second customer with the same email is rejected"""
        assert client.post("/customers", json=customer_payload).status_code == 201

        second = dict(customer_payload, name="John Doe", contact="0987654321")
        response = client.post("/customers", json=second)

        assert response.status_code == 400
        assert response.json()["error"].startswith("Email already exists")
        assert len(client.get("/customers").json()["customers"]) == 1

    def test_different_emails_both_accepted(self, client, customer_payload):
        client.post("/customers", json=customer_payload)
        other = dict(customer_payload, email="john@example.com")

        assert client.post("/customers", json=other).status_code == 201
        assert len(client.get("/customers").json()["customers"]) == 2

    @pytest.mark.parametrize("contact", ["12345", "12345678901", "12345abcde", "123 456 7890"])
    def test_invalid_contact_rejected(self, client, customer_payload, contact):
        response = client.post("/customers", json=dict(customer_payload, contact=contact))

        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid contact format")

    @pytest.mark.parametrize("email", ["bademail", "user@domain", "@", "a@.b"])
    def test_invalid_email_rejected(self, client, customer_payload, email):
        response = client.post("/customers", json=dict(customer_payload, email=email))

        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid email format")

    def test_minimal_email_accepted(self, client, customer_payload):
        response = client.post("/customers", json=dict(customer_payload, email="a@b.com"))

        assert response.status_code == 201

    def test_email_checked_before_contact(self, client):
        """Format errors are reported in order: email first"""
        payload = {"name": "X", "contact": "123", "email": "bademail"}

        response = client.post("/customers", json=payload)

        assert response.json()["error"].startswith("Invalid email format")

    @pytest.mark.parametrize("missing", ["name", "contact", "email"])
    def test_missing_field_rejected_and_nothing_stored(self, client, customer_payload, missing):
        payload = {k: v for k, v in customer_payload.items() if k != missing}

        response = client.post("/customers", json=payload)

        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid input")
        assert client.get("/customers").json()["customers"] == []

    @pytest.mark.parametrize(
        "field,value",
        [("name", 42), ("name", ""), ("contact", 1234567890), ("email", None), ("email", True)],
    )
    def test_wrong_type_rejected(self, client, customer_payload, field, value):
        response = client.post("/customers", json=dict(customer_payload, **{field: value}))

        assert response.status_code == 400
        assert response.json()["error"] == (
            "Invalid input: Ensure 'name', 'contact', and 'email' are provided and are strings."
        )

    def test_non_object_body_rejected(self, client):
        response = client.post("/customers", json=["Jane", "1234567890"])

        assert response.status_code == 400
        assert "error" in response.json()

    def test_malformed_json_rejected(self, client):
        response = client.post(
            "/customers",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid input")


class FailingStore(MemoryStore):
    def insert(self, key, record):
        raise RuntimeError("disk on fire")

    def values(self):
        return []


class TestServerErrors:
    """Unexpected failures are reported as a generic 500"""

    def test_store_failure_returns_500(self, settings, customer_payload, caplog):
        app = create_app(settings)
        app.state.store.customers = FailingStore("customers")

        client = TestClient(app)
        response = client.post("/customers", json=customer_payload)

        assert response.status_code == 500
        assert response.json() == {"error": "Server error occurred while creating the customer."}
        assert "Failed to create customer" in caplog.text
