import pytest
from fastapi.testclient import TestClient

from garage_api.app.core.config import Settings
from garage_api.app.core.db import init_db
from garage_api.app.core.errors import RecordExistsError
from garage_api.app.core.store import GarageStore, MemoryStore, RecordStore, SQLiteStore, build_store
from garage_api.app.main import create_app
from garage_api.app.schemas.customer import Customer, CustomerCreate, new_customer
from garage_api.app.schemas.service import ServiceRecord, ServiceRecordCreate, new_service_record


def make_customer(email="jane@example.com"):
    return new_customer(CustomerCreate(name="Jane", contact="1234567890", email=email))


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "garage.db")


@pytest.fixture(params=["memory", "sqlite"])
def customer_store(request, db_path):
    """A customer store for each backend"""
    if request.param == "memory":
        return MemoryStore("customers")
    init_db(db_path)
    return SQLiteStore("customers", Customer, db_path)


class TestRecordStore:
    def test_insert_then_get(self, customer_store):
        customer = make_customer()

        customer_store.insert(customer.id, customer)

        assert customer_store.get(customer.id) == customer

    def test_get_missing_returns_none(self, customer_store):
        assert customer_store.get("nope") is None

    def test_values_in_insertion_order(self, customer_store):
        customers = [make_customer(f"user{i}@example.com") for i in range(4)]
        for customer in customers:
            customer_store.insert(customer.id, customer)

        assert [c.id for c in customer_store.values()] == [c.id for c in customers]

    def test_duplicate_key_rejected(self, customer_store):
        first = make_customer("first@example.com")
        second = make_customer("second@example.com")
        customer_store.insert(first.id, first)

        with pytest.raises(RecordExistsError):
            customer_store.insert(first.id, second)

        assert customer_store.get(first.id).email == "first@example.com"
        assert len(customer_store.values()) == 1


class TestSQLiteStore:
    def test_collections_are_isolated(self, db_path):
        init_db(db_path)
        customers = SQLiteStore("customers", Customer, db_path)
        services = SQLiteStore("services", ServiceRecord, db_path)
        customer = make_customer()
        customers.insert(customer.id, customer)

        assert services.values() == []
        assert services.get(customer.id) is None

    def test_dates_round_trip(self, db_path):
        init_db(db_path)
        store = SQLiteStore("services", ServiceRecord, db_path)
        record = new_service_record(
            ServiceRecordCreate(vehicle_id="v-1", description="Tyres", cost=80.0, date="2024-01-15T08:00:00Z")
        )
        store.insert(record.id, record)

        assert store.get(record.id).date == record.date

    def test_records_survive_rebuild(self, db_path):
        settings = Settings(storage_backend="sqlite", database_url=db_path)
        customer = make_customer()
        build_store(settings).customers.insert(customer.id, customer)

        reopened = build_store(settings)

        assert [c.id for c in reopened.customers.values()] == [customer.id]

    def test_init_db_is_idempotent(self, db_path):
        assert init_db(db_path) == 1
        assert init_db(db_path) == 1


class TestBuildStore:
    def test_memory_backend(self):
        store = build_store(Settings(storage_backend="memory"))

        assert isinstance(store, GarageStore)
        assert isinstance(store.invoices, MemoryStore)

    def test_sqlite_backend(self, db_path):
        store = build_store(Settings(storage_backend="sqlite", database_url=db_path))

        assert isinstance(store.vehicles, SQLiteStore)

    def test_unknown_backend_rejected(self):
        with pytest.raises(ValueError):
            build_store(Settings(storage_backend="redis"))


class TestSQLiteApp:
    def test_api_over_sqlite(self, db_path):
        """Customers created through the API are stored in sqlite"""
        settings = Settings(storage_backend="sqlite", database_url=db_path, log_level="WARNING")
        client = TestClient(create_app(settings))
        payload = {"name": "Jane", "contact": "1234567890", "email": "jane@example.com"}

        assert client.post("/customers", json=payload).status_code == 201
        assert client.post("/customers", json=payload).status_code == 400

        restarted = TestClient(create_app(settings))
        assert len(restarted.get("/customers").json()["customers"]) == 1

    def test_infinite_cost_does_not_break_listing(self, db_path):
        settings = Settings(storage_backend="sqlite", database_url=db_path, log_level="WARNING")
        client = TestClient(create_app(settings))
        body = '{"vehicleId": "v", "description": "d", "cost": Infinity, "date": "2024-01-01"}'

        response = client.post("/services", content=body, headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        listing = client.get("/services")
        assert listing.status_code == 200
        assert listing.json()["services"] == []


class IncompleteStore(RecordStore):
    def insert(self, key, record):
        pass

    def get(self, key):
        return None


class TestRecordStoreInterface:
    def test_incomplete_backend_cannot_be_created(self):
        with pytest.raises(TypeError):
            IncompleteStore("customers")

    def test_record_store_is_abstract(self):
        with pytest.raises(TypeError):
            RecordStore("customers")


class TestAppSettings:
    def test_debug_flag_reaches_fastapi(self):
        assert create_app(Settings(storage_backend="memory", debug=True)).debug is True
        assert create_app(Settings(storage_backend="memory", debug=False)).debug is False
