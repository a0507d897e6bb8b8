import pytest

from supportdesk.customers.models import CustomerType, get_type_name, get_type_prefix
from supportdesk.customers.service import CustomerService


def test_register_customer_assigns_increasing_ids(customer_service):
    ids = [customer_service.register_customer(f"User {index}", "", "") for index in range(3)]

    assert ids == ["CUST-1001", "CUST-1002", "CUST-1003"]


def test_register_vip_customer_prefixes_name(customer_service, event_logger):
    customer_id = customer_service.register_customer("Ann", "a@x.com", "555", CustomerType.VIP)

    customer = customer_service.get_customer(customer_id)
    assert customer is not None
    assert customer.name == "[VIP] Ann"
    assert customer.type is CustomerType.VIP
    assert customer.email == "a@x.com"
    assert customer.phone == "555"
    assert event_logger.messages == [f"Registered customer {customer_id} (VIP)"]


@pytest.mark.parametrize(
    ("customer_type", "expected_name"),
    [
        (CustomerType.REGULAR, "Bob"),
        (CustomerType.PREMIUM, "[PREMIUM] Bob"),
        (CustomerType.VIP, "[VIP] Bob"),
    ],
)
def test_type_prefix_is_baked_into_stored_name(customer_service, customer_type, expected_name):
    customer_id = customer_service.register_customer("Bob", "b@x.com", "1", customer_type)

    assert customer_service.get_customer(customer_id).name == expected_name


def test_register_customer_defaults_to_regular(customer_service, event_logger):
    customer_id = customer_service.register_customer("Eve", "e@x.com", "2")

    assert customer_service.get_customer(customer_id).type is CustomerType.REGULAR
    assert event_logger.messages[-1] == f"Registered customer {customer_id} (Regular)"


def test_register_customer_accepts_empty_fields(customer_service):
    customer_id = customer_service.register_customer("", "", "")

    customer = customer_service.get_customer(customer_id)
    assert customer is not None
    assert (customer.name, customer.email, customer.phone) == ("", "", "")


def test_get_customer_returns_none_when_missing(customer_service):
    assert customer_service.get_customer("CUST-9999") is None


def test_get_all_customers_is_ordered_and_repeatable(customer_service):
    first = customer_service.register_customer("A", "a@x.com", "1")
    second = customer_service.register_customer("B", "b@x.com", "2", CustomerType.PREMIUM)

    listing = customer_service.get_all_customers()

    assert [customer.id for customer in listing] == [first, second]
    assert customer_service.get_all_customers() == listing


def test_counter_seed_is_configurable(customer_repository):
    service = CustomerService(customer_repository, counter_seed=41)

    assert service.register_customer("Zed", "z@x.com", "0") == "CUST-42"


def test_services_keep_independent_counters(customer_repository):
    first = CustomerService(customer_repository)
    second = CustomerService(customer_repository)

    assert first.register_customer("A", "", "") == "CUST-1001"
    assert second.register_customer("B", "", "") == "CUST-1001"
    assert [customer.name for customer in customer_repository.find_all()] == ["B"]


def test_type_helpers_cover_every_type():
    assert get_type_name(CustomerType.VIP) == "VIP"
    assert get_type_name(CustomerType.PREMIUM) == "Premium"
    assert get_type_name(CustomerType.REGULAR) == "Regular"
    assert get_type_prefix(CustomerType.REGULAR) == ""
    for customer_type in CustomerType:
        assert get_type_name(customer_type)


def test_failing_event_logger_does_not_abort_registration(customer_repository, exploding_logger, caplog):
    service = CustomerService(customer_repository, event_logger=exploding_logger)

    customer_id = service.register_customer("Ann", "a@x.com", "555", CustomerType.PREMIUM)

    assert customer_id == "CUST-1001"
    assert service.get_customer(customer_id).name == "[PREMIUM] Ann"
    assert "Event logger failed" in caplog.text
