import pytest
from pydantic import ValidationError

from core.domain.models import Account, Credentials, JobRequest, OAuthToken, ServiceMatrixEntry, ServiceType


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("C", ServiceType.COLLECTION),
        ("c", ServiceType.COLLECTION),
        ("collection", ServiceType.COLLECTION),
        ("D", ServiceType.DELIVERY),
        (" Delivery ", ServiceType.DELIVERY),
    ],
)
def test_service_type_tags_are_normalised(raw, expected):
    entry = ServiceMatrixEntry.model_validate({"Type": raw})
    assert entry.type == expected


def test_unknown_service_type_is_kept_verbatim():
    entry = ServiceMatrixEntry.model_validate({"Type": "X"})
    assert entry.type == "X"
    assert entry.type not in (ServiceType.COLLECTION, ServiceType.DELIVERY)


def test_matrix_entry_reads_pascal_case_and_nulls():
    entry = ServiceMatrixEntry.model_validate(
        {"ServiceLevelId": 5, "ServiceMatrixId": 10, "AdvanceDays": None, "Unknown": 1}
    )
    assert entry.service_level_id == 5
    assert entry.service_matrix_id == 10
    assert entry.advance_days is None


def test_account_keeps_opaque_fields():
    account = Account.model_validate({"AccountId": 7, "Name": "Acme"})
    assert account.account_id == 7
    assert account.model_extra == {"Name": "Acme"}


def test_token_requires_access_token():
    with pytest.raises(ValidationError):
        OAuthToken.model_validate({"token_type": "bearer"})
    token = OAuthToken.model_validate({"access_token": "abc", "expires_in": 3600})
    assert token.access_token == "abc"


def test_credentials_are_immutable_and_hide_password():
    creds = Credentials(username="demo", password="s3cret", base_url="https://auth")
    with pytest.raises(ValidationError):
        creds.username = "other"
    assert "s3cret" not in repr(creds)
    assert creds.password.get_secret_value() == "s3cret"


def test_job_request_payload_uses_portal_job_names():
    job = JobRequest(
        account_id=1,
        service_level_id=5,
        collection_date=20240227,
        collection_address1="From",
        delivery_date=20240229,
        delivery_address1="To",
    )
    payload = job.to_payload()
    assert payload["AccountId"] == 1
    assert payload["ServiceLevelId"] == 5
    assert payload["CollectionDate"] == 20240227
    assert payload["DeliveryDate"] == 20240229
    assert payload["CollectionAddress1"] == "From"
    assert payload["Weight"] == 0
    assert type(payload["Weight"]) is int
    assert job.model_dump_json(by_alias=True).endswith('"Weight":0}')
    assert payload["CollectionTime"] == 0
