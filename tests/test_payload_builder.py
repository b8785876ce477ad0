import pytest
from conftest import VALID_FORM
from lagos_price.core.config import MSG_MISSING_FIELDS, TITLES, TOWNS
from lagos_price.schemas.form import FormState
from lagos_price.utils.payload_builder import FormValidationError, build_payload, field_label


def test_counts_coerced_and_strings_verbatim():
    payload = build_payload(FormState(**VALID_FORM))

    assert payload.model_dump() == {
        "bedrooms": 4,
        "bathrooms": 3,
        "toilets": 5,
        "parking_space": 2,
        "town": "Lekki",
        "title": "Detached Duplex",
    }


def test_key_order_matches_service_contract():
    payload = build_payload(FormState(**VALID_FORM))
    assert list(payload.model_dump()) == [
        "bedrooms",
        "bathrooms",
        "toilets",
        "parking_space",
        "town",
        "title",
    ]


def test_zero_counts_are_allowed():
    form = FormState(**{**VALID_FORM, "parking_space": "0", "toilets": "0"})
    payload = build_payload(form)
    assert payload.parking_space == 0
    assert payload.toilets == 0


def test_whitespace_is_ignored():
    form = FormState(**{**VALID_FORM, "bedrooms": " 3 "})
    assert build_payload(form).bedrooms == 3


@pytest.mark.parametrize("town", TOWNS)
def test_every_town_accepted(town):
    assert build_payload(FormState(**{**VALID_FORM, "town": town})).town == town


@pytest.mark.parametrize("title", TITLES)
def test_every_title_accepted(title):
    assert build_payload(FormState(**{**VALID_FORM, "title": title})).title == title


def test_missing_field_reported_first():
    form = FormState(**{**VALID_FORM, "toilets": "", "town": ""})
    with pytest.raises(FormValidationError) as exc:
        build_payload(form)
    assert exc.value.message == MSG_MISSING_FIELDS
    assert exc.value.field == "toilets"


def test_empty_form_rejected():
    with pytest.raises(FormValidationError) as exc:
        build_payload(FormState())
    assert exc.value.field == "bedrooms"


@pytest.mark.parametrize("value", ["abc", "2.5", "-1", "1e3x"])
def test_non_numeric_or_negative_count_rejected(value):
    form = FormState(**{**VALID_FORM, "bathrooms": value})
    with pytest.raises(FormValidationError) as exc:
        build_payload(form)
    assert exc.value.field == "bathrooms"
    assert exc.value.message == "Bathrooms must be a whole number of 0 or more."


def test_town_outside_closed_set_rejected():
    form = FormState(**{**VALID_FORM, "town": "Abuja"})
    with pytest.raises(FormValidationError) as exc:
        build_payload(form)
    assert exc.value.field == "town"


def test_title_outside_closed_set_rejected():
    form = FormState(**{**VALID_FORM, "title": "Castle"})
    with pytest.raises(FormValidationError) as exc:
        build_payload(form)
    assert exc.value.field == "title"


def test_field_label():
    assert field_label("parking_space") == "Parking Space"
    assert field_label("bedrooms") == "Bedrooms"
