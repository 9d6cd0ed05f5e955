import pytest

from scratchweb.status_code import StatusCode


@pytest.mark.parametrize(
    "code, phrase",
    [
        (StatusCode.OK, "OK"),
        (StatusCode.BAD_REQUEST, "Bad Request"),
        (StatusCode.NOT_FOUND, "Not Found"),
    ],
)
def test_reason_phrase(code, phrase):
    assert code.reason_phrase() == phrase


@pytest.mark.parametrize(
    "code, number",
    [(StatusCode.OK, 200), (StatusCode.BAD_REQUEST, 400), (StatusCode.NOT_FOUND, 404)],
)
def test_display_is_numeric(code, number):
    assert str(code) == str(number)
    assert int(code) == number


def test_lookup_by_number():
    assert StatusCode(404) is StatusCode.NOT_FOUND
    with pytest.raises(ValueError):
        StatusCode(500)