import pytest

from fairflow.errors import CompanyError, ErrorCode


def test_message_matches_code():
    error = CompanyError(ErrorCode.INVALID_TEAM_NAME)
    assert str(error) == "Team name can only be between 1 and 10 characters"
    assert error.code is ErrorCode.INVALID_TEAM_NAME


def test_numeric_code_is_accepted():
    error = CompanyError(int(ErrorCode.ARITHMETIC_OVERFLOW))
    assert error.code is ErrorCode.ARITHMETIC_OVERFLOW
    assert error.args == ("Arithmetic overflow",)


def test_codes_start_at_custom_error_base():
    error = CompanyError(6000)
    assert error.code is ErrorCode.INVALID_PERCENTAGE
    assert str(error) == (
        "Increment and Decrement Percentage can only be in between 0 and 100"
    )


def test_codes_are_contiguous():
    count = len(ErrorCode)
    codes = [CompanyError(value).code for value in range(6000, 6000 + count)]
    assert set(codes) == set(ErrorCode)
    with pytest.raises(ValueError):
        CompanyError(6000 + count)


def test_every_code_has_a_distinct_message():
    messages = [str(CompanyError(code)) for code in ErrorCode]
    assert all(messages)
    assert len(set(messages)) == len(messages)
    assert messages == [code.message for code in ErrorCode]


def test_unknown_code_is_rejected():
    with pytest.raises(ValueError):
        CompanyError(42)


def test_error_can_be_raised_and_caught():
    error = CompanyError(ErrorCode.MAX_TEAMS_REACHED)
    with pytest.raises(CompanyError) as excinfo:
        raise error
    assert excinfo.value is error
    assert error.code is ErrorCode.MAX_TEAMS_REACHED
    assert str(error) == "Maximum number of teams reached"
    assert error.args == ("Maximum number of teams reached",)