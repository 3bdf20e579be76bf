"""Error codes reported by the payroll program."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Program error codes, numbered from the custom-error base 6000."""

    INVALID_PERCENTAGE = 6000
    INVALID_COMPANY_NAME = 6001
    INVALID_TEAM_NAME = 6002
    MAX_TEAMS_REACHED = 6003
    INVALID_EMPLOYEE_NAME = 6004
    EMPLOYEE_NOT_IN_TEAM = 6005
    CANNOT_VOTE_FOR_SELF = 6006
    UNAUTHORIZED = 6007
    INVALID_FEEDBACK_RATING = 6008
    NO_FEEDBACKS_RECEIVED = 6009
    INSUFFICIENT_FUNDS = 6010
    PAYMENT_TRANSFER_FAILED = 6011
    INVALID_TREASURY = 6012
    INVALID_SALARY_ACCOUNT = 6013
    FUNDING_TREASURY_FAILED = 6014
    TRANSACTION_FAILED = 6015
    ARITHMETIC_OVERFLOW = 6016

    @property
    def message(self) -> str:
        """Human-readable description of the error."""
        return _MESSAGES[self]


_MESSAGES = {
    ErrorCode.INVALID_PERCENTAGE: (
        "Increment and Decrement Percentage can only be in between 0 and 100"
    ),
    ErrorCode.INVALID_COMPANY_NAME: "Company name can only be between 1 and 10 characters",
    ErrorCode.INVALID_TEAM_NAME: "Team name can only be between 1 and 10 characters",
    ErrorCode.MAX_TEAMS_REACHED: "Maximum number of teams reached",
    ErrorCode.INVALID_EMPLOYEE_NAME: "Employee name can only be between 1 and 10 characters",
    ErrorCode.EMPLOYEE_NOT_IN_TEAM: (
        "Cannot submit feedback score for Employee outside of the team"
    ),
    ErrorCode.CANNOT_VOTE_FOR_SELF: "Cannot submit feedback score for yourself",
    ErrorCode.UNAUTHORIZED: "Unauthorized to provide feedback",
    ErrorCode.INVALID_FEEDBACK_RATING: "Feeback rating must be between 1 and 5",
    ErrorCode.NO_FEEDBACKS_RECEIVED: "No feedbacks received for this payroll period",
    ErrorCode.INSUFFICIENT_FUNDS: (
        "The treasury has insufficient funds to process this payment"
    ),
    ErrorCode.PAYMENT_TRANSFER_FAILED: "Salary payment transfer failed",
    ErrorCode.INVALID_TREASURY: "Invalid treasury provided",
    ErrorCode.INVALID_SALARY_ACCOUNT: "Invalid salary account provided",
    ErrorCode.FUNDING_TREASURY_FAILED: "Funding treasury failed",
    ErrorCode.TRANSACTION_FAILED: "Transaction failed",
    ErrorCode.ARITHMETIC_OVERFLOW: "Arithmetic overflow",
}


class CompanyError(Exception):
    """Raised when an instruction is rejected by the program."""

    def __init__(self, code):
        self.code = ErrorCode(code)
        super().__init__(self.code.message)