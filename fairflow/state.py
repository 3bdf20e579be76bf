"""Account records kept by the payroll program."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from .salary import ANCHOR_DISCRIMINATOR

_LENGTH_PREFIX = 4
_PUBKEY = 32


@dataclass
class Company:
    """A company owned by an employer, with its treasury and teams."""

    MAX_NAME_LEN: ClassVar[int] = 10
    MAX_TEAMS: ClassVar[int] = 5
    INIT_SPACE: ClassVar[int] = (
        _LENGTH_PREFIX + MAX_NAME_LEN + _PUBKEY + _LENGTH_PREFIX + MAX_TEAMS * _PUBKEY + 3
    )
    SPACE: ClassVar[int] = ANCHOR_DISCRIMINATOR + INIT_SPACE

    company_name: str
    treasury: bytes
    teams: list[bytes] = field(default_factory=list)
    inc_percent: int = 0
    dec_percent: int = 0
    bump: int = 0


@dataclass
class Team:
    """A team within a company, listing its employees' salary wallets."""

    MAX_NAME_LEN: ClassVar[int] = 10
    MAX_EMPLOYEES: ClassVar[int] = 5
    INIT_SPACE: ClassVar[int] = (
        _LENGTH_PREFIX + MAX_NAME_LEN + _LENGTH_PREFIX + MAX_EMPLOYEES * _PUBKEY + 1
    )
    SPACE: ClassVar[int] = ANCHOR_DISCRIMINATOR + INIT_SPACE

    team_name: str
    employees: list[bytes] = field(default_factory=list)
    bump: int = 0


@dataclass
class Employee:
    """An employee's payroll record with feedback totals for the current period."""

    MAX_NAME_LEN: ClassVar[int] = 10
    INIT_SPACE: ClassVar[int] = _LENGTH_PREFIX + MAX_NAME_LEN + 3 * _PUBKEY + 1 + 1 + 1 + 2 + 1 + 1
    SPACE: ClassVar[int] = ANCHOR_DISCRIMINATOR + INIT_SPACE

    employee_name: str
    team: bytes
    salary_account: bytes
    employee_owned_salary_wallet: bytes
    last_payroll_feedback: int = 0
    current_total_feedback_score: int = 0
    current_total_feedbacks: int = 0
    encrypted_current_salary: int = 0
    salary_account_bump: int = 0
    bump: int = 0