"""In-memory execution of the payroll program's instructions."""

from __future__ import annotations

import hashlib

from .errors import CompanyError, ErrorCode
from .salary import LAMPORTS_PER_SOL, U16_MAX, encrypt_decrypt_salary
from .state import Company, Employee, Team

PROGRAM_ID_BASE58 = "FZJ5m8nT7mi78VGrGsCGSPRYSK69PS7U2rzvR3CwGcBP"

_B58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_MAX_SEED_LEN = 32
_MAX_SEEDS = 16
_PDA_MARKER = b"ProgramDerivedAddress"
_FIELD_PRIME = 2**255 - 19
_EDWARDS_D = (-121665 * pow(121666, _FIELD_PRIME - 2, _FIELD_PRIME)) % _FIELD_PRIME
_U64_MAX = 2**64 - 1


def _b58decode(text: str) -> bytes:
    number = 0
    for char in text:
        number = number * 58 + _B58_ALPHABET.index(char)
    body = number.to_bytes((number.bit_length() + 7) // 8, "big")
    leading_zeros = len(text) - len(text.lstrip("1"))
    return b"\0" * leading_zeros + body


PROGRAM_ID = _b58decode(PROGRAM_ID_BASE58)


def _is_on_curve(point: bytes) -> bool:
    """Whether 32 bytes decompress to a point on the ed25519 curve."""
    p = _FIELD_PRIME
    y = int.from_bytes(point, "little") & ((1 << 255) - 1)
    y2 = y * y % p
    u = (y2 - 1) % p
    v = (_EDWARDS_D * y2 + 1) % p
    ratio = u * pow(v, p - 2, p) % p
    return ratio == 0 or pow(ratio, (p - 1) // 2, p) == 1


def find_program_address(*args):
    """Derive an off-curve address and its bump seed from the given seeds."""
    seeds = [bytes(seed) for seed in args]
    if len(seeds) > _MAX_SEEDS - 1:
        raise ValueError(f"at most {_MAX_SEEDS - 1} seeds are allowed")
    for seed in seeds:
        if len(seed) > _MAX_SEED_LEN:
            raise ValueError(f"seed longer than {_MAX_SEED_LEN} bytes: {seed!r}")
    prefix = b"".join(seeds)
    for bump in range(255, 0, -1):
        digest = hashlib.sha256(prefix + bytes([bump]) + PROGRAM_ID + _PDA_MARKER).digest()
        if not _is_on_curve(digest):
            return digest, bump
    raise RuntimeError("unable to find a viable program address bump seed")


def _check_uint(value, bits: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < 2**bits:
        raise ValueError(f"{name} must be an unsigned {bits}-bit integer, got {value!r}")
    return value


def _pubkey(value) -> bytes:
    key = bytes(value)
    if len(key) != 32:
        raise ValueError(f"public key must be 32 bytes, got {len(key)}")
    return key


def _check_name(name: str, limit: int, code: ErrorCode) -> None:
    if not 0 < len(name.encode()) <= limit:
        raise CompanyError(code)


class Bank:
    """Lamport balances of system-owned accounts."""

    def __init__(self):
        self._balances: dict[bytes, int] = {}

    def deposit(self, address, lamports):
        """Credit an account with new lamports."""
        _check_uint(lamports, 64, "lamports")
        address = bytes(address)
        total = self.balance(address) + lamports
        if total > _U64_MAX:
            raise OverflowError("account balance overflow")
        self._balances[address] = total

    def balance(self, address):
        """Lamports held by an account; unknown accounts hold none."""
        return self._balances.get(bytes(address), 0)

    def transfer(self, source, destination, lamports):
        """Move lamports between accounts, refusing to overdraw the source."""
        _check_uint(lamports, 64, "lamports")
        source, destination = bytes(source), bytes(destination)
        if self.balance(source) < lamports:
            raise ValueError(
                f"insufficient lamports: has {self.balance(source)}, needs {lamports}"
            )
        self._balances[source] = self.balance(source) - lamports
        self._balances[destination] = self.balance(destination) + lamports


class FairflowProgram:
    """The payroll program: companies, teams, employees, feedback and payroll."""

    def __init__(self, bank):
        self.bank = bank
        self._accounts: dict[bytes, Company | Team | Employee] = {}

    # Addresses

    def company_address(self, company_name, employer):
        return find_program_address(b"company", company_name.encode(), _pubkey(employer))[0]

    def treasury_address(self, company_address):
        return find_program_address(b"treasury", _pubkey(company_address))[0]

    def team_address(self, team_name, company_name):
        return find_program_address(b"team", team_name.encode(), company_name.encode())[0]

    def employee_address(self, company_name, wallet):
        return find_program_address(b"employee", company_name.encode(), _pubkey(wallet))[0]

    def salary_address(self, company_name, employee_address):
        return find_program_address(
            b"salary", company_name.encode(), _pubkey(employee_address)
        )[0]

    # Account lookup

    def _load(self, address, kind):
        account = self._accounts.get(bytes(address))
        if not isinstance(account, kind):
            raise KeyError(f"no {kind.__name__} account at {bytes(address).hex()}")
        return account

    def _ensure_vacant(self, address: bytes) -> None:
        if address in self._accounts:
            raise ValueError(f"account {address.hex()} is already in use")

    def company(self, address):
        return self._load(address, Company)

    def team(self, address):
        return self._load(address, Team)

    def employee(self, address):
        return self._load(address, Employee)

    # Instructions

    def initialize_company_state(self, employer, company_name, inc_percent, dec_percent):
        """Create a company record for the employer; returns its address."""
        _check_uint(inc_percent, 8, "inc_percent")
        _check_uint(dec_percent, 8, "dec_percent")
        employer = _pubkey(employer)
        address, bump = find_program_address(b"company", company_name.encode(), employer)
        self._ensure_vacant(address)
        treasury = self.treasury_address(address)
        _check_name(company_name, Company.MAX_NAME_LEN, ErrorCode.INVALID_COMPANY_NAME)
        self._accounts[address] = Company(
            company_name=company_name,
            treasury=treasury,
            teams=[],
            inc_percent=inc_percent,
            dec_percent=dec_percent,
            bump=bump,
        )
        return address

    def fund_treasury(self, employer, company_name, amount):
        """Move ``amount`` SOL from the employer into the company treasury."""
        _check_uint(amount, 64, "amount")
        employer = _pubkey(employer)
        company_address = self.company_address(company_name, employer)
        self.company(company_address)
        treasury = self.treasury_address(company_address)
        required = amount * LAMPORTS_PER_SOL
        if required > _U64_MAX:
            raise CompanyError(ErrorCode.ARITHMETIC_OVERFLOW)
        if self.bank.balance(employer) < required:
            raise CompanyError(ErrorCode.INSUFFICIENT_FUNDS)
        self.bank.transfer(employer, treasury, required)

    def create_team_state(self, employer, team_name, company_name):
        """Add a team to the employer's company; returns the team's address."""
        company = self.company(self.company_address(company_name, employer))
        address, bump = find_program_address(b"team", team_name.encode(), company_name.encode())
        self._ensure_vacant(address)
        _check_name(team_name, Team.MAX_NAME_LEN, ErrorCode.INVALID_TEAM_NAME)
        if len(company.teams) >= Company.MAX_TEAMS:
            raise CompanyError(ErrorCode.MAX_TEAMS_REACHED)
        self._accounts[address] = Team(team_name=team_name, employees=[], bump=bump)
        company.teams.append(address)
        return address

    def register_employee(
        self,
        employer,
        team_name,
        company_name,
        employee_name,
        employee_owned_salary_wallet,
        current_salary,
        key,
    ):
        """Register an employee in a team with an obfuscated salary; returns its address."""
        _check_uint(current_salary, 16, "current_salary")
        _check_uint(key, 16, "key")
        _pubkey(employer)
        wallet = _pubkey(employee_owned_salary_wallet)
        team_address = self.team_address(team_name, company_name)
        team = self.team(team_address)
        address, bump = find_program_address(b"employee", company_name.encode(), wallet)
        self._ensure_vacant(address)
        salary_account, salary_bump = find_program_address(
            b"salary", company_name.encode(), address
        )
        _check_name(employee_name, Employee.MAX_NAME_LEN, ErrorCode.INVALID_EMPLOYEE_NAME)
        if len(team.employees) >= Team.MAX_EMPLOYEES:
            raise ValueError("team account has no space left for another employee")
        self._accounts[address] = Employee(
            employee_name=employee_name,
            team=team_address,
            salary_account=salary_account,
            employee_owned_salary_wallet=wallet,
            encrypted_current_salary=encrypt_decrypt_salary(key, current_salary),
            salary_account_bump=salary_bump,
            bump=bump,
        )
        team.employees.append(wallet)
        return address

    def submit_feedback(
        self, employee_providing_feedback, feedback_for, team_name, company_name, feedback_rating
    ):
        """Record a 1-5 rating from one team member for another."""
        _check_uint(feedback_rating, 8, "feedback_rating")
        team_address = self.team_address(team_name, company_name)
        self.team(team_address)
        target = self.employee(self.employee_address(company_name, feedback_for))
        giver = self.employee(self.employee_address(company_name, employee_providing_feedback))
        if giver.employee_name == target.employee_name:
            raise CompanyError(ErrorCode.CANNOT_VOTE_FOR_SELF)
        if target.team != team_address:
            raise CompanyError(ErrorCode.EMPLOYEE_NOT_IN_TEAM)
        if not 1 <= feedback_rating <= 5:
            raise CompanyError(ErrorCode.INVALID_FEEDBACK_RATING)
        score = target.current_total_feedback_score + feedback_rating
        count = target.current_total_feedbacks + 1
        if score > 0xFF or count > 0xFF:
            raise OverflowError("feedback totals exceed an unsigned 8-bit integer")
        target.current_total_feedback_score = score
        target.current_total_feedbacks = count

    def process_payroll(
        self, employer, team_name, company_name, employee_owned_salary_wallet, encryption_key
    ):
        """Pay an employee from the treasury, adjusting salary by feedback.

        Returns the number of lamports paid.
        """
        _check_uint(encryption_key, 16, "encryption_key")
        employee_address = self.employee_address(company_name, employee_owned_salary_wallet)
        employee = self.employee(employee_address)
        company_address = self.company_address(company_name, employer)
        company = self.company(company_address)
        salary_account = self.salary_address(company_name, employee_address)
        treasury = self.treasury_address(company_address)

        rounded_feedback = 0
        last_feedback = employee.last_payroll_feedback
        if employee.current_total_feedbacks:
            rounded_feedback = (
                employee.current_total_feedback_score // employee.current_total_feedbacks
            )
            last_feedback = rounded_feedback

        encrypted = employee.encrypted_current_salary
        paid = 0
        salary = encrypt_decrypt_salary(encryption_key, encrypted)
        if salary > 0:
            amount = salary * LAMPORTS_PER_SOL
            if rounded_feedback == 5:
                amount += amount * company.inc_percent // 100
            elif rounded_feedback == 0:
                cut = amount * company.dec_percent // 100
                if cut > amount:
                    raise OverflowError("salary reduction exceeds the salary")
                amount -= cut
            encrypted = encrypt_decrypt_salary(
                encryption_key, (amount // LAMPORTS_PER_SOL) & U16_MAX
            )
            if self.bank.balance(treasury) < amount:
                raise CompanyError(ErrorCode.INSUFFICIENT_FUNDS)
            try:
                self.bank.transfer(treasury, salary_account, amount)
            except ValueError as exc:
                raise CompanyError(ErrorCode.PAYMENT_TRANSFER_FAILED) from exc
            paid = amount

        employee.last_payroll_feedback = last_feedback
        employee.current_total_feedback_score = 0
        employee.current_total_feedbacks = 0
        employee.encrypted_current_salary = encrypted
        return paid