# fairflow

A small in-memory payroll ledger in which peer feedback moves salaries.

An employer sets up a company with a treasury, funds it, creates teams
and registers employees. Team members rate each other from 1 to 5. When
payroll runs for an employee, the employee's ratings for the period are
averaged with integer division:

- An average of 5 raises the pay by the company's increment percentage.
- No feedback at all lowers the pay by the decrement percentage.
- Any other average leaves the pay unchanged.

The adjusted amount, in whole SOL, becomes the stored salary for the next
run. The lamports move from the company treasury to the employee's salary
account. The feedback totals are then reset.

Salaries are stored XOR-masked with a 16-bit value. The employer supplies
this value at registration and again at every payroll run
(`fairflow.salary.encrypt_decrypt_salary`).

## Installation

```
pip install .
```

## Usage

Public keys and addresses are 32-byte values.

```python
from fairflow.program import Bank, FairflowProgram
from fairflow.salary import LAMPORTS_PER_SOL, encrypt_decrypt_salary
from fairflow.errors import CompanyError, ErrorCode

bank = Bank()
program = FairflowProgram(bank)

employer = bytes([1]) * 32
alice_wallet = bytes([2]) * 32
bob_wallet = bytes([3]) * 32

bank.deposit(employer, 1_000 * LAMPORTS_PER_SOL)

program.initialize_company_state(employer, "acme", 10, 5)  # +10% / -5%
program.fund_treasury(employer, "acme", 100)                # amount in whole SOL
program.create_team_state(employer, "core", "acme")

salary_mask = 0x1234
program.register_employee(employer, "core", "acme", "alice", alice_wallet, 10, salary_mask)
program.register_employee(employer, "core", "acme", "bob", bob_wallet, 12, salary_mask)

# bob rates alice
program.submit_feedback(bob_wallet, alice_wallet, "core", "acme", 5)

paid = program.process_payroll(employer, "core", "acme", alice_wallet, salary_mask)
print(paid)  # 11000000000 lamports

alice = program.employee(program.employee_address("acme", alice_wallet))
print(encrypt_decrypt_salary(salary_mask, alice.encrypted_current_salary))  # 11
print(bank.balance(alice.salary_account))  # 11000000000

# bob received no feedback this period, so his pay is cut by 5%
print(program.process_payroll(employer, "core", "acme", bob_wallet, salary_mask))  # 11400000000
```

`process_payroll` returns the number of lamports paid. It returns 0 when
the unmasked salary is 0.

## Errors

The ledger rules raise `fairflow.errors.CompanyError`. Its `code`
attribute is a member of `ErrorCode`, and its message is `code.message`.

```python
try:
    program.submit_feedback(bob_wallet, alice_wallet, "core", "acme", 9)
except CompanyError as err:
    assert err.code is ErrorCode.INVALID_FEEDBACK_RATING
```

| Situation | Raised |
| --- | --- |
| Company, team or employee name empty or longer than 10 bytes (UTF-8) | `CompanyError` (`INVALID_COMPANY_NAME`, `INVALID_TEAM_NAME`, `INVALID_EMPLOYEE_NAME`) |
| Sixth team in a company | `CompanyError(MAX_TEAMS_REACHED)` |
| Rater and rated employee have the same name | `CompanyError(CANNOT_VOTE_FOR_SELF)` |
| Rated employee is not in the named team | `CompanyError(EMPLOYEE_NOT_IN_TEAM)` |
| Rating outside 1 to 5 | `CompanyError(INVALID_FEEDBACK_RATING)` |
| Employer or treasury lacks the lamports | `CompanyError(INSUFFICIENT_FUNDS)` |
| Funding amount overflows 64 bits in lamports | `CompanyError(ARITHMETIC_OVERFLOW)` |
| Account already exists at the derived address | `ValueError` |
| Sixth employee in a team | `ValueError` |
| Integer argument out of its unsigned range (percentages 8-bit, salary and mask 16-bit, amounts 64-bit) | `ValueError` |
| Key that is not 32 bytes | `ValueError` |
| Referenced company, team or employee missing | `KeyError` |
| Feedback totals exceed 255 | `OverflowError` |

## Addresses and records

Account addresses come from `fairflow.program.find_program_address(*seeds)`.
It hashes the seeds with SHA-256 and searches bump values from 255 down
until the result is not a point on the ed25519 curve. The same seeds
always give the same address. These `FairflowProgram` helpers give the
address for each account:

- `company_address(company_name, employer)`
- `treasury_address(company_address)`
- `team_address(team_name, company_name)`
- `employee_address(company_name, wallet)`
- `salary_address(company_name, employee_address)`

Records are dataclasses from `fairflow.state`: `Company`, `Team` and
`Employee`. Read them with `program.company(address)`,
`program.team(address)` and `program.employee(address)`. Each class
carries `INIT_SPACE` and `SPACE`, its serialized account size.

`Bank` holds lamport balances. `deposit(address, lamports)` credits an
account. `balance(address)` reads it, and unknown accounts hold 0.
`transfer(source, destination, lamports)` moves lamports and refuses to
overdraw the source.

## What it does not do

Everything lives in memory, in one `Bank` and one `FairflowProgram`.
Nothing is saved to disk and nothing is sent over a network. The package
has no command-line tool. It does not sign or verify transactions. Any
caller may act as any employer or employee by passing that party's key.