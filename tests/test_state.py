from fairflow.salary import ANCHOR_DISCRIMINATOR
from fairflow.state import Company, Employee, Team

TREASURY = bytes([9]) * 32
TEAM = bytes([8]) * 32
SALARY = bytes([7]) * 32
WALLET = bytes([6]) * 32


def test_company_space():
    company = Company("acme", TREASURY)
    assert company.INIT_SPACE == 213
    assert company.SPACE == ANCHOR_DISCRIMINATOR + 213


def test_team_space():
    team = Team("core")
    assert team.INIT_SPACE == 179
    assert team.SPACE == ANCHOR_DISCRIMINATOR + 179


def test_employee_space():
    employee = Employee("alice", TEAM, SALARY, WALLET)
    assert employee.INIT_SPACE == 117
    assert employee.SPACE == ANCHOR_DISCRIMINATOR + 117


def test_company_defaults_and_independent_team_lists():
    first = Company("acme", TREASURY)
    second = Company("globex", TREASURY)
    first.teams.append(TEAM)
    assert second.teams == []
    assert (first.inc_percent, first.dec_percent, first.bump) == (0, 0, 0)


def test_team_employee_lists_are_independent():
    first = Team("core")
    second = Team("ops")
    first.employees.append(WALLET)
    assert first.employees == [WALLET]
    assert second.employees == []


def test_employee_starts_with_empty_feedback():
    employee = Employee("alice", TEAM, SALARY, WALLET)
    assert employee.current_total_feedback_score == 0
    assert employee.current_total_feedbacks == 0
    assert employee.last_payroll_feedback == 0
    assert employee.employee_owned_salary_wallet == WALLET


def test_records_compare_by_value():
    assert Team("core", [WALLET], 254) == Team("core", [WALLET], 254)
    assert Team("core", [WALLET], 254) != Team("core", [], 254)