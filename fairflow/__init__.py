"""In-memory payroll ledger: companies, teams, employees, peer feedback and treasury payouts."""

__version__ = "0.1.0"
__all__ = ["errors", "salary", "state", "program"]