"""PunchPro employee management backend.

Organized by feature modules (users, geo, attendance, payroll, reports) with a
thin Flask controller layer over service and repository layers.
"""

__version__ = "0.1.0"
