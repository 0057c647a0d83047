"""HR System package.

Feature modules (employees, attendance, leaves, payroll, reports) each follow the
same split: dataclass models, a repository Protocol, a MySQL repository, a
service with the business rules and a thin Flask controller.
"""
