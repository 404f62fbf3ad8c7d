"""Payroll System package.

Feature modules (employees, attendance, payroll) each follow the same split:
domain model, repository interface, MySQL repository, service and a thin
Flask controller.
"""
