"""HR Dashboard package.

Organized by feature modules (attendance, leave, payroll, ...) on top of a
local key/value storage, with a thin Flask JSON controller layer and
service/record-store layers underneath.
"""
