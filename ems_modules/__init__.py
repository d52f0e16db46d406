"""
EMS Modules.

Domain modules built on the EMS kernel:
- Employees: employee records and the validating registry
- Payroll: net pay calculation from attendance, performance and tax lookups
"""
