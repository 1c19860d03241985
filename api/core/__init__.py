"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(DB wiring, settings, logging, error policy, schema bootstrap). Keep
feature-specific SQL in the corresponding feature package (e.g. `employees/`).
"""
