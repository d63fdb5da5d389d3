"""HR Portal package.

Organized by feature modules (employees, objectives, trainings, vacations,
users) on top of a shared serialized store, with a thin Flask controller
layer and service/repository layers behind it.
"""
