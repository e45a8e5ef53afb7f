"""
Appointment Booking

A FastAPI service where users register, log in, book appointments and view
their seeded medical records and bills. Every state-changing action is
appended to an activity log that users can read for themselves and that an
admin endpoint exposes in full.
"""

__version__ = "1.0.0"
