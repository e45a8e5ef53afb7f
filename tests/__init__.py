"""
Test suite for the Appointment Booking service.

Contains unit and integration tests for the application's functionality.
"""
import os

# Set environment for testing
os.environ["TESTING"] = "1"
os.environ.setdefault("TEST_DATABASE_URL", "sqlite:///:memory:")
# Keep hashing fast; production uses the default round count
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "1000")
