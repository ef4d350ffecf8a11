"""Process exit codes reported by `installsim run`.

Automation keys off these numbers, so they never change meaning.
"""

SUCCESS = 0
USAGE_ERROR = 2
PREREQUISITES_FAILED = 3
FIXTURE_LOAD_FAILED = 10
SIMULATION_FAILED = 20
VALIDATION_THRESHOLD_EXCEEDED = 21
PERMISSION_DENIED = 31
CLEANUP_FAILED = 32
RESOURCES_EXHAUSTED = 33
INVALID_CONFIG = 40
MISSING_FIXTURES = 41
CORRUPTED_FIXTURES = 42
