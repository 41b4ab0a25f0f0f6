"""Constants for pom-license-analyzer."""

# Exit codes
EXIT_SUCCESS = 0  # Validation passed (or violations were not fatal)
EXIT_ISSUES = 1  # Artifacts failed validation
EXIT_ERROR = 2  # Run failed due to a tool or configuration error

# Report file names written to the output directory
ARTIFACTS_JSON_NAME = "artifacts.json"
VALIDATION_REPORT_NAME = "validation.txt"

DEFAULT_OUTPUT_DIR = "build/reports/licenses"
